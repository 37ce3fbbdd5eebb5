"""End-to-end tests of the ``domo`` command line against a temporary data dir."""

import json

import pytest
from click.testing import CliRunner

from domo.infrastructure.bootstrap import DATA_DIR_ENV
from domo.infrastructure.cli.main import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
    return CliRunner()


def _ok(runner, *args):
    result = runner.invoke(cli, list(args))
    assert result.exit_code == 0, result.output
    return result.output


def _fails(runner, *args):
    result = runner.invoke(cli, list(args))
    assert result.exit_code != 0, result.output
    return result.output


def _add_user(runner, email, role):
    _ok(runner, "user", "add", "--email", email, "--password", "password123", "--role", role)


def _login(runner, email):
    _ok(runner, "login", "--email", email, "--password", "password123")


def _product_id(tmp_path, name):
    for raw in json.loads((tmp_path / "products.json").read_text()):
        if raw["name"] == name:
            return raw["id"]
    raise AssertionError(f"no product named {name}")


@pytest.fixture
def store(runner, tmp_path):
    """An admin and a cashier, a Widget (5 at $10), admin signed in."""
    _add_user(runner, "ann@domo.store", "admin")
    _add_user(runner, "bob@domo.store", "cashier")
    _login(runner, "ann@domo.store")
    _ok(runner, "product", "add", "--name", "Widget", "--price", "10", "--quantity", "5")
    return _product_id(tmp_path, "Widget")


class TestSignedOut:

    def test_product_list_needs_login(self, runner):
        output = _fails(runner, "product", "list")
        assert 'Run "domo login" to sign in.' in output
        assert "You need to sign in first." in output

    def test_wrong_password(self, runner):
        _add_user(runner, "ann@domo.store", "admin")
        output = _fails(runner, "login", "--email", "ann@domo.store", "--password", "nope")
        assert "Incorrect email or password." in output

    def test_forget_password(self, runner):
        output = _ok(runner, "forget-password", "--email", "who@domo.store")
        assert "An email with an instruction to reset your password" in output


class TestAdmin:

    def test_list(self, runner, store):
        output = _ok(runner, "product", "list")
        assert "Widget" in output
        assert "$10.00" in output

    def test_edit_increase(self, runner, store):
        output = _ok(runner, "product", "edit", "--id", store, "--quantity", "8")
        assert "quantity 8 (+3)" in output

    def test_duplicate_name(self, runner, store):
        output = _fails(runner, "product", "add", "--name", "Widget")
        assert "Product name needs to be unique." in output

    def test_invalid_fields(self, runner, store):
        output = _fails(runner, "product", "add", "--name", "Gizmo", "--price", "-1")
        assert "Price must equal or more than 0." in output

    def test_huge_quantity_is_a_field_error(self, runner, store):
        result = runner.invoke(cli, ["product", "add", "--name", "Big", "--quantity", "1e5000"])
        assert result.exit_code == 1
        assert "Quantity must equal or less than 2147483647." in result.output
        assert "Big" not in _ok(runner, "product", "list")

    def test_negative_zero_price(self, runner, store):
        output = _ok(runner, "product", "add", "--name", "Neg", "--price", "-0")
        assert "Product 'Neg' created: 0 at $0.00" in output

    def test_delete(self, runner, store):
        _ok(runner, "product", "delete", "--id", store, "--yes")
        assert "No products found." in _ok(runner, "product", "list")

    def test_audit_logs(self, runner, store):
        _ok(runner, "product", "edit", "--id", store, "--decrement", "1")
        output = _ok(runner, "audit-logs")
        assert "Insert" in output
        assert "Update" in output
        assert '{"name":"Widget","quantity":4}' in output
        assert "ann@domo.store" in output


class TestCashier:

    @pytest.fixture
    def cashier(self, runner, store):
        _ok(runner, "logout")
        _login(runner, "bob@domo.store")
        return store

    def test_decrement(self, runner, cashier):
        output = _ok(runner, "product", "edit", "--id", cashier, "--decrement", "2")
        assert "quantity 3 (-2)" in output

    def test_cannot_increase(self, runner, cashier):
        output = _fails(runner, "product", "edit", "--id", cashier, "--quantity", "6")
        assert "Cannot increase quantity." in output

    def test_increment_button_is_inert(self, runner, cashier):
        output = _ok(runner, "product", "edit", "--id", cashier, "--increment", "3")
        assert "quantity 5," in output

    def test_cannot_rename(self, runner, cashier):
        output = _fails(runner, "product", "edit", "--id", cashier, "--name", "Gizmo")
        assert "Only administrators can change the name." in output

    def test_cannot_create(self, runner, cashier):
        output = _fails(runner, "product", "add", "--name", "Gizmo")
        assert "Only administrators can do that." in output

    def test_cannot_read_audit_logs(self, runner, cashier):
        _fails(runner, "audit-logs")
