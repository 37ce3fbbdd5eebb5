"""Tests for the audit log query."""

from datetime import datetime, timezone

import pytest

from domo.application.show_audit_logs import ShowAuditLogsHandler, format_timestamp
from domo.domain.exceptions import PermissionDenied
from domo.domain.model.audit_log import AuditLog, AuditOperation
from domo.domain.model.principal import Role
from tests.fakes import FakeAuditLogRepository, signed_in_guard


def _entries():
    return [
        AuditLog(
            id="a",
            created_at=datetime(2026, 10, 19, 14, 5, 3, tzinfo=timezone.utc),
            user_email="ann@domo.store",
            operation=AuditOperation.INSERT,
            data={"id": "1", "name": "Widget", "quantity": 5, "price": "10"},
        ),
        AuditLog(
            id="b",
            created_at=datetime(2026, 10, 20, 9, 0, 0, tzinfo=timezone.utc),
            user_email=None,
            operation=AuditOperation.UPDATE,
            data={"quantity": 4},
        ),
    ]


class TestShowAuditLogs:

    def test_admin_sees_newest_first(self):
        guard, _, _ = signed_in_guard(Role.ADMIN)
        handler = ShowAuditLogsHandler(FakeAuditLogRepository(_entries()), guard, tz=timezone.utc)

        rows = handler.handle()

        assert [r.id for r in rows] == ["b", "a"]
        assert rows[1].datetime == "Mon, 19/10/2026, 14:05:03"
        assert rows[1].user == "ann@domo.store"
        assert rows[1].operation == "Insert"
        assert rows[1].data == '{"name":"Widget","quantity":5}'

    def test_missing_columns_and_user(self):
        guard, _, _ = signed_in_guard(Role.ADMIN)
        rows = ShowAuditLogsHandler(FakeAuditLogRepository(_entries()), guard).handle()
        assert rows[0].user == ""
        assert rows[0].operation == "Update"
        assert rows[0].data == '{"quantity":4}'

    def test_cashier_denied(self):
        guard, _, _ = signed_in_guard(Role.CASHIER)
        with pytest.raises(PermissionDenied):
            ShowAuditLogsHandler(FakeAuditLogRepository(_entries()), guard).handle()


def test_format_timestamp_pads_day_and_month():
    value = datetime(2026, 3, 5, 7, 8, 9, tzinfo=timezone.utc)
    assert format_timestamp(value, timezone.utc) == "Thu, 05/03/2026, 07:08:09"
