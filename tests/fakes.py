"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON backend
but keep everything in dicts. No file I/O, no side effects.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

from domo.application.auth_guard import AuthGuard, Navigator
from domo.application.session_provider import SessionProvider
from domo.domain.exceptions import (
    AuthError,
    BackendError,
    EntityNotFoundError,
    UniquenessConflict,
)
from domo.domain.model.audit_log import AuditLog
from domo.domain.model.principal import Role, Session
from domo.domain.model.product import Product
from domo.domain.model.value_objects import Money
from domo.domain.repository.audit_log_repository import AuditLogRepository
from domo.domain.repository.auth_gateway import AuthGateway, SessionListener
from domo.domain.repository.product_repository import ProductRepository
from domo.domain.repository.user_role_repository import UserRoleRepository

EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_product(
    id: str = "1",
    name: str = "Widget",
    quantity: int = 5,
    price: str = "10",
    minutes: int = 0,
) -> Product:
    return Product(
        id=id,
        name=name,
        quantity=quantity,
        price=Money.of(price),
        created_at=EPOCH + timedelta(minutes=minutes),
    )


def session_for(email: str) -> Session:
    return Session(user_id=email, email=email, access_token=f"token-{email}")


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        self._next_id = 100
        self.fail_with: Exception | None = None
        self.calls: list[str] = []
        for p in products or []:
            self._store[p.id] = p

    def list_all(self) -> list[Product]:
        return sorted(self._store.values(), key=lambda p: p.created_at, reverse=True)

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def insert(self, name: str, quantity: int, price: Money) -> Product:
        self._record("insert")
        self._check_unique(name)
        product = Product(
            id=str(self._next_id),
            name=name,
            quantity=quantity,
            price=price,
            created_at=EPOCH + timedelta(days=1, minutes=self._next_id),
        )
        self._next_id += 1
        self._store[product.id] = product
        return product

    def update(
        self,
        product_id: str,
        name: str | None = None,
        quantity: int | None = None,
        price: Money | None = None,
    ) -> Product:
        self._record("update")
        current = self._store.get(product_id)
        if current is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        if name is not None:
            self._check_unique(name, ignore_id=product_id)
        product = current.with_changes(name=name, quantity=quantity, price=price)
        self._store[product_id] = product
        return product

    def delete(self, product_id: str) -> None:
        self._record("delete")
        if self._store.pop(product_id, None) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

    def _record(self, call: str) -> None:
        self.calls.append(call)
        if self.fail_with is not None:
            raise self.fail_with

    def _check_unique(self, name: str, ignore_id: str | None = None) -> None:
        for p in self._store.values():
            if p.name == name and p.id != ignore_id:
                raise UniquenessConflict(f"duplicate name {name!r}")


class FakeUserRoleRepository(UserRoleRepository):

    def __init__(self, roles: dict[str, Role] | None = None) -> None:
        self.roles = dict(roles or {})
        self.fail = False
        self.lookups: list[str] = []

    def get_role(self, user_id: str) -> Role:
        self.lookups.append(user_id)
        if self.fail:
            raise BackendError("role lookup failed")
        return self.roles.get(user_id, Role.UNKNOWN)


class FakeAuditLogRepository(AuditLogRepository):

    def __init__(self, entries: list[AuditLog] | None = None) -> None:
        self.entries = list(entries or [])

    def list_all(self) -> list[AuditLog]:
        return sorted(self.entries, key=lambda e: e.created_at, reverse=True)


class FakeAuthGateway(AuthGateway):

    def __init__(
        self,
        users: dict[str, str] | None = None,
        session: Session | None = None,
    ) -> None:
        self.users = dict(users or {})  # email -> password
        self._session = session
        self._listeners: list[SessionListener] = []
        self.reset_error: AuthError | None = None
        self.reset_requests: list[str] = []
        self.password_updates: list[str] = []

    def get_session(self) -> Session | None:
        return self._session

    def on_session_change(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def sign_in(self, email: str, password: str) -> Session:
        if self.users.get(email) != password:
            raise AuthError("Invalid login credentials", status=400)
        session = session_for(email)
        self.set_session(session)
        return session

    def sign_out(self) -> None:
        self.set_session(None)

    def reset_password_for_email(self, email: str) -> None:
        self.reset_requests.append(email)
        if self.reset_error is not None:
            raise self.reset_error
        if email not in self.users:
            raise AuthError("User not found", status=404)

    def update_password(self, password: str) -> None:
        if self._session is None:
            raise AuthError("Not signed in", status=401)
        self.users[self._session.email] = password
        self.password_updates.append(password)

    # --- Test helpers ---------------------------------------------------------

    def set_session(self, session: Session | None) -> None:
        self._session = session
        for listener in list(self._listeners):
            listener(session)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


class FakeNavigator(Navigator):

    def __init__(self) -> None:
        self.routes: list[str] = []

    def push(self, route: str) -> None:
        self.routes.append(route)


def signed_in_guard(
    role: Role | None,
    email: str = "someone@domo.store",
) -> tuple[AuthGuard, FakeNavigator, FakeAuthGateway]:
    """A started provider + guard; ``role=None`` means signed out."""
    roles = FakeUserRoleRepository()
    session = None
    if role is not None:
        session = session_for(email)
        if role.is_resolved:
            roles.roles[email] = role
    auth = FakeAuthGateway(session=session)
    provider = SessionProvider(auth, roles)
    provider.start()
    navigator = FakeNavigator()
    return AuthGuard(provider, navigator), navigator, auth
