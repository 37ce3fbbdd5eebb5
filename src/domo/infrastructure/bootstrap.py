"""Composition root: builds the JSON-backed gateways and repositories under the data dir.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from domo.application.session_provider import SessionProvider
from domo.infrastructure.persistence.json_audit_log_repository import (
    JsonAuditLogRepository,
)
from domo.infrastructure.persistence.json_auth_gateway import JsonAuthGateway
from domo.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from domo.infrastructure.persistence.json_user_role_repository import (
    JsonUserRoleRepository,
)

DATA_DIR_ENV = "DOMO_DATA_DIR"

# Default data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def auth_gateway() -> JsonAuthGateway:
    root = data_dir()
    return JsonAuthGateway(root / "users.json", root / "session.json")


def user_role_repository() -> JsonUserRoleRepository:
    return JsonUserRoleRepository(data_dir() / "users_roles.json")


def audit_log_repository() -> JsonAuditLogRepository:
    return JsonAuditLogRepository(data_dir() / "audit_logs.json")


def product_repository(auth: JsonAuthGateway) -> JsonProductRepository:
    """Products are audited under the e-mail of whoever is signed in."""

    def actor() -> str | None:
        session = auth.get_session()
        return session.email if session is not None else None

    return JsonProductRepository(
        data_dir() / "products.json", audit_repo=audit_log_repository(), actor=actor
    )


def session_provider(auth: JsonAuthGateway) -> SessionProvider:
    provider = SessionProvider(auth, user_role_repository())
    provider.start()
    return provider
