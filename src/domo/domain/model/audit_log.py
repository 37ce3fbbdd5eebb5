"""Audit log entry written by the backend for every product mutation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class AuditOperation(Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class AuditLog:
    id: str
    created_at: datetime
    user_email: str | None
    operation: AuditOperation
    data: dict[str, Any] = field(default_factory=dict)
