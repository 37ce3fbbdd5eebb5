"""Payloads and read models passed between the CLI and the use cases."""

from __future__ import annotations

from dataclasses import dataclass

from domo.domain.model.value_objects import Money


@dataclass(frozen=True)
class ProductPayload:
    """Output of a validated product form: exactly what gets sent to the backend."""

    name: str
    price: Money
    quantity: int


@dataclass(frozen=True)
class AuditLogDTO:
    """Output: an audit entry formatted for display."""

    id: str
    datetime: str  # e.g. "Mon, 19/10/2026, 14:05:03"
    user: str
    operation: str  # "Insert", "Update", "Delete"
    data: str  # JSON of the name and quantity columns
