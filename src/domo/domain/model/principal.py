"""Who is using the store: the session and the role behind it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    """Tri-state role of the signed-in principal.

    ``UNKNOWN`` means the role lookup has not completed (or found
    nothing). It is *not* the same as CASHIER: code that needs to know
    whether someone is an admin must check ``is_resolved`` first.
    """

    UNKNOWN = "unknown"
    ADMIN = "admin"
    CASHIER = "cashier"

    @property
    def is_resolved(self) -> bool:
        return self is not Role.UNKNOWN

    @property
    def is_admin(self) -> bool | None:
        """True/False once resolved, None while unknown."""
        if self is Role.UNKNOWN:
            return None
        return self is Role.ADMIN

    @staticmethod
    def parse(raw: str | None) -> Role:
        """Map a stored role name to a Role; anything unrecognised is UNKNOWN."""
        if raw is None:
            return Role.UNKNOWN
        try:
            return Role(raw.strip().lower())
        except ValueError:
            return Role.UNKNOWN


@dataclass(frozen=True)
class Session:
    """An authenticated session issued by the auth backend."""

    user_id: str
    email: str
    access_token: str
