"""Domain-level exceptions.

Every failure the store can report is a subclass of DomainException so
the CLI layer can catch them uniformly and show the user a message.
None of them is fatal: the caller always gets control back.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """One or more form fields failed their rules.

    ``field_errors`` maps a field name to the message of its first
    failing rule.
    """

    def __init__(self, message: str, field_errors: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.field_errors = dict(field_errors or {})


class BackendError(DomainException):
    """The backend rejected or failed a request."""


class UniquenessConflict(BackendError):
    """A unique constraint (product name) was violated."""


class EntityNotFoundError(BackendError):
    """A requested record does not exist."""


class AuthError(DomainException):
    """Sign-in, password reset or password update failed.

    ``status`` mirrors the backend's status code when one is known
    (e.g. 404 for an unknown e-mail address).
    """

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class NotAuthenticatedError(DomainException):
    """The operation needs a signed-in principal."""


class PermissionDenied(DomainException):
    """The principal's role does not allow the operation."""


class RoleNotResolvedError(DomainException):
    """The principal's role has not been loaded yet."""


class FormClosedError(DomainException):
    """A closed form was used after it was submitted or cancelled."""
