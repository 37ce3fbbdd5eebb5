"""Abstract boundary to the authentication backend.

Failures are raised as AuthError rather than returned, so callers
only handle the happy path unless they care about a specific failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from domo.domain.model.principal import Session

SessionListener = Callable[["Session | None"], None]


class AuthGateway(ABC):

    @abstractmethod
    def get_session(self) -> Session | None:
        """Return the current session, or None when signed out."""

    @abstractmethod
    def on_session_change(self, listener: SessionListener) -> Callable[[], None]:
        """Register *listener* for session changes; returns an unsubscribe callable."""

    @abstractmethod
    def sign_in(self, email: str, password: str) -> Session:
        """Start a session. Raises AuthError on bad credentials."""

    @abstractmethod
    def sign_out(self) -> None:
        """End the current session (no-op when signed out)."""

    @abstractmethod
    def reset_password_for_email(self, email: str) -> None:
        """Send a password-reset e-mail.

        Raises AuthError; ``status`` is 404 when no account has that e-mail.
        """

    @abstractmethod
    def update_password(self, password: str) -> None:
        """Set a new password for the signed-in user. Raises AuthError."""
