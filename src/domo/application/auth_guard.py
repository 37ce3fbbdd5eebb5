"""Auth guard: keeps signed-out principals away from protected views.

The guard watches a SessionProvider. Whenever the session becomes
absent it sends the navigator to the login route, but never before the
provider has reported its first value, so a view does not bounce to
login while the session is still loading.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from domo.application import routes
from domo.application.session_provider import SessionProvider
from domo.domain.exceptions import (
    NotAuthenticatedError,
    PermissionDenied,
    RoleNotResolvedError,
)
from domo.domain.model.principal import Role, Session

logger = logging.getLogger(__name__)


class Navigator(ABC):

    @abstractmethod
    def push(self, route: str) -> None:
        """Navigate to *route*."""


class AuthGuard:

    def __init__(self, provider: SessionProvider, navigator: Navigator) -> None:
        self._provider = provider
        self._navigator = navigator
        self._redirected = False
        self._unsubscribe = provider.subscribe(self._on_change)
        self._on_change(provider)

    def close(self) -> None:
        self._unsubscribe()

    # --- Derived state ---------------------------------------------------------

    @property
    def is_logged_in(self) -> bool:
        return self._provider.session is not None

    @property
    def session(self) -> Session | None:
        return self._provider.session

    @property
    def role(self) -> Role:
        return self._provider.role

    @property
    def is_admin(self) -> bool | None:
        """True/False once the role is resolved, None while it is unknown."""
        return self._provider.role.is_admin

    # --- Gates -----------------------------------------------------------------

    def require_session(self) -> Session:
        session = self._provider.session
        if session is None:
            raise NotAuthenticatedError("You need to sign in first.")
        return session

    def require_role(self) -> Role:
        """Return the resolved role of the signed-in principal."""
        self.require_session()
        role = self._provider.role
        if not role.is_resolved:
            raise RoleNotResolvedError("Your role has not been loaded yet.")
        return role

    def require_admin(self) -> Session:
        session = self.require_session()
        if self.require_role() is not Role.ADMIN:
            self._navigator.push(routes.HOME)
            raise PermissionDenied("Only administrators can do that.")
        return session

    # --- Internal helpers ------------------------------------------------------

    def _on_change(self, provider: SessionProvider) -> None:
        if not provider.ready:
            return
        if provider.session is not None:
            self._redirected = False
            return
        if not self._redirected:
            logger.info("No session, redirecting to %s", routes.LOGIN)
            self._redirected = True
            self._navigator.push(routes.LOGIN)
