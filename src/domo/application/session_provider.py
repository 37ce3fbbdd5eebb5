"""Session/Role provider.

Follows the auth backend's session and resolves the role behind it.
Views receive an instance explicitly (constructor injection) instead of
reading a process-wide global.

When a session appears the role is UNKNOWN until the role lookup
returns; subscribers are told about both steps.
"""

from __future__ import annotations

import logging
from typing import Callable

from domo.domain.exceptions import BackendError
from domo.domain.model.principal import Role, Session
from domo.domain.repository.auth_gateway import AuthGateway
from domo.domain.repository.user_role_repository import UserRoleRepository

logger = logging.getLogger(__name__)

ProviderListener = Callable[["SessionProvider"], None]


class SessionProvider:

    def __init__(self, auth: AuthGateway, role_repo: UserRoleRepository) -> None:
        self._auth = auth
        self._role_repo = role_repo
        self._session: Session | None = None
        self._role = Role.UNKNOWN
        self._ready = False
        self._listeners: list[ProviderListener] = []
        self._unsubscribe_auth: Callable[[], None] | None = None

    # --- Lifecycle -------------------------------------------------------------

    def start(self) -> None:
        """Report the current session and follow later changes."""
        if self._unsubscribe_auth is not None:
            return
        self._unsubscribe_auth = self._auth.on_session_change(self._on_session_change)
        self._on_session_change(self._auth.get_session())

    def stop(self) -> None:
        if self._unsubscribe_auth is not None:
            self._unsubscribe_auth()
            self._unsubscribe_auth = None

    # --- State -----------------------------------------------------------------

    @property
    def ready(self) -> bool:
        """True once the first session value has been reported."""
        return self._ready

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def role(self) -> Role:
        return self._role

    def subscribe(self, listener: ProviderListener) -> Callable[[], None]:
        """Call *listener* after every change; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Internal helpers ------------------------------------------------------

    def _on_session_change(self, session: Session | None) -> None:
        self._session = session
        self._role = Role.UNKNOWN
        self._ready = True
        self._notify()
        if session is not None:
            self._resolve_role(session)

    def _resolve_role(self, session: Session) -> None:
        try:
            role = self._role_repo.get_role(session.user_id)
        except BackendError as exc:
            logger.warning("Role lookup failed for %s: %s", session.email, exc)
            return

        # The session may have changed while the lookup ran.
        if self._session is not session:
            return
        logger.debug("Resolved role %s for %s", role.value, session.email)
        self._role = role
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
