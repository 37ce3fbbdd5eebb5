"""JSON-file-backed implementation of AuthGateway.

Accounts live in ``users.json`` with werkzeug password hashes. The
current session is kept in ``session.json`` so successive CLI
invocations share it. Reset e-mails are not sent: the request is
logged instead.
"""

from __future__ import annotations

import logging
import secrets
import uuid
from pathlib import Path
from typing import Callable

from werkzeug.security import check_password_hash, generate_password_hash

from domo.domain.exceptions import AuthError, UniquenessConflict
from domo.domain.model.principal import Session
from domo.domain.repository.auth_gateway import AuthGateway, SessionListener
from domo.infrastructure.persistence.json_file import JsonFile

logger = logging.getLogger(__name__)

class JsonAuthGateway(AuthGateway):

    def __init__(self, users_path: Path, session_path: Path) -> None:
        self._users = JsonFile(users_path, default=[])
        self._session_file = JsonFile(session_path, default={"session": None})
        self._listeners: list[SessionListener] = []

    # --- AuthGateway interface ------------------------------------------------

    def get_session(self) -> Session | None:
        raw = self._session_file.load().get("session")
        if raw is None:
            return None
        return Session(
            user_id=raw["user_id"], email=raw["email"], access_token=raw["access_token"]
        )

    def on_session_change(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def sign_in(self, email: str, password: str) -> Session:
        user = self._find_user(email)
        if user is None or not check_password_hash(user["password_hash"], password):
            raise AuthError("Invalid login credentials", status=400)

        session = Session(
            user_id=user["id"],
            email=user["email"],
            access_token=secrets.token_urlsafe(32),
        )
        self._store_session(session)
        return session

    def sign_out(self) -> None:
        if self.get_session() is None:
            return
        self._store_session(None)

    def reset_password_for_email(self, email: str) -> None:
        if self._find_user(email) is None:
            raise AuthError("User not found", status=404)
        logger.info("Password reset e-mail requested for %s", email)

    def update_password(self, password: str) -> None:
        session = self.get_session()
        if session is None:
            raise AuthError("Not signed in", status=401)

        users = self._users.load()
        for user in users:
            if user["id"] == session.user_id:
                user["password_hash"] = generate_password_hash(password)
                self._users.persist(users)
                return
        raise AuthError("User not found", status=404)

    # --- Account administration -----------------------------------------------

    def create_user(self, email: str, password: str) -> str:
        """Register an account and return its user id."""
        if self._find_user(email) is not None:
            raise UniquenessConflict(f"A user with e-mail {email!r} already exists")

        user_id = uuid.uuid4().hex
        users = self._users.load()
        users.append(
            {
                "id": user_id,
                "email": email.strip(),
                "password_hash": generate_password_hash(password),
            }
        )
        self._users.persist(users)
        return user_id

    # --- Internal helpers -----------------------------------------------------

    def _find_user(self, email: str) -> dict | None:
        wanted = email.strip().lower()
        for user in self._users.load():
            if user["email"].lower() == wanted:
                return user
        return None

    def _store_session(self, session: Session | None) -> None:
        raw = None
        if session is not None:
            raw = {
                "user_id": session.user_id,
                "email": session.email,
                "access_token": session.access_token,
            }
        self._session_file.persist({"session": raw})
        for listener in list(self._listeners):
            listener(session)
