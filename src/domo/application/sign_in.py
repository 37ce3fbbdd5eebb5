"""Application service: Sign In use case."""

from __future__ import annotations

import logging

from domo.domain.exceptions import AuthError, ValidationError
from domo.domain.model.principal import Session
from domo.domain.repository.auth_gateway import AuthGateway

logger = logging.getLogger(__name__)

EMAIL_REQUIRED = "Email is required."
PASSWORD_REQUIRED = "Password is required."
INCORRECT_CREDENTIALS = "Incorrect email or password."


class SignInHandler:

    def __init__(self, auth: AuthGateway) -> None:
        self._auth = auth

    def handle(self, email: str, password: str) -> Session:
        """Start a session.

        Every backend failure maps to the same message so the caller
        cannot tell an unknown account from a wrong password.
        """
        errors: dict[str, str] = {}
        if not email or not email.strip():
            errors["email"] = EMAIL_REQUIRED
        if not password:
            errors["password"] = PASSWORD_REQUIRED
        if errors:
            raise ValidationError(" ".join(errors.values()), errors)

        try:
            session = self._auth.sign_in(email.strip(), password)
        except AuthError as exc:
            logger.info("Sign-in failed for %s: %s", email, exc)
            raise AuthError(INCORRECT_CREDENTIALS, status=exc.status) from exc

        logger.info("Signed in as %s", session.email)
        return session
