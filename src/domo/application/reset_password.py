"""Application service: Forget Password use case.

Asks the auth backend to e-mail a reset link. An unknown address gets
the same answer as a known one so the form does not reveal which
accounts exist.
"""

from __future__ import annotations

import logging

from domo.domain.exceptions import AuthError, ValidationError
from domo.domain.repository.auth_gateway import AuthGateway

logger = logging.getLogger(__name__)

EMAIL_REQUIRED = "Email is required."
RESET_SENT = (
    "An email with an instruction to reset your password is sent to your email address."
)
RESET_FAILED = "Failed to reset your password."


class ResetPasswordHandler:

    def __init__(self, auth: AuthGateway) -> None:
        self._auth = auth

    def handle(self, email: str) -> str:
        """Return the message to show; raises AuthError on backend failure."""
        if not email or not email.strip():
            raise ValidationError(EMAIL_REQUIRED, {"email": EMAIL_REQUIRED})

        try:
            self._auth.reset_password_for_email(email.strip())
        except AuthError as exc:
            if exc.status == 404:
                logger.info("Password reset requested for unknown address %s", email)
                return RESET_SENT
            logger.warning("Password reset failed for %s: %s", email, exc)
            raise AuthError(RESET_FAILED, status=exc.status) from exc
        return RESET_SENT
