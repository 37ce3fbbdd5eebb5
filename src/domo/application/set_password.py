"""Application service: Set Password use case."""

from __future__ import annotations

import logging

from domo.domain.exceptions import ValidationError
from domo.domain.repository.auth_gateway import AuthGateway

logger = logging.getLogger(__name__)

PASSWORD_REQUIRED = "Password is required."
PASSWORD_TOO_SHORT = "Password must be at least 8 characters long."
PASSWORD_MISMATCH = "Password not matched."
MIN_PASSWORD_LENGTH = 8


class SetPasswordHandler:

    def __init__(self, auth: AuthGateway) -> None:
        self._auth = auth

    def handle(self, password: str, confirm_password: str) -> None:
        errors: dict[str, str] = {}
        if not password:
            errors["password"] = PASSWORD_REQUIRED
        elif len(password) < MIN_PASSWORD_LENGTH:
            errors["password"] = PASSWORD_TOO_SHORT
        # Confirmation is only compared once a password was typed.
        if password and confirm_password != password:
            errors["confirm_password"] = PASSWORD_MISMATCH
        if errors:
            raise ValidationError(" ".join(errors.values()), errors)

        self._auth.update_password(password)
        logger.info("Password updated")
