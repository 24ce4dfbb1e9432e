from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..common.validators import normalize_email
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password. Please try again."


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    email: str
    name: str


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        try:
            email = normalize_email(email)
        except ValidationError:
            raise AuthenticationError(INVALID_CREDENTIALS)

        user = self._users.get_by_email(email)
        if not user or not user.is_active:
            logger.info("Login rejected for unknown or inactive user %s", email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Login rejected for %s: wrong password", email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info("User %s logged in", email)
        return SessionUser(email=user.email, name=user.full_name)
