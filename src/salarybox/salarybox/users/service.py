from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError
from .repository import UserRepository

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """Session passed explicitly to every guarded call (never the password)."""

    user_id: str
    email: str
    name: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def ensure_can_access(self, employee_id: str) -> None:
        """Employees may only touch their own records; admins touch any."""
        if not self.is_admin and str(employee_id) != self.user_id:
            raise AuthorizationError("Not allowed to access another employee's data")


class AuthService:
    """Use case: authenticate user (login) and revalidate sessions."""

    def __init__(self, users: UserRepository):
        self._users = users

    def authenticate(self, email: str, password: str) -> SessionUser:
        user = self._users.get_by_email(email)
        if not user or not user.is_active:
            log.warning("login failed for %s", email)
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            log.warning("login failed for %s", email)
            raise AuthenticationError("Invalid credentials")

        log.info("login user=%s role=%s", user.user_id, user.role.value)
        return SessionUser(user_id=user.user_id, email=user.email, name=user.name, role=user.role)

    def resolve(self, user_id: str | None) -> SessionUser:
        """Rebuild a session from a stored user id, checking the account still exists."""
        if not user_id:
            raise AuthenticationError("Login required")
        user = self._users.get_by_id(str(user_id))
        if not user or not user.is_active:
            raise AuthenticationError("Session is no longer valid")
        return SessionUser(user_id=user.user_id, email=user.email, name=user.name, role=user.role)
