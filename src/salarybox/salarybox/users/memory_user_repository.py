from __future__ import annotations

from typing import Iterable, Optional

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .model import User

# (user_id, email, password, name, role)
MOCK_ACCOUNTS = (
    ("1", "admin@salarybox.com", "admin123", "Admin User", Role.ADMIN),
    ("2", "employee@salarybox.com", "employee123", "John Employee", Role.EMPLOYEE),
)


def build_mock_users(accounts=MOCK_ACCOUNTS) -> list[User]:
    return [
        User(user_id=uid, email=email, name=name, role=role, password_hash=generate_password_hash(password))
        for uid, email, password, name, role in accounts
    ]


class InMemoryUserRepository:
    def __init__(self, users: Iterable[User] | None = None):
        users = build_mock_users() if users is None else users
        self._by_id: dict[str, User] = {u.user_id: u for u in users}

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._by_id.get(str(user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        email = (email or "").strip().lower()
        return next((u for u in self._by_id.values() if u.email.lower() == email), None)
