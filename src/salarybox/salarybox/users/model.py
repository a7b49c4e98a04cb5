from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: login account.

    Note: plain data object (no store access code).
    """

    user_id: str
    email: str
    name: str
    role: Role
    password_hash: str
    is_active: bool = True
