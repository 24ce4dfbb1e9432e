from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Domain entity: a staff member who can log in and clock time.

    Plain data object, no database access.
    """

    user_id: int
    email: str
    full_name: str
    password_hash: str
    is_active: bool = True
