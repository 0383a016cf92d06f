"""
auth/models.py -- Domain dataclass for the login user record.

Pattern: Data class (pure data container, zero logic). The store maps rows to
it; the password provider reads it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """A local account that can log in with email and password.

    email is stored lower-cased; UserStore normalizes on write and lookup.
    """

    email: str
    hashed_password: str
    id: int | None = None
    created_at: str | None = None
    last_login: str | None = None
    is_active: bool = True
