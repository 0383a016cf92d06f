"""
auth/password.py -- AuthProvider backed by UserStore, bcrypt and JWTs.

authenticate() returns a signed access token for an active user whose password
matches, and None for every kind of rejection (unknown email, wrong password,
disabled account) so callers cannot tell them apart.

Unknown emails still pay for one bcrypt check (burn_password_check) to keep
response time independent of whether the account exists.

Store and driver errors are not caught here. They propagate to the router,
which turns them into a 500.
"""

from __future__ import annotations

import asyncio
import logging

from auth.store import UserStore
from auth.tokens import burn_password_check, create_access_token, verify_password

logger = logging.getLogger("loginrouter.auth")


class PasswordAuthProvider:
    def __init__(self, store: UserStore, expire_seconds: int = 0) -> None:
        self._store = store
        self._expire_seconds = expire_seconds

    async def authenticate(self, email: str, password: str) -> str | None:
        # bcrypt and SQLAlchemy both block; keep them off the event loop.
        return await asyncio.to_thread(self.authenticate_sync, email, password)

    def authenticate_sync(self, email: str, password: str) -> str | None:
        user = self._store.get_by_email(email)
        if user is None:
            burn_password_check(password)
            return None
        if not verify_password(password, user.hashed_password):
            return None
        if not user.is_active:
            logger.info("Login refused for disabled user id=%s", user.id)
            return None

        self._store.update_last_login(user.id)
        return create_access_token(user.id, user.email, expire_seconds=self._expire_seconds)
