"""
auth/tokens.py -- Password hashing and JWT access tokens.

  Passwords: bcrypt, used directly (no passlib wrapper). Its cost factor makes
       brute-forcing low-entropy secrets expensive. _DUMMY_HASH lets callers
       burn the same bcrypt work for unknown emails so response time does not
       reveal which accounts exist.

  JWT: python-jose, HS256, signed with SECRET_KEY. Tokens carry user_id, the
       email as subject, and an expiry. Decoding returns None on any failure.

  SECRET_KEY: read once at module load from core.config.get_settings(). The
       settings validator has already rejected missing or short keys.

Layer rule: no imports from api/. Importing core.config is allowed.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import bcrypt
from jose import JWTError, jwt

from core.config import get_settings

logger = logging.getLogger("loginrouter.auth")

_settings = get_settings()

_ALGORITHM = "HS256"

# ---------------------------------------------------------------------------
# Password hashing
# ---------------------------------------------------------------------------


def hash_password(plain: str) -> str:
    """Return a bcrypt hash of the plaintext password.

    bcrypt only looks at the first 72 bytes; longer inputs are truncated here
    rather than left to the library, which raises on them in 4.x and later.
    """
    return bcrypt.hashpw(plain.encode("utf-8")[:72], bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """Return True if the plaintext matches the bcrypt hash. Never raises."""
    try:
        return bcrypt.checkpw(plain.encode("utf-8")[:72], hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


# Computed once so the first unknown-email login costs the same as later ones.
_DUMMY_HASH: str = hash_password("loginrouter_timing_dummy")


def burn_password_check(plain: str) -> None:
    """Run a bcrypt check against the dummy hash and discard the result."""
    verify_password(plain, _DUMMY_HASH)


# ---------------------------------------------------------------------------
# JWT encode / decode
# ---------------------------------------------------------------------------


def create_access_token(user_id: int, email: str, expire_seconds: int = 0) -> str:
    """Encode a signed JWT for the given user.

    Args:
        user_id:        Numeric user ID from the store.
        email:          Stored as the JWT subject claim.
        expire_seconds: Token lifetime. 0 (default) uses
                        Settings.token_expire_seconds.
    """
    duration = expire_seconds if expire_seconds > 0 else _settings.token_expire_seconds
    expire = datetime.now(timezone.utc) + timedelta(seconds=duration)
    payload = {
        "sub": email,
        "user_id": user_id,
        "exp": expire,
    }
    return jwt.encode(payload, _settings.secret_key, algorithm=_ALGORITHM)


def decode_access_token(token: str) -> dict | None:
    """Decode and verify a JWT. Returns the payload or None on any failure."""
    try:
        payload = jwt.decode(token, _settings.secret_key, algorithms=[_ALGORITHM])
    except JWTError:
        logger.debug("Rejected access token: signature or expiry check failed")
        return None
    if "user_id" not in payload:
        return None
    return payload
