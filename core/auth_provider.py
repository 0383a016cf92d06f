"""
core/auth_provider.py -- The AuthProvider capability the login router depends on.

Any object with an authenticate(email, password) method satisfies it. The
method returns a token string, or None/"" for rejected credentials, either
directly or as an awaitable. Raising means "something broke", which is not the
same thing as "wrong password".

Layer rule: stdlib only. Implementations live outside core/ (auth/password.py)
and import nothing from here at runtime; they satisfy the protocol structurally.
"""

from __future__ import annotations

from collections.abc import Awaitable
from typing import Optional, Protocol, Union

TokenResult = Union[Optional[str], Awaitable[Optional[str]]]


class AuthProvider(Protocol):
    def authenticate(self, email: str, password: str) -> TokenResult: ...


def is_auth_provider(candidate: object) -> bool:
    """Return True if candidate has a callable authenticate attribute.

    Checked with plain getattr rather than isinstance(..., AuthProvider):
    runtime protocol checks look attributes up statically and miss ones
    provided dynamically (proxies, mocks).
    """
    return callable(getattr(candidate, "authenticate", None))
