"""
core/models.py -- Request and response envelopes for the login router.

Pattern: Data class (pure data container). The router and ResponseBuilder do
the work; these only own shape. Both are frozen -- a response is immutable
once returned, and the router hands out its success payload as a read-only
MappingProxyType.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class LoginBody:
    email: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LoginBody":
        """Pick email/password out of a decoded JSON object.

        Non-string values are dropped, so the router sees them as missing.
        """
        email = data.get("email")
        password = data.get("password")
        return cls(
            email=email if isinstance(email, str) else None,
            password=password if isinstance(password, str) else None,
        )


@dataclass(frozen=True)
class HttpRequest:
    # LoginBody, or a plain {"email": ..., "password": ...} mapping.
    body: Union[LoginBody, Mapping[str, Any], None] = None

    @classmethod
    def from_json(cls, payload: Any) -> "HttpRequest":
        """Build a request from a decoded JSON payload.

        Anything other than a JSON object becomes an absent body.
        """
        if not isinstance(payload, Mapping):
            return cls(body=None)
        return cls(body=LoginBody.from_mapping(payload))


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: Any = None
