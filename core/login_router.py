"""
core/login_router.py -- Validate a login request and dispatch it to an AuthProvider.

Evaluation order (first match wins):
  1. No request, no usable body, or no provider  -> 500
     (a plain mapping body is read like LoginBody; any other type is unusable)
  2. Missing/empty email                         -> 400 MissingParamError("email")
  3. Missing/empty password                      -> 400 MissingParamError("password")
  4. provider.authenticate(email, password)
       raises                                    -> 500
       None / ""                                 -> 401
       token                                     -> 200 {"accessToken": token} (read-only mapping)

The provider is checked once at construction. An unusable one is logged and
dropped, which routes every call down the 500 branch instead of raising from
__init__ -- a misconfigured router still answers with a well-formed response.

No exception from the provider escapes route(). The cause goes to the log;
the response body is always a bare ServerError.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from core.auth_provider import AuthProvider, is_auth_provider
from core.http_response import ResponseBuilder
from core.models import HttpRequest, HttpResponse, LoginBody

logger = logging.getLogger("loginrouter.router")


class LoginRouter:
    def __init__(self, auth_provider: Optional[AuthProvider] = None) -> None:
        if auth_provider is None:
            logger.warning("LoginRouter created without an AuthProvider -- every login will return 500")
        elif not is_auth_provider(auth_provider):
            logger.error(
                "LoginRouter given %s, which has no callable authenticate() -- every login will return 500",
                type(auth_provider).__name__,
            )
            auth_provider = None
        self._auth_provider = auth_provider

    @property
    def configured(self) -> bool:
        return self._auth_provider is not None

    async def route(self, http_request: Optional[HttpRequest] = None) -> HttpResponse:
        if http_request is None or http_request.body is None or self._auth_provider is None:
            return ResponseBuilder.server_error()

        body = http_request.body
        if isinstance(body, Mapping):
            body = LoginBody.from_mapping(body)
        elif not isinstance(body, LoginBody):
            logger.error("Login request body has unsupported type %s", type(body).__name__)
            return ResponseBuilder.server_error()

        email = body.email
        password = body.password
        if not email:
            logger.debug("Login rejected: missing email")
            return ResponseBuilder.bad_request("email")
        if not password:
            logger.debug("Login rejected: missing password")
            return ResponseBuilder.bad_request("password")

        try:
            access_token = self._auth_provider.authenticate(email, password)
            if inspect.isawaitable(access_token):
                access_token = await access_token
        except Exception:
            logger.exception("AuthProvider failed during login")
            return ResponseBuilder.server_error()

        if not access_token:
            logger.info("Login rejected: bad credentials")
            return ResponseBuilder.unauthorized_error()

        return ResponseBuilder.ok(MappingProxyType({"accessToken": access_token}))
