"""
api/routes/v1/auth.py -- HTTP binding for the login router.

Routes:
  POST /api/v1/auth/login -- email/password login; returns {"accessToken": ...}

The route does no validation of its own. It decodes the body leniently
(invalid JSON or a non-object payload becomes an absent body), hands the
result to the LoginRouter on app.state, and serializes whatever comes back.
Status codes come straight from the router: 200, 400, 401 or 500.

Responses carry Cache-Control: no-store -- they may contain a bearer token.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.models import ErrorResponse, LoginResponse
from core.errors import HttpError
from core.login_router import LoginRouter
from core.models import HttpRequest, HttpResponse

logger = logging.getLogger("loginrouter.api")

router = APIRouter()


async def _read_login_request(request: Request) -> HttpRequest:
    raw = await request.body()
    if not raw:
        return HttpRequest(body=None)
    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        logger.debug("Login body is not valid JSON")
        return HttpRequest(body=None)
    return HttpRequest.from_json(payload)


def _to_json_response(result: HttpResponse) -> JSONResponse:
    if isinstance(result.body, HttpError):
        content = ErrorResponse.from_error(result.body).model_dump(exclude_none=True)
    elif isinstance(result.body, Mapping) and "accessToken" in result.body:
        content = LoginResponse(access_token=result.body["accessToken"]).model_dump(by_alias=True)
    else:
        content = result.body
    resp = JSONResponse(status_code=result.status_code, content=content)
    resp.headers["Cache-Control"] = "no-store"
    return resp


@router.post("/auth/login", response_model=LoginResponse)
async def login(request: Request) -> JSONResponse:
    """Authenticate with email and password and return an access token."""
    login_router: LoginRouter = request.app.state.login_router
    result = await login_router.route(await _read_login_request(request))
    return _to_json_response(result)
