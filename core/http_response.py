"""
core/http_response.py -- Standard response envelopes for each login outcome.

Pure and total: no I/O, no validation, no failure modes. Status code and body
kind always travel together (400/MissingParamError, 401/UnauthorizedError,
500/ServerError, 200/success payload).
"""

from __future__ import annotations

from typing import Any

from core.errors import MissingParamError, ServerError, UnauthorizedError
from core.models import HttpResponse


class ResponseBuilder:
    @staticmethod
    def ok(data: Any) -> HttpResponse:
        return HttpResponse(status_code=200, body=data)

    @staticmethod
    def bad_request(param_name: str) -> HttpResponse:
        """400 with a MissingParamError naming the absent field."""
        return HttpResponse(status_code=400, body=MissingParamError(param_name))

    @staticmethod
    def server_error() -> HttpResponse:
        """500 for misconfiguration, malformed input, or a collaborator fault.

        The body is always a bare ServerError -- fault detail belongs in logs.
        """
        return HttpResponse(status_code=500, body=ServerError())

    @staticmethod
    def unauthorized_error() -> HttpResponse:
        return HttpResponse(status_code=401, body=UnauthorizedError())
