"""
core/errors.py -- Error bodies carried by 4xx/5xx login responses.

These are payload markers, not control flow: the router never raises them, it
places an instance in HttpResponse.body. They subclass Exception so a body
reads like the error it describes (str(body) is the message).

Equality is structural -- same type and same message -- so tests and callers
can compare a response body against a freshly built instance.
"""

from __future__ import annotations


class HttpError(Exception):
    """Base for all response error bodies."""

    code = "error"

    @property
    def message(self) -> str:
        return str(self)

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class MissingParamError(HttpError):
    code = "missing_param"

    def __init__(self, param_name: str) -> None:
        super().__init__(f"Missing param: {param_name}")
        self.param_name = param_name


class UnauthorizedError(HttpError):
    code = "unauthorized"

    def __init__(self) -> None:
        super().__init__("Unauthorized")


class ServerError(HttpError):
    """Generic 500 body. Never carries the underlying cause."""

    code = "server_error"

    def __init__(self) -> None:
        super().__init__("Internal error")
