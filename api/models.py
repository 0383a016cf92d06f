"""
API response models for the login service.

Pydantic v2 models for the HTTP transport contract. They are separate from
the dataclasses in core/models.py, which own the internal request/response
envelopes. The login route maps between the two.

There is no request model: the router itself decides what a missing or empty
field means, so the route hands it the raw JSON instead of letting pydantic
reject the body with a 422 first.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from core.errors import HttpError


class LoginResponse(BaseModel):
    """Body of a successful POST /api/v1/auth/login."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    access_token: str = Field(alias="accessToken")


class ErrorDetail(BaseModel):
    """Machine-readable error payload."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    param: Optional[str] = None


class ErrorResponse(BaseModel):
    """Top-level error envelope returned on 4xx/5xx responses."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetail

    @classmethod
    def from_error(cls, err: HttpError) -> "ErrorResponse":
        """Build the envelope from a core error body."""
        return cls(
            error=ErrorDetail(
                code=err.code,
                message=err.message,
                param=getattr(err, "param_name", None),
            )
        )


class HealthResponse(BaseModel):
    """Response for GET /api/v1/health."""

    model_config = ConfigDict(frozen=True)

    status: str = "healthy"
    version: str
    components: dict[str, str]
