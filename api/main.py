"""
api/main.py -- FastAPI application entry point for the login service.

Exposes the LoginRouter over HTTP. The app binds exactly two routes (login and
health); it installs no middleware and sets no cookies.

Run with:  uvicorn asgi:app --reload
           python main.py serve

Lifespan opens the UserStore and builds one LoginRouter on startup, and closes
the store on shutdown.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text

from api.models import ErrorDetail, ErrorResponse, HealthResponse
from api.routes.v1.auth import router as auth_router
from auth.password import PasswordAuthProvider
from auth.store import UserStore
from core.config import get_settings
from core.login_router import LoginRouter

__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)-5s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("loginrouter.api")


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the user store and wire the login router for the server lifetime."""
    settings = get_settings()
    app.state.user_store = UserStore(settings.auth_db_url)
    app.state.login_router = LoginRouter(PasswordAuthProvider(app.state.user_store))
    if not app.state.user_store.has_users():
        logger.warning("No users in the auth store -- add one with: python main.py add-user EMAIL")
    logger.info("Login API started")

    yield

    app.state.user_store.close()
    logger.info("Login API shutdown complete")


# ---------------------------------------------------------------------------
# App instantiation
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Login Router API",
    description="Email/password login that returns a signed access token.",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(auth_router, prefix="/api/v1", tags=["Auth"])


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for faults outside the login router (which handles its own).

    The exception goes to the log only, never to the response body.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error=ErrorDetail(
                code="server_error",
                message="Internal error",
            )
        ).model_dump(exclude_none=True),
    )


# ---------------------------------------------------------------------------
# Health endpoint
# ---------------------------------------------------------------------------


@app.get("/api/v1/health", tags=["Health"])
def health(request: Request) -> HealthResponse:
    """Return liveness, version, and the state of the auth store and router.

    Plain def: the DB ping blocks, so FastAPI runs this in its threadpool.
    """
    components = {"app": "ok"}
    try:
        with request.app.state.user_store.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        components["database"] = "ok"
    except Exception:
        logger.exception("Health check: auth store unreachable")
        components["database"] = "error"
    components["login_router"] = "ok" if request.app.state.login_router.configured else "error"
    return HealthResponse(version=__version__, components=components)
