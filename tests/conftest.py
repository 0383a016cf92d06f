"""
tests/conftest.py -- Shared test fixtures for the login service.

This module provides:
  - shared_memory_url(): a named shared-memory SQLite URL
  - make_user_store(): an isolated UserStore seeded with known users
  - api_client: TestClient over the real FastAPI app with a patched lifespan

Named shared-memory SQLite URIs (not plain :memory:) are required wherever
code runs on another thread -- TestClient's worker and asyncio.to_thread in
PasswordAuthProvider. Plain :memory: DBs are per-connection and would show
those threads a blank schema.

The DEBUG env var must be set before any auth module import so get_settings()
auto-generates SECRET_KEY instead of raising ValueError.
"""

from __future__ import annotations

import os
from collections.abc import Generator
from contextlib import asynccontextmanager

# Set DEBUG before any auth/core import.
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from api.main import app
from auth.models import User
from auth.password import PasswordAuthProvider
from auth.store import UserStore
from auth.tokens import hash_password
from core.login_router import LoginRouter

ALICE_EMAIL = "alice@example.com"
ALICE_PASSWORD = "correct-horse"
BOB_EMAIL = "bob@example.com"
BOB_PASSWORD = "battery-staple"


def shared_memory_url(name: str) -> str:
    return f"sqlite:///file:{name}?mode=memory&cache=shared&uri=true"


def make_user_store(db_url: str) -> tuple[UserStore, int, int]:
    """Create a store with an active user (alice) and a disabled one (bob).

    Returns (store, alice_id, bob_id).
    """
    store = UserStore(db_url)
    alice_id = store.create_user(User(email=ALICE_EMAIL, hashed_password=hash_password(ALICE_PASSWORD)))
    bob_id = store.create_user(User(email=BOB_EMAIL, hashed_password=hash_password(BOB_PASSWORD), is_active=False))
    return store, alice_id, bob_id


def _patch_lifespan(user_store: UserStore):
    """Return a lifespan that wires the test store into app.state."""

    @asynccontextmanager
    async def test_lifespan(app):
        app.state.user_store = user_store
        app.state.login_router = LoginRouter(PasswordAuthProvider(user_store))
        yield

    return test_lifespan


@pytest.fixture(scope="module")
def api_client(request: pytest.FixtureRequest) -> Generator[tuple[TestClient, int], None, None]:
    """Yield (client, alice_id) for API integration tests.

    One TestClient per test module, each with its own named in-memory store,
    so modules never see each other's users.
    """
    store, alice_id, _ = make_user_store(shared_memory_url(f"test_auth_{request.module.__name__}"))

    app.router.lifespan_context = _patch_lifespan(store)

    with TestClient(app, raise_server_exceptions=True) as client:
        yield client, alice_id

    store.close()
