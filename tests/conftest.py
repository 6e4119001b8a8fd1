"""Shared test fixtures."""

import os

# Cheap hashes for the test run; must be set before config.settings is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from httpx import ASGITransport, AsyncClient

from src.cc_app.state import AppState, build_app_state
from src.main import app
from tests.fakes import SAMPLE_GROUNDS, InMemoryKeyValueStore


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
async def app_state(kv_store: InMemoryKeyValueStore) -> AppState:
    state = await build_app_state(kv_store, records=SAMPLE_GROUNDS, seed=42)
    # Availability is random at load; start every test from a bookable catalog
    for ground in state.grounds:
        ground.availability = "Available"
    return state


@pytest.fixture
async def client(app_state: AppState) -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints against a fresh AppState."""
    app.state.cricket = app_state
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    del app.state.cricket
