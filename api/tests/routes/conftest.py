"""Route test configuration.

Disables the rate limiter and wires an app whose store and session
dependencies are the in-memory fakes.
"""

from collections.abc import AsyncGenerator
from unittest.mock import patch

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from core.auth import get_session_repository
from main import create_app
from routes.hotels_routes import get_hotel_read_store
from tests.factories import SessionFactory
from tests.fakes import (
    TEST_TOKEN,
    TEST_USER_ID,
    InMemoryHotelReadStore,
    InMemorySessionRepository,
)


@pytest.fixture(autouse=True)
def _disable_rate_limiter():
    """Disable slowapi rate limiting so route handlers can be called directly."""
    with patch("core.ratelimit.limiter.enabled", False):
        yield


@pytest.fixture
def hotel_store() -> InMemoryHotelReadStore:
    return InMemoryHotelReadStore()


@pytest.fixture
def test_app(hotel_store: InMemoryHotelReadStore) -> FastAPI:
    """App with one valid session (TEST_TOKEN -> TEST_USER_ID)."""
    app = create_app()
    sessions = InMemorySessionRepository(
        [SessionFactory.build(user_id=TEST_USER_ID, token=TEST_TOKEN)]
    )
    app.dependency_overrides[get_hotel_read_store] = lambda: hotel_store
    app.dependency_overrides[get_session_repository] = lambda: sessions
    return app


@pytest_asyncio.fixture
async def client(test_app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {TEST_TOKEN}"}
