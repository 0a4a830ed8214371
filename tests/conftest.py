"""Shared fixtures for the pricing service tests.

- AnyIO runs the async tests (@pytest.mark.anyio) on asyncio.
- HTTP tests go through the local ASGI app via httpx.AsyncClient.
"""

from datetime import datetime, timedelta
from typing import AsyncGenerator

import httpx
import pytest
from httpx import ASGITransport

from travel_pricing.main import app


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def day0() -> datetime:
    return datetime(2026, 1, 1, 12, 0)


@pytest.fixture
def days_after(day0):
    def _days_after(days: int, hours: int = 0) -> datetime:
        return day0 + timedelta(days=days, hours=hours)
    return _days_after


@pytest.fixture
async def async_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Client with the application lifespan running (price bot constructed)."""
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
async def bare_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Client without the lifespan; nothing owns a price bot."""
    app.state.price_bot = None
    transport = ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(autouse=True)
def default_localization(monkeypatch):
    """Pin settings so tests don't depend on the local .env"""
    from travel_pricing.config import settings

    monkeypatch.setattr(settings, "DEFAULT_LOCALE", "tr")
    monkeypatch.setattr(settings, "CURRENCY", "TRY")
    monkeypatch.setattr(settings, "PRICE_BOT_ENABLED", False)
