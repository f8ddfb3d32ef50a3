"""
Pytest configuration and fixtures for Stockboard API tests.
"""

from __future__ import annotations

import httpx
import pytest_asyncio

from backend.main import create_app
from engine.kernel.mock_data import MOCK_PRODUCTS
from engine.kernel.store import ProductStore


@pytest_asyncio.fixture
async def store():
    """A fresh store over the sample inventory, one per test."""
    return ProductStore(MOCK_PRODUCTS)


@pytest_asyncio.fixture
async def async_client(store):
    """Async HTTP client against an app wired to `store`."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=create_app(store)),
        base_url="http://test",
    ) as client:
        yield client
