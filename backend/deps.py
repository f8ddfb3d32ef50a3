"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request

from engine.kernel.store import ProductStore


def get_store(request: Request) -> ProductStore:
    """The store built at app construction."""
    return request.app.state.store
