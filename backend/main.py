"""
Stockboard FastAPI application.

Entry point for the API server. The store is built once per app and
injected into routes through backend.deps.get_store.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from backend.config import settings
from backend.routes import pages as pages_routes
from backend.routes import products as product_routes
from backend.routes import view as view_routes
from engine.kernel.mock_data import MOCK_PRODUCTS
from engine.kernel.store import CommandRejected, ProductStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    The store lives in memory only: nothing to open on startup and nothing
    to flush on shutdown beyond logging.
    """
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    store: ProductStore = app.state.store
    logger.info("Dashboard started with %d products (%s)", len(store.snapshot()["products"]), settings.ENVIRONMENT)

    yield

    logger.info("Dashboard stopped after %d commands", len(store.history))


async def command_rejected_handler(request: Request, exc: CommandRejected) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.errors, "command": exc.command_type},
    )


def build_store() -> ProductStore:
    """The store for a fresh process, per settings."""
    seed = MOCK_PRODUCTS if settings.SEED_MOCK_DATA else []
    return ProductStore(seed, items_per_page=settings.ITEMS_PER_PAGE)


def create_app(store: ProductStore | None = None) -> FastAPI:
    app = FastAPI(
        title="Stockboard",
        docs_url="/docs" if settings.is_development else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else build_store()

    app.add_exception_handler(CommandRejected, command_rejected_handler)

    # Register routes
    app.include_router(product_routes.router)
    app.include_router(product_routes.selection_router)
    app.include_router(view_routes.router)
    app.include_router(pages_routes.router)

    @app.get("/health")
    async def health():
        """Health check endpoint for uptime monitoring."""
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the dashboard with uvicorn."""
    import uvicorn

    uvicorn.run("backend.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
