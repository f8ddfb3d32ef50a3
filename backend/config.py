"""
Stockboard configuration — all environment variables in one place.

Read from environment at runtime.
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings from environment variables."""

    # Application
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
    TITLE: str = os.environ.get("DASHBOARD_TITLE", "Inventory Management")

    # Store
    ITEMS_PER_PAGE: int = int(os.environ.get("ITEMS_PER_PAGE", "10"))
    SEED_MOCK_DATA: bool = _env_bool("SEED_MOCK_DATA", "true")

    # Server
    HOST: str = os.environ.get("HOST", "127.0.0.1")
    PORT: int = int(os.environ.get("PORT", "8000"))

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"


# Singleton instance
settings = Settings()

if settings.ITEMS_PER_PAGE < 1:
    raise RuntimeError("ITEMS_PER_PAGE must be a positive integer")
