"""
Pydantic models for Stockboard.

All request and response shapes defined here. No imports from routes.
"""

from backend.models.product import (
    FiltersRequest,
    PageRequest,
    PageSizeRequest,
    ProductForm,
    ProductPatch,
    ProductResponse,
    SelectionResponse,
    SortingRequest,
    StatsResponse,
    ViewResponse,
)

__all__ = [
    "FiltersRequest",
    "PageRequest",
    "PageSizeRequest",
    "ProductForm",
    "ProductPatch",
    "ProductResponse",
    "SelectionResponse",
    "SortingRequest",
    "StatsResponse",
    "ViewResponse",
]
