"""
Stockboard Kernel — Shared Types

Data classes and constants used across primitives, reducer, query, renderer,
and the store. These are the contracts that bind the kernel together.

State shape (plain dicts, produced by reducer.empty_state):
- products: list of product dicts, insertion order is the canonical order
- selected_products: list of product ids, no duplicates, subset of product ids
- filters: {category, in_stock_only, search_query}
- pagination: {current_page, items_per_page}
- sorting: {field, direction}
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

# ---------------------------------------------------------------------------
# Catalog constants
# ---------------------------------------------------------------------------

CATEGORIES: list[str] = [
    "Electronics",
    "Clothing",
    "Food",
    "Furniture",
    "Books",
    "Toys",
    "Other",
]

LOW_STOCK_THRESHOLD = 10

DEFAULT_ITEMS_PER_PAGE = 10

PAGE_SIZE_OPTIONS: list[int] = [5, 10, 20, 50]

# Product keys, in display order
PRODUCT_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "category",
    "price",
    "stock",
    "image",
    "description",
    "created_at",
    "updated_at",
)

# Fields a client may set on add/update
EDITABLE_FIELDS: frozenset[str] = frozenset({"name", "category", "price", "stock", "image", "description"})

NUMERIC_FIELDS: frozenset[str] = frozenset({"price", "stock"})

# ISO 8601 strings; their natural order is chronological
TIMESTAMP_FIELDS: frozenset[str] = frozenset({"created_at", "updated_at"})

SORT_DIRECTIONS: set[str] = {"asc", "desc"}

# ---------------------------------------------------------------------------
# Command type registry
# ---------------------------------------------------------------------------

COMMAND_TYPES: set[str] = {
    # Products
    "product.add",
    "product.update",
    "product.delete",
    "product.delete_selected",
    # Selection
    "selection.select",
    "selection.deselect",
    "selection.toggle",
    "selection.select_all",
    "selection.clear",
    # Filters
    "filter.category",
    "filter.toggle_in_stock",
    "filter.search",
    "filter.set",
    # Pagination
    "page.set",
    "page.size",
    # Sorting
    "sort.set",
}


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------


@dataclass
class Command:
    """
    A named state change plus metadata for the command log.
    The reducer reads `type`, `payload` and `timestamp`.
    """

    id: str
    sequence: int
    timestamp: str  # ISO 8601 UTC, millisecond precision
    type: str
    payload: dict[str, Any]
    actor: str = "user"
    source: str = "web"


@dataclass
class Warning:
    """A non-fatal issue encountered during reduction."""

    code: str
    message: str


@dataclass
class ReduceResult:
    """
    Result of applying one command to a state.
    The reducer never raises; it always returns one of these.
    """

    state: dict[str, Any]
    applied: bool
    warnings: list[Warning] = field(default_factory=list)
    error: str | None = None


@dataclass
class PageView:
    """The display-ready slice of the collection plus pagination facts."""

    items: list[dict[str, Any]]
    total_items: int
    total_pages: int
    current_page: int
    items_per_page: int
    all_on_page_selected: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": self.items,
            "total_items": self.total_items,
            "total_pages": self.total_pages,
            "current_page": self.current_page,
            "items_per_page": self.items_per_page,
            "all_on_page_selected": self.all_on_page_selected,
        }


@dataclass
class RenderOptions:
    """Options controlling what the renderer includes in output."""

    show_chart: bool = True
    title: str = "Inventory Management"
    base_url: str = ""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def now_iso() -> str:
    """Current UTC time as ISO 8601 string with milliseconds."""
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"


def generate_id() -> str:
    """Random 9-character product id."""
    return uuid.uuid4().hex[:9]


def is_valid_sort_field(value: Any) -> bool:
    """None or "" (no sorting), or a known product key."""
    return value is None or value == "" or value in PRODUCT_FIELDS
