"""
Stockboard Kernel — Query Pipeline

Pure functions that derive what the user sees from the full collection:

    apply_filter → apply_sort → apply_pagination

No caching: collections are small, so the page is recomputed from the
state on every read (resolve_page).

Also hosts the summary helpers used by the dashboard header and the
category chart.
"""

from __future__ import annotations

import math
import unicodedata
from collections.abc import Iterable
from datetime import datetime
from typing import Any

from engine.kernel.types import (
    CATEGORIES,
    LOW_STOCK_THRESHOLD,
    TIMESTAMP_FIELDS,
    PageView,
)

Product = dict[str, Any]

# ---------------------------------------------------------------------------
# Filter
# ---------------------------------------------------------------------------


def apply_filter(
    products: Iterable[Product],
    category: str,
    in_stock_only: bool,
    search_query: str,
) -> list[Product]:
    """
    Keep products matching all three predicates, in input order.

    - category: "" matches everything
    - in_stock_only: requires stock > 0
    - search_query: case-insensitive substring of name, or of description
      when one is present. A product without a description can only match
      on its name.
    """
    needle = search_query.casefold()

    def matches(product: Product) -> bool:
        if category and product["category"] != category:
            return False
        if in_stock_only and product["stock"] <= 0:
            return False
        if needle:
            if needle in product["name"].casefold():
                return True
            description = product.get("description")
            return description is not None and needle in description.casefold()
        return True

    return [product for product in products if matches(product)]


# ---------------------------------------------------------------------------
# Sort
# ---------------------------------------------------------------------------


def collation_key(text: str) -> tuple[str, str, str]:
    """
    Dictionary-order key for display strings.

    Compares letters first with accents and case ignored, then accents
    (unaccented first), then case (lowercase first): apple < Apple < éclair < zebra.
    """
    decomposed = unicodedata.normalize("NFKD", text.casefold())
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, decomposed, text.swapcase()


def _sort_key(field: str):
    def key(product: Product) -> Any:
        value = product[field]
        if isinstance(value, str) and field not in TIMESTAMP_FIELDS:
            return collation_key(value)
        return value

    return key


def apply_sort(products: Iterable[Product], field: str | None, direction: str = "asc") -> list[Product]:
    """
    Return a new list ordered by `field`.

    An empty field means no sorting: input order is kept. Strings compare
    in dictionary order (collation_key), numbers numerically, timestamps
    in their natural (chronological) order. The sort is stable in both
    directions: "desc" reverses the comparison, so equal keys keep their
    input order.
    Products with no value for the field (None) go last, in input order.
    The input is never mutated.
    """
    items = list(products)
    if not field:
        return items

    present = [product for product in items if product.get(field) is not None]
    absent = [product for product in items if product.get(field) is None]

    # list.sort keeps equal elements in input order even with reverse=True
    present.sort(key=_sort_key(field), reverse=direction == "desc")
    return present + absent


def next_sort(sorting: dict[str, Any], field: str) -> tuple[str, str]:
    """
    Sorting after a click on a column header: the active column flips
    from ascending to descending, anything else sorts ascending.
    """
    if sorting.get("field") == field and sorting.get("direction") == "asc":
        return field, "desc"
    return field, "asc"


# ---------------------------------------------------------------------------
# Paginate
# ---------------------------------------------------------------------------


def apply_pagination(products: list[Product], current_page: int, items_per_page: int) -> list[Product]:
    """
    Slice [start, start + items_per_page) where start = (page - 1) * size.
    Pages outside the collection, including pages below 1, are empty.
    """
    if current_page < 1 or items_per_page < 1:
        return []
    start = (current_page - 1) * items_per_page
    return products[start : start + items_per_page]


def total_pages(count: int, items_per_page: int) -> int:
    """Number of pages for `count` results; never less than 1."""
    if items_per_page < 1:
        return 1
    return max(1, math.ceil(count / items_per_page))


def page_numbers(pages: int) -> list[int]:
    return list(range(1, pages + 1))


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def resolve_products(state: dict[str, Any]) -> list[Product]:
    """The full filtered and sorted sequence for a state (all pages)."""
    filters = state["filters"]
    sorting = state["sorting"]
    filtered = apply_filter(
        state["products"],
        filters["category"],
        filters["in_stock_only"],
        filters["search_query"],
    )
    return apply_sort(filtered, sorting["field"], sorting["direction"])


def resolve_page(state: dict[str, Any]) -> PageView:
    """
    Derive the displayed page: filter → sort → paginate.
    Recomputed on every call.
    """
    pagination = state["pagination"]
    ordered = resolve_products(state)
    items = apply_pagination(ordered, pagination["current_page"], pagination["items_per_page"])
    selected = set(state["selected_products"])

    return PageView(
        items=items,
        total_items=len(ordered),
        total_pages=total_pages(len(ordered), pagination["items_per_page"]),
        current_page=pagination["current_page"],
        items_per_page=pagination["items_per_page"],
        all_on_page_selected=bool(items) and all(product["id"] in selected for product in items),
    )


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------


def has_low_stock(stock: int) -> bool:
    return stock <= LOW_STOCK_THRESHOLD


def category_counts(products: Iterable[Product]) -> dict[str, int]:
    """
    Products per category. Every known category is present (possibly 0),
    in catalog order; categories outside the catalog are appended.
    """
    counts: dict[str, int] = {category: 0 for category in CATEGORIES}
    for product in products:
        counts[product["category"]] = counts.get(product["category"], 0) + 1
    return counts


def category_distribution(products: list[Product]) -> list[dict[str, Any]]:
    """Chart data: count and share of the whole collection per category."""
    total = len(products)
    return [
        {
            "category": category,
            "count": count,
            "percentage": round(count / total * 100, 1) if total else 0.0,
        }
        for category, count in category_counts(products).items()
    ]


def inventory_summary(state: dict[str, Any]) -> dict[str, Any]:
    """Header figures for the dashboard."""
    products = state["products"]
    return {
        "total_products": len(products),
        "selected_count": len(state["selected_products"]),
        "total_units": sum(product["stock"] for product in products),
        "inventory_value": round(sum(product["price"] * product["stock"] for product in products), 2),
        "low_stock_count": sum(1 for product in products if has_low_stock(product["stock"])),
        "out_of_stock_count": sum(1 for product in products if product["stock"] <= 0),
    }


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_currency(amount: float) -> str:
    """US dollar amount, e.g. 1234.5 → '$1,234.50'."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_date(value: str) -> str:
    """ISO 8601 timestamp → 'Jan 5, 2024'."""
    parsed = datetime.fromisoformat(value)
    return f"{parsed:%b} {parsed.day}, {parsed.year}"
