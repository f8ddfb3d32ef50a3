"""
Stockboard Kernel — Reducer

Pure function: (state, command) → ReduceResult
No side effects. No IO. Deterministic.

Given the same seed and the same sequence of commands, produces the same
state every time. Ids and timestamps come from the command, never from the
clock, so replay is exact.

Cross-cutting invariants maintained here:
- product ids are unique
- selected_products ⊆ product ids, no duplicates
- updated_at >= created_at
- filter and page-size changes reset current_page to 1
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Any

from engine.kernel.types import (
    DEFAULT_ITEMS_PER_PAGE,
    EDITABLE_FIELDS,
    Command,
    ReduceResult,
    Warning,
)

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def empty_state(
    products: Iterable[dict[str, Any]] | None = None,
    *,
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE,
) -> dict[str, Any]:
    """
    The initial state: the seed collection with default view parameters.
    Seed products are copied; optional fields missing from a seed record
    become None.
    """
    seeded: list[dict[str, Any]] = []
    seen: set[str] = set()
    for product in products or []:
        if product["id"] in seen:
            raise ValueError(f"Duplicate product id in seed data: {product['id']}")
        seen.add(product["id"])
        seeded.append(_normalize(copy.deepcopy(product)))

    return {
        "products": seeded,
        "selected_products": [],
        "filters": {
            "category": "",
            "in_stock_only": False,
            "search_query": "",
        },
        "pagination": {
            "current_page": 1,
            "items_per_page": items_per_page,
        },
        "sorting": {
            "field": "name",
            "direction": "asc",
        },
    }


def reduce(state: dict[str, Any], command: Command) -> ReduceResult:
    """
    Apply one command to the current state.
    Returns new state + applied flag + warnings/errors.

    Pure function. The returned state is a new dict.
    The input state is never modified.
    """
    handler = _HANDLERS.get(command.type)
    if handler is None:
        return ReduceResult(
            state=state,
            applied=False,
            error=f"UNKNOWN_COMMAND: {command.type}",
        )

    # Deep copy so we never mutate the input
    new_state = copy.deepcopy(state)
    return handler(new_state, command)


def replay(
    commands: Iterable[Command],
    products: Iterable[dict[str, Any]] | None = None,
    *,
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE,
) -> dict[str, Any]:
    """
    Rebuild state from a seed by reducing over the command log.
    replay(cmds, seed, items_per_page=n)
        == reduce(reduce(empty_state(seed, items_per_page=n), c1), c2)...
    Rejected commands are skipped.
    """
    state = empty_state(products, items_per_page=items_per_page)
    for command in commands:
        result = reduce(state, command)
        if result.applied:
            state = result.state
    return state


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _reject(state: dict, code: str, msg: str) -> ReduceResult:
    return ReduceResult(state=state, applied=False, error=f"{code}: {msg}")


def _ok(state: dict, warnings: list[Warning] | None = None) -> ReduceResult:
    return ReduceResult(state=state, applied=True, warnings=warnings or [])


def _not_found(state: dict, product_id: str) -> ReduceResult:
    """Unknown ids are a silent no-op, surfaced only as a warning."""
    return _ok(state, [Warning(code="PRODUCT_NOT_FOUND", message=f"No product with id '{product_id}'")])


def _normalize(product: dict[str, Any]) -> dict[str, Any]:
    product.setdefault("image", None)
    product.setdefault("description", None)
    return product


def _find_index(state: dict, product_id: str) -> int | None:
    for i, product in enumerate(state["products"]):
        if product["id"] == product_id:
            return i
    return None


def _has_product(state: dict, product_id: str) -> bool:
    return _find_index(state, product_id) is not None


def _reset_page(state: dict) -> None:
    state["pagination"]["current_page"] = 1


# ---------------------------------------------------------------------------
# Product handlers
# ---------------------------------------------------------------------------


def _handle_product_add(state: dict, command: Command) -> ReduceResult:
    p = command.payload
    product_id = p.get("id")
    if product_id is None:
        return _reject(state, "MISSING_ID", "product.add needs an id assigned before reduction")
    if _has_product(state, product_id):
        return _reject(state, "PRODUCT_ALREADY_EXISTS", product_id)

    fields = p["fields"]
    product: dict[str, Any] = {"id": product_id}
    for key in ("name", "category", "price", "stock", "image", "description"):
        product[key] = fields.get(key)
    product["created_at"] = command.timestamp
    product["updated_at"] = command.timestamp

    state["products"].append(product)
    return _ok(state)


def _handle_product_update(state: dict, command: Command) -> ReduceResult:
    p = command.payload
    index = _find_index(state, p["id"])
    if index is None:
        return _not_found(state, p["id"])

    product = state["products"][index]
    # id and timestamps are owned by the reducer
    for key, value in p["fields"].items():
        if key in EDITABLE_FIELDS:
            product[key] = value

    product["updated_at"] = max(command.timestamp, product["updated_at"], product["created_at"])
    return _ok(state)


def _handle_product_delete(state: dict, command: Command) -> ReduceResult:
    product_id = command.payload["id"]
    if not _has_product(state, product_id):
        return _not_found(state, product_id)

    state["products"] = [prod for prod in state["products"] if prod["id"] != product_id]
    state["selected_products"] = [pid for pid in state["selected_products"] if pid != product_id]
    return _ok(state)


def _handle_product_delete_selected(state: dict, command: Command) -> ReduceResult:
    selected = set(state["selected_products"])
    state["products"] = [prod for prod in state["products"] if prod["id"] not in selected]
    state["selected_products"] = []
    return _ok(state)


# ---------------------------------------------------------------------------
# Selection handlers
# ---------------------------------------------------------------------------


def _handle_selection_select(state: dict, command: Command) -> ReduceResult:
    product_id = command.payload["id"]
    if not _has_product(state, product_id):
        return _not_found(state, product_id)
    if product_id not in state["selected_products"]:
        state["selected_products"].append(product_id)
    return _ok(state)


def _handle_selection_deselect(state: dict, command: Command) -> ReduceResult:
    product_id = command.payload["id"]
    state["selected_products"] = [pid for pid in state["selected_products"] if pid != product_id]
    return _ok(state)


def _handle_selection_toggle(state: dict, command: Command) -> ReduceResult:
    product_id = command.payload["id"]
    if product_id in state["selected_products"]:
        state["selected_products"].remove(product_id)
        return _ok(state)
    if not _has_product(state, product_id):
        return _not_found(state, product_id)
    state["selected_products"].append(product_id)
    return _ok(state)


def _handle_selection_select_all(state: dict, command: Command) -> ReduceResult:
    state["selected_products"] = [prod["id"] for prod in state["products"]]
    return _ok(state)


def _handle_selection_clear(state: dict, command: Command) -> ReduceResult:
    state["selected_products"] = []
    return _ok(state)


# ---------------------------------------------------------------------------
# Filter, pagination and sorting handlers
# ---------------------------------------------------------------------------


def _handle_filter_category(state: dict, command: Command) -> ReduceResult:
    state["filters"]["category"] = command.payload["category"]
    _reset_page(state)
    return _ok(state)


def _handle_filter_toggle_in_stock(state: dict, command: Command) -> ReduceResult:
    state["filters"]["in_stock_only"] = not state["filters"]["in_stock_only"]
    _reset_page(state)
    return _ok(state)


def _handle_filter_search(state: dict, command: Command) -> ReduceResult:
    state["filters"]["search_query"] = command.payload["query"]
    _reset_page(state)
    return _ok(state)


def _handle_filter_set(state: dict, command: Command) -> ReduceResult:
    # Any subset of the filters, applied together
    for key, value in command.payload.items():
        state["filters"][key] = value
    _reset_page(state)
    return _ok(state)


def _handle_page_set(state: dict, command: Command) -> ReduceResult:
    # No clamping: an out-of-range page resolves to an empty page
    state["pagination"]["current_page"] = command.payload["page"]
    return _ok(state)


def _handle_page_size(state: dict, command: Command) -> ReduceResult:
    state["pagination"]["items_per_page"] = command.payload["items_per_page"]
    _reset_page(state)
    return _ok(state)


def _handle_sort_set(state: dict, command: Command) -> ReduceResult:
    state["sorting"] = {
        "field": command.payload["field"] or None,
        "direction": command.payload["direction"],
    }
    return _ok(state)


# ---------------------------------------------------------------------------
# Handler dispatch table
# ---------------------------------------------------------------------------

_HANDLERS: dict[str, Any] = {
    "product.add": _handle_product_add,
    "product.update": _handle_product_update,
    "product.delete": _handle_product_delete,
    "product.delete_selected": _handle_product_delete_selected,
    "selection.select": _handle_selection_select,
    "selection.deselect": _handle_selection_deselect,
    "selection.toggle": _handle_selection_toggle,
    "selection.select_all": _handle_selection_select_all,
    "selection.clear": _handle_selection_clear,
    "filter.category": _handle_filter_category,
    "filter.toggle_in_stock": _handle_filter_toggle_in_stock,
    "filter.search": _handle_filter_search,
    "filter.set": _handle_filter_set,
    "page.set": _handle_page_set,
    "page.size": _handle_page_size,
    "sort.set": _handle_sort_set,
}
