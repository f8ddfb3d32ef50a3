"""
Stockboard Kernel — Command Validation

Validates command payloads before they reach the reducer.
Every state change goes through one of the 16 command types.
Validation is structural (well-formed?) not semantic (will it apply?).
The reducer handles semantic checks (does the product exist? etc.).

Business rules on product values (non-empty name, non-negative price and
stock, well-formed image URL) are enforced at the form boundary, see
backend.models.product.
"""

from __future__ import annotations

from typing import Any

from engine.kernel.types import (
    COMMAND_TYPES,
    EDITABLE_FIELDS,
    PRODUCT_FIELDS,
    SORT_DIRECTIONS,
    is_valid_sort_field,
)

# Fields product.add must carry
REQUIRED_ADD_FIELDS: tuple[str, ...] = ("name", "category", "price", "stock")

# Keys filter.set may carry, with their types
FILTER_KEYS: dict[str, type] = {"category": str, "in_stock_only": bool, "search_query": str}

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_command(type: str, payload: dict[str, Any]) -> list[str]:
    """
    Validate a command's type and payload structure.
    Returns a list of error strings. Empty list = valid.

    This checks structural validity only:
    - Is the type recognized?
    - Is the payload a dict?
    - Are required keys present, with the right Python types?

    It does NOT check whether referenced products exist.
    That's the reducer's job.
    """
    errors: list[str] = []

    if type not in COMMAND_TYPES:
        errors.append(f"Unknown command type: {type}")
        return errors

    if not isinstance(payload, dict):
        errors.append("Payload must be a non-null object")
        return errors

    validator = _VALIDATORS.get(type)
    if validator:
        errors.extend(validator(payload))

    return errors


# ---------------------------------------------------------------------------
# Shared checks
# ---------------------------------------------------------------------------


def _is_id(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


def _check_field_types(fields: dict, errors: list[str]) -> None:
    for key, value in fields.items():
        if key in ("name", "category"):
            if not isinstance(value, str):
                errors.append(f"'{key}' must be a string")
        elif key == "price":
            if not isinstance(value, int | float) or isinstance(value, bool):
                errors.append("'price' must be a number")
        elif key == "stock":
            if not isinstance(value, int) or isinstance(value, bool):
                errors.append("'stock' must be an integer")
        elif key in ("image", "description"):
            if value is not None and not isinstance(value, str):
                errors.append(f"'{key}' must be a string or null")


# ---------------------------------------------------------------------------
# Per-command validators
# ---------------------------------------------------------------------------


def _validate_product_add(p: dict) -> list[str]:
    errors: list[str] = []
    if p.get("id") is not None and not _is_id(p["id"]):
        errors.append(f"Invalid product ID: {p['id']!r}")

    fields = p.get("fields")
    if fields is None:
        errors.append("product.add requires 'fields'")
        return errors
    if not isinstance(fields, dict):
        errors.append("'fields' must be an object")
        return errors

    for key in REQUIRED_ADD_FIELDS:
        if key not in fields:
            errors.append(f"product.add requires field '{key}'")
    for key in fields:
        if key not in EDITABLE_FIELDS:
            errors.append(f"Unknown product field: {key}")

    _check_field_types(fields, errors)
    return errors


def _validate_product_update(p: dict) -> list[str]:
    errors: list[str] = []
    if not _is_id(p.get("id")):
        errors.append("product.update requires 'id'")

    fields = p.get("fields")
    if fields is None:
        errors.append("product.update requires 'fields'")
        return errors
    if not isinstance(fields, dict):
        errors.append("'fields' must be an object")
        return errors

    for key in fields:
        if key not in PRODUCT_FIELDS:
            errors.append(f"Unknown product field: {key}")

    _check_field_types(fields, errors)
    return errors


def _validate_requires_id(type: str):
    def validate(p: dict) -> list[str]:
        if not _is_id(p.get("id")):
            return [f"{type} requires 'id'"]
        return []

    return validate


def _validate_filter_category(p: dict) -> list[str]:
    if not isinstance(p.get("category"), str):
        return ["filter.category requires 'category' string"]
    return []


def _validate_filter_search(p: dict) -> list[str]:
    if not isinstance(p.get("query"), str):
        return ["filter.search requires 'query' string"]
    return []


def _validate_filter_set(p: dict) -> list[str]:
    if not p:
        return ["filter.set requires at least one filter"]
    errors: list[str] = []
    for key, value in p.items():
        expected = FILTER_KEYS.get(key)
        if expected is None:
            errors.append(f"Unknown filter: {key}")
        elif not isinstance(value, expected):
            errors.append(f"'{key}' must be a {expected.__name__}")
    return errors


def _validate_page_set(p: dict) -> list[str]:
    if not _is_positive_int(p.get("page")):
        return ["page.set requires 'page' as a positive integer"]
    return []


def _validate_page_size(p: dict) -> list[str]:
    if not _is_positive_int(p.get("items_per_page")):
        return ["page.size requires 'items_per_page' as a positive integer"]
    return []


def _validate_sort_set(p: dict) -> list[str]:
    errors: list[str] = []
    if "field" not in p:
        errors.append("sort.set requires 'field'")
    elif not is_valid_sort_field(p["field"]):
        errors.append(f"Unknown sort field: {p['field']}")
    if p.get("direction") not in SORT_DIRECTIONS:
        errors.append(f"Invalid sort direction: {p.get('direction')!r}. Must be one of {sorted(SORT_DIRECTIONS)}")
    return errors


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

_VALIDATORS: dict[str, Any] = {
    "product.add": _validate_product_add,
    "product.update": _validate_product_update,
    "product.delete": _validate_requires_id("product.delete"),
    "selection.select": _validate_requires_id("selection.select"),
    "selection.deselect": _validate_requires_id("selection.deselect"),
    "selection.toggle": _validate_requires_id("selection.toggle"),
    "filter.category": _validate_filter_category,
    "filter.search": _validate_filter_search,
    "filter.set": _validate_filter_set,
    "page.set": _validate_page_set,
    "page.size": _validate_page_size,
    "sort.set": _validate_sort_set,
}
