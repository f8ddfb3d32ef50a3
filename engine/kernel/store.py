"""
Stockboard Kernel — Product Store

The single writer for dashboard state. Holds the current state and applies
named operations atomically through the pure reducer.

    operation → Command → validate → reduce → swap state

Reads hand out deep copies; nothing outside the store ever holds the live
state. A lock serializes dispatch so one command completes before the next
begins, which makes the store safe to share between server threads.
"""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Iterable
from typing import Any

from engine.kernel.commands import make_command
from engine.kernel.primitives import validate_command
from engine.kernel.query import resolve_page
from engine.kernel.reducer import empty_state, reduce, replay
from engine.kernel.types import (
    DEFAULT_ITEMS_PER_PAGE,
    Command,
    PageView,
    ReduceResult,
    generate_id,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class CommandRejected(ValueError):
    """Command is malformed or the reducer refused it. State is unchanged."""

    def __init__(self, command_type: str, errors: list[str]):
        self.command_type = command_type
        self.errors = errors
        super().__init__(f"{command_type} rejected: {'; '.join(errors)}")


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


class ProductStore:
    """
    Authoritative in-memory state for the dashboard.
    Construct once with the seed collection and pass it to whatever renders.
    """

    def __init__(
        self,
        products: Iterable[dict[str, Any]] | None = None,
        *,
        items_per_page: int = DEFAULT_ITEMS_PER_PAGE,
        source: str = "web",
    ):
        self._state = empty_state(products, items_per_page=items_per_page)
        self._seed = copy.deepcopy(self._state["products"])
        self._items_per_page = items_per_page
        self._log: list[Command] = []
        self._lock = threading.Lock()
        self._source = source

    # -- reads --

    def snapshot(self) -> dict[str, Any]:
        """Deep copy of the current state."""
        with self._lock:
            return copy.deepcopy(self._state)

    def view(self) -> PageView:
        """The currently displayed page."""
        return resolve_page(self.snapshot())

    def get_product(self, product_id: str) -> dict[str, Any] | None:
        with self._lock:
            for product in self._state["products"]:
                if product["id"] == product_id:
                    return copy.deepcopy(product)
        return None

    @property
    def seed(self) -> list[dict[str, Any]]:
        return copy.deepcopy(self._seed)

    @property
    def items_per_page(self) -> int:
        """Page size the store started with."""
        return self._items_per_page

    @property
    def history(self) -> list[Command]:
        """Applied commands, oldest first."""
        with self._lock:
            return list(self._log)

    def rebuild(self) -> dict[str, Any]:
        """Replay the command log over the seed. Equals snapshot()."""
        return replay(self.history, self._seed, items_per_page=self._items_per_page)

    # -- dispatch --

    def dispatch(self, type: str, payload: dict[str, Any] | None = None) -> ReduceResult:
        """
        Apply one command atomically.

        product.add payloads without an id get a fresh one that is unique
        in the current collection. Raises CommandRejected if the command
        is malformed or refused; the state is left untouched.
        """
        payload = copy.deepcopy(payload) if payload is not None else {}

        with self._lock:
            if type == "product.add" and isinstance(payload, dict) and payload.get("id") is None:
                payload["id"] = self._unique_id()

            errors = validate_command(type, payload)
            if errors:
                logger.warning("store: rejected %s: %s", type, "; ".join(errors))
                raise CommandRejected(type, errors)

            command = make_command(len(self._log) + 1, type, payload, source=self._source)
            result = reduce(self._state, command)
            if not result.applied:
                logger.warning("store: reducer refused %s: %s", type, result.error)
                raise CommandRejected(type, [result.error or "Unknown error"])

            self._state = result.state
            self._log.append(command)

        for warning in result.warnings:
            logger.debug("store: %s %s", warning.code, warning.message)
        logger.debug("store: applied %s (seq %d)", type, command.sequence)

        return ReduceResult(
            state=copy.deepcopy(result.state),
            applied=True,
            warnings=result.warnings,
        )

    def _unique_id(self) -> str:
        existing = {product["id"] for product in self._state["products"]}
        product_id = generate_id()
        while product_id in existing:
            product_id = generate_id()
        return product_id

    # -- products --

    def add_product(self, fields: dict[str, Any]) -> None:
        """Append a new product with a generated id and fresh timestamps."""
        self.dispatch("product.add", {"fields": fields})

    def update_product(self, product: dict[str, Any]) -> None:
        """Merge `product` into the stored record with the same id. Unknown id: no-op."""
        fields = {key: value for key, value in product.items() if key != "id"}
        self.dispatch("product.update", {"id": product.get("id"), "fields": fields})

    def delete_product(self, product_id: str) -> None:
        self.dispatch("product.delete", {"id": product_id})

    def delete_selected_products(self) -> None:
        self.dispatch("product.delete_selected")

    # -- selection --

    def select_product(self, product_id: str) -> None:
        self.dispatch("selection.select", {"id": product_id})

    def deselect_product(self, product_id: str) -> None:
        self.dispatch("selection.deselect", {"id": product_id})

    def toggle_product_selection(self, product_id: str) -> None:
        self.dispatch("selection.toggle", {"id": product_id})

    def select_all_products(self) -> None:
        self.dispatch("selection.select_all")

    def deselect_all_products(self) -> None:
        self.dispatch("selection.clear")

    # -- filters --

    def set_category_filter(self, category: str) -> None:
        self.dispatch("filter.category", {"category": category})

    def toggle_in_stock_filter(self) -> None:
        self.dispatch("filter.toggle_in_stock")

    def set_search_query(self, query: str) -> None:
        self.dispatch("filter.search", {"query": query})

    def set_filters(self, **filters: Any) -> None:
        """Set any of category, in_stock_only and search_query in one command."""
        self.dispatch("filter.set", filters)

    # -- pagination and sorting --

    def set_current_page(self, page: int) -> None:
        self.dispatch("page.set", {"page": page})

    def set_items_per_page(self, items_per_page: int) -> None:
        self.dispatch("page.size", {"items_per_page": items_per_page})

    def set_sorting(self, field: str | None, direction: str) -> None:
        self.dispatch("sort.set", {"field": field, "direction": direction})
