"""
Stockboard Kernel — the pure engine.

Components:
  primitives  — structural validation for the 16 command types
  reducer     — (state, command) → state  (pure, deterministic)
  query       — filter → sort → paginate over a state
  store       — single-writer holder of the current state
  renderer    — state → HTML / text dashboard

Query helpers:
  apply_filter, apply_sort, apply_pagination, total_pages, resolve_page
"""

from engine.kernel.primitives import validate_command
from engine.kernel.query import (
    apply_filter,
    apply_pagination,
    apply_sort,
    resolve_page,
    total_pages,
)
from engine.kernel.reducer import empty_state, reduce, replay
from engine.kernel.store import CommandRejected, ProductStore

__all__ = [
    "validate_command",
    "reduce",
    "replay",
    "empty_state",
    "apply_filter",
    "apply_sort",
    "apply_pagination",
    "total_pages",
    "resolve_page",
    "ProductStore",
    "CommandRejected",
]
