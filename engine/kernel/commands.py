"""
Stockboard Kernel — Command Construction

Factory functions for creating well-formed commands.
Used by the store to wrap named operations before feeding them to the reducer,
and by tests to build commands concisely.
"""

from __future__ import annotations

from typing import Any

from engine.kernel.types import Command, now_iso


def make_command(
    seq: int,
    type: str,
    payload: dict[str, Any] | None = None,
    *,
    actor: str = "user",
    source: str = "web",
    timestamp: str | None = None,
    command_id: str | None = None,
) -> Command:
    """
    Build a complete Command from minimal inputs.

    seq is required: it determines both the command ID and sequence number.
    Everything else has sensible defaults for testing.
    """
    ts = timestamp or now_iso()
    cid = command_id or f"cmd_{ts[:10].replace('-', '')}_{seq:03d}"

    return Command(
        id=cid,
        sequence=seq,
        timestamp=ts,
        type=type,
        payload=payload if payload is not None else {},
        actor=actor,
        source=source,
    )
