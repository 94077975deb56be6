"""Sink port describing where rendered text ends up.

Purpose
-------
Define the narrow character-stream contract the renderer writes to so stream,
Rich, and test sinks can plug in without leaking implementation details.

System Role
-----------
The renderer issues exactly one :meth:`SinkPort.write` per event; sinks are
responsible for serialising concurrent writers.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SinkPort(Protocol):
    """Accept fully rendered, newline-terminated text blocks."""

    def write(self, text: str) -> None:
        """Write ``text`` atomically with respect to other writers."""

    def flush(self) -> None:
        """Push buffered output to the underlying device."""


__all__ = ["SinkPort"]
