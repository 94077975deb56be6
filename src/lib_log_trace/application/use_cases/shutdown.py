"""Shutdown orchestration for the trace renderer.

Purpose
-------
Provide one teardown routine that detaches the stdlib bridge and flushes the
configured sink.
"""

from __future__ import annotations

import logging
from typing import Callable

from lib_log_trace.application.ports.sink import SinkPort


def create_shutdown(
    *,
    sink: SinkPort,
    bridge: logging.Handler | None = None,
    bridge_target: logging.Logger | None = None,
    previous_level: int | None = None,
) -> Callable[[], None]:
    """Return a callable performing the shutdown sequence.

    ``previous_level`` is the level the bridge target had before the bridge
    lowered it; it is restored once the handler is detached.
    """

    def shutdown() -> None:
        """Detach the bridge handler, then flush buffered output."""
        if bridge is not None:
            target = bridge_target if bridge_target is not None else logging.getLogger()
            target.removeHandler(bridge)
            bridge.close()
            if previous_level is not None:
                target.setLevel(previous_level)
        sink.flush()

    return shutdown


__all__ = ["create_shutdown"]
