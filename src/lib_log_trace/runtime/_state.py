"""Runtime state container and access helpers."""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from typing import Any, Callable

from lib_log_trace.application.ports.sink import SinkPort
from lib_log_trace.application.use_cases.render_event import LineRenderer, RenderProfile
from lib_log_trace.domain import LogLevel, SpanStack


@dataclass(slots=True)
class LoggingRuntime:
    """Aggregate of live collaborators assembled by the composition root."""

    span_stack: SpanStack
    renderer: LineRenderer
    sink: SinkPort
    process: Callable[..., dict[str, Any]]
    shutdown: Callable[[], None]
    level: LogLevel
    profile: RenderProfile
    console_backend: str
    capture_stdlib: bool
    atexit_hook: Callable[[], None] | None = None


_STATE: LoggingRuntime | None = None
_STATE_LOCK = RLock()


def set_runtime(runtime: LoggingRuntime) -> None:
    """Install ``runtime`` as the active singleton."""

    with _STATE_LOCK:
        global _STATE
        _STATE = runtime


def clear_runtime() -> None:
    """Remove the active runtime if present."""

    with _STATE_LOCK:
        global _STATE
        _STATE = None


def current_runtime() -> LoggingRuntime:
    """Return the active runtime or raise when uninitialised."""

    with _STATE_LOCK:
        if _STATE is None:
            raise RuntimeError("lib_log_trace.init() must be called before using the logging API")
        return _STATE


def is_initialised() -> bool:
    """Return ``True`` when :func:`lib_log_trace.init` has been called."""

    with _STATE_LOCK:
        return _STATE is not None


__all__ = [
    "LoggingRuntime",
    "clear_runtime",
    "current_runtime",
    "is_initialised",
    "set_runtime",
]
