"""Use case turning a call-site emission into a rendered event.

Purpose
-------
Tie together the severity threshold, span snapshotting, event construction,
and the line renderer.

Contents
--------
* :func:`build_diagnostic_emitter` - wraps the optional diagnostic hook.
* :func:`create_emit_event` - factory returning the runtime callable.

System Role
-----------
Application-layer orchestrator invoked by :func:`lib_log_trace.init` to turn
the configured dependencies into a callable logging pipeline.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lib_log_trace.application.ports.time import ClockPort
from lib_log_trace.domain.events import FieldInput, LogEvent
from lib_log_trace.domain.levels import LogLevel
from lib_log_trace.domain.presentation import Presentation
from lib_log_trace.domain.spans import SpanStack

from .render_event import RenderedBlock

logger = logging.getLogger(__name__)

DiagnosticHook = Callable[[str, dict[str, Any]], None] | None
EmitResult = dict[str, Any]


def build_diagnostic_emitter(diagnostic: DiagnosticHook) -> Callable[[str, dict[str, Any]], None]:
    """Return a callable forwarding pipeline milestones to ``diagnostic``.

    Hook failures are logged at debug level and never reach the caller.
    """

    def emit(name: str, payload: dict[str, Any]) -> None:
        if diagnostic is None:
            return
        try:
            diagnostic(name, payload)
        except Exception:  # noqa: BLE001
            logger.debug("diagnostic hook failed for %s", name, exc_info=True)

    return emit


@dataclass(frozen=True)
class _PipelineToolkit:
    span_stack: SpanStack
    render: Callable[[LogEvent], RenderedBlock]
    clock: ClockPort
    min_level: LogLevel
    emit: Callable[[str, dict[str, Any]], None]


class _EmitPipeline:
    def __init__(self, toolkit: _PipelineToolkit) -> None:
        self._toolkit = toolkit

    @property
    def min_level(self) -> LogLevel:
        return self._toolkit.min_level

    def __call__(
        self,
        *,
        logger_name: str,
        level: LogLevel,
        message: str | None,
        fields: FieldInput = None,
        presentation: Presentation | None = None,
    ) -> EmitResult:
        toolkit = self._toolkit
        if level < toolkit.min_level:
            toolkit.emit("filtered", {"logger": logger_name, "level": level.name})
            return {"ok": False, "reason": "below_threshold"}

        event = LogEvent(
            timestamp=toolkit.clock.now(),
            level=level,
            message=message,
            fields=fields,
            spans=toolkit.span_stack.current(),
            presentation=presentation,
            logger_name=logger_name,
        )
        block = toolkit.render(event)
        for name in block.degraded:
            toolkit.emit("degraded_field", {"logger": logger_name, "field": name})
        toolkit.emit("emitted", {"logger": logger_name, "level": level.name, "lines": len(block)})
        return {"ok": True, "lines": len(block)}


def create_emit_event(
    *,
    span_stack: SpanStack,
    render: Callable[[LogEvent], RenderedBlock],
    clock: ClockPort,
    min_level: LogLevel,
    diagnostic: DiagnosticHook = None,
) -> Callable[..., EmitResult]:
    """Build the emit callable capturing the current dependency wiring.

    Parameters
    ----------
    span_stack:
        Shared :class:`SpanStack` supplying the active span chain.
    render:
        Callable produced by :func:`create_render_event`; writes one block per
        event to the configured sink.
    clock:
        Provider of timezone-aware timestamps.
    min_level:
        Static threshold; events below it are dropped before rendering.
    diagnostic:
        Optional callback receiving ``filtered``, ``degraded_field`` and
        ``emitted`` milestones.

    Returns
    -------
    Callable[..., dict[str, Any]]
        Accepts ``logger_name``, ``level``, ``message``, ``fields`` and
        ``presentation`` keywords and returns ``{"ok": True, "lines": n}`` or
        ``{"ok": False, "reason": "below_threshold"}``. Sink errors propagate.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> class _Clock:
    ...     def now(self):
    ...         return datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> rendered = []
    >>> def _render(event):
    ...     rendered.append(event)
    ...     return RenderedBlock(lines=("line\\n",))
    >>> stack = SpanStack()
    >>> emit = create_emit_event(span_stack=stack, render=_render, clock=_Clock(), min_level=LogLevel.INFO)
    >>> with stack.enter("job"):
    ...     emit(logger_name="svc", level=LogLevel.WARN, message="hello")
    {'ok': True, 'lines': 1}
    >>> emit(logger_name="svc", level=LogLevel.DEBUG, message="noise")
    {'ok': False, 'reason': 'below_threshold'}
    >>> rendered[0].spans[0].name
    'job'
    """

    toolkit = _PipelineToolkit(
        span_stack=span_stack,
        render=render,
        clock=clock,
        min_level=min_level,
        emit=build_diagnostic_emitter(diagnostic),
    )
    return _EmitPipeline(toolkit)


__all__ = ["DiagnosticHook", "EmitResult", "build_diagnostic_emitter", "create_emit_event"]
