"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate :class:`RuntimeSettings` into the live :class:`LoggingRuntime`
singleton. The helpers here keep wiring small, declarative, and testable.

Contents
--------
* :class:`LoggerProxy` - level-specific call-site façade.
* :class:`SystemClock` - local, timezone-aware clock.
* :func:`build_runtime` - sink selection, renderer, emit pipeline, bridge.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable

from lib_log_trace.adapters import RichConsoleSink, StreamSink, TraceLogHandler
from lib_log_trace.application.ports import ClockPort, SinkPort
from lib_log_trace.application.use_cases.emit_event import create_emit_event
from lib_log_trace.application.use_cases.render_event import LineRenderer, create_render_event
from lib_log_trace.application.use_cases.shutdown import create_shutdown
from lib_log_trace.domain import LogLevel, Presentation, SpanStack
from lib_log_trace.domain.events import FieldInput

from ._settings import RuntimeSettings
from ._state import LoggingRuntime


class SystemClock(ClockPort):
    """Clock returning the local wall time with its UTC offset attached."""

    def now(self) -> datetime:
        return datetime.now().astimezone()


class LoggerProxy:
    """Lightweight facade for structured logging calls.

    The proxy keeps host code decoupled from the emit use case while providing
    level-specific helpers that return the pipeline's result dictionary.
    """

    def __init__(self, name: str, process: Callable[..., dict[str, Any]]) -> None:
        self._name = name
        self._process = process

    @property
    def name(self) -> str:
        return self._name

    def trace(self, message: str | None = None, *, fields: FieldInput = None, presentation: Presentation | None = None) -> dict[str, Any]:
        return self.log(LogLevel.TRACE, message, fields=fields, presentation=presentation)

    def debug(self, message: str | None = None, *, fields: FieldInput = None, presentation: Presentation | None = None) -> dict[str, Any]:
        return self.log(LogLevel.DEBUG, message, fields=fields, presentation=presentation)

    def info(self, message: str | None = None, *, fields: FieldInput = None, presentation: Presentation | None = None) -> dict[str, Any]:
        return self.log(LogLevel.INFO, message, fields=fields, presentation=presentation)

    def warn(self, message: str | None = None, *, fields: FieldInput = None, presentation: Presentation | None = None) -> dict[str, Any]:
        return self.log(LogLevel.WARN, message, fields=fields, presentation=presentation)

    warning = warn

    def error(self, message: str | None = None, *, fields: FieldInput = None, presentation: Presentation | None = None) -> dict[str, Any]:
        return self.log(LogLevel.ERROR, message, fields=fields, presentation=presentation)

    def log(
        self,
        level: LogLevel,
        message: str | None = None,
        *,
        fields: FieldInput = None,
        presentation: Presentation | None = None,
    ) -> dict[str, Any]:
        """Delegate to the emit use case.

        Parameters
        ----------
        level:
            Severity attached to the event.
        message:
            Primary text; ``None`` renders an empty body (fields only).
        fields:
            Mapping or ordered ``(name, value)`` pairs. The reserved
            ``_header_text`` / ``_header_color`` / ``_text_color`` keys are
            honoured when ``presentation`` is ``None``.
        presentation:
            Explicit :class:`Presentation`; overrides the reserved fields.

        Returns
        -------
        dict[str, Any]
            ``{"ok": True, "lines": n}`` or ``{"ok": False, "reason": ...}``.
        """
        return self._process(
            logger_name=self._name,
            level=level,
            message=message,
            fields=fields,
            presentation=presentation,
        )


def create_sink(settings: RuntimeSettings) -> SinkPort:
    """Return the explicit sink or build the configured console backend."""

    if settings.sink is not None:
        return settings.sink
    if settings.console_backend == "rich":
        return RichConsoleSink(force_color=settings.force_color, no_color=settings.no_color)
    return StreamSink()


def build_runtime(settings: RuntimeSettings) -> LoggingRuntime:
    """Assemble the logging runtime from resolved settings."""

    span_stack = SpanStack()
    sink = create_sink(settings)
    renderer = LineRenderer(profile=settings.profile, timestamp_format=settings.timestamp_format)
    clock: ClockPort = SystemClock()

    process = create_emit_event(
        span_stack=span_stack,
        render=create_render_event(renderer=renderer, sink=sink),
        clock=clock,
        min_level=settings.level,
        diagnostic=settings.diagnostic_hook,
    )

    bridge: TraceLogHandler | None = None
    root: logging.Logger | None = None
    previous_level: int | None = None
    if settings.capture_stdlib:
        bridge = TraceLogHandler(process)
        root = logging.getLogger()
        root.addHandler(bridge)
        if root.level > settings.level.to_python_level():
            previous_level = root.level
            root.setLevel(settings.level.to_python_level())

    return LoggingRuntime(
        span_stack=span_stack,
        renderer=renderer,
        sink=sink,
        process=process,
        shutdown=create_shutdown(sink=sink, bridge=bridge, bridge_target=root, previous_level=previous_level),
        level=settings.level,
        profile=settings.profile,
        console_backend=settings.console_backend if settings.sink is None else "custom",
        capture_stdlib=settings.capture_stdlib,
    )


__all__ = ["LoggerProxy", "SystemClock", "build_runtime", "create_sink"]
