"""Public package surface for span-aware, colour-coded trace lines.

Typical use::

    import lib_log_trace as log

    log.init(level="debug")
    with log.span("server"), log.span("request"):
        log.get("app.http").warn(
            "Unable to ping host",
            presentation=log.Presentation.header("HTTP", log.styles.YELLOW),
        )
    log.shutdown()
"""

from __future__ import annotations

from .adapters import RichConsoleSink, StreamSink, TraceLogHandler
from .adapters.progress import build_progress_columns, create_progress
from .application.use_cases.render_event import LineRenderer, RenderedBlock, RenderProfile
from .domain import PROGRESS_STYLES, LogEvent, LogLevel, Presentation, PresentationKind, ProgressStyle, Span, styles
from .runtime import (
    LoggerProxy,
    RuntimeSnapshot,
    emit,
    get,
    init,
    inspect_runtime,
    is_initialised,
    logdemo,
    shutdown,
    span,
    summary_info,
)

__all__ = [
    "LineRenderer",
    "LogEvent",
    "LogLevel",
    "LoggerProxy",
    "PROGRESS_STYLES",
    "Presentation",
    "PresentationKind",
    "ProgressStyle",
    "RenderProfile",
    "RenderedBlock",
    "RichConsoleSink",
    "RuntimeSnapshot",
    "Span",
    "StreamSink",
    "TraceLogHandler",
    "build_progress_columns",
    "create_progress",
    "emit",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "logdemo",
    "shutdown",
    "span",
    "styles",
    "summary_info",
]
