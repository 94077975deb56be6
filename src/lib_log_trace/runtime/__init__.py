"""Runtime façade wiring the trace renderer into a process-wide logger.

Purpose
-------
Expose a stable entry point (``init``, ``get``, ``span``, ``emit``,
``shutdown``) that host applications use instead of importing the inner
layers directly.

Contents
--------
* ``init`` - composition root for assembling the rendering pipeline.
* ``get`` / ``emit`` - call-site helpers dispatching to the pipeline.
* ``span`` - scoped span context feeding the span path segment.
* ``shutdown`` - flushes the sink and detaches the stdlib bridge.
* ``inspect_runtime`` / ``logdemo`` / ``summary_info`` - introspection and
  demonstration helpers used by the CLI.

System Role
-----------
Outer shell of the architecture: domain values, use cases, and adapters stay
hidden behind this module so hosts depend on a small, documented API.
"""

from __future__ import annotations

import atexit
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from lib_log_trace.application.ports.sink import SinkPort
from lib_log_trace.application.use_cases.emit_event import DiagnosticHook
from lib_log_trace.application.use_cases.render_event import RenderProfile
from lib_log_trace.domain import LogLevel, Presentation, Span, styles
from lib_log_trace.domain.events import FieldInput

from ._composition import LoggerProxy, build_runtime
from ._settings import build_runtime_settings, coerce_level
from ._state import LoggingRuntime, clear_runtime, current_runtime, is_initialised, set_runtime


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Immutable view over the active logging runtime."""

    level: LogLevel
    profile: RenderProfile
    timestamp_format: str
    console_backend: str
    capture_stdlib: bool
    span_depth: int


__all__ = [
    "LoggerProxy",
    "RuntimeSnapshot",
    "emit",
    "get",
    "init",
    "inspect_runtime",
    "is_initialised",
    "logdemo",
    "shutdown",
    "span",
    "summary_info",
]


def init(
    *,
    level: str | LogLevel = LogLevel.INFO,
    profile: str | RenderProfile = RenderProfile.FULL,
    sink: SinkPort | None = None,
    console_backend: str = "stream",
    force_color: bool = False,
    no_color: bool = False,
    timestamp_format: str | None = None,
    capture_stdlib: bool = False,
    register_atexit: bool = True,
    diagnostic_hook: DiagnosticHook = None,
) -> None:
    """Compose the logging runtime according to configuration inputs.

    Inputs
    ------
    level:
        Minimum severity; strings are coerced via :meth:`LogLevel.from_name`.
    profile:
        ``"full"`` renders the complete span path, ``"depth"`` the compact
        nesting counter.
    sink:
        Explicit :class:`SinkPort`. When omitted ``console_backend`` decides:
        ``"stream"`` writes raw ANSI to ``sys.stdout`` and ``"rich"`` prints
        through a :class:`rich.console.Console`.
    force_color, no_color:
        Colour overrides for the Rich backend.
    timestamp_format:
        ``strftime`` pattern for the line prefix.
    capture_stdlib:
        Attach :class:`TraceLogHandler` to the root logger.
    register_atexit:
        Flush the sink automatically at interpreter exit.
    diagnostic_hook:
        Optional callback receiving pipeline milestones.

    Side Effects
    ------------
    Raises :class:`RuntimeError` if called while a runtime is already active.
    ``LOG_*`` environment variables override the matching keywords.
    """

    if is_initialised():
        raise RuntimeError(
            "lib_log_trace.init() cannot be called twice without shutdown(); call lib_log_trace.shutdown() first",
        )

    settings = build_runtime_settings(
        level=level,
        profile=profile,
        sink=sink,
        console_backend=console_backend,
        force_color=force_color,
        no_color=no_color,
        timestamp_format=timestamp_format,
        capture_stdlib=capture_stdlib,
        register_atexit=register_atexit,
        diagnostic_hook=diagnostic_hook,
    )
    runtime = build_runtime(settings)
    if settings.register_atexit:
        hook = _atexit_hook_for(runtime)
        runtime.atexit_hook = hook
        atexit.register(hook)
    set_runtime(runtime)


def _atexit_hook_for(runtime: LoggingRuntime) -> Callable[[], None]:
    def _flush_at_exit() -> None:
        if is_initialised() and current_runtime() is runtime:
            shutdown()

    return _flush_at_exit


def get(name: str) -> LoggerProxy:
    """Return a logger proxy bound to the configured runtime.

    Raises :class:`RuntimeError` when ``init`` has not been called.
    """

    runtime = current_runtime()
    return LoggerProxy(name, runtime.process)


@contextmanager
def span(name: str, **fields: Any) -> Iterator[Span]:
    """Enter a named span for the lifetime of the ``with`` block.

    Events emitted inside the block carry the span chain from the outermost
    active span to this one.
    """

    runtime = current_runtime()
    with runtime.span_stack.enter(name, **fields) as entered:
        yield entered


def emit(
    level: str | LogLevel,
    message: str | None = None,
    fields: FieldInput = None,
    presentation: Presentation | None = None,
    *,
    logger_name: str = "",
) -> dict[str, Any]:
    """Render one event without creating a :class:`LoggerProxy` first."""

    runtime = current_runtime()
    return runtime.process(
        logger_name=logger_name,
        level=coerce_level(level),
        message=message,
        fields=fields,
        presentation=presentation,
    )


def shutdown() -> None:
    """Detach the stdlib bridge, flush the sink, and clear runtime state.

    Raises :class:`RuntimeError` when no runtime is active.
    """

    runtime = current_runtime()
    try:
        runtime.shutdown()
    finally:
        if runtime.atexit_hook is not None:
            atexit.unregister(runtime.atexit_hook)
        clear_runtime()


def inspect_runtime() -> RuntimeSnapshot:
    """Return a read-only snapshot of the current runtime state."""

    runtime = current_runtime()
    return RuntimeSnapshot(
        level=runtime.level,
        profile=runtime.profile,
        timestamp_format=runtime.renderer.timestamp_format,
        console_backend=runtime.console_backend,
        capture_stdlib=runtime.capture_stdlib,
        span_depth=runtime.span_stack.depth(),
    )


def logdemo(
    *,
    profile: str | RenderProfile = RenderProfile.FULL,
    level: str | LogLevel = LogLevel.TRACE,
    sink: SinkPort | None = None,
    console_backend: str = "stream",
) -> dict[str, Any]:
    """Emit sample events covering every presentation mode.

    Spins up a temporary runtime, renders plain, header-only, text-colour and
    header-plus-text events (single- and multi-line) inside nested spans, then
    shuts the runtime down again.

    Returns
    -------
    dict[str, Any]
        Resolved profile and level plus the per-event result dictionaries.

    Raises
    ------
    RuntimeError
        If the logging runtime is already initialised.

    Examples
    --------
    >>> class _Sink:
    ...     def __init__(self):
    ...         self.parts = []
    ...     def write(self, text):
    ...         self.parts.append(text)
    ...     def flush(self):
    ...         pass
    >>> sink = _Sink()
    >>> result = logdemo(profile="depth", sink=sink)  # doctest: +SKIP
    >>> result["profile"]  # doctest: +SKIP
    'depth'
    """

    if is_initialised():
        raise RuntimeError("logdemo() requires lib_log_trace to be uninitialised. Call shutdown() first.")

    resolved_profile = profile if isinstance(profile, RenderProfile) else RenderProfile.from_name(profile)
    resolved_level = coerce_level(level)
    init(
        level=resolved_level,
        profile=resolved_profile,
        sink=sink,
        console_backend=console_backend,
        register_atexit=False,
    )

    results: list[dict[str, Any]] = []
    try:
        logger = get("logdemo")
        results.append(logger.info("Service starting", fields={"version": "0.1.0"}))
        with span("server", port=8080):
            results.append(logger.debug("Listening", fields={"port": 8080, "tls": False}))
            with span("request"):
                results.append(
                    logger.warn(
                        "Unable to ping host",
                        fields={"_header_color": styles.YELLOW, "_header_text": "HTTP"},
                    )
                )
                with span("handler"):
                    results.append(
                        logger.info(
                            "payload accepted\nqueued for processing",
                            presentation=Presentation.text(styles.CYAN),
                        )
                    )
                    with span("db"):
                        results.append(
                            logger.error(
                                "connection refused\nretrying in 5s\ngiving up",
                                presentation=Presentation.header_and_text("DB", styles.RED, styles.RED),
                            )
                        )
                        results.append(logger.trace(fields={"rows": 0, "elapsed_ms": 12.5}))
        results.append(logger.info("Service stopped"))
    finally:
        shutdown()

    return {
        "profile": resolved_profile.value,
        "level": resolved_level.name,
        "events": results,
    }


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point and docs."""

    from .. import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)
