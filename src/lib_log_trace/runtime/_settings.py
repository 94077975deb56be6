"""Runtime settings resolved from keyword arguments and environment variables.

Purpose
-------
Normalise the inputs of :func:`lib_log_trace.init` into one immutable value
before any adapter is built, applying the ``LOG_*`` environment overrides.

Contents
--------
* :class:`RuntimeSettings` - resolved configuration.
* :func:`build_runtime_settings` - argument + environment resolution.
* Coercion helpers shared with the CLI (:func:`coerce_level`,
  :func:`coerce_profile`, :func:`_env_bool`).
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from lib_log_trace.application.ports.sink import SinkPort
from lib_log_trace.application.use_cases.emit_event import DiagnosticHook
from lib_log_trace.application.use_cases.render_event import DEFAULT_TIMESTAMP_FORMAT, RenderProfile
from lib_log_trace.domain.levels import LogLevel

CONSOLE_BACKENDS = ("stream", "rich")


@dataclass(frozen=True)
class RuntimeSettings:
    """Resolved configuration consumed by :func:`build_runtime`."""

    level: LogLevel
    profile: RenderProfile
    timestamp_format: str
    console_backend: str
    force_color: bool
    no_color: bool
    capture_stdlib: bool
    register_atexit: bool
    sink: SinkPort | None = None
    diagnostic_hook: DiagnosticHook = None


def build_runtime_settings(
    *,
    level: str | LogLevel,
    profile: str | RenderProfile,
    sink: SinkPort | None,
    console_backend: str,
    force_color: bool,
    no_color: bool,
    timestamp_format: str | None,
    capture_stdlib: bool,
    register_atexit: bool,
    diagnostic_hook: DiagnosticHook,
) -> RuntimeSettings:
    """Merge keyword arguments with ``LOG_*`` environment overrides.

    Environment variables win over arguments, matching the precedence hosts
    expect from twelve-factor style deployments.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop("LOG_LEVEL", None)
    >>> _ = os.environ.pop("LOG_PROFILE", None)
    >>> settings = build_runtime_settings(
    ...     level="warn", profile="depth", sink=None, console_backend="stream",
    ...     force_color=False, no_color=False, timestamp_format=None,
    ...     capture_stdlib=False, register_atexit=False, diagnostic_hook=None,
    ... )
    >>> settings.level, settings.profile
    (<LogLevel.WARN: 30>, <RenderProfile.DEPTH: 'depth'>)
    """

    resolved_level = coerce_level(os.getenv("LOG_LEVEL") or level)
    resolved_profile = coerce_profile(os.getenv("LOG_PROFILE") or profile)
    resolved_format = os.getenv("LOG_TIMESTAMP_FORMAT") or timestamp_format or DEFAULT_TIMESTAMP_FORMAT
    backend = (os.getenv("LOG_CONSOLE_BACKEND") or console_backend).strip().lower()
    if backend not in CONSOLE_BACKENDS:
        raise ValueError(f"Unknown console backend: {backend!r} (expected one of {', '.join(CONSOLE_BACKENDS)})")

    return RuntimeSettings(
        level=resolved_level,
        profile=resolved_profile,
        timestamp_format=resolved_format,
        console_backend=backend,
        force_color=_env_bool("LOG_FORCE_COLOR", force_color),
        no_color=_env_bool("LOG_NO_COLOR", no_color),
        capture_stdlib=_env_bool("LOG_CAPTURE_STDLIB", capture_stdlib),
        register_atexit=register_atexit,
        sink=sink,
        diagnostic_hook=diagnostic_hook,
    )


def coerce_level(level: str | LogLevel) -> LogLevel:
    """Normalise level inputs (string or enum) into :class:`LogLevel`.

    Examples
    --------
    >>> coerce_level("warning") is LogLevel.WARN
    True
    >>> coerce_level(LogLevel.ERROR) is LogLevel.ERROR
    True
    """
    if isinstance(level, LogLevel):
        return level
    return LogLevel.from_name(level)


def coerce_profile(profile: str | RenderProfile) -> RenderProfile:
    if isinstance(profile, RenderProfile):
        return profile
    return RenderProfile.from_name(profile)


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> _env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = '0'
    >>> _env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    >>> del os.environ['LOG_EXAMPLE_BOOL']
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


__all__ = [
    "CONSOLE_BACKENDS",
    "RuntimeSettings",
    "build_runtime_settings",
    "coerce_level",
    "coerce_profile",
]
