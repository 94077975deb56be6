"""Bridge forwarding stdlib :mod:`logging` records into the trace pipeline.

Purpose
-------
Let libraries that only know :mod:`logging` reach the renderer. Records are
mapped onto the same emit callable used by :class:`LoggerProxy`, so span
context, threshold, and presentation rules are identical.

Contents
--------
* :class:`TraceLogHandler` - :class:`logging.Handler` subclass.

Mapping
-------
* ``record.levelno`` is bucketed via :meth:`LogLevel.from_python_level`.
* ``extra={"fields": {...}}`` becomes the event field stream. A ``message``
  key is renamed to ``field.message`` so it cannot clash with the record text.
* ``extra={"presentation": Presentation(...)}`` is passed through.
* Exception and stack information is appended to the message as extra lines.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from lib_log_trace.domain.fields import MESSAGE_KEY
from lib_log_trace.domain.levels import LogLevel
from lib_log_trace.domain.presentation import Presentation


_PRIVATE_LOGGER_PREFIX = "lib_log_trace"
_RENAMED_MESSAGE_KEY = "field.message"


class TraceLogHandler(logging.Handler):
    """Forward :class:`logging.LogRecord` objects to the emit pipeline."""

    def __init__(self, process: Callable[..., dict[str, Any]], level: int = logging.NOTSET) -> None:
        super().__init__(level=level)
        self._process = process

    def emit(self, record: logging.LogRecord) -> None:
        if record.name.startswith(_PRIVATE_LOGGER_PREFIX):
            # Diagnostics of this package would re-enter the pipeline.
            return
        try:
            self._process(
                logger_name=record.name,
                level=LogLevel.from_python_level(record.levelno),
                message=self._message_for(record),
                fields=self._fields_for(record),
                presentation=self._presentation_for(record),
            )
        except Exception:
            self.handleError(record)

    def _message_for(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        extras: list[str] = []
        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            extras.append(record.exc_text)
        if record.stack_info:
            extras.append(self.formatStack(record.stack_info))
        if extras:
            message = "\n".join([message, *extras])
        return message

    @staticmethod
    def _fields_for(record: logging.LogRecord) -> Mapping[str, Any] | None:
        fields = getattr(record, "fields", None)
        if not isinstance(fields, Mapping):
            return None
        if MESSAGE_KEY not in fields:
            return fields
        # The record message always occupies the ``message`` slot.
        return {(_RENAMED_MESSAGE_KEY if name == MESSAGE_KEY else name): value for name, value in fields.items()}

    @staticmethod
    def _presentation_for(record: logging.LogRecord) -> Presentation | None:
        presentation = getattr(record, "presentation", None)
        if isinstance(presentation, Presentation):
            return presentation
        return None

    def formatException(self, ei: Any) -> str:  # noqa: N802
        return logging.Formatter().formatException(ei)

    def formatStack(self, stack_info: str) -> str:  # noqa: N802
        return logging.Formatter().formatStack(stack_info)


__all__ = ["TraceLogHandler"]
