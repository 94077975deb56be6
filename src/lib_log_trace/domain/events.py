"""Domain event describing a single structured log emission.

Purpose
-------
Provide an immutable, point-in-time record handed once to the renderer and
discarded afterwards.

Contents
--------
* :class:`LogEvent` dataclass with the ordered field stream helper.
* Utility functions ``_ensure_aware`` and ``_normalise_fields``.

System Role
-----------
Sits in the domain layer so the renderer, the emit use case, and the stdlib
bridge all exchange the same pure data object.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

from .fields import MESSAGE_KEY
from .levels import LogLevel
from .presentation import Presentation
from .spans import Span

FieldInput = Mapping[str, Any] | Iterable[tuple[str, Any]] | None


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts


def _normalise_fields(fields: FieldInput) -> tuple[tuple[str, Any], ...]:
    """Return ``fields`` as an order-preserving tuple of pairs."""
    if fields is None:
        return ()
    items = fields.items() if isinstance(fields, Mapping) else fields
    return tuple((str(name), value) for name, value in items)


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event handed to the line renderer.

    Attributes
    ----------
    timestamp:
        Emission time (timezone-aware); rendered as-is without conversion.
    level:
        :class:`LogLevel` severity.
    message:
        Optional primary text; may contain line breaks.
    fields:
        Ordered ``(name, value)`` pairs. Names are unique and ``message`` may
        only appear here when :attr:`message` is ``None``.
    spans:
        Active span chain at emission time, outermost first.
    presentation:
        Optional explicit :class:`Presentation` overriding the reserved
        presentation fields.
    logger_name:
        Logical logger that produced the event.
    """

    timestamp: datetime
    level: LogLevel
    message: str | None = None
    fields: tuple[tuple[str, Any], ...] = ()
    spans: tuple[Span, ...] = ()
    presentation: Presentation | None = None
    logger_name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        object.__setattr__(self, "fields", _normalise_fields(self.fields))
        object.__setattr__(self, "spans", tuple(self.spans))
        seen: set[str] = {MESSAGE_KEY} if self.message is not None else set()
        for name, _ in self.fields:
            if name in seen:
                raise ValueError(f"duplicate field name: {name!r}")
            seen.add(name)

    def field_stream(self) -> Iterator[tuple[str, Any]]:
        """Yield the message (when set) followed by the fields in emission order."""

        if self.message is not None:
            yield MESSAGE_KEY, self.message
        yield from self.fields

    def to_dict(self) -> dict[str, Any]:
        """Serialize the event to a dictionary with an ISO8601 timestamp."""

        data: dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.severity,
            "logger_name": self.logger_name,
            "message": self.message,
            "fields": [[name, value] for name, value in self.fields],
            "spans": [span.to_dict() for span in self.spans],
        }
        if self.presentation is not None:
            data["presentation"] = {
                "header_label": self.presentation.header_label,
                "header_color": self.presentation.header_color,
                "text_color": self.presentation.text_color,
            }
        return data

    def replace(self, **changes: Any) -> "LogEvent":
        """Return a copied event with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["FieldInput", "LogEvent"]
