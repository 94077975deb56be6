"""Field extraction separating display text from presentation metadata.

Purpose
-------
Walk an event's ``(name, value)`` stream once, in emission order, and split it
into the text buffer shown to the reader and the reserved presentation slots
(header label, header colour, text colour).

Contents
--------
* Reserved key constants forming the producer wire contract.
* :class:`ExtractedFields` - per-event result record.
* :class:`FieldVisitor` - incremental visitor.
* :func:`extract_fields` - convenience wrapper running the visitor.

System Role
-----------
First step of the line renderer. Unknown fields never fail: they degrade to a
``, name = value`` suffix.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from .presentation import Presentation


MESSAGE_KEY = "message"
TEXT_COLOR_KEY = "_text_color"
HEADER_COLOR_KEY = "_header_color"
HEADER_LABEL_KEY = "_header_text"

RESERVED_KEYS = frozenset({TEXT_COLOR_KEY, HEADER_COLOR_KEY, HEADER_LABEL_KEY})


def format_value(value: Any) -> str:
    """Return strings verbatim and everything else via :func:`repr`.

    Examples
    --------
    >>> format_value("plain")
    'plain'
    >>> format_value({"a": 1})
    "{'a': 1}"
    """

    if isinstance(value, str):
        return value
    return repr(value)


@dataclass(slots=True, frozen=True)
class ExtractedFields:
    """Text buffer plus presentation slots recovered from one event.

    Attributes
    ----------
    text:
        Message and ordinary fields concatenated in emission order; may span
        several lines.
    text_color, header_color, header_label:
        Values of the reserved fields. ``header_color`` and ``header_label``
        are either both set or both ``None``.
    degraded:
        Names of reserved fields that carried unusable values and were
        rendered as ordinary fields instead.
    """

    text: str = ""
    text_color: str | None = None
    header_color: str | None = None
    header_label: str | None = None
    degraded: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if (self.header_label is None) != (self.header_color is None):
            raise ValueError("header_label and header_color must be given together")

    @property
    def presentation(self) -> Presentation:
        return Presentation(
            header_label=self.header_label,
            header_color=self.header_color,
            text_color=self.text_color,
        )


class FieldVisitor:
    """Record fields one by one and produce :class:`ExtractedFields`.

    Examples
    --------
    >>> visitor = FieldVisitor()
    >>> visitor.record("message", "disk almost full")
    >>> visitor.record("free_mb", 12)
    >>> visitor.finish().text
    'disk almost full, free_mb = 12'
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._slots: dict[str, str] = {}
        self._degraded: list[str] = []

    def record(self, name: str, value: Any) -> None:
        if name == MESSAGE_KEY:
            self._parts.append(format_value(value))
        elif name in RESERVED_KEYS and isinstance(value, str):
            self._slots[name] = value
        else:
            if name in RESERVED_KEYS:
                self._degraded.append(name)
            self._append_pair(name, value)

    def finish(self) -> ExtractedFields:
        label = self._slots.get(HEADER_LABEL_KEY)
        color = self._slots.get(HEADER_COLOR_KEY)
        if (label is None) != (color is None):
            # A header needs both halves; show the lone half as plain data.
            lone_key = HEADER_LABEL_KEY if label is not None else HEADER_COLOR_KEY
            self._degraded.append(lone_key)
            self._append_pair(lone_key, self._slots[lone_key])
            label = color = None
        return ExtractedFields(
            text="".join(self._parts),
            text_color=self._slots.get(TEXT_COLOR_KEY),
            header_color=color,
            header_label=label,
            degraded=tuple(self._degraded),
        )

    def _append_pair(self, name: str, value: Any) -> None:
        self._parts.append(f", {name} = {format_value(value)}")


def extract_fields(stream: Iterable[tuple[str, Any]]) -> ExtractedFields:
    """Run a :class:`FieldVisitor` over ``stream``.

    Examples
    --------
    >>> extracted = extract_fields([
    ...     ("_header_color", "\\x1b[33m"),
    ...     ("_header_text", "HTTP"),
    ...     ("message", "Unable to ping host"),
    ... ])
    >>> extracted.text, extracted.header_label
    ('Unable to ping host', 'HTTP')
    """

    visitor = FieldVisitor()
    for name, value in stream:
        visitor.record(name, value)
    return visitor.finish()


__all__ = [
    "ExtractedFields",
    "FieldVisitor",
    "HEADER_COLOR_KEY",
    "HEADER_LABEL_KEY",
    "MESSAGE_KEY",
    "RESERVED_KEYS",
    "TEXT_COLOR_KEY",
    "extract_fields",
    "format_value",
]
