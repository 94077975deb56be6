"""Explicit presentation data travelling alongside a log event.

Purpose
-------
Describe how an event should be decorated (bold coloured header label,
coloured body text, both or neither) without smuggling control metadata
through the generic field stream.

Contents
--------
* :class:`PresentationKind` - the four mutually exclusive rendering modes.
* :class:`Presentation` - immutable value with one constructor per mode.

System Role
-----------
Consumed by the line renderer, which branches exactly once on
:attr:`Presentation.kind`. The field extractor produces the same value from
the reserved ``_header_text`` / ``_header_color`` / ``_text_color`` fields so
both producer styles meet in one type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PresentationKind(Enum):
    """Rendering mode selected per event."""

    NONE = "none"
    HEADER = "header"
    TEXT = "text"
    HEADER_AND_TEXT = "header_and_text"


@dataclass(slots=True, frozen=True)
class Presentation:
    """Header and colour selection for a single event.

    Attributes
    ----------
    header_label:
        Text shown as ``[label]:`` in front of the first physical line.
    header_color:
        Escape sequence or registry name colouring the header.
    text_color:
        Escape sequence or registry name wrapping every body line.

    A header needs both ``header_label`` and ``header_color``; supplying only
    one of them raises :class:`ValueError`.

    Examples
    --------
    >>> Presentation.header("HTTP", "yellow").kind
    <PresentationKind.HEADER: 'header'>
    >>> Presentation.none().kind
    <PresentationKind.NONE: 'none'>
    """

    header_label: str | None = None
    header_color: str | None = None
    text_color: str | None = None

    def __post_init__(self) -> None:
        if (self.header_label is None) != (self.header_color is None):
            raise ValueError("header_label and header_color must be given together")

    @classmethod
    def none(cls) -> "Presentation":
        return cls()

    @classmethod
    def header(cls, label: str, color: str) -> "Presentation":
        return cls(header_label=label, header_color=color)

    @classmethod
    def text(cls, color: str) -> "Presentation":
        return cls(text_color=color)

    @classmethod
    def header_and_text(cls, label: str, header_color: str, text_color: str) -> "Presentation":
        return cls(header_label=label, header_color=header_color, text_color=text_color)

    @property
    def has_header(self) -> bool:
        return self.header_label is not None

    @property
    def kind(self) -> PresentationKind:
        """Return the rendering mode implied by the populated slots."""

        if self.has_header and self.text_color is not None:
            return PresentationKind.HEADER_AND_TEXT
        if self.has_header:
            return PresentationKind.HEADER
        if self.text_color is not None:
            return PresentationKind.TEXT
        return PresentationKind.NONE


__all__ = ["Presentation", "PresentationKind"]
