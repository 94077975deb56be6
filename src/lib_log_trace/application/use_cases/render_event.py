"""Line renderer turning one :class:`LogEvent` into coloured terminal lines.

Purpose
-------
Combine timestamp, severity tag, span decoration, and the extracted text into
one or more physical lines, applying the header/colour decision matrix and
prefixing every line of a multi-line body.

Contents
--------
* :class:`RenderProfile` - detailed span path or compact depth marker.
* :class:`LineRenderer` - pure rendering logic.
* :func:`create_render_event` - factory binding a renderer to a sink.

System Role
-----------
Core of the pipeline. The emit use case calls it once per accepted event; all
state is local to the call so concurrent emitters never interfere.

Layout
------
``2025-01-02 03:04:05  WARN >> api > db ⣿       [HTTP]: text``

* Header: ``header_color + BOLD + "[label]:"`` right-aligned to
  :data:`HEADER_WIDTH`; continuation lines get blank padding of the same width.
* Text colour wraps the body of every physical line.
* Every line ends with :data:`~lib_log_trace.domain.styles.RESET`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from lib_log_trace.application.ports.sink import SinkPort
from lib_log_trace.domain.events import LogEvent
from lib_log_trace.domain.fields import ExtractedFields, extract_fields
from lib_log_trace.domain.presentation import Presentation, PresentationKind
from lib_log_trace.domain.spans import resolve_span_depth, resolve_span_path
from lib_log_trace.domain.styles import BOLD, DIM, RESET, resolve_style


DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
HEADER_WIDTH = 12
DELIMITER = "⣿"
PATH_MARKER = ">>"
LEVEL_WIDTH = 5


class RenderProfile(Enum):
    """Select how the span chain is shown in the prefix."""

    FULL = "full"
    DEPTH = "depth"

    @classmethod
    def from_name(cls, name: str) -> "RenderProfile":
        """Return the matching profile for a case-insensitive name.

        Examples
        --------
        >>> RenderProfile.from_name(" Depth ") is RenderProfile.DEPTH
        True
        """

        normalized = name.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown render profile: {name!r}")


@dataclass(slots=True, frozen=True)
class RenderedBlock:
    """Physical lines produced for one event."""

    lines: tuple[str, ...]
    degraded: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return "".join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)


class LineRenderer:
    """Render events into ANSI-decorated, newline-terminated lines.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_trace.domain.levels import LogLevel
    >>> event = LogEvent(datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc), LogLevel.DEBUG, "a\\nb")
    >>> lines = LineRenderer().render_lines(event)
    >>> len(lines)
    2
    >>> all(line.endswith(RESET + "\\n") for line in lines)
    True
    """

    def __init__(
        self,
        *,
        profile: RenderProfile = RenderProfile.FULL,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
        header_width: int = HEADER_WIDTH,
    ) -> None:
        if header_width < 0:
            raise ValueError("header_width must not be negative")
        self._profile = profile
        self._timestamp_format = timestamp_format
        self._header_width = header_width

    @property
    def profile(self) -> RenderProfile:
        return self._profile

    @property
    def timestamp_format(self) -> str:
        return self._timestamp_format

    def render(self, event: LogEvent) -> str:
        """Return the complete block for ``event`` as one string."""

        return self.render_block(event).text

    def render_lines(self, event: LogEvent) -> list[str]:
        """Return every physical line of ``event`` including terminators."""

        return list(self.render_block(event).lines)

    def render_block(self, event: LogEvent) -> RenderedBlock:
        """Render ``event`` and keep track of degraded reserved fields."""

        extracted = extract_fields(event.field_stream())
        presentation = self._presentation_for(event, extracted)
        prefix = self.prefix(event)
        lines = _split_lines(extracted.text)
        kind = presentation.kind

        if kind is PresentationKind.HEADER_AND_TEXT:
            color = resolve_style(presentation.text_color or "")
            rendered = self._with_header(prefix, presentation, [color + line for line in lines])
        elif kind is PresentationKind.HEADER:
            rendered = self._with_header(prefix, presentation, lines)
        elif kind is PresentationKind.TEXT:
            color = resolve_style(presentation.text_color or "")
            rendered = [f"{prefix}{color}{line}{RESET}\n" for line in lines]
        else:
            rendered = [f"{prefix}{line}{RESET}\n" for line in lines]
        return RenderedBlock(lines=tuple(rendered), degraded=extracted.degraded)

    def prefix(self, event: LogEvent) -> str:
        """Return the shared prefix: timestamp, level tag, span decoration."""

        timestamp = event.timestamp.strftime(self._timestamp_format)
        return f"{DIM}{timestamp}{RESET} {_level_tag(event)}{self._decoration(event)}"

    def header_segment(self, presentation: Presentation) -> str:
        """Return the bold ``[label]:`` block printed on the first line."""

        color = resolve_style(presentation.header_color or "")
        label = f"[{presentation.header_label}]"
        return f"{color}{BOLD}{label:>{self._header_width}}:{RESET} "

    def padding(self) -> str:
        """Return blank space matching :meth:`header_segment`'s visible width."""

        return " " * (self._header_width + 2)

    def _with_header(self, prefix: str, presentation: Presentation, bodies: list[str]) -> list[str]:
        header = self.header_segment(presentation)
        padding = self.padding()
        rendered = [f"{prefix}{header}{bodies[0]}{RESET}\n"]
        rendered.extend(f"{prefix}{padding}{body}{RESET}\n" for body in bodies[1:])
        return rendered

    def _decoration(self, event: LogEvent) -> str:
        if self._profile is RenderProfile.DEPTH:
            marker = resolve_span_depth(event.spans)
        else:
            path = resolve_span_path(event.spans)
            marker = f"{PATH_MARKER} {path}" if path else ""
        if not marker:
            return f"{DIM}{DELIMITER} {RESET}"
        return f"{DIM}{marker} {DELIMITER} {RESET}"

    @staticmethod
    def _presentation_for(event: LogEvent, extracted: ExtractedFields) -> Presentation:
        if event.presentation is not None:
            return event.presentation
        return extracted.presentation


def _level_tag(event: LogEvent) -> str:
    label = f"{event.level.label:>{LEVEL_WIDTH}}"
    color = event.level.color
    if not color:
        return f"{label} "
    return f"{color}{label}{RESET} "


def _split_lines(text: str) -> list[str]:
    """Split ``text`` on line breaks, always returning at least one line."""

    return text.replace("\r\n", "\n").split("\n")


def create_render_event(*, renderer: LineRenderer, sink: SinkPort) -> Callable[[LogEvent], RenderedBlock]:
    """Bind ``renderer`` to ``sink`` and return the per-event writer.

    The returned callable writes the whole block with a single
    :meth:`SinkPort.write` and returns the :class:`RenderedBlock`. Sink errors
    propagate unchanged.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> from lib_log_trace.domain.levels import LogLevel
    >>> class _Sink:
    ...     def __init__(self):
    ...         self.writes = []
    ...     def write(self, text):
    ...         self.writes.append(text)
    ...     def flush(self):
    ...         pass
    >>> sink = _Sink()
    >>> write = create_render_event(renderer=LineRenderer(), sink=sink)
    >>> len(write(LogEvent(datetime(2025, 1, 1, tzinfo=timezone.utc), LogLevel.INFO, "x\\ny\\nz")))
    3
    >>> len(sink.writes)
    1
    """

    def render_event(event: LogEvent) -> RenderedBlock:
        block = renderer.render_block(event)
        sink.write(block.text)
        return block

    return render_event


__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "DELIMITER",
    "HEADER_WIDTH",
    "LineRenderer",
    "RenderProfile",
    "RenderedBlock",
    "create_render_event",
]
