"""Named progress-indicator templates and ETA arithmetic.

Purpose
-------
Keep the progress styles offered next to the log renderer as plain data so
adapters can turn them into concrete widgets (see
:mod:`lib_log_trace.adapters.progress`).

Contents
--------
* :class:`ProgressStyle` - named template with placeholder parsing.
* :data:`PROGRESS_STYLES` - ``plain`` (alias ``empty``), ``count``, ``bytes``.
* :func:`estimate_eta` / :func:`format_eta` - remaining-time estimate derived
  from elapsed time and position/total.

Placeholders
------------
``{spinner}`` ``{elapsed}`` ``{bar}`` ``{pos}`` ``{len}`` ``{percent}``
``{bytes}`` ``{total_bytes}`` ``{eta}`` ``{msg}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import Formatter
from types import MappingProxyType
from typing import Mapping

PLACEHOLDERS = frozenset({"spinner", "elapsed", "bar", "pos", "len", "percent", "bytes", "total_bytes", "eta", "msg"})


@dataclass(slots=True, frozen=True)
class ProgressStyle:
    """Template describing the layout of a progress line."""

    name: str
    template: str

    def __post_init__(self) -> None:
        unknown = [name for _, name in self.segments() if name is not None and name not in PLACEHOLDERS]
        if unknown:
            raise ValueError(f"Unknown progress placeholder(s): {', '.join(unknown)}")

    def segments(self) -> list[tuple[str, str | None]]:
        """Split the template into ``(literal, placeholder)`` pairs.

        Examples
        --------
        >>> ProgressStyle("x", "[{elapsed}] {eta}").segments()
        [('[', 'elapsed'), ('] ', 'eta')]
        """

        return [(literal, name) for literal, name, _, _ in Formatter().parse(self.template)]

    def placeholders(self) -> tuple[str, ...]:
        return tuple(name for _, name in self.segments() if name is not None)


PROGRESS_PLAIN = ProgressStyle("plain", "{spinner} {msg} [{elapsed}] eta {eta}")
PROGRESS_COUNT = ProgressStyle("count", "{spinner} [{elapsed}] {bar} {pos}/{len} {percent} eta {eta} {msg}")
PROGRESS_BYTES = ProgressStyle("bytes", "{spinner} [{elapsed}] {bar} {bytes}/{total_bytes} eta {eta} {msg}")

PROGRESS_STYLES: Mapping[str, ProgressStyle] = MappingProxyType(
    {
        "plain": PROGRESS_PLAIN,
        "empty": PROGRESS_PLAIN,
        "count": PROGRESS_COUNT,
        "bytes": PROGRESS_BYTES,
    }
)


def get_progress_style(name: str) -> ProgressStyle:
    key = name.strip().lower()
    try:
        return PROGRESS_STYLES[key]
    except KeyError as exc:
        raise ValueError(f"Unknown progress style: {name!r}") from exc


def estimate_eta(elapsed: float | None, position: float, total: float | None) -> float | None:
    """Return the remaining seconds extrapolated from the current rate.

    ``None`` when nothing is known yet (no elapsed time, no position, or an
    open-ended total).

    Examples
    --------
    >>> estimate_eta(10.0, 25, 100)
    30.0
    >>> estimate_eta(10.0, 0, 100) is None
    True
    >>> estimate_eta(4.0, 120, 100)
    0.0
    """

    if elapsed is None or total is None or position <= 0:
        return None
    remaining = max(total - position, 0)
    return elapsed * remaining / position


def format_eta(seconds: float | None) -> str:
    """Render ``seconds`` as ``H:MM:SS`` (``-:--:--`` when unknown).

    Examples
    --------
    >>> format_eta(3725.4)
    '1:02:05'
    >>> format_eta(None)
    '-:--:--'
    """

    if seconds is None:
        return "-:--:--"
    whole = int(round(seconds))
    hours, rest = divmod(whole, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"


__all__ = [
    "PLACEHOLDERS",
    "PROGRESS_BYTES",
    "PROGRESS_COUNT",
    "PROGRESS_PLAIN",
    "PROGRESS_STYLES",
    "ProgressStyle",
    "estimate_eta",
    "format_eta",
    "get_progress_style",
]
