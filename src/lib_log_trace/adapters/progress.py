"""Rich progress bars built from the named :class:`ProgressStyle` templates.

Purpose
-------
Translate the placeholder templates in :mod:`lib_log_trace.domain.progress`
into :mod:`rich.progress` columns so progress output matches the log palette.

Contents
--------
* :class:`EtaColumn` - remaining time from elapsed time and position/total.
* :class:`CountColumn` - position or total of a task.
* :func:`build_progress_columns` - template to column list.
* :func:`create_progress` - ready-to-use :class:`rich.progress.Progress`.
"""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    FileSizeColumn,
    Progress,
    ProgressColumn,
    SpinnerColumn,
    Task,
    TextColumn,
    TimeElapsedColumn,
    TotalFileSizeColumn,
)
from rich.text import Text

from lib_log_trace.domain.progress import ProgressStyle, estimate_eta, format_eta, get_progress_style


class EtaColumn(ProgressColumn):
    """Render the remaining time as ``H:MM:SS``."""

    def __init__(self, style: str = "cyan") -> None:
        super().__init__()
        self._style = style

    def render(self, task: Task) -> Text:
        eta = estimate_eta(task.elapsed, task.completed, task.total)
        return Text(format_eta(eta), style=self._style)


class CountColumn(ProgressColumn):
    """Render the position (or the total, ``?`` when open-ended)."""

    def __init__(self, *, total: bool) -> None:
        super().__init__()
        self._total = total

    def render(self, task: Task) -> Text:
        value = task.total if self._total else task.completed
        if value is None:
            return Text("?")
        return Text(f"{value:.0f}")


def _column_for(placeholder: str) -> ProgressColumn:
    if placeholder == "spinner":
        return SpinnerColumn(style="green")
    if placeholder == "elapsed":
        return TimeElapsedColumn()
    if placeholder == "bar":
        return BarColumn(complete_style="cyan", finished_style="blue")
    if placeholder == "pos":
        return CountColumn(total=False)
    if placeholder == "len":
        return CountColumn(total=True)
    if placeholder == "percent":
        return TextColumn("{task.percentage:>3.0f}%")
    if placeholder == "bytes":
        return FileSizeColumn()
    if placeholder == "total_bytes":
        return TotalFileSizeColumn()
    if placeholder == "eta":
        return EtaColumn()
    return TextColumn("{task.description}")


def _literal_column(literal: str) -> TextColumn:
    escaped = literal.replace("{", "{{").replace("}", "}}")
    return TextColumn(escaped, markup=False)


def build_progress_columns(style: ProgressStyle | str) -> list[ProgressColumn]:
    """Return Rich columns laid out as described by ``style``.

    Literal template text becomes plain :class:`TextColumn` segments and each
    placeholder maps to its widget.

    Examples
    --------
    >>> [type(column).__name__ for column in build_progress_columns("plain")]
    ['SpinnerColumn', 'TextColumn', 'TextColumn', 'TimeElapsedColumn', 'TextColumn', 'EtaColumn']
    """

    resolved = get_progress_style(style) if isinstance(style, str) else style
    columns: list[ProgressColumn] = []
    for literal, placeholder in resolved.segments():
        if literal.strip():
            columns.append(_literal_column(literal.strip()))
        if placeholder is not None:
            columns.append(_column_for(placeholder))
    return columns


def create_progress(style: ProgressStyle | str = "count", *, console: Console | None = None, transient: bool = False) -> Progress:
    """Return a :class:`Progress` instance using the named template."""

    return Progress(*build_progress_columns(style), console=console, transient=transient)


__all__ = ["CountColumn", "EtaColumn", "build_progress_columns", "create_progress"]
