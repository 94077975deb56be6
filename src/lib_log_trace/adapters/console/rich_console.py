"""Rich-powered console sink implementing :class:`SinkPort`.

Purpose
-------
Route rendered blocks through :class:`rich.console.Console` for hosts that
already print through Rich and want its colour-system handling (``NO_COLOR``,
``force_terminal``, recording, HTML export).

Contents
--------
* :class:`RichConsoleSink` - decodes the renderer's ANSI output into Rich
  :class:`~rich.text.Text` and prints it in one call.

System Role
-----------
Optional human-facing sink selected with ``console_backend="rich"``.
"""

from __future__ import annotations

import threading

from rich.console import Console
from rich.text import Text

from lib_log_trace.application.ports.sink import SinkPort


class RichConsoleSink(SinkPort):
    """Print rendered blocks using Rich with colour overrides.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True, width=120)
    >>> sink = RichConsoleSink(console=console)
    >>> sink.write("\\x1b[32mready\\x1b[0m\\n")
    >>> console.export_text()
    'ready\\n'
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Configure the sink with colour overrides or an explicit console."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=True if force_color else None, no_color=no_color)
        self._lock = threading.Lock()

    @property
    def console(self) -> Console:
        return self._console

    def write(self, text: str) -> None:
        """Decode ANSI styles in ``text`` and print the block once."""
        if text.endswith("\n"):
            text = text[:-1]
        rendered = Text.from_ansi(text)
        with self._lock:
            self._console.print(rendered, soft_wrap=True, highlight=False)

    def flush(self) -> None:
        with self._lock:
            self._console.file.flush()


__all__ = ["RichConsoleSink"]
