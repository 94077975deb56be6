"""Plain text-stream sink writing rendered blocks untouched.

Purpose
-------
Default sink: ANSI sequences produced by the renderer reach the stream exactly
as rendered, without terminal capability detection.

Contents
--------
* :class:`StreamSink` - lock-guarded implementation of :class:`SinkPort`.
"""

from __future__ import annotations

import sys
import threading
from typing import TextIO

from lib_log_trace.application.ports.sink import SinkPort


class StreamSink(SinkPort):
    """Write each block to a text stream under a lock.

    ``stream=None`` resolves :data:`sys.stdout` on every write so redirections
    performed after construction (pytest capture, ``contextlib.redirect_stdout``)
    are honoured.

    Examples
    --------
    >>> from io import StringIO
    >>> buffer = StringIO()
    >>> sink = StreamSink(buffer)
    >>> sink.write("hello\\n")
    >>> buffer.getvalue()
    'hello\\n'
    """

    def __init__(self, stream: TextIO | None = None, *, flush_each: bool = False) -> None:
        self._stream = stream
        self._flush_each = flush_each
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        with self._lock:
            stream = self.stream
            stream.write(text)
            if self._flush_each:
                stream.flush()

    def flush(self) -> None:
        with self._lock:
            self.stream.flush()


__all__ = ["StreamSink"]
