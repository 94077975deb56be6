from __future__ import annotations

import sys
import threading
from io import StringIO

import pytest

from lib_log_trace.adapters.stream import StreamSink


def test_stream_sink_writes_text_untouched() -> None:
    buffer = StringIO()
    sink = StreamSink(buffer)

    sink.write("\x1b[32mready\x1b[0m\n")

    assert buffer.getvalue() == "\x1b[32mready\x1b[0m\n"


def test_default_stream_follows_current_stdout(monkeypatch: pytest.MonkeyPatch) -> None:
    sink = StreamSink()
    replacement = StringIO()
    monkeypatch.setattr(sys, "stdout", replacement)

    sink.write("late\n")

    assert replacement.getvalue() == "late\n"


def test_flush_each_flushes_after_every_write() -> None:
    class _Stream(StringIO):
        def __init__(self) -> None:
            super().__init__()
            self.flushes = 0

        def flush(self) -> None:
            self.flushes += 1

    stream = _Stream()
    sink = StreamSink(stream, flush_each=True)
    sink.write("a\n")
    sink.write("b\n")

    assert stream.flushes == 2


def test_concurrent_blocks_never_interleave() -> None:
    buffer = StringIO()
    sink = StreamSink(buffer)
    block = "".join(f"line {n}\n" for n in range(50))

    threads = [threading.Thread(target=sink.write, args=(block,)) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert buffer.getvalue() == block * 8


def test_write_errors_propagate() -> None:
    buffer = StringIO()
    buffer.close()

    with pytest.raises(ValueError):
        StreamSink(buffer).write("x\n")
