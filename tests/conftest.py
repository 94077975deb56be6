from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime, timezone
from io import StringIO

import pytest
from rich.console import Console

import lib_log_trace as log
from lib_log_trace.adapters import TraceLogHandler
from lib_log_trace.runtime import _state

FIXED_TIMESTAMP = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

_LOG_ENV_VARS = (
    "LOG_LEVEL",
    "LOG_PROFILE",
    "LOG_TIMESTAMP_FORMAT",
    "LOG_CONSOLE_BACKEND",
    "LOG_FORCE_COLOR",
    "LOG_NO_COLOR",
    "LOG_CAPTURE_STDLIB",
)


class RecordingSink:
    """Sink capturing every write so tests can assert on raw output."""

    def __init__(self) -> None:
        self.writes: list[str] = []
        self.flushes = 0

    def write(self, text: str) -> None:
        self.writes.append(text)

    def flush(self) -> None:
        self.flushes += 1

    @property
    def text(self) -> str:
        return "".join(self.writes)


class FixedClock:
    def __init__(self, moment: datetime = FIXED_TIMESTAMP) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def record_console() -> Console:
    """Rich console that records output for assertions."""

    return Console(file=StringIO(), record=True, force_terminal=True, color_system="truecolor", width=160)


@pytest.fixture(autouse=True)
def _isolate_runtime(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip ``LOG_*`` overrides and tear down any runtime a test left behind."""

    for name in _LOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    root_level = logging.getLogger().level
    yield
    if log.is_initialised():
        log.shutdown()
    _state.clear_runtime()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, TraceLogHandler):
            root.removeHandler(handler)
    root.setLevel(root_level)
