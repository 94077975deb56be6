from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lib_log_trace.domain.events import LogEvent
from lib_log_trace.domain.levels import LogLevel
from lib_log_trace.domain.presentation import Presentation
from lib_log_trace.domain.spans import Span

MOMENT = datetime(2025, 9, 23, 11, 0, 0, tzinfo=timezone.utc)


def test_log_event_requires_timezone_aware_timestamp() -> None:
    with pytest.raises(ValueError, match="timezone-aware"):
        LogEvent(timestamp=datetime(2025, 9, 23, 12, 0, 0), level=LogLevel.INFO, message="hello")


def test_field_stream_yields_message_first_then_fields_in_order() -> None:
    event = LogEvent(MOMENT, LogLevel.INFO, "hello", fields={"b": 2, "a": 1})

    assert list(event.field_stream()) == [("message", "hello"), ("b", 2), ("a", 1)]


def test_fields_accept_ordered_pairs() -> None:
    event = LogEvent(MOMENT, LogLevel.DEBUG, fields=[("z", 1), ("y", 2)])

    assert event.fields == (("z", 1), ("y", 2))
    assert list(event.field_stream()) == [("z", 1), ("y", 2)]


def test_message_may_arrive_as_field_when_not_given_directly() -> None:
    event = LogEvent(MOMENT, LogLevel.INFO, fields=[("message", "from field")])

    assert list(event.field_stream()) == [("message", "from field")]


@pytest.mark.parametrize(
    "message, fields",
    [
        (None, [("a", 1), ("a", 2)]),
        ("hello", [("message", "again")]),
    ],
)
def test_duplicate_field_names_are_rejected(message: str | None, fields: list[tuple[str, int | str]]) -> None:
    with pytest.raises(ValueError, match="duplicate field name"):
        LogEvent(MOMENT, LogLevel.INFO, message, fields=fields)


def test_to_dict_serialises_spans_and_presentation() -> None:
    event = LogEvent(
        MOMENT,
        LogLevel.WARN,
        "boom",
        fields={"code": "E100"},
        spans=(Span("api", span_id="s1"),),
        presentation=Presentation.header("HTTP", "yellow"),
        logger_name="tests",
    )

    data = event.to_dict()

    assert data["timestamp"] == "2025-09-23T11:00:00+00:00"
    assert data["level"] == "warn"
    assert data["fields"] == [["code", "E100"]]
    assert data["spans"] == [{"name": "api", "span_id": "s1", "fields": {}}]
    assert data["presentation"]["header_label"] == "HTTP"


def test_replace_returns_modified_copy() -> None:
    event = LogEvent(MOMENT, LogLevel.INFO, "a")
    changed = event.replace(message="b")

    assert changed.message == "b"
    assert event.message == "a"
