from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

import pytest

from lib_log_trace.application.use_cases.render_event import (
    LineRenderer,
    RenderProfile,
    create_render_event,
)
from lib_log_trace.domain.events import LogEvent
from lib_log_trace.domain.levels import LogLevel
from lib_log_trace.domain.presentation import Presentation
from lib_log_trace.domain.spans import Span
from lib_log_trace.domain.styles import BOLD, CYAN, DIM, GREEN, RED, RESET, YELLOW

FIXED_TIMESTAMP = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
TS = f"{DIM}2025-01-02 03:04:05{RESET} "
NO_SPANS = f"{DIM}⣿ {RESET}"


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


def _event(message: str | None = "hello", **kwargs: object) -> LogEvent:
    kwargs.setdefault("level", LogLevel.INFO)
    return LogEvent(timestamp=FIXED_TIMESTAMP, message=message, **kwargs)  # type: ignore[arg-type]


def test_plain_event_renders_prefix_text_and_reset() -> None:
    line = LineRenderer().render(_event("hello"))

    assert line == f"{TS}{GREEN} INFO{RESET} {NO_SPANS}hello{RESET}\n"


def test_warn_http_header_example_matches_exact_bytes() -> None:
    event = _event(
        None,
        level=LogLevel.WARN,
        fields=[("_header_color", "\x1b[33m"), ("_header_text", "HTTP"), ("message", "Unable to ping host")],
    )

    line = LineRenderer().render(event)

    assert line == (
        f"{TS}{YELLOW} WARN{RESET} {NO_SPANS}"
        f"{YELLOW}{BOLD}      [HTTP]:{RESET} Unable to ping host{RESET}\n"
    )


def test_header_and_text_colours_body_of_every_line() -> None:
    event = _event(
        "first\nsecond",
        level=LogLevel.ERROR,
        presentation=Presentation.header_and_text("DB", RED, CYAN),
    )

    lines = LineRenderer().render_lines(event)

    prefix = f"{TS}{RED}ERROR{RESET} {NO_SPANS}"
    assert lines == [
        f"{prefix}{RED}{BOLD}        [DB]:{RESET} {CYAN}first{RESET}\n",
        f"{prefix}{' ' * 14}{CYAN}second{RESET}\n",
    ]


def test_text_colour_only_wraps_each_line() -> None:
    event = _event("a\nb", presentation=Presentation.text("cyan"))

    lines = LineRenderer().render_lines(event)

    assert [line.split(NO_SPANS, 1)[1] for line in lines] == [f"{CYAN}a{RESET}\n", f"{CYAN}b{RESET}\n"]


def test_multi_line_text_gets_full_prefix_on_every_line() -> None:
    event = _event("one\r\ntwo\nthree", spans=(Span("api"),))

    lines = LineRenderer().render_lines(event)

    assert len(lines) == 3
    assert [strip_ansi(line) for line in lines] == [
        "2025-01-02 03:04:05  INFO >> api ⣿ one\n",
        "2025-01-02 03:04:05  INFO >> api ⣿ two\n",
        "2025-01-02 03:04:05  INFO >> api ⣿ three\n",
    ]


def test_header_continuation_lines_are_padded_to_header_width() -> None:
    event = _event("x\ny", presentation=Presentation.header("HTTP", YELLOW))

    first, second = (strip_ansi(line) for line in LineRenderer().render_lines(event))

    assert first.endswith("      [HTTP]: x\n")
    assert second.endswith(" " * 14 + "y\n")
    assert len(first) == len(second)


def test_long_header_label_overflows_without_reflowing_continuations() -> None:
    event = _event("first\nsecond", presentation=Presentation.header("VERY-LONG-LABEL", RED))

    first, second = LineRenderer().render_lines(event)

    assert f"{RED}{BOLD}[VERY-LONG-LABEL]:{RESET} first{RESET}\n" in first
    assert strip_ansi(first).endswith(" ⣿ [VERY-LONG-LABEL]: first\n")
    assert strip_ansi(second).endswith(" ⣿ " + " " * 14 + "second\n")


def test_full_profile_shows_root_first_span_path() -> None:
    event = _event("x", spans=(Span("A"), Span("B"), Span("C")))

    line = LineRenderer(profile=RenderProfile.FULL).render(event)

    assert f"{DIM}>> A > B > C ⣿ {RESET}" in line


@pytest.mark.parametrize(
    "depth, marker",
    [(1, ">"), (3, ">>>"), (4, ">>4"), (7, ">>7")],
)
def test_depth_profile_shows_counter(depth: int, marker: str) -> None:
    event = _event("x", spans=tuple(Span(f"s{n}") for n in range(depth)))

    line = LineRenderer(profile=RenderProfile.DEPTH).render(event)

    assert f"{DIM}{marker} ⣿ {RESET}" in line


def test_depth_profile_without_spans_collapses_to_marker() -> None:
    line = LineRenderer(profile=RenderProfile.DEPTH).render(_event("x"))

    assert line == f"{TS}{GREEN} INFO{RESET} {NO_SPANS}x{RESET}\n"


def test_empty_text_still_renders_one_line() -> None:
    lines = LineRenderer().render_lines(_event(None))

    assert lines == [f"{TS}{GREEN} INFO{RESET} {NO_SPANS}{RESET}\n"]


@pytest.mark.parametrize("level", [LogLevel.TRACE, LogLevel.DEBUG])
def test_uncoloured_levels_have_plain_tag(level: LogLevel) -> None:
    line = LineRenderer().render(_event("x", level=level))

    assert line.startswith(f"{TS}{level.label:>5} {DIM}")


def test_explicit_presentation_overrides_reserved_fields() -> None:
    event = _event(
        "boot",
        fields={"_header_text": "OLD", "_header_color": RED},
        presentation=Presentation.text(CYAN),
    )

    line = LineRenderer().render(event)

    assert "[OLD]" not in line
    assert f"{CYAN}boot{RESET}\n" in line


def test_degraded_reserved_field_is_reported_and_shown() -> None:
    event = _event("boot", fields={"_header_text": "HTTP"})

    block = LineRenderer().render_block(event)

    assert block.degraded == ("_header_text",)
    assert strip_ansi(block.text).endswith("boot, _header_text = HTTP\n")


def test_every_line_ends_with_reset_and_newline() -> None:
    event = _event("a\nb\nc", presentation=Presentation.header_and_text("X", RED, RED))

    assert all(line.endswith(f"{RESET}\n") for line in LineRenderer().render_lines(event))


def test_timestamp_is_rendered_without_timezone_conversion() -> None:
    local = FIXED_TIMESTAMP.replace(tzinfo=timezone(timedelta(hours=2)))

    line = LineRenderer(timestamp_format="%H:%M %z").render(_event("x").replace(timestamp=local))

    assert line.startswith(f"{DIM}03:04 +0200{RESET} ")


def test_rendering_is_idempotent() -> None:
    renderer = LineRenderer()
    event = _event("same", spans=(Span("a"),), presentation=Presentation.header("H", GREEN))

    assert renderer.render(event) == renderer.render(event)


def test_render_event_writes_whole_block_once(recording_sink) -> None:
    write = create_render_event(renderer=LineRenderer(), sink=recording_sink)

    block = write(_event("x\ny\nz"))

    assert len(block) == 3
    assert recording_sink.writes == [block.text]


def test_render_event_propagates_sink_errors() -> None:
    class _BrokenSink:
        def write(self, text: str) -> None:
            raise OSError("pipe closed")

        def flush(self) -> None:
            pass

    write = create_render_event(renderer=LineRenderer(), sink=_BrokenSink())

    with pytest.raises(OSError, match="pipe closed"):
        write(_event("x"))


def test_profile_from_name_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown render profile"):
        RenderProfile.from_name("tree")


def test_negative_header_width_is_rejected() -> None:
    with pytest.raises(ValueError):
        LineRenderer(header_width=-1)


def test_naive_timestamps_never_reach_the_renderer() -> None:
    with pytest.raises(ValueError):
        _event("x").replace(timestamp=datetime(2025, 1, 1))
