from __future__ import annotations

import pytest

from lib_log_trace.domain.fields import ExtractedFields, FieldVisitor, extract_fields
from lib_log_trace.domain.presentation import PresentationKind


def test_message_and_plain_fields_concatenate_in_emission_order() -> None:
    extracted = extract_fields([("message", "hello"), ("user", "ada"), ("attempt", 3)])

    assert extracted.text == "hello, user = ada, attempt = 3"
    assert extracted.presentation.kind is PresentationKind.NONE


def test_fields_only_event_starts_with_separator() -> None:
    extracted = extract_fields([("rows", 0)])

    assert extracted.text == ", rows = 0"


def test_reserved_fields_are_removed_from_the_text() -> None:
    extracted = extract_fields(
        [
            ("_header_color", "\x1b[33m"),
            ("_header_text", "HTTP"),
            ("message", "Unable to ping host"),
            ("_text_color", "\x1b[36m"),
        ]
    )

    assert extracted.text == "Unable to ping host"
    assert extracted.header_label == "HTTP"
    assert extracted.header_color == "\x1b[33m"
    assert extracted.text_color == "\x1b[36m"
    assert extracted.degraded == ()


def test_empty_stream_yields_empty_text() -> None:
    extracted = extract_fields([])

    assert extracted == ExtractedFields()


@pytest.mark.parametrize("lone", ["_header_text", "_header_color"])
def test_lone_header_half_degrades_to_plain_field(lone: str) -> None:
    extracted = extract_fields([("message", "boot"), (lone, "value")])

    assert extracted.header_label is None
    assert extracted.header_color is None
    assert extracted.text == f"boot, {lone} = value"
    assert extracted.degraded == (lone,)


def test_non_string_reserved_value_degrades_to_repr() -> None:
    extracted = extract_fields([("message", "x"), ("_text_color", 33)])

    assert extracted.text_color is None
    assert extracted.text == "x, _text_color = 33"
    assert extracted.degraded == ("_text_color",)


def test_non_string_message_uses_repr() -> None:
    visitor = FieldVisitor()
    visitor.record("message", ["a", "b"])

    assert visitor.finish().text == "['a', 'b']"


def test_extracted_fields_rejects_half_header() -> None:
    with pytest.raises(ValueError):
        ExtractedFields(header_label="HTTP")
