from __future__ import annotations

import pytest

from lib_log_trace.domain.presentation import Presentation, PresentationKind


@pytest.mark.parametrize(
    "presentation, kind",
    [
        (Presentation.none(), PresentationKind.NONE),
        (Presentation.header("HTTP", "\x1b[33m"), PresentationKind.HEADER),
        (Presentation.text("\x1b[36m"), PresentationKind.TEXT),
        (Presentation.header_and_text("DB", "\x1b[31m", "\x1b[31m"), PresentationKind.HEADER_AND_TEXT),
    ],
)
def test_constructors_select_one_mode(presentation: Presentation, kind: PresentationKind) -> None:
    assert presentation.kind is kind


@pytest.mark.parametrize(
    "label, color",
    [("HTTP", None), (None, "\x1b[33m")],
)
def test_header_requires_both_label_and_color(label: str | None, color: str | None) -> None:
    with pytest.raises(ValueError, match="together"):
        Presentation(header_label=label, header_color=color)


def test_presentation_is_immutable() -> None:
    presentation = Presentation.text("red")
    with pytest.raises(AttributeError):
        presentation.text_color = "blue"  # type: ignore[misc]
