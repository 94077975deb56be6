"""Domain entities and value objects used by the trace renderer."""

from __future__ import annotations

from . import styles
from .events import LogEvent
from .fields import ExtractedFields, FieldVisitor, extract_fields
from .levels import LogLevel
from .presentation import Presentation, PresentationKind
from .progress import PROGRESS_STYLES, ProgressStyle
from .spans import Span, SpanStack, resolve_span_depth, resolve_span_path

__all__ = [
    "ExtractedFields",
    "FieldVisitor",
    "LogEvent",
    "LogLevel",
    "PROGRESS_STYLES",
    "Presentation",
    "PresentationKind",
    "ProgressStyle",
    "Span",
    "SpanStack",
    "extract_fields",
    "resolve_span_depth",
    "resolve_span_path",
    "styles",
]
