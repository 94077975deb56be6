"""Use cases composing the domain with ports."""

from __future__ import annotations

from .emit_event import create_emit_event
from .render_event import LineRenderer, RenderedBlock, RenderProfile, create_render_event
from .shutdown import create_shutdown

__all__ = [
    "LineRenderer",
    "RenderProfile",
    "RenderedBlock",
    "create_emit_event",
    "create_render_event",
    "create_shutdown",
]
