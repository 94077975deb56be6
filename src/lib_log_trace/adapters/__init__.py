"""Concrete adapters implementing the application ports."""

from __future__ import annotations

from .console.rich_console import RichConsoleSink
from .logging_bridge import TraceLogHandler
from .stream import StreamSink

__all__ = ["RichConsoleSink", "StreamSink", "TraceLogHandler"]
