"""Protocols separating the use cases from concrete adapters."""

from __future__ import annotations

from .sink import SinkPort
from .time import ClockPort

__all__ = ["ClockPort", "SinkPort"]
