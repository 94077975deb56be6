"""Log level abstraction providing presentation metadata for the renderer.

Purpose
-------
Offer a domain-specific representation of severities that orders
``TRACE < DEBUG < INFO < WARN < ERROR`` and carries the tag colour used by the
line renderer.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* ``_COLOR_TABLE`` constant mapping levels to their tag colour.

System Role
-----------
Used by the emit use case to enforce the static severity threshold and by the
line renderer to colour the level tag.
"""

from __future__ import annotations

import logging
from enum import Enum

from .styles import GREEN, RED, YELLOW


class LogLevel(Enum):
    """Enumerated logging levels used throughout the system."""

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value >= other.value

    @property
    def severity(self) -> str:
        """Return the lowercase severity name for structured payloads."""

        return self.name.lower()

    @property
    def label(self) -> str:
        """Return the uppercase tag printed in the line prefix."""

        return self.name

    @property
    def color(self) -> str:
        """Return the ANSI colour of the level tag (empty when uncoloured)."""

        return _COLOR_TABLE.get(self, "")

    def to_python_level(self) -> int:
        """Return the :mod:`logging` number closest to this level."""

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls, level: int) -> "LogLevel":
        """Return the :class:`LogLevel` whose value equals ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Bucket a stdlib logging number into the closest :class:`LogLevel`.

        Examples
        --------
        >>> LogLevel.from_python_level(logging.CRITICAL) is LogLevel.ERROR
        True
        >>> LogLevel.from_python_level(1) is LogLevel.TRACE
        True
        """
        if level >= logging.ERROR:
            return cls.ERROR
        if level >= logging.WARNING:
            return cls.WARN
        if level >= logging.INFO:
            return cls.INFO
        if level >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE


_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "ERROR",
    "FATAL": "ERROR",
}

_COLOR_TABLE = {
    LogLevel.INFO: GREEN,
    LogLevel.WARN: YELLOW,
    LogLevel.ERROR: RED,
}
# TRACE and DEBUG tags stay uncoloured.

_PYTHON_LEVELS = {
    LogLevel.TRACE: 5,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


__all__ = ["LogLevel"]
