"""ANSI style registry shared by the renderer and host applications.

Purpose
-------
Name the SGR escape sequences used by the line renderer so call sites can pass
either a raw code (``"\\x1b[33m"``) or a registry name (``"yellow"``) when
choosing header and text colours.

Contents
--------
* Text attributes (:data:`RESET`, :data:`BOLD`, :data:`DIM`, :data:`ITALIC`,
  :data:`UNDERLINE`, :data:`REVERSED`).
* Eight foreground and eight background colours.
* :data:`ATTRIBUTES`, :data:`FOREGROUND`, :data:`BACKGROUND`, :data:`STYLES`
  read-only name maps and :func:`resolve_style`.

System Role
-----------
Pure data. Constants are immutable and shared by every thread without
synchronisation.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
DIM = "\x1b[2m"
ITALIC = "\x1b[3m"
UNDERLINE = "\x1b[4m"
REVERSED = "\x1b[7m"

BLACK = "\x1b[30m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"

BG_BLACK = "\x1b[40m"
BG_RED = "\x1b[41m"
BG_GREEN = "\x1b[42m"
BG_YELLOW = "\x1b[43m"
BG_BLUE = "\x1b[44m"
BG_MAGENTA = "\x1b[45m"
BG_CYAN = "\x1b[46m"
BG_WHITE = "\x1b[47m"


ATTRIBUTES: Mapping[str, str] = MappingProxyType(
    {
        "reset": RESET,
        "bold": BOLD,
        "dim": DIM,
        "italic": ITALIC,
        "underline": UNDERLINE,
        "reversed": REVERSED,
    }
)

FOREGROUND: Mapping[str, str] = MappingProxyType(
    {
        "black": BLACK,
        "red": RED,
        "green": GREEN,
        "yellow": YELLOW,
        "blue": BLUE,
        "magenta": MAGENTA,
        "cyan": CYAN,
        "white": WHITE,
    }
)

BACKGROUND: Mapping[str, str] = MappingProxyType(
    {
        "bg_black": BG_BLACK,
        "bg_red": BG_RED,
        "bg_green": BG_GREEN,
        "bg_yellow": BG_YELLOW,
        "bg_blue": BG_BLUE,
        "bg_magenta": BG_MAGENTA,
        "bg_cyan": BG_CYAN,
        "bg_white": BG_WHITE,
    }
)

STYLES: Mapping[str, str] = MappingProxyType({**ATTRIBUTES, **FOREGROUND, **BACKGROUND})
#: Every named style; keys are lowercase.


def resolve_style(value: str) -> str:
    """Return the escape sequence for ``value``.

    Registry names are matched case-insensitively; ``"reverse"`` is accepted
    for :data:`REVERSED`. Anything else (normally a raw escape sequence) is
    returned untouched so callers stay free to pass their own SGR codes.

    Examples
    --------
    >>> resolve_style("Yellow") == YELLOW
    True
    >>> resolve_style("\\x1b[38;5;208m")
    '\\x1b[38;5;208m'
    """

    key = value.strip().lower()
    if key == "reverse":
        key = "reversed"
    return STYLES.get(key, value)


__all__ = [
    "ATTRIBUTES",
    "BACKGROUND",
    "BG_BLACK",
    "BG_BLUE",
    "BG_CYAN",
    "BG_GREEN",
    "BG_MAGENTA",
    "BG_RED",
    "BG_WHITE",
    "BG_YELLOW",
    "BLACK",
    "BLUE",
    "BOLD",
    "CYAN",
    "DIM",
    "FOREGROUND",
    "GREEN",
    "ITALIC",
    "MAGENTA",
    "RED",
    "RESET",
    "REVERSED",
    "STYLES",
    "UNDERLINE",
    "WHITE",
    "YELLOW",
    "resolve_style",
]
