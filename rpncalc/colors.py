"""ANSI terminal colour codes and helpers to switch them on a stream."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class Color(str, Enum):
    """ANSI escape sequences for terminal foreground colours."""

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    RESET = "\033[0m"
    PINK = "\033[38;5;206m"


def _code(color: Color | str) -> str:
    return color.value if isinstance(color, Color) else color


def set_color(color: Color | str, stream: TextIO | None = None) -> None:
    """Write the escape sequence for ``color`` to ``stream`` (stdout by default)."""
    (stream if stream is not None else sys.stdout).write(_code(color))


def reset_color(stream: TextIO | None = None) -> None:
    """Write the reset sequence to ``stream`` (stdout by default)."""
    set_color(Color.RESET, stream)