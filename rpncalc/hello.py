"""Print a coloured greeting."""

from __future__ import annotations

from collections.abc import Sequence

from rpncalc.colors import Color, reset_color, set_color


def main(argv: Sequence[str] | None = None) -> int:
    """Print a green "Hello world!" line and reset the colour."""
    set_color(Color.GREEN)
    print("Hello world!")
    reset_color()
    return 0