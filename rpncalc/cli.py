"""Command line entry point for the RPN evaluator."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from rpncalc.rpn import Rpn, RpnError


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate the single RPN expression argument and print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        prog = sys.argv[0] if sys.argv and sys.argv[0] else "rpncalc"
        print(f'Usage: {prog} "RPN expression"', file=sys.stderr)
        return 1
    try:
        result = Rpn().calculate(args[0])
    except RpnError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(result)
    return 0