"""Reverse Polish notation evaluator for single-digit operands."""

from __future__ import annotations

import operator
from collections.abc import Callable


class RpnError(Exception):
    """Base class for evaluation errors."""

    message = "Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidExpressionError(RpnError):
    """The expression is not a well-formed RPN expression."""

    message = "Error: Invalid RPN expression"


class DivisionByZeroError(RpnError, ZeroDivisionError):
    """The expression divides by zero."""

    message = "Error: Division by zero"


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZeroError()
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}

_DIGITS = frozenset("0123456789")


class Rpn:
    """Stack-based evaluator; each operand is a single decimal digit."""

    def __init__(self) -> None:
        self._stack: list[int] = []

    def _apply(self, op: str) -> None:
        if len(self._stack) < 2:
            raise InvalidExpressionError()
        b = self._stack.pop()
        a = self._stack.pop()
        self._stack.append(_OPERATORS[op](a, b))

    def calculate(self, expression: str) -> int:
        """Evaluate ``expression`` and return its integer result."""
        self._stack.clear()
        for token in expression.split():
            if token in _DIGITS:
                self._stack.append(int(token))
            elif token in _OPERATORS:
                self._apply(token)
            else:
                raise InvalidExpressionError()
        if len(self._stack) != 1:
            raise InvalidExpressionError()
        return self._stack[0]


def evaluate(expression: str) -> int:
    """Evaluate an RPN expression with a fresh evaluator."""
    return Rpn().calculate(expression)