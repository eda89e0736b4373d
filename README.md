# rpncalc

A small calculator for expressions in reverse Polish (postfix) notation.

## Rules

- Tokens are separated by whitespace.
- Each operand is a single digit, `0` to `9`.
- The operators are `+`, `-`, `*` and `/`. Division is integer division and truncates toward zero.
- A valid expression leaves exactly one value on the stack.

Any other token, an operator with fewer than two operands, or leftover values make the expression invalid. Dividing by zero is also reported as an error.

## Command line

```
rpn "8 9 * 9 - 9 - 9 - 4 - 1 +"
```

This prints `42`.

On success the command prints the result and exits with status 0. On an invalid expression it prints `Error: Invalid RPN expression` to standard error and exits with status 1. On division by zero it prints `Error: Division by zero` to standard error and exits with status 1. If it is not given exactly one argument, it prints a usage message to standard error and exits with status 1.

The package also installs `rpncalc-hello`. It prints a green `Hello world!` line and then resets the terminal colour, which makes it a quick check that the install worked:

```
rpncalc-hello
```

## Library

```python
from rpncalc.rpn import Rpn, evaluate, InvalidExpressionError, DivisionByZeroError

evaluate("1 2 * 2 / 2 * 2 4 - +")   # 0

calc = Rpn()
calc.calculate("7 7 * 7 -")          # 42

try:
    evaluate("1 0 /")
except DivisionByZeroError as exc:
    print(exc)                       # Error: Division by zero
```

`InvalidExpressionError` and `DivisionByZeroError` both derive from `RpnError`. `DivisionByZeroError` is also a `ZeroDivisionError`.

`rpncalc.colors` provides the `Color` enumeration of ANSI escape codes (`RED`, `GREEN`, `YELLOW`, `BLUE`, `MAGENTA`, `CYAN`, `PINK` and `RESET`). `set_color(color, stream=None)` writes a colour's code, or any string given instead, to a stream, and `reset_color(stream=None)` writes the reset code. Both write to standard output when no stream is given.

## Tests

```
pip install -e ".[test]"
pytest
```