"""A four-operation calculator for expressions such as ``3.5 * 2``."""

from __future__ import annotations

import math
import re
import sys
from collections.abc import Callable, Sequence
from operator import add, mul, sub

__all__ = ["calculate", "evaluate", "main"]

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
_EXPRESSION = re.compile(rf"^\s*({_NUMBER})\s*(\S)\s*({_NUMBER})\s*$")


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


_OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": _divide,
}


def calculate(left: float, operator: str, right: float) -> float:
    """Apply ``operator`` (one of ``+ - * /``) to two numbers.

    Division by zero follows IEEE rules and yields an infinity or NaN.
    Raises ValueError for any other operator.
    """
    try:
        operation = _OPERATIONS[operator]
    except KeyError:
        raise ValueError("Invalid operator!") from None
    return float(operation(float(left), float(right)))


def evaluate(expression: str) -> float:
    """Parse ``"<number> <operator> <number>"`` and compute it."""
    match = _EXPRESSION.match(expression)
    if match is None:
        raise ValueError(f"malformed expression: {expression!r}")
    left, operator, right = match.groups()
    return calculate(float(left), operator, float(right))


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate an expression from the arguments or, failing that, from stdin."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        expression = " ".join(args)
    else:
        try:
            expression = input("Enter calculation: ")
        except EOFError:
            return 1
    try:
        result = evaluate(expression)
    except ValueError as exc:
        print(exc)
        return 1
    print(f"{result:.2f}")
    return 0