"""Text patterns and greetings."""

from __future__ import annotations

__all__ = ["diamond", "hello_world"]


def diamond(rows: int) -> str:
    """Return a diamond of ``*`` marks, ``rows`` lines growing then shrinking.

    The widest line appears twice, once at the end of each half.
    Each line ends with a newline; ``rows <= 0`` gives an empty string.
    """
    growing = [" " * (rows - i) + "* " * i for i in range(1, rows + 1)]
    lines = growing + growing[::-1]
    return "".join(line + "\n" for line in lines)


def hello_world() -> str:
    """Return the classic greeting."""
    return "Hello World"