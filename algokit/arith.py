"""Integer arithmetic helpers: binomials, Catalan and Fibonacci numbers,
matrix products and multiplication tables."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from numbers import Number

__all__ = [
    "binomial",
    "catalan",
    "fibonacci",
    "multiply_matrices",
    "multiplication_table",
]


def binomial(n: int, k: int) -> int:
    """Return the binomial coefficient C(n, k); zero when ``k > n``."""
    if n < 0 or k < 0:
        raise ValueError("binomial arguments must be non-negative")
    if k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(k):
        result = result * (n - i) // (i + 1)
    return result


def catalan(n: int) -> int:
    """Return the ``n``-th Catalan number."""
    if n < 0:
        raise ValueError("catalan index must be non-negative")
    return binomial(2 * n, n) // (n + 1)


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("fibonacci index must be non-negative")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def _rows(matrix: Iterable[Iterable[Number]], name: str) -> list[list[Number]]:
    rows = [list(row) for row in matrix]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError(f"{name} matrix is not rectangular")
    return rows


def multiply_matrices(
    left: Iterable[Iterable[Number]], right: Iterable[Iterable[Number]]
) -> list[list[Number]]:
    """Return the matrix product ``left @ right`` as a list of rows.

    Raises ValueError when a matrix is ragged or the inner dimensions differ.
    """
    a = _rows(left, "left")
    b = _rows(right, "right")
    if a and len(a[0]) != len(b):
        raise ValueError(
            f"cannot multiply: left has {len(a[0])} columns, right has {len(b)} rows"
        )
    columns: Sequence[tuple[Number, ...]] = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns] for row in a
    ]


def multiplication_table(number: int, count: int) -> list[str]:
    """Return the lines ``"number * i = product"`` for ``i`` from 1 to ``count``."""
    return [f"{number} * {i} = {number * i}" for i in range(1, count + 1)]