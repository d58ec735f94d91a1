"""Small sequence utilities: reversal, run collapsing and palindrome checks."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby
from typing import TypeVar

T = TypeVar("T")

__all__ = ["reverse", "remove_adjacent_duplicates", "is_palindrome"]


def reverse(items: Iterable[T]) -> list[T]:
    """Return the items as a list in reverse order."""
    return list(items)[::-1]


def remove_adjacent_duplicates(text: str) -> str:
    """Collapse every run of identical consecutive characters to one."""
    return "".join(char for char, _ in groupby(text))


def is_palindrome(text: str) -> bool:
    """Return True when ``text`` reads the same backwards."""
    return text == text[::-1]