"""Searching over sequences: binary search and sliding-window maxima."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)

__all__ = ["binary_search", "sliding_window_max"]


def binary_search(items: Sequence[T], target: T) -> int:
    """Return an index of ``target`` in the ascending sequence ``items``.

    Raises ValueError when ``target`` is not present.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        middle = low + (high - low) // 2
        value = items[middle]
        if value == target:
            return middle
        if value < target:
            low = middle + 1
        else:
            high = middle - 1
    raise ValueError(f"{target!r} is not in the sequence")


def sliding_window_max(items: Iterable[T], k: int) -> list[T]:
    """Return the maximum of every contiguous window of length ``k``.

    Raises ValueError unless ``1 <= k <= len(items)``.
    """
    values = list(items)
    if k < 1:
        raise ValueError("window size must be at least 1")
    if k > len(values):
        raise ValueError("window size exceeds the number of items")

    window: deque[int] = deque()
    maxima: list[T] = []
    for index, value in enumerate(values):
        if window and window[0] <= index - k:
            window.popleft()
        while window and value >= values[window[-1]]:
            window.pop()
        window.append(index)
        if index >= k - 1:
            maxima.append(values[window[0]])
    return maxima