"""Classic comparison sorts.

Every function accepts any iterable of mutually comparable values and
returns a new sorted list in ascending order; the input is left untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T", bound=Any)

__all__ = [
    "bubble_sort",
    "heap_sort",
    "merge_sort",
    "quick_sort",
    "insertion_sort",
    "selection_sort",
]


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for i in range(end):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
    return result


def _sift_down(heap: list[T], root: int, last: int) -> None:
    """Restore the max-heap property below ``root`` within ``heap[:last + 1]``."""
    while True:
        left = 2 * root + 1
        right = left + 1
        largest = root
        if left <= last and heap[left] > heap[largest]:
            largest = left
        if right <= last and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(items: Iterable[T]) -> list[T]:
    """Sort by building a max-heap and repeatedly moving its root to the end."""
    result = list(items)
    last = len(result) - 1
    for root in range((len(result) - 1) // 2, -1, -1):
        _sift_down(result, root, last)
    for end in range(last, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, 0, end - 1)
    return result


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) + 1) // 2
    return _merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def _partition(values: list[T], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` around its last element; return the pivot index."""
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            boundary += 1
            values[boundary], values[j] = values[j], values[boundary]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[T]) -> list[T]:
    """Quicksort with last-element pivot, driven by an explicit range stack."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(result, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return result


def insertion_sort(items: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(items: Iterable[T]) -> list[T]:
    """Sort by repeatedly selecting the smallest remaining element."""
    result = list(items)
    for start in range(len(result) - 1):
        smallest = min(range(start, len(result)), key=result.__getitem__)
        if smallest != start:
            result[start], result[smallest] = result[smallest], result[start]
    return result