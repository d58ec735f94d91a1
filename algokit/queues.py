"""A singly linked FIFO queue."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["LinkedQueue", "Show"]


class Show(enum.IntFlag):
    """What :meth:`LinkedQueue.format` includes."""

    DATA = 1
    LENGTH = 2
    BOTH = 3


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedQueue:
    """First-in, first-out queue built from linked nodes."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._front: _Node | None = None
        self._rear: _Node | None = None
        self._length = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._length += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise IndexError("dequeue from an empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._length -= 1
        return node.value

    def format(self, show: Show | int = Show.BOTH) -> str:
        """Render the elements as ``a --> b --> NULL`` and/or the length."""
        flags = Show(show)
        parts = []
        if Show.DATA in flags:
            parts.append("".join(f"{value} --> " for value in self) + "NULL\n")
        if Show.LENGTH in flags:
            parts.append(f"Length : {len(self)}\n")
        return "".join(parts)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"