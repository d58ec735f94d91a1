"""LIFO stacks: an unbounded linked stack and a fixed-capacity stack,
plus an interactive menu driving the latter."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

__all__ = ["LinkedStack", "BoundedStack", "main"]


@dataclass(slots=True)
class _Node:
    value: Any
    below: _Node | None = None


class LinkedStack:
    """Unbounded last-in, first-out stack built from linked nodes."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._top: _Node | None = None
        self._length = 0
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Place ``value`` on top."""
        self._top = _Node(value, self._top)
        self._length += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise IndexError("pop from an empty stack")
        node = self._top
        self._top = node.below
        self._length -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise IndexError("peek at an empty stack")
        return self._top.value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        """Yield values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below


class BoundedStack:
    """Stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, value: Any) -> None:
        """Place ``value`` on top; raises OverflowError when full."""
        if self.is_full:
            raise OverflowError("Stack is overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raises IndexError when empty."""
        if not self._items:
            raise IndexError("Stack is underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value; raises IndexError when empty."""
        if not self._items:
            raise IndexError("Underflow")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield values from top to bottom."""
        return reversed(self._items)


_MENU = "Stack Operations : Push = 1  Pop = 2  Peek = 3  Display = 4  End = 5"


def _run_choice(stack: BoundedStack, choice: str) -> bool:
    """Carry out one menu choice; return False when the session should end."""
    if choice == "1":
        if stack.is_full:
            print("Stack is overflow")
            return True
        try:
            stack.push(int(input("Enter a value to be pushed : ")))
        except ValueError:
            print("Invalid input. Please try again.")
    elif choice == "2":
        try:
            print(f"The popped element is {stack.pop()}")
        except IndexError as exc:
            print(exc)
    elif choice == "3":
        try:
            print(f"The top element is {stack.peek()}")
        except IndexError as exc:
            print(exc)
    elif choice == "4":
        if len(stack):
            print("Stack : " + " ".join(str(value) for value in stack))
        else:
            print("The stack is empty.")
    elif choice == "5":
        return False
    else:
        print("Invalid input. Please try again.")
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive stack menu on stdin; takes no options."""
    try:
        stack = BoundedStack(int(input("Enter the no. of elements in the stack (1 - 100) : ")))
    except EOFError:
        return 1
    except ValueError:
        print("Invalid stack size.")
        return 1
    print()
    while True:
        print(_MENU)
        print()
        try:
            choice = input("Enter your choice = ").strip()
            keep_going = _run_choice(stack, choice)
        except EOFError:
            break
        if not keep_going:
            break
        print()
    print()
    return 0