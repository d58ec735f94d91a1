"""Classic sorting, searching, arithmetic, stack and queue algorithms."""

__version__ = "0.1.0"

__all__ = [
    "arith",
    "calculator",
    "patterns",
    "queues",
    "searching",
    "sequences",
    "sorting",
    "stacks",
]