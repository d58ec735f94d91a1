# algokit

A small collection of classic algorithms and data structures in plain Python.
It has no runtime dependencies.

## Installation

```
pip install algokit
```

## What's inside

- `algokit.sorting` provides `bubble_sort`, `heap_sort`, `merge_sort`,
  `quick_sort`, `insertion_sort` and `selection_sort`. Each function takes an
  iterable of comparable values and returns a new list in ascending order. The
  input is not changed.
- `algokit.searching`:
  - `binary_search(items, target)` returns the index of `target` in an
    ascending sequence. It raises `ValueError` when `target` is not present.
  - `sliding_window_max(items, k)` returns the maximum of every contiguous
    window of length `k`. It raises `ValueError` unless `1 <= k <= len(items)`.
- `algokit.sequences`:
  - `reverse(items)` returns a reversed list.
  - `remove_adjacent_duplicates(text)` collapses each run of repeated
    characters to a single character.
  - `is_palindrome(text)` tells whether the text reads the same backwards.
- `algokit.arith`:
  - `binomial(n, k)`, `catalan(n)` and `fibonacci(n)` compute exact integers.
    `fibonacci(0) == 0`.
  - `multiply_matrices(left, right)` multiplies lists of rows. It raises
    `ValueError` for ragged matrices or mismatched inner dimensions.
  - `multiplication_table(number, count)` returns lines such as `"7 * 3 = 21"`.
- `algokit.patterns`:
  - `diamond(rows)` returns a star pattern as one string. The widest line
    appears twice.
  - `hello_world()` returns `"Hello World"`.
- `algokit.calculator`:
  - `calculate(left, operator, right)` handles `+ - * /`. Division by zero
    gives an infinity or NaN. Any other operator raises `ValueError`.
  - `evaluate("3 * 4")` parses a one-operator expression and computes it.
- `algokit.queues.LinkedQueue` is a FIFO queue with these members:
  - `enqueue` and `dequeue`. `dequeue` raises `IndexError` when the queue is
    empty.
  - `len()` and iteration.
  - `format(show)`, which renders `1 --> 2 --> NULL` and/or `Length : 2`. The
    choice is made with the `Show` flag: `DATA`, `LENGTH` or `BOTH`.
- `algokit.stacks` has two stacks:
  - `LinkedStack` is unbounded. It has `push`, `pop`, `peek`, `len()`, and
    iteration from top to bottom.
  - `BoundedStack(capacity)` has the same operations and an `is_full`
    property. Pushing onto a full stack raises `OverflowError`. Popping or
    peeking an empty stack raises `IndexError`.

## Examples

```python
from algokit.sorting import merge_sort
from algokit.searching import binary_search, sliding_window_max
from algokit.arith import catalan
from algokit.stacks import LinkedStack

merge_sort([3, 1, 2])                          # [1, 2, 3]
binary_search([1, 4, 7, 9, 16, 56, 70], 16)    # 4
sliding_window_max([12, 156, 73, 93], 3)       # [156, 156]
[catalan(i) for i in range(5)]                 # [1, 1, 2, 5, 14]

stack = LinkedStack([1, 2, 3])
stack.pop()                                    # 3
list(stack)                                    # [2, 1]
```

## Command-line tools

`algokit-calc` evaluates one arithmetic expression and prints the result with
two decimal places. You can pass the expression as arguments:

```
algokit-calc "7 / 2"
```

If you give no arguments, it asks for the expression on standard input.

`algokit-stack` runs an interactive menu on a bounded stack. The menu offers
push, pop, peek, display and end. The session starts by asking for the stack's
capacity:

```
algokit-stack
```

## What it does not do

The package has no tree or other search structures. It has no persistent
storage. Its containers hold values in memory only.

## Running the tests

```
pip install "algokit[test]"
pytest
```