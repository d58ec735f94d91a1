from hypothesis import given
from hypothesis import strategies as st

from algokit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SOURCE_SAMPLE = [3, 5, 1, 7, 10, 4, 9, 6, 8, 2]


def test_sorts_source_sample():
    expected = list(range(1, 11))
    assert bubble_sort(SOURCE_SAMPLE) == expected
    assert heap_sort(SOURCE_SAMPLE) == expected
    assert merge_sort(SOURCE_SAMPLE) == expected
    assert quick_sort(SOURCE_SAMPLE) == expected
    assert insertion_sort(SOURCE_SAMPLE) == expected
    assert selection_sort(SOURCE_SAMPLE) == expected


def test_empty_input():
    assert bubble_sort([]) == []
    assert heap_sort([]) == []
    assert merge_sort([]) == []
    assert quick_sort([]) == []
    assert insertion_sort([]) == []
    assert selection_sort([]) == []


def test_single_element():
    assert bubble_sort([42]) == [42]
    assert heap_sort([42]) == [42]
    assert merge_sort([42]) == [42]
    assert quick_sort([42]) == [42]
    assert insertion_sort([42]) == [42]
    assert selection_sort([42]) == [42]


def test_input_is_not_modified():
    data = [5, 3, 9, 1]
    assert bubble_sort(data) == [1, 3, 5, 9]
    assert heap_sort(data) == [1, 3, 5, 9]
    assert merge_sort(data) == [1, 3, 5, 9]
    assert quick_sort(data) == [1, 3, 5, 9]
    assert insertion_sort(data) == [1, 3, 5, 9]
    assert selection_sort(data) == [1, 3, 5, 9]
    assert data == [5, 3, 9, 1]


def test_accepts_generators():
    assert bubble_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert heap_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert merge_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert quick_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert insertion_sort(x for x in (3, 1, 2)) == [1, 2, 3]
    assert selection_sort(x for x in (3, 1, 2)) == [1, 2, 3]


def test_large_values_and_negatives():
    data = [100000, -5, 99999, 0, -100000, 250000]
    expected = [-100000, -5, 0, 99999, 100000, 250000]
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


def test_already_sorted_long_input():
    long_data = list(range(1500))
    short_data = list(range(200))
    assert bubble_sort(short_data) == short_data
    assert heap_sort(long_data) == long_data
    assert merge_sort(long_data) == long_data
    assert quick_sort(long_data) == long_data
    assert insertion_sort(long_data) == long_data
    assert selection_sort(long_data) == long_data


def test_reverse_sorted_input():
    data = list(range(120, 0, -1))
    expected = list(range(1, 121))
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


def test_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert heap_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert insertion_sort(words) == expected
    assert selection_sort(words) == expected


@given(data=st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_matches_builtin_sorted(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


@given(data=st.lists(st.tuples(st.integers(0, 5), st.integers()), max_size=40))
def test_merge_sort_is_stable(data):
    keyed = [_Keyed(key, tag) for key, tag in data]
    result = merge_sort(keyed)
    assert [(k.key, k.tag) for k in result] == sorted(data, key=lambda pair: pair[0])


class _Keyed:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __lt__(self, other):
        return self.key < other.key

    def __le__(self, other):
        return self.key <= other.key

    def __gt__(self, other):
        return self.key > other.key