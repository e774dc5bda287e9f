import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    insertion_sort,
    merge_sort,
    merge_sorted,
    selection_sort,
)

SOURCE_INPUTS = [
    [6, 9, 1, 3, 5, 2, 3],
    [29, 72, 98, 13, 87, 66, 52, 51, 36],
    [4, 1, 5, 2, 3],
    [5, 2, 4, 7, 1, 3, 2, 6],
]


@pytest.mark.parametrize("values", SOURCE_INPUTS)
def test_sorts_source_inputs(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert selection_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected


def test_source_outputs_pinned():
    assert bubble_sort([6, 9, 1, 3, 5, 2, 3]) == [1, 2, 3, 3, 5, 6, 9]
    assert selection_sort([29, 72, 98, 13, 87, 66, 52, 51, 36]) == [
        13, 29, 36, 51, 52, 66, 72, 87, 98,
    ]
    assert insertion_sort([4, 1, 5, 2, 3]) == [1, 2, 3, 4, 5]
    assert merge_sort([5, 2, 4, 7, 1, 3, 2, 6]) == [1, 2, 2, 3, 4, 5, 6, 7]


@pytest.mark.parametrize("values", SOURCE_INPUTS)
def test_sorts_descending(values):
    expected = sorted(values, reverse=True)
    assert bubble_sort(values, reverse=True) == expected
    assert selection_sort(values, reverse=True) == expected
    assert insertion_sort(values, reverse=True) == expected


def test_sorts_random():
    rng = random.Random(11)
    for size in range(0, 40, 3):
        values = [rng.randint(-50, 50) for _ in range(size)]
        expected = sorted(values)
        assert bubble_sort(values) == expected
        assert selection_sort(values) == expected
        assert insertion_sort(values) == expected
        assert merge_sort(values) == expected


def test_sorts_do_not_mutate_input():
    values = [3, 1, 2]
    assert bubble_sort(values) == [1, 2, 3]
    assert selection_sort(values) == [1, 2, 3]
    assert insertion_sort(values) == [1, 2, 3]
    assert merge_sort(values) == [1, 2, 3]
    assert values == [3, 1, 2]


def test_sorts_edge_cases():
    for sort_result in (bubble_sort([]), selection_sort([]), insertion_sort([]), merge_sort([])):
        assert sort_result == []
    for sort_result in (bubble_sort([7]), selection_sort([7]), insertion_sort([7]), merge_sort([7])):
        assert sort_result == [7]
    assert bubble_sort((2, 1)) == [1, 2]
    assert selection_sort((2, 1)) == [1, 2]
    assert insertion_sort((2, 1)) == [1, 2]
    assert merge_sort((2, 1)) == [1, 2]


def test_sorts_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = sorted(words)
    assert bubble_sort(words) == expected
    assert selection_sort(words) == expected
    assert insertion_sort(words) == expected
    assert merge_sort(words) == expected


def test_already_sorted_is_unchanged():
    values = list(range(10))
    assert bubble_sort(values) == values
    assert selection_sort(values) == values
    assert insertion_sort(values) == values
    assert bubble_sort(values, reverse=True) == values[::-1]
    assert selection_sort(values, reverse=True) == values[::-1]
    assert insertion_sort(values, reverse=True) == values[::-1]


def test_merge_sorted_interleaves():
    left, right = [1, 3, 5, 9], [2, 3, 4, 10, 11]
    assert merge_sorted(left, right) == [1, 2, 3, 3, 4, 5, 9, 10, 11]


def test_merge_sorted_with_empty_side():
    assert merge_sorted([], [1, 2]) == [1, 2]
    assert merge_sorted([1, 2], []) == [1, 2]
    assert merge_sorted([], []) == []


def test_merge_sorted_prefers_left_on_ties():
    left = [(1.0)]
    right = [1]
    merged = merge_sorted(left, right)
    assert merged == [1, 1]
    assert isinstance(merged[0], float)