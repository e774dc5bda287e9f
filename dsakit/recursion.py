"""Recursion classics: factorials, Fibonacci, subsets and permutations."""

import math
from itertools import pairwise


def countdown(n):
    """Return the numbers from ``n`` down to 1. Raises ValueError if ``n`` < 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return list(range(n, 0, -1))


def factorial(n):
    """Return ``n!``. Raises ValueError for negative ``n``."""
    if n < 0:
        raise ValueError("factorial is undefined for negative numbers")
    return math.prod(range(1, n + 1))


def sum_to(n):
    """Return 1 + 2 + ... + n. Raises ValueError if ``n`` < 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return n * (n + 1) // 2


def fibonacci(n):
    """Return the ``n``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def is_sorted(values):
    """True if ``values`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(values))


def subsets(nums):
    """Return every subset, each element first included and then excluded."""
    items = list(nums)
    found = []

    def build(index, chosen):
        if index == len(items):
            found.append(list(chosen))
            return
        chosen.append(items[index])
        build(index + 1, chosen)
        chosen.pop()
        build(index + 1, chosen)

    build(0, [])
    return found


def subsets_with_dup(nums):
    """Return every distinct subset of ``nums``, which may hold repeated values."""
    items = sorted(nums)
    found = []

    def build(index, chosen):
        if index == len(items):
            found.append(list(chosen))
            return
        chosen.append(items[index])
        build(index + 1, chosen)
        chosen.pop()
        skip = index + 1
        while skip < len(items) and items[skip] == items[skip - 1]:
            skip += 1
        build(skip, chosen)

    build(0, [])
    return found


def permutations(nums):
    """Return all orderings of ``nums``, generated by swapping each choice into place."""
    items = list(nums)
    found = []

    def build(index):
        if index == len(items):
            found.append(list(items))
            return
        for i in range(index, len(items)):
            items[index], items[i] = items[i], items[index]
            build(index + 1)
            items[index], items[i] = items[i], items[index]

    build(0)
    return found