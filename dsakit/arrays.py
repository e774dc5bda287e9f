"""Classic array problems: prefix products, subarray sums, two pointers and voting."""

import math
import operator
from functools import reduce
from itertools import accumulate


def product_except_self(nums):
    """Return a list whose i-th entry is the product of every element except ``nums[i]``.

    Uses a prefix pass followed by a running suffix product, without division.
    """
    nums = list(nums)
    if not nums:
        return []
    answer = list(accumulate(nums[:-1], operator.mul, initial=1))
    suffix = 1
    for j in range(len(nums) - 2, -1, -1):
        suffix *= nums[j + 1]
        answer[j] *= suffix
    return answer


def xor_all(values):
    """Return the bitwise XOR of all values (0 for an empty input)."""
    return reduce(operator.xor, values, 0)


def single_number(nums):
    """Return the element that appears once when every other element appears twice."""
    return xor_all(nums)


def subarrays(values):
    """Yield every contiguous, non-empty subarray, ordered by start then by end."""
    items = list(values)
    for start in range(len(items)):
        for end in range(start + 1, len(items) + 1):
            yield items[start:end]


def max_subarray_sum_brute(nums):
    """Largest sum of a non-empty contiguous subarray, checking every start point.

    Raises ValueError for an empty input.
    """
    items = list(nums)
    if not items:
        raise ValueError("max_subarray_sum_brute() arg is an empty sequence")
    return max(
        max(accumulate(items[start:])) for start in range(len(items))
    )


def max_subarray_sum(nums):
    """Largest sum of a non-empty contiguous subarray using Kadane's algorithm.

    Raises ValueError for an empty input.
    """
    best = None
    current = 0
    for value in nums:
        current += value
        if best is None or current > best:
            best = current
        if current < 0:
            current = 0
    if best is None:
        raise ValueError("max_subarray_sum() arg is an empty sequence")
    return best


def pair_sum(nums, target):
    """Find indices ``(i, j)``, ``i < j``, of an ascending sequence summing to ``target``.

    Returns None when no such pair exists.
    """
    i, j = 0, len(nums) - 1
    while i < j:
        total = nums[i] + nums[j]
        if total > target:
            j -= 1
        elif total < target:
            i += 1
        else:
            return i, j
    return None


def majority_element(nums):
    """Return the element occurring more than ``len(nums) // 2`` times, or None.

    Uses Moore's voting to pick a candidate, then verifies it by counting.
    """
    items = list(nums)
    candidate = None
    votes = 0
    for value in items:
        if votes == 0:
            candidate = value
        votes += 1 if value == candidate else -1
    if items and items.count(candidate) > len(items) // 2:
        return candidate
    return None


def max_area(heights):
    """Most water held between two lines, closing in from both ends."""
    best = 0
    left, right = 0, len(heights) - 1
    while left < right:
        best = max(best, min(heights[left], heights[right]) * (right - left))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def max_profit(prices):
    """Best profit from one buy followed by one later sell (0 if none is profitable).

    Raises ValueError for an empty price list.
    """
    iterator = iter(prices)
    try:
        best_buy = next(iterator)
    except StopIteration:
        raise ValueError("max_profit() needs at least one price") from None
    best = 0
    for price in iterator:
        if price > best_buy:
            best = max(best, price - best_buy)
        best_buy = min(best_buy, price)
    return best


def reverse_array(values):
    """Return the elements of ``values`` as a new list in reverse order."""
    items = list(values)
    start, end = 0, len(items) - 1
    while start < end:
        items[start], items[end] = items[end], items[start]
        start += 1
        end -= 1
    return items


def sum_and_product(values):
    """Return ``(sum, product)`` of the values; an empty input gives ``(0, 1)``."""
    items = list(values)
    return sum(items), math.prod(items)


def min_and_max(values):
    """Return ``(smallest, largest)``. Raises ValueError for an empty input."""
    items = list(values)
    if not items:
        raise ValueError("min_and_max() arg is an empty sequence")
    return min(items), max(items)


def intersection(first, second):
    """Elements of ``first`` matched in ``second``, once per matching pair, in ``first`` order."""
    others = list(second)
    return [a for a in first for b in others if a == b]


def doubled(values):
    """Return a new list with every value multiplied by two."""
    return [2 * value for value in values]