"""Linear and binary search, plus problems solved by binary search on the answer."""

from collections.abc import Callable, Sequence

NOT_FOUND = -1


def linear_search(values, target):
    """Return the index of the first element equal to ``target``, or -1."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return NOT_FOUND


def binary_search(values, target):
    """Iteratively search an ascending sequence; return an index of ``target`` or -1."""
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if target > values[mid]:
            lo = mid + 1
        elif target < values[mid]:
            hi = mid - 1
        else:
            return mid
    return NOT_FOUND


def binary_search_recursive(values, target):
    """Recursively search an ascending sequence; return an index of ``target`` or -1."""

    def search(lo, hi):
        if lo > hi:
            return NOT_FOUND
        mid = lo + (hi - lo) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            return search(mid + 1, hi)
        return search(lo, mid - 1)

    return search(0, len(values) - 1)


def search_rotated(nums, target):
    """Find ``target`` in an ascending sequence of distinct values rotated at some pivot."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if nums[lo] <= target <= nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] <= target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return NOT_FOUND


def peak_index_linear(arr):
    """Return the first index strictly greater than both neighbours, or -1."""
    triples = zip(arr, arr[1:], arr[2:])
    for index, (before, here, after) in enumerate(triples, start=1):
        if before < here > after:
            return index
    return NOT_FOUND


def peak_index_binary(arr):
    """Return the peak index of a mountain array in logarithmic time, or -1."""
    lo, hi = 1, len(arr) - 2
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if arr[mid - 1] < arr[mid] > arr[mid + 1]:
            return mid
        if arr[mid - 1] < arr[mid]:
            lo = mid + 1
        else:
            hi = mid - 1
    return NOT_FOUND


def single_non_duplicate_linear(nums):
    """Return the element that differs from both neighbours in a sorted sequence.

    Raises ValueError if there is no such element.
    """
    last = len(nums) - 1
    for index, value in enumerate(nums):
        left_differs = index == 0 or nums[index - 1] != value
        right_differs = index == last or nums[index + 1] != value
        if left_differs and right_differs:
            return value
    raise ValueError("no element appears exactly once")


def single_non_duplicate_binary(nums):
    """Find the one unpaired element of a sorted sequence of pairs by bisection.

    Raises ValueError if the search finds no such element.
    """
    n = len(nums)
    if n == 1:
        return nums[0]
    lo, hi = 0, n - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        value = nums[mid]
        left = nums[mid - 1] if mid > 0 else None
        right = nums[mid + 1] if mid < n - 1 else None
        if left != value and right != value:
            return value
        if mid % 2 == 0:
            if left == value:
                hi = mid - 1
            else:
                lo = mid + 1
        elif left == value:
            lo = mid + 1
        else:
            hi = mid - 1
    raise ValueError("no element appears exactly once")


def _fits(weights: Sequence[int], groups: int, limit: int) -> bool:
    """Can ``weights`` be cut into at most ``groups`` contiguous runs, each <= ``limit``?"""
    used, load = 1, 0
    for weight in weights:
        if weight > limit:
            return False
        if load + weight <= limit:
            load += weight
        else:
            used += 1
            load = weight
    return used <= groups


def _lowest_passing(lo: int, hi: int, accepts: Callable[[int], bool]):
    answer = None
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if accepts(mid):
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer


def _highest_passing(lo: int, hi: int, accepts: Callable[[int], bool]):
    answer = None
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if accepts(mid):
            answer = mid
            lo = mid + 1
        else:
            hi = mid - 1
    return answer


def allocate_books(pages, students):
    """Smallest possible maximum of pages given to one student.

    Books are handed out in order, each student receiving a contiguous run.
    Raises ValueError if there are fewer books than students or no students.
    """
    if students < 1:
        raise ValueError("there must be at least one student")
    if students > len(pages):
        raise ValueError("more students than books")
    return _lowest_passing(0, sum(pages), lambda limit: _fits(pages, students, limit))


def min_time_to_paint(boards, painters):
    """Least time in which ``painters`` can paint ``boards`` in contiguous runs."""
    if painters < 1:
        raise ValueError("there must be at least one painter")
    if not boards:
        raise ValueError("there must be at least one board")
    return _lowest_passing(
        max(boards), sum(boards), lambda limit: _fits(boards, painters, limit)
    )


def _can_place(positions: Sequence[int], cows: int, gap: int) -> bool:
    placed, last = 1, positions[0]
    for position in positions[1:]:
        if position - last >= gap:
            placed += 1
            last = position
            if placed >= cows:
                return True
    return False


def largest_min_distance(stalls, cows):
    """Largest minimum gap achievable when placing ``cows`` in the given stalls."""
    if cows < 2:
        raise ValueError("at least two cows are needed to define a distance")
    if cows > len(stalls):
        raise ValueError("more cows than stalls")
    positions = sorted(stalls)
    answer = _highest_passing(
        1, positions[-1] - positions[0], lambda gap: _can_place(positions, cows, gap)
    )
    if answer is None:
        raise ValueError("cows cannot be placed at distinct distances")
    return answer