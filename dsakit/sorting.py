"""Elementary comparison sorts and merge sort."""

import operator


def _out_of_order(reverse):
    return operator.lt if reverse else operator.gt


def bubble_sort(values, reverse=False):
    """Return a sorted list using bubble sort, stopping early once no swap occurs."""
    items = list(values)
    out_of_order = _out_of_order(reverse)
    for done in range(len(items) - 1):
        swapped = False
        for j in range(len(items) - 1 - done):
            if out_of_order(items[j], items[j + 1]):
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def selection_sort(values, reverse=False):
    """Return a sorted list using selection sort."""
    items = list(values)
    precedes = operator.gt if reverse else operator.lt
    for i in range(len(items)):
        pick = i
        for j in range(i + 1, len(items)):
            if precedes(items[j], items[pick]):
                pick = j
        items[i], items[pick] = items[pick], items[i]
    return items


def insertion_sort(values, reverse=False):
    """Return a sorted list using insertion sort."""
    items = list(values)
    out_of_order = _out_of_order(reverse)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and out_of_order(items[j], current):
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def merge_sorted(left, right):
    """Merge two ascending sequences into one ascending list, left first on ties."""
    merged = []
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


def merge_sort(values):
    """Return an ascending list using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return merge_sorted(merge_sort(items[:mid]), merge_sort(items[mid:]))