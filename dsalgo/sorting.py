"""Insertion, quick and selection sort, each returning a new sorted list."""

from __future__ import annotations


def insertion_sort(items) -> list:
    """Return the elements of ``items`` in ascending order.

    Each element is moved left past every larger element before it.
    """
    data = list(items)
    for i in range(1, len(data)):
        current = data[i]
        j = i - 1
        while j >= 0 and current < data[j]:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = current
    return data


def quick_sort(items) -> list:
    """Return the elements of ``items`` in ascending order.

    Ranges are partitioned around their middle element, closing in from
    both ends and swapping out-of-place pairs.
    """
    data = list(items)
    ranges = [(0, len(data) - 1)]
    while ranges:
        left, right = ranges.pop()
        if left >= right:
            continue
        low, high = left, right
        pivot = data[(left + right) // 2]
        while low <= high:
            while data[low] < pivot:
                low += 1
            while data[high] > pivot:
                high -= 1
            if low <= high:
                data[low], data[high] = data[high], data[low]
                low += 1
                high -= 1
        ranges.append((low, right))
        ranges.append((left, high))
    return data


def selection_sort(items) -> list:
    """Return the elements of ``items`` in ascending order.

    For each position the smallest remaining element is found and swapped
    into place, at most one swap per position.
    """
    data = list(items)
    for i in range(len(data) - 1):
        smallest = min(range(i, len(data)), key=data.__getitem__)
        if smallest != i:
            data[i], data[smallest] = data[smallest], data[i]
    return data