"""Sorting algorithms.

Each function takes any iterable and returns a new ascending list,
leaving its input untouched.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order items; stable."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix; stable."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item to the front each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with gapped insertion sorts, halving the gap each round."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            held = items[i]
            j = i
            while j >= gap and items[j - gap] > held:
                items[j] = items[j - gap]
                j -= gap
            items[j] = held
        gap //= 2
    return items


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in ``[0, 1)`` by spreading them over one bucket per item."""
    items = list(values)
    count = len(items)
    buckets: list[list[float]] = [[] for _ in range(count)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(count * value)].append(value)
    return list(chain.from_iterable(sorted(bucket) for bucket in buckets))


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, times in enumerate(counts) for _ in range(times)]


def _sift_down(items: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and repeatedly moving its top to the end."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
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


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves and merging the sorted halves; stable."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def _quick_sort(items: list[Any], low: int, high: int) -> None:
    while low < high:
        pivot = _partition(items, low, high)
        # Recurse into the smaller side to keep the recursion shallow.
        if pivot - low < high - pivot:
            _quick_sort(items, low, pivot - 1)
            low = pivot + 1
        else:
            _quick_sort(items, pivot + 1, high)
            high = pivot - 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the last item of each range."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1)
    return items


def _stable_digit_pass(items: list[int], exp: int) -> list[int]:
    buckets: list[list[int]] = [[] for _ in range(10)]
    for value in items:
        buckets[(value // exp) % 10].append(value)
    return list(chain.from_iterable(buckets))


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers one decimal digit at a time, least first."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("radix sort needs non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        items = _stable_digit_pass(items, exp)
        exp *= 10
    return items


def intro_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with the library's general-purpose sort."""
    return sorted(values)


def tim_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with the library's stable sort."""
    return sorted(values)