"""Array algorithms: running sums, subarray sums and two-pointer problems."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import accumulate
from operator import xor
from typing import Any


def _non_empty(values: Iterable[Any], what: str) -> list[Any]:
    items = list(values)
    if not items:
        raise ValueError(f"{what} needs at least one element")
    return items


def total(values: Iterable[int]) -> int:
    """Return the sum of all values."""
    return sum(values)


def prefix_sums(values: Iterable[int]) -> list[int]:
    """Return running totals: element ``i`` is the sum of ``values[0..i]``."""
    return list(accumulate(values))


def range_sum(prefix: Sequence[int], left: int, right: int) -> int:
    """Return the sum of the original ``values[left..right]`` from its prefix sums."""
    if not 0 <= left <= right < len(prefix):
        raise IndexError(f"range [{left}, {right}] is out of bounds")
    if left == 0:
        return prefix[right]
    return prefix[right] - prefix[left - 1]


def suffix_sums(values: Iterable[int]) -> list[int]:
    """Return totals from the end: element ``i`` is the sum of ``values[i..]``."""
    items = list(values)
    return list(accumulate(reversed(items)))[::-1]


def largest(values: Iterable[Any]) -> Any:
    """Return the largest value."""
    return max(_non_empty(values, "largest"))


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray (Kadane)."""
    items = _non_empty(values, "max_subarray_sum")
    current = best = items[0]
    for value in items[1:]:
        current = max(value, value + current)
        best = max(best, current)
    return best


def max_subarray(values: Iterable[int]) -> tuple[int, list[int]]:
    """Return the largest contiguous subarray sum and the earliest subarray reaching it."""
    items = list(values)
    if not items:
        raise ValueError("There is no element in array.")
    current = best = items[0]
    start = 0
    best_start = best_end = 0
    for index, value in enumerate(items[1:], start=1):
        if value > current + value:
            current = value
            start = index
        else:
            current += value
        if current > best:
            best = current
            best_start, best_end = start, index
    return best, items[best_start : best_end + 1]


def min_subarray_sum(values: Iterable[int]) -> int:
    """Return the smallest sum of a non-empty contiguous subarray."""
    items = _non_empty(values, "min_subarray_sum")
    current = lowest = items[0]
    for value in items[1:]:
        current = min(value, value + current)
        lowest = min(lowest, current)
    return lowest


def next_greater_elements(queries: Iterable[Any], values: Iterable[Any]) -> list[Any]:
    """For each query, return the first greater value to its right in ``values``, or -1."""
    next_greater: dict[Any, Any] = {}
    pending: list[Any] = []
    for value in values:
        while pending and pending[-1] < value:
            next_greater[pending.pop()] = value
        pending.append(value)
    return [next_greater.get(query, -1) for query in queries]


def single_number(values: Iterable[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, values, 0)


def kids_with_candies(candies: Iterable[int], extra: int) -> list[bool]:
    """Tell for each kid whether ``extra`` candies would give them the most."""
    counts = list(candies)
    most = max(counts, default=0)
    most = max(most, 0)
    return [count + extra >= most for count in counts]


def can_place_flowers(flowerbed: Iterable[int], n: int) -> bool:
    """Return True if ``n`` flowers fit without any two being adjacent.

    The given flowerbed is not modified.
    """
    if n == 0:
        return True
    bed = list(flowerbed)
    placed = 0
    last = len(bed) - 1
    for index, plot in enumerate(bed):
        if plot != 0:
            continue
        left_empty = index == 0 or bed[index - 1] == 0
        right_empty = index == last or bed[index + 1] == 0
        if left_empty and right_empty:
            bed[index] = 1
            placed += 1
            if placed >= n:
                return True
    return False


def product_except_self(values: Iterable[int]) -> list[int]:
    """Return, for each position, the product of all other values."""
    items = list(values)
    before = [1, *accumulate(items[:-1], math.prod.__call__ and (lambda a, b: a * b))] if items else []
    after = list(accumulate(reversed(items[1:]), lambda a, b: a * b))[::-1] + [1] if items else []
    return [left * right for left, right in zip(before, after)]


def increasing_triplet(values: Iterable[int]) -> bool:
    """Return True if some ``i < j < k`` has ``values[i] < values[j] < values[k]``."""
    first = second = math.inf
    for value in values:
        if value <= first:
            first = value
        elif value <= second:
            second = value
        else:
            return True
    return False


def move_zeroes(values: Iterable[int]) -> list[int]:
    """Return the values with every zero moved to the end, others kept in order."""
    items = list(values)
    kept = [value for value in items if value != 0]
    return kept + [0] * (len(items) - len(kept))


def max_area(heights: Sequence[int]) -> int:
    """Return the most water held between two lines of the given heights."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def max_operations(values: Iterable[int], k: int) -> int:
    """Return how many disjoint pairs summing to ``k`` can be removed."""
    unmatched: Counter[int] = Counter()
    pairs = 0
    for value in values:
        partner = k - value
        if unmatched[partner] > 0:
            unmatched[partner] -= 1
            pairs += 1
        else:
            unmatched[value] += 1
    return pairs