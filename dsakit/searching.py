"""Searching algorithms over sequences.

Every function except ``linear_search`` expects ``nums`` sorted ascending.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, Optional


def linear_search(nums: Sequence[Any], key: Any) -> bool:
    """Return True if ``key`` occurs anywhere in ``nums``."""
    return any(item == key for item in nums)


def _bounds(nums: Sequence[Any], low: int, high: Optional[int]) -> tuple[int, int]:
    return low, len(nums) - 1 if high is None else high


def _binary_index(nums: Sequence[Any], key: Any, low: int, high: int) -> int:
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == key:
            return mid
        if nums[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def binary_search(
    nums: Sequence[Any], key: Any, low: int = 0, high: Optional[int] = None
) -> bool:
    """Return True if ``key`` lies in ``nums[low..high]`` (inclusive).

    ``high`` defaults to the last index.
    """
    low, high = _bounds(nums, low, high)
    return _binary_index(nums, key, low, high) != -1


def exponential_search(nums: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in ``nums``, or -1 if it is absent.

    The search range doubles until it passes ``key``, then a binary search
    runs over the last range.
    """
    size = len(nums)
    if size == 0:
        return -1
    if nums[0] == key:
        return 0
    bound = 1
    while bound < size and nums[bound] <= key:
        bound *= 2
    return _binary_index(nums, key, bound // 2, min(bound, size - 1))


def interpolation_search(nums: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in ``nums``, or -1 if it is absent.

    The probe position is estimated from the values at the range ends,
    which suits uniformly distributed numbers.
    """
    low, high = 0, len(nums) - 1
    while low <= high and nums[low] <= key <= nums[high]:
        if nums[high] == nums[low]:
            return low if nums[low] == key else -1
        pos = int(
            low + (high - low) / (nums[high] - nums[low]) * (key - nums[low])
        )
        if nums[pos] == key:
            return pos
        if nums[pos] < key:
            low = pos + 1
        else:
            high = pos - 1
    return -1


def jump_search(nums: Sequence[Any], key: Any) -> bool:
    """Return True if ``key`` occurs in ``nums``.

    The list is walked in blocks of ``sqrt(len(nums))`` until a block may
    hold ``key``; that block is then scanned element by element.
    """
    size = len(nums)
    if size == 0:
        return False
    step = math.isqrt(size)
    current = previous = 0
    while current < size and nums[current] < key:
        previous = current
        current += step
    stop = min(current, size - 1)
    return any(item == key for item in nums[previous : stop + 1])


def ternary_search(
    nums: Sequence[Any], key: Any, low: int = 0, high: Optional[int] = None
) -> bool:
    """Return True if ``key`` lies in ``nums[low..high]`` (inclusive).

    Each step splits the range into thirds with two probe points.
    """
    low, high = _bounds(nums, low, high)
    while low <= high:
        third = (high - low) // 3
        left_mid = low + third
        right_mid = high - third
        if nums[left_mid] == key or nums[right_mid] == key:
            return True
        if key < nums[left_mid]:
            high = left_mid - 1
        elif key > nums[right_mid]:
            low = right_mid + 1
        else:
            low = left_mid + 1
            high = right_mid - 1
    return False