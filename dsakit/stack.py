"""A fixed-capacity LIFO stack and a bracket-balance checker."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100

_OPENER_FOR = {")": "(", "]": "[", "}": "{"}


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has reached its capacity."""


class StackEmptyError(IndexError):
    """Raised when reading from or popping an empty stack."""


class Stack(Generic[T]):
    """A last-in, first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackFullError("Stack Overflow")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("Stack is Empty")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("Stack is Empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Yield items from the top of the stack down to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r}, capacity={self._capacity})"


def is_valid_parentheses(text: str) -> bool:
    """Return True if every bracket in ``text`` is closed in the right order.

    Each character either closes the bracket on top of the pending stack or
    is pushed onto it, so any character that is not a matching bracket makes
    the text invalid.
    """
    pending: list[str] = []
    for char in text:
        if pending and _OPENER_FOR.get(char) == pending[-1]:
            pending.pop()
        else:
            pending.append(char)
    return not pending