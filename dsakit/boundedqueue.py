"""A fixed-capacity FIFO queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class QueueFullError(OverflowError):
    """Raised when enqueuing into a queue that has reached its capacity."""


class QueueEmptyError(IndexError):
    """Raised when reading from or dequeuing an empty queue."""


class CircularQueue(Generic[T]):
    """A first-in, first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: deque[T] = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear of the queue."""
        if self.is_full():
            raise QueueFullError("Queue Overflow")
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if not self._items:
            raise QueueEmptyError("Queue Underflow")
        return self._items.popleft()

    def front(self) -> T:
        """Return the item at the front without removing it."""
        if not self._items:
            raise QueueEmptyError("Queue Empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Yield items from the front of the queue to the rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"CircularQueue({list(self._items)!r}, capacity={self._capacity})"