"""Singly linked list nodes, a list wrapper and node-level list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: Any = 0
    next: Optional["ListNode"] = None


class LinkedList:
    """A singly linked list that tracks its length."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._length = 0
        for value in values:
            self.insert_back(value)

    @property
    def head(self) -> Optional[ListNode]:
        return self._head

    def insert_front(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        self._head = ListNode(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._length += 1

    def insert_back(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        node = ListNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.val
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a chain of nodes from ``values`` and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[Any]:
    """Return the values of the chain starting at ``head``."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink consecutive nodes with equal values, keeping the first of each run."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next