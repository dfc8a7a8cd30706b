"""A singly linked list of values with head and tail deletion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass
class _Node:
    data: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list keeping references to both ends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add a value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def delete_head(self) -> Optional[Any]:
        """Remove the first node and return its value; None if the list is empty."""
        if self._head is None:
            return None
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def delete_tail(self) -> Optional[Any]:
        """Remove the last node and return its value; None if the list is empty."""
        if self._head is None:
            return None
        if self._head is self._tail:
            return self.delete_head()
        node = self._head
        while node.next is not self._tail:
            node = node.next
        removed = self._tail
        node.next = None
        self._tail = node
        self._size -= 1
        return removed.data

    def delete_at(self, k: int) -> Optional[Any]:
        """Remove the k-th node (1-based) and return its value.

        Positions outside the list leave it unchanged and return None.
        """
        if k < 1 or k > self._size:
            return None
        if k == 1:
            return self.delete_head()
        prev = self._head
        for _ in range(k - 2):
            prev = prev.next
        removed = prev.next
        prev.next = removed.next
        if removed is self._tail:
            self._tail = prev
        self._size -= 1
        return removed.data

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"