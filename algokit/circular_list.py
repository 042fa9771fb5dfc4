"""A singly linked circular list with sorted insertion and halving."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class CircularList:
    """Circular singly linked list whose last node points back to the head."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self.head: _Node | None = None
        if iterable is None:
            return
        tail: _Node | None = None
        for value in iterable:
            node = _Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node
        if tail is not None:
            tail.next = self.head

    @classmethod
    def _from_head(cls, head: _Node | None) -> CircularList:
        result = cls()
        result.head = head
        return result

    def _nodes(self) -> Iterator[_Node]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node
            node = node.next
            if node is self.head:
                return

    def _last(self) -> _Node:
        node = self.head
        while node.next is not self.head:
            node = node.next
        return node

    def push(self, value: Any) -> None:
        """Insert ``value`` at the front of the list."""
        node = _Node(value)
        if self.head is None:
            node.next = node
        else:
            node.next = self.head
            self._last().next = node
        self.head = node

    def sorted_insert(self, value: Any) -> None:
        """Insert ``value`` so that an ascending list stays ascending."""
        node = _Node(value)
        if self.head is None:
            node.next = node
            self.head = node
        elif self.head.data >= value:
            self._last().next = node
            node.next = self.head
            self.head = node
        else:
            current = self.head
            while current.next is not self.head and current.next.data < value:
                current = current.next
            node.next = current.next
            current.next = node

    def split(self) -> tuple[CircularList, CircularList]:
        """Split into two circular halves; an odd extra node goes to the first.

        The nodes are moved into the halves, so this list is left empty.
        """
        head = self.head
        self.head = None
        if head is None:
            return CircularList(), CircularList()
        slow = head
        fast = head
        while fast.next is not head and fast.next.next is not head:
            fast = fast.next.next
            slow = slow.next
        if fast.next.next is head:
            fast = fast.next
        second_head = slow.next if head.next is not head else None
        fast.next = slow.next
        slow.next = head
        return CircularList._from_head(head), CircularList._from_head(second_head)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"