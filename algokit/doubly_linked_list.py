"""A doubly linked list with in-place quicksort, and an XOR-linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _DoubleNode:
    data: Any
    next: _DoubleNode | None = None
    prev: _DoubleNode | None = None


class DoublyLinkedList:
    """Doubly linked list holding a head reference only."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self.head: _DoubleNode | None = None
        if iterable is not None:
            for value in reversed(list(iterable)):
                self.push(value)

    def _nodes(self) -> Iterator[_DoubleNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _last(self) -> _DoubleNode | None:
        last = None
        for last in self._nodes():
            pass
        return last

    def push(self, value: Any) -> None:
        """Insert ``value`` at the front of the list."""
        node = _DoubleNode(value, next=self.head)
        if self.head is not None:
            self.head.prev = node
        self.head = node

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._last()
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        previous_of_last: _DoubleNode | None = None
        current = self.head
        while current is not None:
            previous_of_last = current.prev
            current.prev, current.next = current.next, current.prev
            current = current.prev
        if previous_of_last is not None:
            self.head = previous_of_last.prev

    @staticmethod
    def _partition(low: _DoubleNode, high: _DoubleNode) -> _DoubleNode:
        pivot = high.data
        i = low.prev
        j = low
        while j is not high:
            if j.data <= pivot:
                i = low if i is None else i.next
                i.data, j.data = j.data, i.data
            j = j.next
        i = low if i is None else i.next
        i.data, high.data = high.data, i.data
        return i

    def quicksort(self) -> None:
        """Sort the values in place, using the last element of each range as pivot."""
        pending = [(self.head, self._last())]
        while pending:
            low, high = pending.pop()
            if high is None or low is high or low is high.next:
                continue
            pivot = self._partition(low, high)
            pending.append((low, pivot.prev))
            pending.append((pivot.next, high))


@dataclass
class _XorNode:
    data: Any
    npx: int = 0


class XorLinkedList:
    """Doubly traversable list where each node stores the XOR of its neighbours' addresses.

    Addresses are positive integers handed out by the list; 0 stands for no node.
    """

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self._memory: dict[int, _XorNode] = {}
        self._next_address = 1
        self._head = 0
        self._tail = 0
        if iterable is not None:
            for value in reversed(list(iterable)):
                self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert ``value`` at the front of the list."""
        address = self._next_address
        self._next_address += 1
        self._memory[address] = _XorNode(value, npx=self._head)
        if self._head:
            head = self._memory[self._head]
            head.npx ^= address
        else:
            self._tail = address
        self._head = address

    def _walk(self, start: int) -> Iterator[Any]:
        prev = 0
        curr = start
        while curr:
            node = self._memory[curr]
            yield node.data
            prev, curr = curr, prev ^ node.npx

    def __iter__(self) -> Iterator[Any]:
        return self._walk(self._head)

    def __reversed__(self) -> Iterator[Any]:
        return self._walk(self._tail)

    def __len__(self) -> int:
        return len(self._memory)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"