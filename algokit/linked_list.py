"""A singly linked list of values with the classic link-rewiring operations."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list whose operations work by relinking nodes, not copying data."""

    def __init__(self, iterable: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        if iterable is None:
            return
        tail: Node | None = None
        for value in iterable:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push(self, value: Any) -> None:
        """Insert ``value`` at the front of the list."""
        self.head = Node(value, self.head)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __contains__(self, value: object) -> bool:
        return any(node.data == value for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def render(self, formatter: Callable[[Any], str] = str) -> str:
        """Format every value with ``formatter`` and join them with spaces."""
        return " ".join(formatter(value) for value in self)

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = prev
            prev = current
            current = following
        self.head = prev

    def reverse_in_groups(self, k: int) -> None:
        """Reverse each run of ``k`` consecutive nodes; a short final run is reversed too."""
        if k < 1:
            raise ValueError("group size must be at least 1")
        new_head: Node | None = None
        previous_tail: Node | None = None
        current = self.head
        while current is not None:
            group_first = current
            prev: Node | None = None
            count = 0
            while current is not None and count < k:
                following = current.next
                current.next = prev
                prev = current
                current = following
                count += 1
            if previous_tail is None:
                new_head = prev
            else:
                previous_tail.next = prev
            previous_tail = group_first
        self.head = new_head

    def rotate(self, k: int) -> None:
        """Rotate counter-clockwise by ``k`` nodes.

        The list is left unchanged when ``k`` is zero or not smaller than its length.
        """
        if k < 0:
            raise ValueError("rotation count must not be negative")
        if k == 0 or self.head is None:
            return
        kth = self.head
        for _ in range(k - 1):
            kth = kth.next
            if kth is None:
                return
        if kth.next is None:
            return
        last = kth
        while last.next is not None:
            last = last.next
        last.next = self.head
        self.head = kth.next
        kth.next = None

    def _find_with_previous(self, value: Any) -> tuple[Node | None, Node | None]:
        prev: Node | None = None
        for node in self._nodes():
            if node.data == value:
                return prev, node
            prev = node
        return None, None

    def swap_nodes(self, x: Any, y: Any) -> None:
        """Swap the first nodes holding ``x`` and ``y`` by changing links.

        Nothing happens when the values are equal or either one is missing.
        """
        if x == y:
            return
        prev_x, node_x = self._find_with_previous(x)
        prev_y, node_y = self._find_with_previous(y)
        if node_x is None or node_y is None:
            return
        if prev_x is not None:
            prev_x.next = node_y
        else:
            self.head = node_y
        if prev_y is not None:
            prev_y.next = node_x
        else:
            self.head = node_x
        node_x.next, node_y.next = node_y.next, node_x.next

    def union(self, other: LinkedList) -> LinkedList:
        """Return a new list with every value of this list and the values of ``other`` not yet present.

        Values are pushed to the front as they are taken, so the result comes out reversed.
        """
        result = LinkedList()
        for value in self:
            result.push(value)
        for value in other:
            if value not in result:
                result.push(value)
        return result

    def intersection(self, other: LinkedList) -> LinkedList:
        """Return a new list with the values of this list that also occur in ``other``.

        Values are pushed to the front as they are taken, so the result comes out reversed.
        """
        result = LinkedList()
        for value in self:
            if value in other:
                result.push(value)
        return result