"""Stacks: bounded array stack, linked stack, middle-tracking stack and two stacks in one array."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


class ArrayStack:
    """Stack backed by a list that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def push(self, item: Any) -> bool:
        """Push ``item``; return False and leave the stack unchanged when it is full."""
        if self.is_full():
            return False
        self._items.append(item)
        return True

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self.is_empty():
            raise IndexError("peek at empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self.capacity})"


@dataclass(eq=False)
class _StackNode:
    data: Any
    next: _StackNode | None = None


class LinkedStack:
    """Unbounded stack built from linked nodes; iteration runs from the top down."""

    def __init__(self) -> None:
        self._top: _StackNode | None = None
        self._count = 0

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, item: Any) -> None:
        """Push ``item`` on top."""
        self._top = _StackNode(item, self._top)
        self._count += 1

    def pop(self) -> Any:
        """Remove and return the top item."""
        if self._top is None:
            raise IndexError("pop from empty stack")
        node = self._top
        self._top = node.next
        self._count -= 1
        return node.data

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if self._top is None:
            raise IndexError("peek at empty stack")
        return self._top.data

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


@dataclass(eq=False)
class _DoubleNode:
    data: Any
    next: _DoubleNode | None = None
    prev: _DoubleNode | None = None


class MiddleStack:
    """Stack over a doubly linked list that finds its middle item in constant time."""

    def __init__(self) -> None:
        self._head: _DoubleNode | None = None
        self._mid: _DoubleNode | None = None
        self._count = 0

    def push(self, item: Any) -> None:
        """Push ``item`` on top, moving the middle up when the count becomes odd."""
        node = _DoubleNode(item, next=self._head)
        self._count += 1
        if self._count == 1:
            self._mid = node
        else:
            self._head.prev = node
            if self._count & 1:
                self._mid = self._mid.prev
        self._head = node

    def pop(self) -> Any:
        """Remove and return the top item, moving the middle down when the count becomes even."""
        if self._head is None:
            raise IndexError("pop from empty stack")
        node = self._head
        self._head = node.next
        if self._head is not None:
            self._head.prev = None
        self._count -= 1
        if not self._count & 1:
            self._mid = self._mid.next
        return node.data

    def middle(self) -> Any:
        """Return the middle item."""
        if self._mid is None:
            raise IndexError("middle of empty stack")
        return self._mid.data

    def __len__(self) -> int:
        return self._count


class TwoStacks:
    """Two stacks sharing one array of ``size`` slots.

    The first stack grows downwards from the middle into the lower half,
    the second grows upwards into the upper half.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._array: list[Any] = [None] * size
        self._top1 = size // 2 + 1
        self._top2 = size // 2

    def push1(self, item: Any) -> None:
        """Push ``item`` onto the first stack."""
        if self._top1 <= 0:
            raise OverflowError(f"stack overflow by element {item!r}")
        self._top1 -= 1
        self._array[self._top1] = item

    def push2(self, item: Any) -> None:
        """Push ``item`` onto the second stack."""
        if self._top2 >= self.size - 1:
            raise OverflowError(f"stack overflow by element {item!r}")
        self._top2 += 1
        self._array[self._top2] = item

    def pop1(self) -> Any:
        """Remove and return the top of the first stack."""
        if self._top1 > self.size // 2:
            raise IndexError("stack underflow")
        item = self._array[self._top1]
        self._top1 += 1
        return item

    def pop2(self) -> Any:
        """Remove and return the top of the second stack."""
        if self._top2 < self.size // 2 + 1:
            raise IndexError("stack underflow")
        item = self._array[self._top2]
        self._top2 -= 1
        return item


def _insert_at_bottom(stack: LinkedStack, item: Any) -> None:
    if stack.is_empty():
        stack.push(item)
        return
    held = stack.pop()
    _insert_at_bottom(stack, item)
    stack.push(held)


def reverse_stack(stack: LinkedStack) -> None:
    """Reverse ``stack`` in place using only push and pop, by recursion."""
    if stack.is_empty():
        return
    held = stack.pop()
    reverse_stack(stack)
    _insert_at_bottom(stack, held)


def _sorted_insert(stack: LinkedStack, item: Any) -> None:
    if stack.is_empty() or item > stack.peek():
        stack.push(item)
        return
    held = stack.pop()
    _sorted_insert(stack, item)
    stack.push(held)


def sort_stack(stack: LinkedStack) -> None:
    """Sort ``stack`` in place by recursion so that the largest item ends on top."""
    if stack.is_empty():
        return
    held = stack.pop()
    sort_stack(stack)
    _sorted_insert(stack, held)


def reverse_string(text: str) -> str:
    """Return ``text`` reversed by pushing its characters onto a stack and popping them off."""
    stack = ArrayStack(len(text))
    for char in text:
        stack.push(char)
    return "".join(stack.pop() for _ in range(len(text)))