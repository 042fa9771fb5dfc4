"""Queues: a bounded circular array queue, a linked queue and a queue made of two stacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from algokit.stacks import LinkedStack


class ArrayQueue:
    """Circular buffer queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._array: list[Any] = [None] * capacity
        self._front = 0
        self._rear = capacity - 1
        self._size = 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def enqueue(self, item: Any) -> bool:
        """Add ``item`` at the rear; return False and change nothing when the queue is full."""
        if self.is_full():
            return False
        self._rear = (self._rear + 1) % self.capacity
        self._array[self._rear] = item
        self._size += 1
        return True

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self.is_empty():
            raise IndexError("dequeue from empty queue")
        item = self._array[self._front]
        self._array[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return item

    def front(self) -> Any:
        """Return the front item without removing it."""
        if self.is_empty():
            raise IndexError("front of empty queue")
        return self._array[self._front]

    def rear(self) -> Any:
        """Return the rear item without removing it."""
        if self.is_empty():
            raise IndexError("rear of empty queue")
        return self._array[self._rear]

    def __len__(self) -> int:
        return self._size


@dataclass(eq=False)
class _QueueNode:
    key: Any
    next: _QueueNode | None = None


class LinkedQueue:
    """Unbounded queue built from linked nodes with front and rear references."""

    def __init__(self) -> None:
        self._front: _QueueNode | None = None
        self._rear: _QueueNode | None = None
        self._count = 0

    def is_empty(self) -> bool:
        return self._front is None

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        node = _QueueNode(item)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self._front is None:
            raise IndexError("dequeue from empty queue")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._count -= 1
        return node.key

    def front(self) -> Any:
        """Return the front item without removing it."""
        if self._front is None:
            raise IndexError("front of empty queue")
        return self._front.key

    def rear(self) -> Any:
        """Return the rear item without removing it."""
        if self._rear is None:
            raise IndexError("rear of empty queue")
        return self._rear.key

    def __len__(self) -> int:
        return self._count


class StackQueue:
    """Queue made of two stacks: items move to the second only when it runs empty."""

    def __init__(self) -> None:
        self._inbox = LinkedStack()
        self._outbox = LinkedStack()

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the rear."""
        self._inbox.push(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if self._inbox.is_empty() and self._outbox.is_empty():
            raise IndexError("dequeue from empty queue")
        if self._outbox.is_empty():
            while not self._inbox.is_empty():
                self._outbox.push(self._inbox.pop())
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)