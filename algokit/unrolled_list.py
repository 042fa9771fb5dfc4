"""An unrolled linked list: a chain of nodes each holding a small block of values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class _Block:
    elements: list[Any] = field(default_factory=list)
    next: _Block | None = None


class UnrolledLinkedList:
    """Linked list of blocks, each holding up to ``max_elements`` values."""

    def __init__(self, max_elements: int = 4) -> None:
        if max_elements < 1:
            raise ValueError("max_elements must be at least 1")
        self.max_elements = max_elements
        self.head: _Block | None = None
        self._tail: _Block | None = None

    def _blocks(self) -> Iterator[_Block]:
        block = self.head
        while block is not None:
            yield block
            block = block.next

    def append(self, value: Any) -> None:
        """Add ``value`` at the end, starting a new block when the last one is full."""
        if self._tail is None or len(self._tail.elements) >= self.max_elements:
            block = _Block()
            if self._tail is None:
                self.head = block
            else:
                self._tail.next = block
            self._tail = block
        self._tail.elements.append(value)

    def __iter__(self) -> Iterator[Any]:
        for block in self._blocks():
            yield from block.elements

    def __len__(self) -> int:
        return sum(len(block.elements) for block in self._blocks())

    def node_count(self) -> int:
        """Return the number of blocks in the chain."""
        return sum(1 for _ in self._blocks())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, max_elements={self.max_elements})"