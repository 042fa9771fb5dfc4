"""Insertion sort, well suited to nearly sorted data."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def insertion_sort(values: MutableSequence[Any]) -> None:
    """Sort ``values`` in place in ascending order; equal items keep their order."""
    for i in range(1, len(values)):
        key = values[i]
        j = i - 1
        while j >= 0 and values[j] > key:
            values[j + 1] = values[j]
            j -= 1
        values[j + 1] = key