"""Stack and queue problems over sequences: next greater element, stock span, window maxima, circular tour."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PetrolPump:
    """A pump's petrol and the distance from it to the next pump."""

    petrol: int
    distance: int

    @property
    def surplus(self) -> int:
        return self.petrol - self.distance


def next_greater_elements(values: Sequence[Any]) -> list[tuple[Any, Any]]:
    """Return (element, next greater element) pairs in the order they are found.

    Elements with no greater element to their right are paired with None and
    come last, taken from the top of the working stack down. An element equal
    to the one that follows it is dropped.
    """
    if not values:
        return []
    pairs: list[tuple[Any, Any]] = []
    stack = [values[0]]
    for following in values[1:]:
        if stack:
            element = stack.pop()
            while element < following:
                pairs.append((element, following))
                if not stack:
                    break
                element = stack.pop()
            if element > following:
                stack.append(element)
        stack.append(following)
    while stack:
        pairs.append((stack.pop(), None))
    return pairs


def stock_span(prices: Sequence[Any]) -> list[int]:
    """Return, for each day, the number of consecutive days up to it with a price not above it."""
    spans: list[int] = []
    for day, price in enumerate(prices):
        span = 1
        for earlier in reversed(prices[:day]):
            if price < earlier:
                break
            span += 1
        spans.append(span)
    return spans


def sliding_window_max(values: Sequence[Any], k: int) -> list[Any]:
    """Return the maximum of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    return [max(values[start:start + k]) for start in range(len(values) - k + 1)]


def find_tour_start(pumps: Sequence[PetrolPump]) -> int | None:
    """Return the index of a pump from which a truck can visit every pump in a circle.

    Returns None when no such pump exists.
    """
    count = len(pumps)
    if count == 0:
        raise ValueError("at least one petrol pump is needed")
    if count == 1:
        return 0 if pumps[0].surplus >= 0 else None
    start = 0
    end = 1
    fuel = pumps[start].surplus
    while end != start or fuel < 0:
        while fuel < 0 and start != end:
            fuel -= pumps[start].surplus
            start = (start + 1) % count
            if start == 0:
                return None
        fuel += pumps[end].surplus
        end = (end + 1) % count
    return start