"""Bit tricks on 32-bit integers."""

from __future__ import annotations

from collections.abc import Iterable

_WORD_MASK = 0xFFFFFFFF
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1


def is_power_of_four(n: int) -> bool:
    """Return True when ``n`` is a power of four (1 included)."""
    if n <= 0:
        return False
    while n != 1:
        if n % 4:
            return False
        n //= 4
    return True


def unset_rightmost_bit(n: int) -> int:
    """Return ``n`` with its lowest set bit cleared."""
    if n < 0:
        raise ValueError("n must not be negative")
    return n & (n - 1)


def count_set_bits(values: Iterable[int]) -> int:
    """Return the total number of set bits in the 32-bit two's complement form of every value."""
    total = 0
    for value in values:
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f"{value} does not fit in a 32-bit signed integer")
        total += bin(value & _WORD_MASK).count("1")
    return total


def smallest_of_three(x: int, y: int, z: int) -> int:
    """Return the smallest of three non-negative integers."""
    if x < 0 or y < 0 or z < 0:
        raise ValueError("values must not be negative")
    return min(x, y, z)


def swap_bits(x: int, p1: int, p2: int, n: int) -> int:
    """Swap the ``n`` bits of ``x`` starting at position ``p1`` with those starting at ``p2``.

    The work is done on 32-bit unsigned words.
    """
    if min(x, p1, p2, n) < 0:
        raise ValueError("arguments must not be negative")
    x &= _WORD_MASK
    field = (1 << n) - 1
    first = (x >> p1) & field
    second = (x >> p2) & field
    difference = first ^ second
    difference = (difference << p1) | (difference << p2)
    return (x ^ difference) & _WORD_MASK