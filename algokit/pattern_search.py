"""Pattern searching (naive, distinct-character, Rabin-Karp) and string permutations."""

from __future__ import annotations

from collections.abc import Iterator

_ALPHABET_SIZE = 256


def naive_search(pattern: str, text: str) -> list[int]:
    """Return every index at which ``pattern`` occurs in ``text``, overlaps included."""
    return [
        index
        for index in range(len(text) - len(pattern) + 1)
        if text.startswith(pattern, index)
    ]


def _matched_prefix(pattern: str, window: str) -> int:
    return next(
        (count for count, (a, b) in enumerate(zip(pattern, window)) if a != b),
        min(len(pattern), len(window)),
    )


def distinct_search(pattern: str, text: str) -> list[int]:
    """Search for a pattern whose characters are all different.

    After a partial match of ``j`` characters the search slides ahead by ``j``,
    and after a full match by the whole pattern, so matches never overlap.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    size = len(pattern)
    matches: list[int] = []
    index = 0
    while index <= len(text) - size:
        matched = _matched_prefix(pattern, text[index:index + size])
        if matched == size:
            matches.append(index)
            index += size
        else:
            index += max(matched, 1)
    return matches


def rabin_karp_search(pattern: str, text: str, prime: int = 101) -> list[int]:
    """Return every index at which ``pattern`` occurs in ``text``, using a rolling hash modulo ``prime``."""
    if prime < 1:
        raise ValueError("prime must be positive")
    size = len(pattern)
    length = len(text)
    if size > length:
        return []
    high = pow(_ALPHABET_SIZE, size - 1, prime) if size > 1 else 1
    pattern_hash = 0
    window_hash = 0
    for p_char, t_char in zip(pattern, text):
        pattern_hash = (_ALPHABET_SIZE * pattern_hash + ord(p_char)) % prime
        window_hash = (_ALPHABET_SIZE * window_hash + ord(t_char)) % prime
    matches: list[int] = []
    last = length - size
    for index in range(last + 1):
        if pattern_hash == window_hash and text.startswith(pattern, index):
            matches.append(index)
        if index < last:
            window_hash = (
                _ALPHABET_SIZE * (window_hash - ord(text[index]) * high)
                + ord(text[index + size])
            ) % prime
    return matches


def _permute(chars: list[str], left: int) -> Iterator[str]:
    if left == len(chars) - 1:
        yield "".join(chars)
        return
    for index in range(left, len(chars)):
        chars[left], chars[index] = chars[index], chars[left]
        yield from _permute(chars, left + 1)
        chars[left], chars[index] = chars[index], chars[left]


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of ``text`` in swap order; repeated characters give repeated results."""
    if text:
        yield from _permute(list(text), 0)