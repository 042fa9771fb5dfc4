"""Dynamic programming classics: LCS, LIS, matrix chain order, minimum cost path, Fibonacci."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any


def lcs_length(x: Sequence[Any], y: Sequence[Any]) -> int:
    """Return the length of the longest common subsequence of ``x`` and ``y``."""
    previous = [0] * (len(y) + 1)
    for a in x:
        row = [0]
        for j, b in enumerate(y):
            row.append(previous[j] + 1 if a == b else max(row[j], previous[j + 1]))
        previous = row
    return previous[-1]


def lis_length(values: Sequence[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence of ``values``."""
    ending: list[int] = []
    for index, value in enumerate(values):
        best = max(
            (length for earlier, length in zip(values[:index], ending) if earlier < value),
            default=0,
        )
        ending.append(best + 1)
    return max(ending, default=0)


def matrix_chain_cost(dimensions: Sequence[int]) -> int:
    """Return the fewest scalar multiplications needed to multiply a chain of matrices.

    Matrix ``i`` has shape ``dimensions[i-1] x dimensions[i]``.
    """
    count = len(dimensions) - 1
    if count < 1:
        raise ValueError("at least two dimensions are needed")
    cost: dict[tuple[int, int], int] = {(i, i): 0 for i in range(1, count + 1)}
    for length in range(2, count + 1):
        for i in range(1, count - length + 2):
            j = i + length - 1
            cost[i, j] = min(
                cost[i, k] + cost[k + 1, j] + dimensions[i - 1] * dimensions[k] * dimensions[j]
                for k in range(i, j)
            )
    return cost[1, count]


def min_cost_path(cost: Sequence[Sequence[int]], m: int, n: int) -> int:
    """Return the cheapest path cost from (0, 0) to (m, n).

    A path moves right, down or diagonally down-right; every visited cell's cost counts.
    """
    if not 0 <= m < len(cost) or not 0 <= n < len(cost[m]):
        raise ValueError("target cell lies outside the cost grid")
    best: list[list[float]] = []
    for i in range(m + 1):
        row: list[float] = []
        for j in range(n + 1):
            if i == 0 and j == 0:
                row.append(cost[0][0])
                continue
            diagonal = best[i - 1][j - 1] if i > 0 and j > 0 else math.inf
            above = best[i - 1][j] if i > 0 else math.inf
            left = row[j - 1] if j > 0 else math.inf
            row.append(cost[i][j] + min(diagonal, above, left))
        best.append(row)
    return int(best[m][n])


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current