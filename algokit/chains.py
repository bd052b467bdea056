"""Interval dynamic programming: matrix chains and egg dropping."""

from __future__ import annotations

from collections.abc import Sequence


def matrix_chain_cost(dimensions: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply a matrix chain.

    Matrix ``i`` has shape ``dimensions[i - 1] x dimensions[i]``; fewer than
    two matrices cost nothing.
    """
    count = len(dimensions) - 1
    if count < 2:
        return 0
    # cost[i][j]: cheapest product of matrices i..j (1-based).
    cost = [[0] * (count + 1) for _ in range(count + 1)]
    for span in range(1, count):
        for i in range(1, count - span + 1):
            j = i + span
            cost[i][j] = min(
                cost[i][k]
                + cost[k + 1][j]
                + dimensions[i - 1] * dimensions[k] * dimensions[j]
                for k in range(i, j)
            )
    return cost[1][count]


def super_egg_drop(eggs: int, floors: int) -> int:
    """Return the fewest drops that always find the critical floor.

    Raises ValueError if there are no eggs or the floor count is negative.
    """
    if eggs < 1:
        raise ValueError("at least one egg is needed")
    if floors < 0:
        raise ValueError("floors must be non-negative")
    previous = list(range(floors + 1))
    for _ in range(2, eggs + 1):
        current = [0] * (floors + 1)
        if floors >= 1:
            current[1] = 1
        for j in range(2, floors + 1):
            current[j] = 1 + min(
                max(current[j - k], previous[k - 1]) for k in range(1, j + 1)
            )
        previous = current
    return previous[floors]