"""Knapsack-style dynamic programming: subsets, coins, rods and partitions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

PERFECT_SUM_MODULUS = 1_000_000_007


def _non_negative(items: Iterable[int], what: str = "items") -> list[int]:
    values = list(items)
    if any(value < 0 for value in values):
        raise ValueError(f"{what} must be non-negative")
    return values


def _count_sums(values: Sequence[int], total: int, modulus: int | None = None) -> int:
    """Count the subsets of ``values`` summing to ``total``.

    The empty subset is always counted for a total of zero, and a zero in
    ``values`` doubles the count of every positive total.
    """
    if total < 0:
        raise ValueError("total must be non-negative")
    counts = [1] + [0] * total
    for value in values:
        for j in range(total, 0, -1):
            if value <= j:
                counts[j] += counts[j - value]
                if modulus is not None:
                    counts[j] %= modulus
    return counts[total]


def _reachable_sums(values: Sequence[int], limit: int) -> list[bool]:
    reachable = [True] + [False] * limit
    for value in values:
        for j in range(limit, 0, -1):
            if value <= j and reachable[j - value]:
                reachable[j] = True
    return reachable


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items whose weights fit in ``capacity``.

    Each item is taken at most once.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    _non_negative(weights, "weights")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, 0, -1):
            if weight <= room:
                best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def count_coin_ways(coins: Iterable[int], amount: int) -> int:
    """Count the ways to make ``amount`` from an unlimited supply of ``coins``."""
    denominations = list(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coins must be positive")
    if amount < 0:
        raise ValueError("amount must be non-negative")
    ways = [1] + [0] * amount
    for coin in denominations:
        for j in range(coin, amount + 1):
            ways[j] += ways[j - coin]
    return ways[amount]


def min_coins(coins: Iterable[int], amount: int) -> int | None:
    """Return the fewest coins summing to ``amount``, or None if impossible."""
    denominations = list(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coins must be positive")
    if amount < 0:
        raise ValueError("amount must be non-negative")
    if not denominations:
        return None
    unreachable = float("inf")
    fewest: list[float] = [0] + [unreachable] * amount
    for coin in denominations:
        for j in range(coin, amount + 1):
            fewest[j] = min(fewest[j], fewest[j - coin] + 1)
    result = fewest[amount]
    return None if result == unreachable else int(result)


def min_subset_sum_difference(items: Iterable[int]) -> int:
    """Return the smallest difference between the sums of a two-way split."""
    values = _non_negative(items)
    total = sum(values)
    reachable = _reachable_sums(values, total // 2)
    closest = max(j for j, ok in enumerate(reachable) if ok)
    return total - 2 * closest


def count_subsets_with_sum(items: Iterable[int], total: int) -> int:
    """Count the subsets of non-negative ``items`` summing to ``total``."""
    return _count_sums(_non_negative(items), total)


def count_subsets_with_difference(items: Iterable[int], diff: int) -> int:
    """Count the two-way splits whose sums differ by ``diff`` (first minus second)."""
    values = _non_negative(items)
    remainder = sum(values) - diff
    if remainder < 0 or remainder % 2:
        return 0
    return _count_sums(values, remainder // 2)


def perfect_sum(items: Iterable[int], total: int) -> int:
    """Count the subsets summing to ``total``, modulo 1_000_000_007."""
    return _count_sums(_non_negative(items), total, PERFECT_SUM_MODULUS)


def rod_cutting(prices: Sequence[int]) -> int:
    """Return the best price for a rod of length ``len(prices)``.

    ``prices[i]`` is the price of a piece of length ``i + 1``; pieces of
    any length may be cut any number of times.
    """
    length = len(prices)
    best = [0] * (length + 1)
    for piece, price in enumerate(prices, start=1):
        for room in range(piece, length + 1):
            best[room] = max(best[room], price + best[room - piece])
    return best[length]


def has_subset_sum(items: Iterable[int], total: int) -> bool:
    """Tell whether some subset of non-negative ``items`` sums to ``total``."""
    if total < 0:
        raise ValueError("total must be non-negative")
    return _reachable_sums(_non_negative(items), total)[total]


def can_partition_equally(items: Iterable[int]) -> bool:
    """Tell whether ``items`` split into two parts of equal sum."""
    values = _non_negative(items)
    total = sum(values)
    if total % 2:
        return False
    return has_subset_sum(values, total // 2)


def target_sum_ways(nums: Iterable[int], target: int) -> int:
    """Count the sign assignments to ``nums`` whose signed sum is ``target``."""
    values = _non_negative(nums, "nums")
    total = sum(values)
    zeros = values.count(0)
    if target > total or (total - target) % 2:
        return 0
    wanted = (total - target) // 2
    if wanted < 0:
        return 0
    nonzero = [value for value in values if value]
    return 2**zeros * _count_sums(nonzero, wanted)