"""Counting and optimisation problems solved by dynamic programming."""

from __future__ import annotations

import math
from typing import Sequence


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of items whose weights fit in ``capacity``;
    each item is taken at most once."""
    if len(weights) != len(values):
        raise ValueError("weights and values differ in length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for size in range(capacity, max(weight, 1) - 1, -1):
            best[size] = max(best[size], best[size - weight] + value)
    return best[capacity]


def binomial_coefficient(n: int, r: int) -> int:
    """Return the number of ways to choose ``r`` items from ``n``; 0 if r > n."""
    if n < 0 or r < 0:
        raise ValueError("n and r must not be negative")
    row = [1] + [0] * r
    for _ in range(n):
        for k in range(r, 0, -1):
            row[k] += row[k - 1]
    return row[r]


def catalan_number(n: int) -> int:
    """Return the ``n``-th Catalan number."""
    if n < 0:
        raise ValueError("n must not be negative")
    catalan = [1]
    for size in range(1, n + 1):
        catalan.append(sum(catalan[j] * catalan[size - 1 - j] for j in range(size)))
    return catalan[n]


def _fewest_coins(coins: Sequence[int], amount: int) -> int:
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin < 0 for coin in coins):
        raise ValueError("coin values must not be negative")
    fewest = [0] + [math.inf] * amount
    for total in range(1, amount + 1):
        for coin in coins:
            if 0 < coin <= total:
                fewest[total] = min(fewest[total], fewest[total - coin] + 1)
    return -1 if fewest[amount] == math.inf else int(fewest[amount])


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins, each usable any number of times, summing to
    ``amount``; -1 if it cannot be made."""
    return _fewest_coins(coins, amount)


def min_coins(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins from an unlimited supply summing to ``amount``;
    -1 if it cannot be made."""
    if amount == 0:
        return 0
    return _fewest_coins(coins, amount)


def rod_cutting(prices: Sequence[int]) -> int:
    """Return the best revenue from cutting a rod of length ``len(prices)``,
    where ``prices[i]`` is the price of a piece of length ``i + 1``."""
    if not prices:
        raise ValueError("prices are empty")
    best: list[int] = []
    for length, price in enumerate(prices):
        best.append(
            max([price] + [best[j] + best[length - j - 1] for j in range(length)])
        )
    return best[-1]


def _check_subset_args(coins: Sequence[int], target: int) -> None:
    if target < 0:
        raise ValueError("target must not be negative")
    if any(coin < 0 for coin in coins):
        raise ValueError("coin values must not be negative")


def subset_sum(coins: Sequence[int], target: int) -> bool:
    """Return True if some coins, each used at most once, sum to ``target``."""
    _check_subset_args(coins, target)
    reachable = [True] + [False] * target
    for coin in coins:
        for total in range(target, coin - 1, -1):
            if reachable[total - coin]:
                reachable[total] = True
    return reachable[target]


def subset_sum_unbounded(coins: Sequence[int], target: int) -> bool:
    """Return True if coins, each usable any number of times, sum to ``target``."""
    _check_subset_args(coins, target)
    reachable = [True] + [False] * target
    for coin in coins:
        for total in range(coin, target + 1):
            if reachable[total - coin]:
                reachable[total] = True
    return reachable[target]