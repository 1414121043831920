"""Maximum trading profit under various transaction rules."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def max_profit_single(prices: Sequence[int]) -> int:
    """Return the best profit from at most one buy followed by one sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    profit = 0
    lowest = prices[0]
    for price in prices[1:]:
        profit = max(profit, price - lowest)
        lowest = min(lowest, price)
    return profit


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Return the best profit from any number of non-overlapping trades."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def max_profit_k(k: int, prices: Sequence[int]) -> int:
    """Return the best profit from at most ``k`` non-overlapping trades."""
    if k < 0:
        raise ValueError("k must not be negative")
    if not prices or k == 0:
        return 0
    # holding[c]: best balance while holding the c-th position;
    # sold[c]: best balance after closing the c-th trade.
    holding = [-prices[0]] * k
    sold = [0] * k
    for price in prices:
        for c in range(k):
            before = sold[c - 1] if c else 0
            holding[c] = max(holding[c], before - price)
            sold[c] = max(sold[c], holding[c] + price)
    return sold[-1]


def max_profit_two(prices: Sequence[int]) -> int:
    """Return the best profit from at most two non-overlapping trades."""
    return max_profit_k(2, prices)


def max_profit_cooldown(prices: Sequence[int]) -> int:
    """Return the best profit with unlimited trades and a one-day rest after each sale."""
    if not prices:
        return 0
    holding = -prices[0]
    just_sold = 0
    resting = 0
    for price in prices:
        holding, just_sold, resting = (
            max(holding, resting - price),
            holding + price,
            max(resting, just_sold),
        )
    return max(just_sold, resting)