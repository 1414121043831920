"""Dynamic-programming routines over integer sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    if not nums:
        raise ValueError("nums must not be empty")
    tails: list[int] = []
    for value in nums:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def count_lis(nums: Sequence[int]) -> int:
    """Return how many strictly increasing subsequences have the greatest length."""
    lengths: list[int] = []
    counts: list[int] = []
    for value in nums:
        best, ways = 1, 1
        for earlier, length, count in zip(nums, lengths, counts):
            if value <= earlier:
                continue
            if length + 1 > best:
                best, ways = length + 1, count
            elif length + 1 == best:
                ways += count
        lengths.append(best)
        counts.append(ways)
    longest = max(lengths, default=0)
    return sum(count for length, count in zip(lengths, counts) if length == longest)


def largest_divisible_subset(nums: Sequence[int]) -> list[int]:
    """Return a largest subset, in ascending order, whose members divide one another."""
    ordered = sorted(nums)
    if not ordered:
        raise ValueError("nums must not be empty")
    sizes: list[int] = []
    parents: list[int] = []
    best_index = 0
    for i, value in enumerate(ordered):
        size, parent = 1, i
        for j, (smaller, smaller_size) in enumerate(zip(ordered, sizes)):
            if value % smaller == 0 and smaller_size + 1 > size:
                size, parent = smaller_size + 1, j
        sizes.append(size)
        parents.append(parent)
        if size > sizes[best_index]:
            best_index = i

    chain = [ordered[best_index]]
    while parents[best_index] != best_index:
        best_index = parents[best_index]
        chain.append(ordered[best_index])
    chain.reverse()
    return chain


def can_partition(nums: Sequence[int]) -> bool:
    """Return whether ``nums`` splits into two parts of equal sum."""
    if not nums:
        raise ValueError("nums must not be empty")
    if any(value < 0 for value in nums):
        raise ValueError("nums must not hold negative values")
    total = sum(nums)
    if total % 2:
        return False
    target = total // 2
    mask = (1 << (target + 1)) - 1
    reachable = 1  # bit s is set when some subset sums to s
    for value in nums:
        reachable |= (reachable << value) & mask
    return bool((reachable >> target) & 1)


def max_sum_after_partitioning(arr: Sequence[int], k: int) -> int:
    """Return the largest sum after cutting ``arr`` into runs of at most ``k``
    items and raising every item of a run to the run's maximum."""
    if k < 1:
        raise ValueError("k must be at least 1")
    n = len(arr)
    best = [0] * (n + 1)
    for i in reversed(range(n)):
        top = 0
        result = None
        for length, value in enumerate(arr[i : i + k], start=1):
            top = max(top, value)
            candidate = top * length + best[i + length]
            if result is None or candidate > result:
                result = candidate
        best[i] = result
    return best[0]


def max_coins(nums: Sequence[int]) -> int:
    """Return the most coins won by bursting every balloon in the best order."""
    n = len(nums)
    padded = [1, *nums, 1]
    best = [[0] * (n + 2) for _ in range(n + 2)]
    for i in range(n, 0, -1):
        for j in range(i, n + 1):
            edge = padded[i - 1] * padded[j + 1]
            best[i][j] = max(
                0,
                max(
                    edge * padded[last] + best[i][last - 1] + best[last + 1][j]
                    for last in range(i, j + 1)
                ),
            )
    return best[1][n]


def min_cut_cost(n: int, cuts: Sequence[int]) -> int:
    """Return the least total cost of making ``cuts`` in a stick of length ``n``.

    Each cut costs the length of the piece it is made in.
    """
    count = len(cuts)
    points = sorted([0, *cuts, n])
    best = [[0] * (count + 2) for _ in range(count + 2)]
    for i in range(count, 0, -1):
        for j in range(i, count + 1):
            best[i][j] = points[j + 1] - points[i - 1] + min(
                best[i][first - 1] + best[first + 1][j] for first in range(i, j + 1)
            )
    return best[1][count]


def most_points(questions: Sequence[Sequence[int]]) -> int:
    """Return the most points from ``(points, brainpower)`` questions taken in
    order, where solving one skips the next ``brainpower`` questions."""
    n = len(questions)
    best = [0] * (n + 1)
    for i, (points, brainpower) in reversed(list(enumerate(questions))):
        best[i] = max(best[i + 1], points + best[min(n, i + brainpower + 1)])
    return best[0]