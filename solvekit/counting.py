"""Counting routines over integer arrays and digit strings."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations
from math import factorial, prod

_MOD = 10**9 + 7


def count_good_triplets(arr: Sequence[int], a: int, b: int, c: int) -> int:
    """Return how many triplets ``i < j < k`` satisfy
    ``|x-y| <= a``, ``|y-z| <= b`` and ``|x-z| <= c``."""
    return sum(
        1
        for x, y, z in combinations(arr, 3)
        if abs(x - y) <= a and abs(z - y) <= b and abs(x - z) <= c
    )


def count_good_numbers(n: int) -> int:
    """Return, modulo 1e9+7, how many digit strings of length ``n`` hold an
    even digit at every even index and a prime digit at every odd index."""
    if n < 0:
        raise ValueError("n must not be negative")
    even_slots = (n + 1) // 2
    odd_slots = n // 2
    return pow(5, even_slots, _MOD) * pow(4, odd_slots, _MOD) % _MOD


def count_pairs(nums: Sequence[int], k: int) -> int:
    """Return how many index pairs ``i < j`` hold equal values with ``i*j``
    divisible by ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    return sum(
        1
        for (i, x), (j, y) in combinations(enumerate(nums), 2)
        if x == y and (i * j) % k == 0
    )


class _Fenwick:
    """Binary indexed tree counting occurrences at 1-based positions."""

    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def add(self, index: int) -> None:
        while index < len(self._tree):
            self._tree[index] += 1
            index += index & -index

    def prefix(self, index: int) -> int:
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total


def good_triplets(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Return how many value triplets appear in the same order in two
    permutations of ``0..n-1``."""
    n = len(nums1)
    expected = list(range(n))
    if sorted(nums1) != expected or sorted(nums2) != expected:
        raise ValueError("both sequences must be permutations of 0..n-1")

    position = {value: i for i, value in enumerate(nums2)}
    mapped = [position[value] for value in nums1]

    tree = _Fenwick(n)
    smaller_before = []
    for p in mapped:
        smaller_before.append(tree.prefix(p))
        tree.add(p + 1)

    tree = _Fenwick(n)
    larger_after = []
    for p in reversed(mapped):
        larger_after.append(tree.prefix(n) - tree.prefix(p + 1))
        tree.add(p + 1)
    larger_after.reverse()

    return sum(left * right for left, right in zip(smaller_before, larger_after))


def count_good_subarrays(nums: Sequence[int], k: int) -> int:
    """Return how many subarrays hold at least ``k`` pairs of equal values."""
    n = len(nums)
    counts: Counter[int] = Counter()
    start = 0
    pairs = 0
    result = 0
    for end, value in enumerate(nums):
        pairs += counts[value]
        counts[value] += 1
        while pairs >= k and start < n:
            result += n - end
            counts[nums[start]] -= 1
            pairs -= counts[nums[start]]
            start += 1
    return result


def count_fair_pairs(nums: Sequence[int], lower: int, upper: int) -> int:
    """Return how many index pairs have a sum within ``[lower, upper]``."""
    ordered = sorted(nums)
    total = 0
    for i, value in enumerate(ordered):
        first = bisect_left(ordered, lower - value, i + 1)
        past = bisect_right(ordered, upper - value, i + 1)
        total += max(past - first, 0)
    return total


def _is_symmetric(value: int) -> bool:
    if 10 <= value <= 99:
        return value % 11 == 0
    if 1000 <= value <= 9999:
        d1, d2, d3, d4 = (int(ch) for ch in str(value))
        return d1 + d2 == d3 + d4
    return False


def count_symmetric_integers(low: int, high: int) -> int:
    """Return how many two- or four-digit integers in ``[low, high]`` have
    equal digit sums in both halves."""
    return sum(1 for value in range(low, high + 1) if _is_symmetric(value))


def count_good_integers(n: int, k: int) -> int:
    """Return how many ``n``-digit integers can be rearranged into a
    palindrome divisible by ``k``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if k < 1:
        raise ValueError("k must be at least 1")
    half = (n + 1) // 2
    digit_sets: set[str] = set()
    for left in range(10 ** (half - 1), 10**half):
        digits = str(left)
        mirror = digits if n % 2 == 0 else digits[:-1]
        full = digits + mirror[::-1]
        if int(full) % k == 0:
            digit_sets.add("".join(sorted(full)))

    total = 0
    for key in digit_sets:
        counts = Counter(key)
        leading = n - counts["0"]
        total += leading * factorial(n - 1) // prod(
            factorial(c) for c in counts.values()
        )
    return total


def min_operations(nums: Iterable[int], k: int) -> int:
    """Return how many operations bring every value down to ``k``, where one
    operation lowers every value above some valid height to that height."""
    values = set(nums)
    if values and min(values) < k:
        raise ValueError("a value below k can never be raised to k")
    return len(values - {k})


def minimum_operations(nums: Sequence[int]) -> int:
    """Return how many times three leading items must be dropped to leave
    only distinct values."""
    seen: set[int] = set()
    for i, value in reversed(list(enumerate(nums))):
        if value in seen:
            return i // 3 + 1
        seen.add(value)
    return 0


def is_n_straight_hand(hand: Iterable[int], group_size: int) -> bool:
    """Return whether ``hand`` splits into runs of ``group_size`` consecutive values."""
    if group_size < 1:
        raise ValueError("group_size must be at least 1")
    counts = Counter(hand)
    if sum(counts.values()) % group_size:
        return False
    for start in sorted(counts):
        need = counts[start]
        if not need:
            continue
        for value in range(start, start + group_size):
            if counts[value] < need:
                return False
            counts[value] -= need
    return True