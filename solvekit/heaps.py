"""Priority-queue based routines."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

_MEDALS = ("Gold Medal", "Silver Medal", "Bronze Medal")


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional[ListNode] = None


def from_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_list(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def merge_k_lists(lists: Iterable[Optional[ListNode]]) -> Optional[ListNode]:
    """Merge sorted linked lists into one sorted list, relinking their nodes."""
    heap = [(node.val, i, node) for i, node in enumerate(lists) if node is not None]
    heapq.heapify(heap)
    dummy = ListNode(0)
    tail = dummy
    while heap:
        _, i, node = heapq.heappop(heap)
        if node.next is not None:
            heapq.heappush(heap, (node.next.val, i, node.next))
        tail.next = node
        tail = node
    return dummy.next


def k_smallest_pairs(
    nums1: Sequence[int], nums2: Sequence[int], k: int
) -> list[tuple[int, int]]:
    """Return the ``k`` pairs from two sorted sequences with the smallest sums."""
    if not nums1 or not nums2 or k <= 0:
        return []
    heap = [(a + nums2[0], i, 0) for i, a in enumerate(nums1[:k])]
    heapq.heapify(heap)
    pairs = []
    while heap and len(pairs) < k:
        _, i, j = heapq.heappop(heap)
        pairs.append((nums1[i], nums2[j]))
        if j + 1 < len(nums2):
            heapq.heappush(heap, (nums1[i] + nums2[j + 1], i, j + 1))
    return pairs


def frequency_sort(s: str) -> str:
    """Return ``s`` with its characters grouped, most frequent first."""
    return "".join(ch * count for ch, count in Counter(s).most_common())


def relative_ranks(score: Sequence[int]) -> list[str]:
    """Return each athlete's rank: medals for the top three, places after."""
    order = sorted(range(len(score)), key=lambda i: score[i], reverse=True)
    ranks = [""] * len(score)
    for place, athlete in enumerate(order, start=1):
        ranks[athlete] = _MEDALS[place - 1] if place <= len(_MEDALS) else str(place)
    return ranks


def least_interval(tasks: Iterable[str], n: int) -> int:
    """Return the fewest time units to run ``tasks`` when equal tasks must be
    at least ``n`` units apart."""
    if n < 0:
        raise ValueError("n must not be negative")
    heap = [-count for count in Counter(tasks).values()]
    heapq.heapify(heap)
    time = 0
    while heap:
        batch = []
        for _ in range(n + 1):
            if not heap:
                break
            batch.append(-heapq.heappop(heap) - 1)
        for remaining in batch:
            if remaining:
                heapq.heappush(heap, -remaining)
        time += n + 1 if heap else len(batch)
    return time


class KthLargest:
    """Track the k-th largest value of a growing stream."""

    def __init__(self, k: int, nums: Iterable[int] = ()) -> None:
        if k < 1:
            raise ValueError("k must be at least 1")
        self._k = k
        self._heap: list[int] = []
        for value in nums:
            self._offer(value)

    def _offer(self, value: int) -> None:
        if len(self._heap) < self._k:
            heapq.heappush(self._heap, value)
        elif value > self._heap[0]:
            heapq.heapreplace(self._heap, value)

    def add(self, val: int) -> int:
        """Add ``val`` to the stream and return the current k-th largest value."""
        self._offer(val)
        return self._heap[0]