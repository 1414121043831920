from collections import Counter
from itertools import groupby, product

import pytest

from solvekit.heaps import (
    KthLargest,
    ListNode,
    frequency_sort,
    from_list,
    k_smallest_pairs,
    least_interval,
    merge_k_lists,
    relative_ranks,
    to_list,
)


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [5, 5, 0, -2]])
def test_linked_list_round_trip(values):
    assert to_list(from_list(values)) == values


def test_linked_list_empty():
    assert from_list([]) is None
    assert to_list(None) == []


def test_list_node_links():
    head = ListNode(1, ListNode(2))
    assert to_list(head) == [1, 2]


def test_merge_k_lists_sorted_union():
    groups = [[1, 4, 5], [1, 3, 4], [2, 6]]
    merged = merge_k_lists([from_list(g) for g in groups])
    assert to_list(merged) == sorted(v for g in groups for v in g)


def test_merge_k_lists_skips_empty_lists():
    groups = [[], [0, 7], [], [3]]
    merged = merge_k_lists([from_list(g) for g in groups])
    assert to_list(merged) == sorted(v for g in groups for v in g)


def test_merge_k_lists_nothing():
    assert merge_k_lists([]) is None
    assert merge_k_lists([None, None]) is None


def test_k_smallest_pairs_have_smallest_sums():
    nums1, nums2 = [1, 7, 11], [2, 4, 6]
    k = 4
    pairs = k_smallest_pairs(nums1, nums2, k)
    assert len(pairs) == k
    sums = [a + b for a, b in pairs]
    assert sums == sorted(sums)
    all_sums = sorted(a + b for a, b in product(nums1, nums2))
    assert sums == all_sums[:k]
    assert all(a in nums1 and b in nums2 for a, b in pairs)


def test_k_smallest_pairs_k_beyond_all_pairs():
    nums1, nums2 = [1, 1, 2], [1, 2, 3]
    pairs = k_smallest_pairs(nums1, nums2, 100)
    assert len(pairs) == len(nums1) * len(nums2)
    assert Counter(pairs) == Counter(product(nums1, nums2))


def test_k_smallest_pairs_empty_cases():
    assert k_smallest_pairs([], [1], 3) == []
    assert k_smallest_pairs([1], [2], 0) == []


def test_frequency_sort_worked_example():
    assert frequency_sort("tree") in {"eetr", "eert"}


def test_frequency_sort_groups_by_descending_count():
    text = "mississippi river"
    result = frequency_sort(text)
    assert Counter(result) == Counter(text)
    groups = [(ch, len(list(run))) for ch, run in groupby(result)]
    assert len({ch for ch, _ in groups}) == len(groups)
    lengths = [length for _, length in groups]
    assert lengths == sorted(lengths, reverse=True)


def test_relative_ranks_descending():
    assert relative_ranks([5, 4, 3, 2, 1]) == [
        "Gold Medal",
        "Silver Medal",
        "Bronze Medal",
        "4",
        "5",
    ]


def test_relative_ranks_follow_scores():
    scores = [10, 3, 8, 9, 4]
    ranks = relative_ranks(scores)
    ordered = sorted(scores, reverse=True)
    by_score = dict(zip(scores, ranks))
    assert [by_score[s] for s in ordered] == relative_ranks(ordered)


def test_least_interval_worked_example():
    assert least_interval(["A", "A", "A", "B", "B", "B"], 2) == 8


def test_least_interval_without_gap_is_task_count():
    tasks = list("AAABBC")
    assert least_interval(tasks, 0) == len(tasks)


def test_least_interval_distinct_tasks_need_no_idle():
    tasks = list("ABCDEF")
    assert least_interval(tasks, 3) == len(tasks)


def test_least_interval_negative_gap_raises():
    with pytest.raises(ValueError):
        least_interval(["A"], -1)


def test_kth_largest_tracks_stream():
    k = 3
    seen = [4, 5, 8, 2]
    tracker = KthLargest(k, seen)
    for value in [3, 5, 10, 9, 4, -1, 12]:
        seen.append(value)
        assert tracker.add(value) == sorted(seen)[-k]


def test_kth_largest_filling_from_empty():
    tracker = KthLargest(2, [])
    assert tracker.add(7) == 7
    assert tracker.add(3) == 3
    assert tracker.add(9) == 7


def test_kth_largest_bad_k():
    with pytest.raises(ValueError):
        KthLargest(0, [1])