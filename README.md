# solvekit

A small library of well-known algorithm solutions, written as plain
functions over Python lists, tuples and strings. It has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

## Modules

### `solvekit.textdp` – dynamic programming over strings

- `is_match(text, pattern)` – wildcard matching of the whole text; `?`
  matches one character, `*` any run of characters.
- `min_distance(word1, word2)` – edit distance (insert, delete, replace).
- `num_distinct(s, t)` – number of distinct subsequences of `s` equal to `t`.
- `min_cut(s)` – fewest cuts splitting `s` into palindromes (`-1` for the
  empty string).
- `longest_str_chain(words)` – longest chain where each word is the previous
  one with one letter inserted (`1` for an empty collection).

### `solvekit.stocks` – trading profit

- `max_profit_single(prices)` – at most one trade; raises `ValueError` on an
  empty list.
- `max_profit_unlimited(prices)` – any number of non-overlapping trades.
- `max_profit_two(prices)` – at most two trades.
- `max_profit_k(k, prices)` – at most `k` trades; `k` must not be negative.
- `max_profit_cooldown(prices)` – unlimited trades with a one-day rest after
  each sale.

### `solvekit.sequences` – dynamic programming over integer sequences

- `length_of_lis(nums)` – length of the longest strictly increasing
  subsequence (non-empty input).
- `count_lis(nums)` – number of longest strictly increasing subsequences.
- `largest_divisible_subset(nums)` – a largest subset, ascending, whose
  members divide one another (non-empty input).
- `can_partition(nums)` – whether non-negative `nums` split into two equal
  sums.
- `max_sum_after_partitioning(arr, k)` – largest sum after raising each run
  of at most `k` items to its maximum.
- `max_coins(nums)` – burst balloons.
- `min_cut_cost(n, cuts)` – least cost to cut a stick of length `n`.
- `most_points(questions)` – best score from `(points, brainpower)` pairs.

### `solvekit.heaps` – priority-queue routines

- `ListNode` with `from_list(values)` and `to_list(head)`.
- `merge_k_lists(lists)` – merge sorted linked lists by relinking nodes.
- `k_smallest_pairs(nums1, nums2, k)` – the `k` smallest-sum pairs, as tuples.
- `frequency_sort(s)` – characters grouped, most frequent first.
- `relative_ranks(score)` – `"Gold Medal"`, `"Silver Medal"`,
  `"Bronze Medal"`, then place numbers.
- `least_interval(tasks, n)` – task scheduler with cooldown `n`.
- `KthLargest(k, nums)` – `add(val)` returns the current k-th largest value.

### `solvekit.grids` – stacks, binary matrices and expressions

- `largest_rectangle_area(heights)` – largest rectangle in a histogram.
- `maximal_rectangle(matrix)` – largest all-`'1'` rectangle in a matrix of
  `'0'`/`'1'` characters.
- `count_squares(matrix)` – number of all-ones square submatrices of a 0/1
  matrix.
- `parse_bool_expr(expression)` – evaluates `t`, `f`, `!(..)`, `&(..)`,
  `|(..)`; raises `ValueError` on malformed input.
- `generate_parenthesis(n)` – every balanced string of `n` pairs.

### `solvekit.counting` – counting over arrays and digits

`count_good_triplets`, `count_good_numbers` (modulo 1e9+7), `count_pairs`,
`good_triplets` (two permutations of `0..n-1`), `count_good_subarrays`,
`count_fair_pairs`, `count_symmetric_integers`, `count_good_integers`,
`min_operations` (raises `ValueError` when a value is below `k`),
`minimum_operations` and `is_n_straight_hand(hand, group_size)`.

Invalid arguments such as negative counts raise `ValueError`.

## Examples

```python
from solvekit.textdp import min_distance, is_match
from solvekit.heaps import KthLargest, from_list, merge_k_lists, to_list
from solvekit.grids import generate_parenthesis

min_distance("horse", "ros")            # 3
is_match("adceb", "*a*b")               # True
generate_parenthesis(2)                 # ['(())', '()()']

merged = merge_k_lists([from_list([1, 4, 5]), from_list([1, 3, 4])])
to_list(merged)                         # [1, 1, 3, 4, 4, 5]

stream = KthLargest(3, [4, 5, 8, 2])
stream.add(3)                           # 4
```

## What it does not do

The package is a library only: it has no command-line program and reads
no input files. Call its functions from Python.

## Running the tests

```
pip install ".[test]"
pytest
```