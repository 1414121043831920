"""Stack and grid routines: histograms, binary matrices, expressions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import repeat


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle inside a histogram."""
    best = 0
    stack: list[int] = []  # indices of bars with non-decreasing heights
    for i, height in enumerate([*heights, 0]):
        while stack and heights[stack[-1]] >= height:
            top = heights[stack.pop()]
            left = stack[-1] if stack else -1
            best = max(best, top * (i - left - 1))
        stack.append(i)
    return best


def maximal_rectangle(matrix: Iterable[Sequence[str]]) -> int:
    """Return the area of the largest all-``'1'`` rectangle in a matrix of
    ``'0'``/``'1'`` characters."""
    best = 0
    heights: list[int] = []
    for row in matrix:
        heights = [
            h + 1 if cell == "1" else 0
            for h, cell in zip(heights or repeat(0), row)
        ]
        best = max(best, largest_rectangle_area(heights))
    return best


def count_squares(matrix: Iterable[Sequence[int]]) -> int:
    """Return how many square submatrices of a 0/1 matrix hold only ones."""
    total = 0
    previous: list[int] | None = None
    for row in matrix:
        current: list[int] = []
        for j, cell in enumerate(row):
            if previous is None or j == 0 or not cell:
                size = cell
            else:
                size = 1 + min(previous[j], previous[j - 1], current[j - 1])
            current.append(size)
            total += size
        previous = current
    return total


def _apply(operator: str, values: list[str]) -> str:
    if operator == "!":
        if len(values) != 1:
            raise ValueError("'!' takes exactly one operand")
        return "f" if values[0] == "t" else "t"
    if operator == "&":
        return "f" if "f" in values else "t"
    if operator == "|":
        return "t" if "t" in values else "f"
    raise ValueError(f"unknown operator {operator!r}")


def parse_bool_expr(expression: str) -> bool:
    """Evaluate a boolean expression of ``t``, ``f``, ``!(..)``, ``&(..)`` and ``|(..)``."""
    stack: list[str] = []
    for ch in expression:
        if ch == ",":
            continue
        if ch != ")":
            stack.append(ch)
            continue
        values = []
        while stack and stack[-1] != "(":
            values.append(stack.pop())
        if len(stack) < 2 or not values:
            raise ValueError(f"malformed expression: {expression!r}")
        stack.pop()
        stack.append(_apply(stack.pop(), values))
    if len(stack) != 1 or stack[0] not in ("t", "f"):
        raise ValueError(f"malformed expression: {expression!r}")
    return stack[0] == "t"


def _balanced(prefix: str, opens: int, closes: int) -> Iterator[str]:
    if not opens and not closes:
        yield prefix
        return
    if opens:
        yield from _balanced(prefix + "(", opens - 1, closes)
    if closes > opens:
        yield from _balanced(prefix + ")", opens, closes - 1)


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses."""
    if n < 0:
        raise ValueError("n must not be negative")
    return list(_balanced("", n, n))