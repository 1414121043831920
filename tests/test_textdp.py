import itertools

import pytest

from solvekit.textdp import (
    is_match,
    longest_str_chain,
    min_cut,
    min_distance,
    num_distinct,
)

WORDS = ["", "a", "ab", "horse", "ros", "intention", "execution", "kitten", "sitting"]


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("", ""),
        ("", "***"),
        ("abc", "abc"),
        ("abc", "*"),
        ("abc", "a*"),
        ("abc", "?b?"),
        ("adceb", "*a*b"),
        ("abcdef", "a*d*f"),
        ("aa", "a*a"),
    ],
)
def test_is_match_accepts(text, pattern):
    assert is_match(text, pattern)


@pytest.mark.parametrize(
    "text, pattern",
    [
        ("a", ""),
        ("", "?"),
        ("aa", "a"),
        ("cb", "?a"),
        ("acdcb", "a*c?b"),
        ("abc", "abcd"),
        ("abc", "*d"),
        ("?", "a"),
    ],
)
def test_is_match_rejects(text, pattern):
    assert not is_match(text, pattern)


@pytest.mark.parametrize("text", ["x", "hello", "a?b*c"])
def test_is_match_question_marks_fix_length(text):
    assert is_match(text, "?" * len(text))
    assert not is_match(text, "?" * (len(text) + 1))
    assert is_match(text, text)


def test_min_distance_worked_example():
    assert min_distance("horse", "ros") == 3


@pytest.mark.parametrize("word", WORDS)
def test_min_distance_to_self_and_empty(word):
    assert min_distance(word, word) == min_distance("", "")
    assert min_distance(word, "") == len(word)
    assert min_distance("", word) == len(word)


@pytest.mark.parametrize("a, b", list(itertools.combinations(WORDS, 2)))
def test_min_distance_symmetric_and_bounded(a, b):
    d = min_distance(a, b)
    assert d == min_distance(b, a)
    assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))


@pytest.mark.parametrize("a, b, c", list(itertools.permutations(WORDS[:6], 3)))
def test_min_distance_triangle_inequality(a, b, c):
    assert min_distance(a, c) <= min_distance(a, b) + min_distance(b, c)


def test_num_distinct_worked_example():
    assert num_distinct("rabbbit", "rabbit") == 3


@pytest.mark.parametrize("s", ["", "abc", "banana", "mississippi"])
def test_num_distinct_empty_target_and_self(s):
    assert num_distinct(s, "") == num_distinct(s, s)
    assert num_distinct(s, s + "x") == num_distinct("", "x")


@pytest.mark.parametrize("s, ch", [("banana", "a"), ("mississippi", "s"), ("abc", "z")])
def test_num_distinct_single_character_counts_occurrences(s, ch):
    assert num_distinct(s, ch) == s.count(ch)


def test_min_cut_worked_example():
    assert min_cut("aab") == 1


@pytest.mark.parametrize("s", ["a", "aa", "aba", "racecar", "abba"])
def test_min_cut_palindrome_needs_none(s):
    assert min_cut(s) == min_cut("a")


@pytest.mark.parametrize("s", ["ab", "abcdef", "xyz"])
def test_min_cut_distinct_characters(s):
    assert min_cut(s) == len(s) - 1


def test_min_cut_empty_is_one_below_single():
    assert min_cut("") == min_cut("a") - 1


@pytest.mark.parametrize("s", ["banana", "abacdc", "coder", "noonabbad"])
def test_min_cut_bounded_by_length(s):
    assert min_cut(s) <= len(s) - 1
    assert min_cut(s + s[::-1]) <= min_cut(s) * 2 + 1


@pytest.mark.parametrize(
    "words",
    [
        ["a", "ba", "bca", "bdca"],
        ["bdca", "a", "bca", "ba"],
        ["xb", "xbc", "cxbc", "pcxbc", "pcxbcf"],
    ],
)
def test_longest_str_chain_full_chain(words):
    assert longest_str_chain(words) == len(words)


def test_longest_str_chain_unrelated_words():
    words = ["abcd", "dbqca"]
    assert longest_str_chain(words) == len(words) - 1


def test_longest_str_chain_picks_best_branch():
    chain = ["a", "ab", "abc", "abcd"]
    assert longest_str_chain(chain + ["zz", "zzz", "q"]) == len(chain)


def test_longest_str_chain_empty_matches_single_word():
    assert longest_str_chain([]) == longest_str_chain(["solo"])