import math
from itertools import combinations, permutations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algorecipes.backtracking import (
    combination_sum,
    combination_sum2,
    is_palindrome,
    partition_palindromes,
    permute,
)


def test_combination_sum_worked_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


@settings(max_examples=50)
@given(
    st.lists(st.integers(min_value=1, max_value=8), min_size=1, max_size=5, unique=True),
    st.integers(min_value=0, max_value=15),
)
def test_combination_sum_invariants(candidates, target):
    result = combination_sum(candidates, target)
    for combo in result:
        assert sum(combo) == target
        assert combo == sorted(combo)
        assert set(combo) <= set(candidates)
    assert len({tuple(combo) for combo in result}) == len(result)
    assert result == sorted(result)


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 1], 3)


def test_combination_sum2_worked_example():
    assert combination_sum2([10, 1, 2, 7, 6, 1, 5], 8) == [
        [1, 1, 6],
        [1, 2, 5],
        [1, 7],
        [2, 6],
    ]


@settings(max_examples=50)
@given(
    st.lists(st.integers(min_value=1, max_value=6), max_size=7),
    st.integers(min_value=0, max_value=12),
)
def test_combination_sum2_matches_subsets(candidates, target):
    result = combination_sum2(candidates, target)
    expected = {
        tuple(sorted(combo))
        for size in range(len(candidates) + 1)
        for combo in combinations(candidates, size)
        if sum(combo) == target
    }
    assert {tuple(combo) for combo in result} == expected
    assert len(result) == len(expected)


def test_combination_sum2_rejects_negative():
    with pytest.raises(ValueError):
        combination_sum2([-1, 2], 1)


def test_partition_worked_example():
    assert partition_palindromes("aab") == [["a", "a", "b"], ["aa", "b"]]


@given(st.text(alphabet="ab", max_size=8))
def test_partition_invariants(s):
    result = partition_palindromes(s)
    for pieces in result:
        assert "".join(pieces) == s
        assert all(is_palindrome(piece) for piece in pieces)
    assert list(s) in result or s == ""


def test_partition_distinct_letters_has_single_split():
    s = "abcdef"
    assert partition_palindromes(s) == [list(s)]


@given(st.text(max_size=10))
def test_is_palindrome_of_mirrored_text(s):
    assert is_palindrome(s + s[::-1]) is True
    assert is_palindrome(s + "x" + s[::-1]) is True


def test_is_palindrome_detects_mismatch():
    assert is_palindrome("ab") is False


@given(st.lists(st.integers(), max_size=5, unique=True).filter(lambda xs: len(xs) > 0))
def test_permute_matches_library(nums):
    result = permute(nums)
    assert len(result) == math.factorial(len(nums))
    assert sorted(result) == sorted(list(p) for p in permutations(nums))
    assert result[0] == nums


def test_permute_does_not_modify_input():
    nums = [3, 1, 2]
    permute(nums)
    assert nums == [3, 1, 2]


def test_permute_empty():
    assert permute([]) == []