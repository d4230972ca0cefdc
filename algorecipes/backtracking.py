"""Backtracking problems: combination sums, palindrome partitions, permutations."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "combination_sum",
    "combination_sum2",
    "partition_palindromes",
    "is_palindrome",
    "permute",
]


def _require_positive(values: Sequence[int]) -> None:
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive integers")


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every ascending combination, reusing candidates freely, that sums to ``target``."""
    _require_positive(candidates)
    values = sorted(candidates)
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(remaining: int, start: int) -> None:
        if remaining == 0:
            result.append(list(chosen))
            return
        for index in range(start, len(values)):
            value = values[index]
            if value > remaining:
                break
            chosen.append(value)
            search(remaining - value, index)
            chosen.pop()

    if target >= 0:
        search(target, 0)
    return result


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every unique combination, using each candidate once, that sums to ``target``."""
    _require_positive(candidates)
    values = sorted(candidates)
    result: list[list[int]] = []
    chosen: list[int] = []

    def search(remaining: int, start: int) -> None:
        if remaining == 0:
            result.append(list(chosen))
            return
        for index in range(start, len(values)):
            value = values[index]
            if value > remaining:
                break
            if index > start and value == values[index - 1]:
                continue
            chosen.append(value)
            search(remaining - value, index + 1)
            chosen.pop()

    if target >= 0:
        search(target, 0)
    return result


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same backwards."""
    return s == s[::-1]


def partition_palindromes(s: str) -> list[list[str]]:
    """Return every way to split ``s`` into palindromic pieces."""
    result: list[list[str]] = []
    pieces: list[str] = []

    def search(start: int) -> None:
        if start == len(s):
            result.append(list(pieces))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if is_palindrome(piece):
                pieces.append(piece)
                search(end)
                pieces.pop()

    search(0)
    return result


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Return all permutations of ``nums`` in swap-generation order."""
    items = list(nums)
    last = len(items) - 1
    result: list[list[int]] = []

    def search(left: int) -> None:
        if left == last:
            result.append(list(items))
            return
        for index in range(left, last + 1):
            items[left], items[index] = items[index], items[left]
            search(left + 1)
            items[left], items[index] = items[index], items[left]

    search(0)
    return result