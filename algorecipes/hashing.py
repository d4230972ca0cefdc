"""Hash-based problems: k-sums, balanced runs, sequences and windows."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "four_sum",
    "find_max_length",
    "longest_consecutive",
    "length_of_longest_substring",
    "two_sum",
]


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return all unique ascending quadruplets that sum to ``target``."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    for i in range(size):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, size):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            wanted = target - values[i] - values[j]
            low, high = j + 1, size - 1
            while low < high:
                pair = values[low] + values[high]
                if pair < wanted:
                    low += 1
                elif pair > wanted:
                    high -= 1
                else:
                    third, fourth = values[low], values[high]
                    result.append([values[i], values[j], third, fourth])
                    while low < high and values[low] == third:
                        low += 1
                    while low < high and values[high] == fourth:
                        high -= 1
    return result


def find_max_length(nums: Sequence[int]) -> int:
    """Return the length of the longest slice with equal counts of zeros and ones."""
    first_seen = {0: -1}
    balance = 0
    best = 0
    for index, value in enumerate(nums):
        balance += -1 if value == 0 else value
        if balance in first_seen:
            best = max(best, index - first_seen[balance])
        else:
            first_seen[balance] = index
    return best


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``."""
    present = set(nums)
    best = 0
    for value in present:
        if value - 1 in present:
            continue
        length = 1
        while value + length in present:
            length += 1
        best = max(best, length)
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = -1
    best = 0
    for index, char in enumerate(s):
        if char in last_seen:
            start = max(start, last_seen[char])
        last_seen[char] = index
        best = max(best, index - start)
    return best


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of the first pair summing to ``target``, or an empty list."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [partner, index]
        seen.setdefault(value, index)
    return []