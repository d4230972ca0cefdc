"""Classic array problems: sums, intervals, permutations and in-place edits."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, groupby

__all__ = [
    "three_sum_closest",
    "three_sum",
    "max_profit",
    "find_duplicate",
    "is_ideal_permutation",
    "find_max_consecutive_ones",
    "max_subarray",
    "merge_intervals",
    "merge_sorted",
    "missing_number",
    "move_zeroes",
    "next_permutation",
    "remove_duplicates",
    "remove_element",
    "sort_colors",
    "trap",
]


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three elements that lies closest to ``target``."""
    if len(nums) < 3:
        raise ValueError("at least three numbers are required")
    values = sorted(nums)
    best = 0
    best_diff = float("inf")
    for i, first in enumerate(values[:-2]):
        wanted = target - first
        low, high = i + 1, len(values) - 1
        while low < high:
            pair = values[low] + values[high]
            if abs(pair - wanted) < abs(best_diff):
                best = first + pair
                best_diff = best - target
            if pair > wanted:
                high -= 1
            elif pair < wanted:
                low += 1
            else:
                low += 1
                high -= 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return all unique triples, in ascending order, that sum to zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values[:-2]):
        if i > 0 and first == values[i - 1]:
            continue
        wanted = -first
        low, high = i + 1, len(values) - 1
        while low < high:
            pair = values[low] + values[high]
            if pair > wanted:
                high -= 1
            elif pair < wanted:
                low += 1
            else:
                second, third = values[low], values[high]
                result.append([first, second, third])
                while low < high and values[low] == second:
                    low += 1
                while high > low and values[high] == third:
                    high -= 1
    return result


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sale."""
    if len(prices) < 2:
        return 0
    best = 0
    lowest = prices[0]
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def find_duplicate(nums: Sequence[int]) -> int:
    """Return the repeated value in a list of n+1 numbers drawn from 1..n."""
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return fast


def is_ideal_permutation(nums: Sequence[int]) -> bool:
    """Tell whether a permutation of 0..n-1 has only local inversions."""
    return all(abs(value - index) <= 1 for index, value in enumerate(nums))


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of ones."""
    return max(
        (sum(1 for _ in run) for key, run in groupby(nums) if key == 1),
        default=0,
    )


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous slice."""
    if not nums:
        raise ValueError("max_subarray() requires at least one number")
    current = best = nums[0]
    for value in nums[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals into a sorted list."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if merged and merged[-1][1] >= start:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` items of ``nums2`` into ``nums1`` in place."""
    nums1[m : m + n] = nums2[:n]
    nums1.sort()


def missing_number(nums: Sequence[int]) -> int:
    """Return the one number of 0..n absent from ``nums``."""
    size = len(nums)
    return size * (size + 1) // 2 - sum(nums)


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the other order."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into its next lexicographic permutation."""
    pivot = next(
        (i - 1 for i in range(len(nums) - 1, 0, -1) if nums[i - 1] < nums[i]),
        None,
    )
    if pivot is None:
        nums.sort()
        return
    swap = next(j for j in range(len(nums) - 1, pivot, -1) if nums[pivot] < nums[j])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1 :] = nums[:pivot:-1]


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal values to the front in place; return the count."""
    unique = [key for key, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def remove_element(nums: list[int], val: int) -> int:
    """Move the items not equal to ``val`` to the front; return their count."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0, 1 and 2 values in place."""
    counts = Counter(nums)
    unknown = set(counts) - {0, 1, 2}
    if unknown:
        raise ValueError(f"colours must be 0, 1 or 2, got {sorted(unknown)}")
    nums[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def trap(heights: Sequence[int]) -> int:
    """Return how much water the elevation map ``heights`` holds."""
    if not heights:
        return 0
    left = list(accumulate(heights, max))
    right = list(accumulate(reversed(heights), max))[::-1]
    return sum(min(l, r) - h for l, r, h in zip(left, right, heights))