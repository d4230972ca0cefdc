# algorecipes

A collection of well-known algorithm recipes written as small, dependency-free
Python functions: two-pointer array techniques, in-place matrix transforms,
backtracking searches and hash-based lookups.

## Installation

```
pip install algorecipes
```

To run the tests:

```
pip install "algorecipes[test]"
pytest
```

## Modules

### `algorecipes.arrays`

- `three_sum(nums)`: every unique triple, each in ascending order, that sums to zero
- `three_sum_closest(nums, target)`: the sum of three elements closest to
  `target`; raises `ValueError` for fewer than three numbers
- `max_profit(prices)`: best profit from one buy followed by one later sale
  (`0` when no profit is possible)
- `find_duplicate(nums)`: the repeated value in `n + 1` numbers drawn from
  `1..n`, found by cycle detection
- `is_ideal_permutation(nums)`: whether every value of a permutation of
  `0..n-1` sits at most one place from its index, i.e. all inversions are local
- `find_max_consecutive_ones(nums)`: the length of the longest run of `1`s
- `max_subarray(nums)`: the largest sum of a non-empty contiguous slice;
  raises `ValueError` on an empty list
- `merge_intervals(intervals)`: merges overlapping `[start, end]` intervals
  into a sorted list
- `merge_sorted(nums1, m, nums2, n)`: puts the first `n` items of `nums2` after
  the first `m` of `nums1` and sorts `nums1` in place
- `missing_number(nums)`: the value of `0..n` absent from `nums`
- `move_zeroes(nums)`: moves zeros to the end in place, keeping the order of
  the rest
- `next_permutation(nums)`: rearranges in place into the next lexicographic
  permutation, wrapping round to ascending order after the last one
- `remove_duplicates(nums)`: collapses runs of equal values to the front in
  place and returns how many remain
- `remove_element(nums, val)`: moves the items not equal to `val` to the front
  in place and returns their count
- `sort_colors(nums)`: sorts a list of `0`, `1` and `2` in place; raises
  `ValueError` if any other value is present
- `trap(heights)`: the rain water held by an elevation map

### `algorecipes.matrix`

- `generate_pascal(rows)`: the first `rows` rows of Pascal's triangle; raises
  `ValueError` for a negative count
- `rotate(matrix)`: rotates a square matrix 90 degrees clockwise in place;
  raises `ValueError` if the matrix is not square
- `set_zeroes(matrix)`: zeroes, in place, every row and column that holds a zero

### `algorecipes.backtracking`

- `combination_sum(candidates, target)`: every ascending combination that sums
  to `target`, each candidate usable any number of times
- `combination_sum2(candidates, target)`: every unique combination that sums
  to `target`, each candidate used at most once
- Both raise `ValueError` unless all candidates are positive integers, and
  return an empty list for a negative target.
- `partition_palindromes(s)`: every way to split `s` into palindromic pieces
- `is_palindrome(s)`: whether `s` reads the same backwards
- `permute(nums)`: every ordering of `nums`, in swap-generation order

### `algorecipes.hashing`

- `four_sum(nums, target)`: all unique ascending quadruplets that sum to `target`
- `find_max_length(nums)`: the length of the longest slice of a 0/1 list with
  as many `0`s as `1`s
- `longest_consecutive(nums)`: the length of the longest run of consecutive
  integers among the values
- `length_of_longest_substring(s)`: the length of the longest substring
  without a repeated character
- `two_sum(nums, target)`: indices of the first pair that adds up to `target`,
  or an empty list if there is none

## Example

```python
from algorecipes.arrays import three_sum, trap
from algorecipes.matrix import rotate
from algorecipes.hashing import two_sum

three_sum([-1, 0, 1, 2, -1, -4])            # [[-1, -1, 2], [-1, 0, 1]]
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
two_sum([2, 7, 11, 15], 9)                  # [0, 1]

grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
rotate(grid)                                # grid is now [[7, 4, 1], [8, 5, 2], [9, 6, 3]]
```

Functions that describe an in-place change (`rotate`, `set_zeroes`,
`move_zeroes`, `sort_colors`, `next_permutation`, `merge_sorted`,
`remove_duplicates`, `remove_element`) modify the list they are given.

## What it does not do

This is a library of functions only: it has no command-line tool, and the
functions read no files and keep no state between calls.