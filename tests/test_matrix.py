import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algorecipes.matrix import generate_pascal, rotate, set_zeroes


def test_pascal_fifth_row():
    assert generate_pascal(5)[4] == [1, 4, 6, 4, 1]


def test_pascal_empty():
    assert generate_pascal(0) == []


@given(st.integers(min_value=1, max_value=15))
def test_pascal_shape_and_sums(rows):
    triangle = generate_pascal(rows)
    assert len(triangle) == rows
    for index, row in enumerate(triangle):
        assert len(row) == index + 1
        assert row[0] == row[-1] == 1
        assert sum(row) == 2**index
        assert row == row[::-1]


def test_pascal_negative_rows():
    with pytest.raises(ValueError):
        generate_pascal(-1)


def test_rotate_two_by_two():
    matrix = [[1, 2], [3, 4]]
    rotate(matrix)
    assert matrix == [[3, 1], [4, 2]]


square = st.integers(min_value=0, max_value=5).flatmap(
    lambda n: st.lists(
        st.lists(st.integers(-9, 9), min_size=n, max_size=n), min_size=n, max_size=n
    )
)


@given(square)
def test_rotate_four_times_is_identity(matrix):
    original = copy.deepcopy(matrix)
    for _ in range(4):
        rotate(matrix)
    assert matrix == original


@given(square)
def test_rotate_moves_first_row_to_last_column(matrix):
    original = copy.deepcopy(matrix)
    rotate(matrix)
    if original:
        assert [row[-1] for row in matrix] == original[0]


def test_rotate_rejects_non_square():
    with pytest.raises(ValueError):
        rotate([[1, 2, 3], [4, 5, 6]])


rectangle = st.tuples(st.integers(1, 5), st.integers(1, 5)).flatmap(
    lambda shape: st.lists(
        st.lists(st.integers(0, 3), min_size=shape[1], max_size=shape[1]),
        min_size=shape[0],
        max_size=shape[0],
    )
)


@given(rectangle)
def test_set_zeroes(matrix):
    original = copy.deepcopy(matrix)
    set_zeroes(matrix)
    for i, row in enumerate(original):
        for j, value in enumerate(row):
            hit = 0 in row or any(r[j] == 0 for r in original)
            assert matrix[i][j] == (0 if hit else value)