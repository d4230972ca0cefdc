"""Matrix problems: Pascal's triangle, rotation and zero propagation."""

from __future__ import annotations

__all__ = ["generate_pascal", "rotate", "set_zeroes"]


def generate_pascal(rows: int) -> list[list[int]]:
    """Return the first ``rows`` rows of Pascal's triangle."""
    if rows < 0:
        raise ValueError("rows must not be negative")
    triangle: list[list[int]] = []
    for index in range(rows):
        if index == 0:
            triangle.append([1])
        else:
            above = triangle[-1]
            triangle.append([1, *(a + b for a, b in zip(above, above[1:])), 1])
    return triangle


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                if j < len(row):
                    row[j] = 0