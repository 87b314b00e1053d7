"""Dense integer matrices stored as lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["shape", "add", "multiply", "transpose"]

Matrix = Sequence[Sequence[int]]


def shape(matrix: Matrix) -> tuple[int, int]:
    """Return ``(rows, columns)``; every row must have the same length."""
    rows = len(matrix)
    if rows == 0:
        return 0, 0
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("rows of a matrix must all have the same length")
    return rows, cols


def add(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the element-wise sum of two matrices of equal shape."""
    if shape(first) != shape(second):
        raise ValueError(
            f"matrix addition is not possible: shapes {shape(first)} and "
            f"{shape(second)} differ"
        )
    return [[a + b for a, b in zip(row1, row2)] for row1, row2 in zip(first, second)]


def multiply(first: Matrix, second: Matrix) -> list[list[int]]:
    """Return the matrix product; columns of ``first`` must equal rows of ``second``."""
    _, inner = shape(first)
    inner_second, _ = shape(second)
    if inner != inner_second:
        raise ValueError(
            f"matrix multiplication is not possible: {inner} columns against "
            f"{inner_second} rows"
        )
    columns = list(zip(*second))
    return [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in first]


def transpose(matrix: Matrix) -> list[list[int]]:
    """Return the matrix with rows and columns exchanged."""
    shape(matrix)
    return [list(column) for column in zip(*matrix)]