"""Sparse integer matrices kept in triplet form."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .matrix import shape

__all__ = ["SparseMatrix"]

Triplet = tuple[int, int, int]


@dataclass(frozen=True)
class SparseMatrix:
    """A ``rows`` by ``cols`` matrix holding only its listed entries.

    ``entries`` are ``(row, column, value)`` triplets kept in row-major order.
    """

    rows: int
    cols: int
    entries: tuple[Triplet, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        entries = tuple(sorted(tuple(entry) for entry in self.entries))
        seen: set[tuple[int, int]] = set()
        for row, col, _ in entries:
            if not (0 <= row < self.rows and 0 <= col < self.cols):
                raise ValueError(
                    f"entry ({row}, {col}) lies outside a "
                    f"{self.rows}x{self.cols} matrix"
                )
            if (row, col) in seen:
                raise ValueError(f"entry ({row}, {col}) is given more than once")
            seen.add((row, col))
        object.__setattr__(self, "entries", entries)

    @classmethod
    def from_dense(cls, matrix: Sequence[Sequence[int]]) -> SparseMatrix:
        """Build from a dense matrix, keeping its non-zero elements."""
        rows, cols = shape(matrix)
        entries = [
            (i, j, value)
            for i, row in enumerate(matrix)
            for j, value in enumerate(row)
            if value != 0
        ]
        return cls(rows, cols, tuple(entries))

    @classmethod
    def from_triplets(cls, triplets: Iterable[Sequence[int]]) -> SparseMatrix:
        """Build from a header ``(rows, cols, count)`` followed by ``count`` entries."""
        items = iter(triplets)
        try:
            rows, cols, count = next(items)
        except StopIteration:
            raise ValueError("triplet form needs a header row") from None
        entries = [tuple(t) for t in items]
        if any(len(entry) != 3 for entry in entries):
            raise ValueError("every triplet must hold row, column and value")
        if len(entries) != count:
            raise ValueError(
                f"header announces {count} entries but {len(entries)} follow"
            )
        return cls(rows, cols, tuple(entries))

    def to_triplets(self) -> list[Triplet]:
        """Return the header ``(rows, cols, count)`` followed by the entries."""
        return [(self.rows, self.cols, len(self.entries)), *self.entries]

    def to_dense(self) -> list[list[int]]:
        """Return the full matrix with zeros in unlisted places."""
        dense = [[0] * self.cols for _ in range(self.rows)]
        for row, col, value in self.entries:
            dense[row][col] = value
        return dense

    def add(self, other: SparseMatrix) -> SparseMatrix:
        """Return the sum; entries at the same place are added, even to zero."""
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError("sparse matrices of different shapes can not be added")
        combined = {(row, col): value for row, col, value in self.entries}
        for row, col, value in other.entries:
            combined[row, col] = combined.get((row, col), 0) + value
        entries = tuple((row, col, value) for (row, col), value in combined.items())
        return SparseMatrix(self.rows, self.cols, entries)

    def transpose(self) -> SparseMatrix:
        """Return the transposed matrix."""
        entries = tuple((col, row, value) for row, col, value in self.entries)
        return SparseMatrix(self.cols, self.rows, entries)