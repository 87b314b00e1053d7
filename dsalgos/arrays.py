"""Basic operations on integer arrays held in Python lists."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["array_sum", "largest", "insert_at", "delete_at", "merge_sorted"]


def array_sum(values: Sequence[int]) -> int:
    """Return the sum of all elements."""
    return sum(values)


def largest(values: Sequence[int]) -> int:
    """Return the largest element; an empty sequence has none."""
    if not values:
        raise ValueError("largest() of an empty sequence")
    return max(values)


def insert_at(values: Sequence[int], index: int, value: int) -> list[int]:
    """Return a new list with ``value`` placed at ``index`` (0 to len inclusive)."""
    if not 0 <= index <= len(values):
        raise IndexError(
            f"can not insert at index {index}; valid range is 0 to {len(values)}"
        )
    return [*values[:index], value, *values[index:]]


def delete_at(values: Sequence[int], index: int) -> list[int]:
    """Return a new list without the element at ``index`` (0 to len - 1)."""
    if not 0 <= index < len(values):
        raise IndexError(
            f"can not delete index {index}; valid range is 0 to {len(values) - 1}"
        )
    return [*values[:index], *values[index + 1:]]


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list.

    On equal elements the one from ``second`` is taken first.
    """
    merged: list[int] = []
    left, right = iter(first), iter(second)
    a = next(left, None)
    b = next(right, None)
    while a is not None and b is not None:
        if a < b:
            merged.append(a)
            a = next(left, None)
        else:
            merged.append(b)
            b = next(right, None)
    if a is not None:
        merged.append(a)
        merged.extend(left)
    if b is not None:
        merged.append(b)
        merged.extend(right)
    return merged