"""Directed graphs given as edge lists over vertices 0 to n - 1."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from .matrix import multiply

__all__ = [
    "vertex_count",
    "adjacency_matrix",
    "incidence_matrix",
    "path_matrix",
    "bfs",
    "dfs",
]

Edge = tuple[int, int]


def _edges(edges: Iterable[Sequence[int]]) -> list[Edge]:
    checked: list[Edge] = []
    for edge in edges:
        if len(edge) != 2:
            raise ValueError("every edge must hold a source and a target")
        source, target = edge
        if source < 0 or target < 0:
            raise ValueError(f"edge ({source}, {target}) has a negative vertex")
        checked.append((source, target))
    return checked


def vertex_count(edges: Iterable[Sequence[int]]) -> int:
    """Return one more than the largest vertex named by any edge."""
    return max((max(edge) for edge in _edges(edges)), default=-1) + 1


def adjacency_matrix(edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return the matrix with 1 at ``[source][target]`` for every edge."""
    checked = _edges(edges)
    size = vertex_count(checked)
    matrix = [[0] * size for _ in range(size)]
    for source, target in checked:
        matrix[source][target] = 1
    return matrix


def incidence_matrix(edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return a vertices-by-edges matrix: 1 where an edge leaves, -1 where it enters.

    For a self loop the entering mark wins.
    """
    checked = _edges(edges)
    size = vertex_count(checked)
    matrix = [[0] * len(checked) for _ in range(size)]
    for column, (source, target) in enumerate(checked):
        matrix[source][column] = 1
        matrix[target][column] = -1
    return matrix


def path_matrix(edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Return 1 at ``[i][j]`` when a path of one or more edges leads from i to j."""
    adjacency = adjacency_matrix(edges)
    size = len(adjacency)
    reach = [row[:] for row in adjacency]
    power = [row[:] for row in adjacency]
    for _ in range(size - 1):
        power = [[1 if cell else 0 for cell in row] for row in multiply(power, adjacency)]
        reach = [
            [1 if a or b else 0 for a, b in zip(reach_row, power_row)]
            for reach_row, power_row in zip(reach, power)
        ]
    return reach


def _successors(adjacency: list[list[int]]) -> list[list[int]]:
    return [[j for j, linked in enumerate(row) if linked] for row in adjacency]


def _check_start(start: int, size: int) -> None:
    if not 0 <= start < size:
        raise ValueError(f"start vertex {start} is not in the graph of {size} vertices")


def bfs(edges: Iterable[Sequence[int]], start: int) -> list[int]:
    """Return vertices in breadth-first order from ``start``, lower vertices first."""
    successors = _successors(adjacency_matrix(edges))
    _check_start(start, len(successors))
    visited = {start}
    order = [start]
    pending = deque([start])
    while pending:
        node = pending.popleft()
        for neighbour in successors[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                pending.append(neighbour)
    return order


def dfs(edges: Iterable[Sequence[int]], start: int) -> list[int]:
    """Return vertices in depth-first order from ``start``, lower vertices first."""
    successors = _successors(adjacency_matrix(edges))
    _check_start(start, len(successors))
    visited = {start}
    order = [start]
    stack = [iter(successors[start])]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                order.append(neighbour)
                stack.append(iter(successors[neighbour]))
                break
        else:
            stack.pop()
    return order