"""Prim's minimum spanning tree over an adjacency matrix."""

from __future__ import annotations

import math
from collections.abc import Sequence


def prim_mst(matrix: Sequence[Sequence[int]]) -> list[int | None]:
    """Return the parent of each vertex in a minimum spanning tree rooted at 0.

    ``matrix[u][v]`` is the weight of the edge between ``u`` and ``v``; zero
    means there is no edge. The root's parent is None. Raises ValueError if
    the graph is not connected.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []
    keys: list[float] = [math.inf] * size
    keys[0] = 0
    parents: list[int | None] = [None] * size
    in_tree = [False] * size
    for _ in range(size):
        pending = [vertex for vertex in range(size) if not in_tree[vertex]]
        current = min(pending, key=keys.__getitem__)
        if keys[current] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[current] = True
        for vertex, weight in enumerate(matrix[current]):
            if weight and not in_tree[vertex] and weight < keys[vertex]:
                parents[vertex] = current
                keys[vertex] = weight
    return parents


def format_mst(parents: Sequence[int | None], matrix: Sequence[Sequence[int]]) -> str:
    """Render the tree's edges and their weights, one edge per line."""
    lines = ["Edge \tWeight\n"]
    for vertex, parent in enumerate(parents):
        if vertex == 0:
            continue
        if parent is None:
            raise ValueError(f"vertex {vertex} has no parent")
        lines.append(f"{parent} - {vertex} \t{matrix[vertex][parent]} \n")
    return "".join(lines)