"""Breadth-first search over adjacency matrices and adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _check_vertex(vertex: int, count: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} is outside the range 0..{count - 1}")


def matrix_breadth_first(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in breadth-first order.

    ``matrix[v][u]`` is non-zero when there is an edge from ``v`` to ``u``.
    Neighbours are explored in ascending index order.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    _check_vertex(start, size)
    visited = [False] * size
    visited[start] = True
    order: list[int] = []
    queue = deque([start])
    while queue:
        current = queue.popleft()
        order.append(current)
        for vertex, edge in enumerate(matrix[current]):
            if edge and not visited[vertex]:
                visited[vertex] = True
                queue.append(vertex)
    return order


class ListGraph:
    """Undirected graph stored as adjacency lists in edge insertion order."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    def add_edge(self, v: int, u: int) -> None:
        """Connect ``v`` and ``u`` in both directions."""
        _check_vertex(v, self.vertex_count)
        _check_vertex(u, self.vertex_count)
        self._adjacency[v].append(u)
        self._adjacency[u].append(v)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in the order they were added."""
        _check_vertex(vertex, self.vertex_count)
        return list(self._adjacency[vertex])

    def breadth_first(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        _check_vertex(start, self.vertex_count)
        visited = [False] * self.vertex_count
        visited[start] = True
        order: list[int] = []
        queue = deque([start])
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self._adjacency[current]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
        return order

    def is_bipartite(self, start: int) -> bool:
        """Two-colour the component containing ``start``; report whether it works."""
        _check_vertex(start, self.vertex_count)
        colours: list[int | None] = [None] * self.vertex_count
        colours[start] = 1
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour in self._adjacency[current]:
                if colours[neighbour] is None:
                    colours[neighbour] = 1 - colours[current]
                    queue.append(neighbour)
                elif colours[neighbour] == colours[current]:
                    return False
        return True