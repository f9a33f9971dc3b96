"""Undirected graph with adjacency lists and depth-first search."""

from __future__ import annotations


class Graph:
    """Undirected graph whose adjacency lists hold the newest edge first."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise ValueError(
                f"vertex {vertex} is outside the range 0..{self.vertex_count - 1}"
            )

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest``, placing each at the front of the other's list."""
        self._check_vertex(src)
        self._check_vertex(dest)
        self._adjacency[src].insert(0, dest)
        self._adjacency[dest].insert(0, src)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex``, most recently added first."""
        self._check_vertex(vertex)
        return list(self._adjacency[vertex])

    def describe(self) -> str:
        """Render every adjacency list as text."""
        parts: list[str] = []
        for vertex, neighbours in enumerate(self._adjacency):
            parts.append(f"\n Adjacency list of vertex {vertex}\n ")
            parts.extend(f"{neighbour} -> " for neighbour in neighbours)
            parts.append("\n")
        return "".join(parts)

    def depth_first(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first preorder."""
        self._check_vertex(start)
        visited = [False] * self.vertex_count
        order: list[int] = []
        stack = [start]
        while stack:
            vertex = stack.pop()
            if visited[vertex]:
                continue
            visited[vertex] = True
            order.append(vertex)
            stack.extend(
                neighbour
                for neighbour in reversed(self._adjacency[vertex])
                if not visited[neighbour]
            )
        return order