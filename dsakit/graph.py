"""Undirected graphs stored as adjacency lists."""

from __future__ import annotations


class _AdjacencyGraph:
    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self._vertices = vertices
        self._adj: list[list] = [[] for _ in range(vertices)]

    @property
    def vertices(self) -> int:
        return self._vertices

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self._vertices:
            raise IndexError(f"vertex {vertex} out of range")

    def __len__(self) -> int:
        return self._vertices


class Graph(_AdjacencyGraph):
    """An undirected, unweighted graph with vertices ``0 .. vertices-1``."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._adj[v].append(u)

    def neighbors(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in insertion order."""
        self._check(vertex)
        return list(self._adj[vertex])

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex} -> " + "".join(f"{n} " for n in adjacent)
            for vertex, adjacent in enumerate(self._adj)
        )


class WeightedGraph(_AdjacencyGraph):
    """An undirected graph whose edges carry weights."""

    def __init__(self, vertices: int) -> None:
        super().__init__(vertices)

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Connect ``u`` and ``v`` in both directions with ``weight``."""
        self._check(u)
        self._check(v)
        self._adj[u].append((v, weight))
        self._adj[v].append((u, weight))

    def neighbors(self, vertex: int) -> list[tuple[int, int]]:
        """Return ``(neighbour, weight)`` pairs of ``vertex`` in insertion order."""
        self._check(vertex)
        return list(self._adj[vertex])

    def __str__(self) -> str:
        return "\n".join(
            f"{vertex} -> "
            + "".join(f"({n}, weight={w}) " for n, w in adjacent)
            for vertex, adjacent in enumerate(self._adj)
        )