"""
Adjacency-list graph used by the survey engine.

One structure serves both variants: the ``directed`` flag only changes how
edges are inserted and how in-degree is counted. Vertices are dense ints in
``[0, vertex_count)``; neighbor lists keep insertion order, which is the
order the surveys visit them in.
"""

import random
from collections.abc import Sequence


class AdjacencyGraph:
    """
    Adjacency-list graph over dense integer vertices.

    Usage:
        g = undirected_graph(4)
        g.add_edge(0, 1)
        g.add_edge(1, 2)
        list(g.neighbors(1))  # [0, 2]
    """

    def __init__(self, vertex_count: int = 0, directed: bool = False):
        if vertex_count < 0:
            raise ValueError(f"vertex_count must be non-negative, got {vertex_count}")
        self.directed = directed
        self._adj: list[list[int]] = [[] for _ in range(vertex_count)]

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"AdjacencyGraph({kind}, vertices={self.vertex_count}, edges={self.edge_count})"

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        """Number of edges; undirected graphs count each symmetric pair once."""
        total = sum(len(adj) for adj in self._adj)
        return total if self.directed else total // 2

    def set_vertex_count(self, n: int) -> None:
        """Grow or shrink the vertex set, keeping lists of surviving vertices."""
        if n < 0:
            raise ValueError(f"vertex_count must be non-negative, got {n}")
        if n < len(self._adj):
            del self._adj[n:]
        else:
            self._adj.extend([] for _ in range(n - len(self._adj)))

    def check_vertex(self, v: int) -> None:
        """Raise IndexError unless ``v`` is in ``[0, vertex_count)``."""
        if not 0 <= v < len(self._adj):
            raise IndexError(f"vertex {v} out of range [0, {len(self._adj)})")

    def add_edge(self, from_v: int, to_v: int) -> None:
        self.check_vertex(from_v)
        self.check_vertex(to_v)
        self._adj[from_v].append(to_v)
        if not self.directed:
            self._adj[to_v].append(from_v)

    def has_edge(self, from_v: int, to_v: int) -> bool:
        self.check_vertex(from_v)
        return to_v in self._adj[from_v]

    def neighbors(self, v: int) -> Sequence[int]:
        """Neighbors of ``v`` in native adjacency order (read-only view)."""
        self.check_vertex(v)
        return tuple(self._adj[v])

    def adjacency(self, v: int) -> list[int]:
        """
        The live adjacency list of ``v``.

        Surveys index into this list directly; callers must not mutate it.
        """
        self.check_vertex(v)
        return self._adj[v]

    def out_degree(self, v: int) -> int:
        self.check_vertex(v)
        return len(self._adj[v])

    def in_degree(self, v: int) -> int:
        self.check_vertex(v)
        if not self.directed:
            return len(self._adj[v])
        return sum(adj.count(v) for adj in self._adj)

    def edges(self) -> list[tuple[int, int]]:
        """All edges as (from, to); undirected edges are listed once per insertion."""
        result = []
        for u, adj in enumerate(self._adj):
            loops = 0
            for v in adj:
                if self.directed or u < v:
                    result.append((u, v))
                elif u == v:
                    # undirected self-loops are stored twice
                    loops += 1
                    if loops % 2:
                        result.append((u, v))
        return result

    def clear(self) -> None:
        self._adj.clear()

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Randomize the order of every adjacency list in place."""
        rng = rng or random.Random()
        for adj in self._adj:
            rng.shuffle(adj)

    def reversed(self) -> "AdjacencyGraph":
        """New directed graph with every edge reversed."""
        if not self.directed:
            raise ValueError("reversed() is only defined for directed graphs")
        rev = AdjacencyGraph(self.vertex_count, directed=True)
        for u, adj in enumerate(self._adj):
            for v in adj:
                rev._adj[v].append(u)
        return rev

    def dump(self) -> str:
        """Adjacency listing, one ``[v]->a,b,c`` line per vertex."""
        return "\n".join(
            f"[{v}]->" + ",".join(str(n) for n in adj) for v, adj in enumerate(self._adj)
        )


def undirected_graph(vertex_count: int = 0) -> AdjacencyGraph:
    """Graph storing every edge symmetrically."""
    return AdjacencyGraph(vertex_count, directed=False)


def directed_graph(vertex_count: int = 0) -> AdjacencyGraph:
    return AdjacencyGraph(vertex_count, directed=True)
