"""
Breadth-first survey over an AdjacencyGraph.

Level-order expansion with a FIFO control queue. Records, per vertex,
the edge distance from the search root, the discovery time, the BFS-tree
parent and the traversal color.
"""

import logging
from collections import deque

from ..graph import AdjacencyGraph
from .base import Color, TraceCallback

logger = logging.getLogger(__name__)


class BreadthFirstSurvey:
    """
    Breadth-first survey bound to a graph it does not own.

    The survey must be reset and re-run after any change to the graph;
    stale state is not detected.

    Usage:
        bfs = BreadthFirstSurvey(g)
        bfs.search_from(0)
        bfs.distance[5]  # hops from 0, or None if unreached
    """

    def __init__(
        self,
        graph: AdjacencyGraph,
        start: int = 0,
        trace: TraceCallback | None = None,
    ):
        if start or graph.vertex_count:
            graph.check_vertex(start)
        self.graph = graph
        self.trace = trace
        self._start = start
        self._time = 0
        self._queue: deque[int] = deque()
        self._color: list[Color] = []
        self._distance: list[int | None] = []
        self._dtime: list[int | None] = []
        self._parent: list[int | None] = []
        self.reset()

    # === STATE ACCESSORS ===

    @property
    def color(self) -> list[Color]:
        return self._color

    @property
    def distance(self) -> list[int | None]:
        return self._distance

    @property
    def discovery_time(self) -> list[int | None]:
        return self._dtime

    @property
    def parent(self) -> list[int | None]:
        return self._parent

    @property
    def start(self) -> int:
        return self._start

    @property
    def vertex_count(self) -> int:
        return self.graph.vertex_count

    @property
    def edge_count(self) -> int:
        return self.graph.edge_count

    # Numeric sentinels used when printing survey data
    @property
    def infinite_distance(self) -> int:
        return 1 + self.graph.edge_count

    @property
    def infinite_time(self) -> int:
        return self.graph.vertex_count

    @property
    def null_vertex(self) -> int:
        return self.graph.vertex_count

    # === SURVEY ===

    def reset(self, start: int | None = None) -> None:
        """
        Return every vertex to WHITE with no distance, time or parent.

        The per-vertex lists are reused; they are only reallocated when the
        graph's vertex count has changed since the last reset.

        Args:
            start: New start vertex for search_all(); unchanged if None
        """
        if start is not None:
            self.graph.check_vertex(start)
            self._start = start
        self._time = 0
        self._queue.clear()

        n = self.graph.vertex_count
        if len(self._color) != n:
            self._color = [Color.WHITE] * n
            self._distance = [None] * n
            self._dtime = [None] * n
            self._parent = [None] * n
        else:
            for x in range(n):
                self._color[x] = Color.WHITE
                self._distance[x] = None
                self._dtime[x] = None
                self._parent[x] = None

    def search_all(self) -> None:
        """
        Reset, then survey every vertex.

        Roots are taken in index order starting at ``start`` and wrapping
        around to 0, so every component gets its own BFS tree.
        """
        self.reset()
        n = self.graph.vertex_count
        for v in [*range(self._start, n), *range(0, min(self._start, n))]:
            if self._color[v] is Color.WHITE:
                self.search_from(v)

    def search_from(self, v: int) -> None:
        """
        Single-source BFS from ``v``.

        Vertices in other components are left untouched. If ``v`` has
        already been discovered in this run the call does nothing.
        """
        self.graph.check_vertex(v)
        if self._color[v] is not Color.WHITE:
            logger.debug("search_from(%d): vertex already discovered", v)
            return

        self._distance[v] = 0
        self._dtime[v] = self._tick()
        self._color[v] = Color.GREY
        self._queue.append(v)
        self._show_queue()

        while self._queue:
            front = self._queue[0]
            # Discover the unvisited neighbors of front
            for u in self.graph.adjacency(front):
                if self._color[u] is Color.WHITE:
                    self._distance[u] = self._distance[front] + 1
                    self._dtime[u] = self._tick()
                    self._parent[u] = front
                    self._color[u] = Color.GREY
                    self._queue.append(u)
                    self._show_queue()
            self._queue.popleft()
            self._show_queue()
            self._color[front] = Color.BLACK

    def search(self, v: int | None = None) -> None:
        """search_all() when ``v`` is None, otherwise search_from(v)."""
        if v is None:
            self.search_all()
        else:
            self.search_from(v)

    def _tick(self) -> int:
        t = self._time
        self._time += 1
        return t

    def _show_queue(self) -> None:
        if self.trace is not None:
            self.trace(list(self._queue))
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug("conQueue <- %s", " ".join(map(str, self._queue)) or "NULL")
