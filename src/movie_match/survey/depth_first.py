"""
Depth-first survey over an AdjacencyGraph.

Iterative, non-recursive DFS: the control stack holds the active path and
each vertex keeps a cursor into its adjacency list, so re-entering a vertex
resumes its neighbor scan where it stopped. Discovery and finish times draw
from one shared clock and therefore range over [0, 2 * vertex_count).
"""

import logging
from collections import deque

from ..graph import AdjacencyGraph
from .base import Color, TraceCallback

logger = logging.getLogger(__name__)


class DepthFirstSurvey:
    """
    Depth-first survey bound to a graph it does not own.

    Usage:
        dfs = DepthFirstSurvey(g)
        dfs.search_all()
        dfs.discovery_time[v] < dfs.finish_time[v]  # always True once BLACK
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
        self._stack: deque[int] = deque()
        self._color: list[Color] = []
        self._dtime: list[int | None] = []
        self._ftime: list[int | None] = []
        self._parent: list[int | None] = []
        self._cursor: list[int] = []
        self.reset()

    # === STATE ACCESSORS ===

    @property
    def color(self) -> list[Color]:
        return self._color

    @property
    def discovery_time(self) -> list[int | None]:
        return self._dtime

    @property
    def finish_time(self) -> list[int | None]:
        return self._ftime

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

    @property
    def infinite_time(self) -> int:
        return 2 * self.graph.vertex_count

    @property
    def null_vertex(self) -> int:
        return self.graph.vertex_count

    # === SURVEY ===

    def reset(self, start: int | None = None) -> None:
        """
        Return every vertex to WHITE and rewind every neighbor cursor.

        Args:
            start: New start vertex for search_all(); unchanged if None
        """
        if start is not None:
            self.graph.check_vertex(start)
            self._start = start
        self._time = 0
        self._stack.clear()

        n = self.graph.vertex_count
        if len(self._color) != n:
            self._color = [Color.WHITE] * n
            self._dtime = [None] * n
            self._ftime = [None] * n
            self._parent = [None] * n
            self._cursor = [0] * n
        else:
            for x in range(n):
                self._color[x] = Color.WHITE
                self._dtime[x] = None
                self._ftime[x] = None
                self._parent[x] = None
                self._cursor[x] = 0

    def search_all(self) -> None:
        """Reset, then survey every vertex starting at ``start`` and wrapping around."""
        self.reset()
        n = self.graph.vertex_count
        for v in [*range(self._start, n), *range(0, min(self._start, n))]:
            if self._color[v] is Color.WHITE:
                self.search_from(v)

    def search_from(self, v: int) -> None:
        """
        Single-source DFS from ``v``; a no-op if ``v`` is already discovered.
        """
        self.graph.check_vertex(v)
        if self._color[v] is not Color.WHITE:
            logger.debug("search_from(%d): vertex already discovered", v)
            return

        self._dtime[v] = self._tick()
        self._color[v] = Color.GREY
        self._stack.append(v)
        self._show_stack()

        while self._stack:
            top = self._stack[-1]
            u = self._next_neighbor(top)
            if u is not None:
                self._dtime[u] = self._tick()
                self._parent[u] = top
                self._color[u] = Color.GREY
                self._stack.append(u)
                self._show_stack()
            else:
                self._stack.pop()
                self._show_stack()
                self._color[top] = Color.BLACK
                self._ftime[top] = self._tick()

    def search(self, v: int | None = None) -> None:
        """search_all() when ``v`` is None, otherwise search_from(v)."""
        if v is None:
            self.search_all()
        else:
            self.search_from(v)

    def _next_neighbor(self, x: int) -> int | None:
        """Advance x's cursor past discovered neighbors; return the next WHITE one."""
        adj = self.graph.adjacency(x)
        i = self._cursor[x]
        while i < len(adj) and self._color[adj[i]] is not Color.WHITE:
            i += 1
        self._cursor[x] = i
        return adj[i] if i < len(adj) else None

    def _tick(self) -> int:
        t = self._time
        self._time += 1
        return t

    def _show_stack(self) -> None:
        if self.trace is not None:
            self.trace(list(self._stack))
        elif logger.isEnabledFor(logging.DEBUG):
            logger.debug("conStack -> %s", " ".join(map(str, self._stack)) or "NULL")
