"""
Depth-limited graph traversal and topological sort.

traverse() expands one BFS level at a time so it can stop at a depth
limit or at vertices matching a stop condition; use BreadthFirstSurvey
when a complete survey of the graph is wanted instead.
"""

from collections import deque
from collections.abc import Callable

from ..graph import AdjacencyGraph
from .base import MAX_DEPTH, TopologicalSortResult, TraverseResult


def traverse(
    graph: AdjacencyGraph,
    start_id: int,
    max_depth: int = 10,
    stop_condition: Callable[[int], bool] | None = None,
    include_start: bool = True,
) -> TraverseResult:
    """
    Level-by-level traversal from ``start_id``.

    Args:
        graph: Graph to traverse
        start_id: Starting vertex
        max_depth: Maximum traversal depth (clamped to MAX_DEPTH)
        stop_condition: Predicate marking terminal vertices. Terminal
                        vertices are included but not expanded.
        include_start: Whether to include the start vertex in results

    Returns:
        TraverseResult dict

    Example:
        >>> # Every movie and co-star within two hops of an actor
        >>> result = traverse(mm.graph, kevin, max_depth=2)
        >>> len(result["nodes"])
    """
    max_depth = min(max_depth, MAX_DEPTH)

    frontier: list[int] = [start_id]
    visited: set[int] = {start_id}
    order: list[int] = [start_id]
    paths: dict[int, list[int]] = {start_id: [start_id]}
    edges_traversed: list[tuple[int, int]] = []
    terminated_at: list[int] = []
    depth_reached = 0

    if stop_condition and stop_condition(start_id):
        terminated_at.append(start_id)

    for depth in range(max_depth):
        # Terminal vertices are not expanded
        terminal = set(terminated_at)
        expandable = [v for v in frontier if v not in terminal]
        if not expandable:
            break

        next_frontier: list[int] = []
        for source in expandable:
            for target in graph.adjacency(source):
                if target in visited:
                    continue
                visited.add(target)
                order.append(target)
                next_frontier.append(target)
                edges_traversed.append((source, target))
                paths[target] = paths[source] + [target]
                if stop_condition and stop_condition(target):
                    terminated_at.append(target)

        if not next_frontier:
            break
        frontier = next_frontier
        depth_reached = depth + 1

    if not include_start:
        order = order[1:]
        paths = {k: v for k, v in paths.items() if k != start_id}

    return {
        "nodes": order,
        "paths": paths,
        "edges": edges_traversed,
        "depth_reached": depth_reached,
        "nodes_visited": len(visited),
        "terminated_at": terminated_at,
    }


def topological_sort(graph: AdjacencyGraph) -> TopologicalSortResult:
    """
    Topological sort of a directed graph (queue-driven in-degree method).

    Sources are processed in FIFO order. If the graph has a cycle the
    vertices on or behind it are never released, so ``order`` is partial
    and ``is_dag`` is False.

    Raises:
        ValueError: If the graph is undirected
    """
    if not graph.directed:
        raise ValueError("topological_sort requires a directed graph")

    in_degree = [0] * graph.vertex_count
    for v in range(graph.vertex_count):
        for w in graph.adjacency(v):
            in_degree[w] += 1

    queue = deque(v for v in range(graph.vertex_count) if in_degree[v] == 0)
    order: list[int] = []
    while queue:
        v = queue.popleft()
        order.append(v)
        for w in graph.adjacency(v):
            in_degree[w] -= 1
            if in_degree[w] == 0:
                queue.append(w)

    return {"order": order, "is_dag": len(order) == graph.vertex_count}
