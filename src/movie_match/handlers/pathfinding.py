"""
Unweighted shortest-path handlers.

shortest_path() runs a single-source BreadthFirstSurvey and walks parent
pointers back from the target. all_shortest_paths() enumerates every
tie via NetworkX.
"""

import networkx as nx

from ..graph import AdjacencyGraph
from ..survey import BreadthFirstSurvey, Color, tree_path
from .base import AllShortestPathsResult, ShortestPathResult, to_networkx


def shortest_path(
    graph: AdjacencyGraph,
    start_id: int,
    end_id: int,
    survey: BreadthFirstSurvey | None = None,
) -> ShortestPathResult:
    """
    Find a shortest path between two vertices by hop count.

    Args:
        graph: Graph to search
        start_id: Starting vertex
        end_id: Target vertex
        survey: Optional survey bound to ``graph`` to reuse; it is reset

    Returns:
        dict with:
            - path: vertices from start to end (None if no path)
            - distance: number of edges (None if no path)
            - nodes_explored: vertices discovered by the search
            - error: error message if no path found

    Raises:
        IndexError: If either vertex is out of range
        ValueError: If ``survey`` is bound to another graph

    Example:
        >>> result = shortest_path(g, 0, 5)
        >>> result["distance"] == len(result["path"]) - 1
        True
    """
    bfs = survey if survey is not None else BreadthFirstSurvey(graph)
    if bfs.graph is not graph:
        raise ValueError("survey is bound to a different graph")
    graph.check_vertex(end_id)
    bfs.reset()
    bfs.search_from(start_id)

    nodes_explored = sum(1 for c in bfs.color if c is not Color.WHITE)

    if bfs.color[end_id] is not Color.BLACK:
        return {
            "path": None,
            "distance": None,
            "nodes_explored": nodes_explored,
            "error": f"No path found from {start_id} to {end_id}",
        }

    path = tree_path(bfs.parent, end_id)
    path.reverse()
    return {
        "path": path,
        "distance": bfs.distance[end_id],
        "nodes_explored": nodes_explored,
        "error": None,
    }


def all_shortest_paths(
    graph: AdjacencyGraph,
    start_id: int,
    end_id: int,
    max_paths: int = 10,
) -> AllShortestPathsResult:
    """
    Find every shortest path between two vertices (up to ``max_paths``).

    Useful for showing alternative chains of movies between two actors.

    Raises:
        SubgraphTooLarge: If the graph exceeds MAX_NODES
    """
    G = to_networkx(graph)
    try:
        paths = []
        for path in nx.all_shortest_paths(G, start_id, end_id):
            paths.append(list(path))
            if len(paths) >= max_paths:
                break
    except nx.NetworkXNoPath:
        return {
            "paths": [],
            "distance": None,
            "path_count": 0,
            "error": f"No path found from {start_id} to {end_id}",
        }

    return {
        "paths": paths,
        "distance": len(paths[0]) - 1,
        "path_count": len(paths),
        "error": None,
    }
