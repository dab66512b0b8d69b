"""
Core handler infrastructure: result types, safety limits, exceptions.

Handlers are plain functions over an AdjacencyGraph. They return
TypedDicts so callers get IDE support while staying JSON-friendly.
"""

from typing import Any, TypedDict

import networkx as nx

from ..graph import AdjacencyGraph


# === TYPED RESULT DICTIONARIES ===


class TraverseResult(TypedDict):
    """Result type for traverse()."""

    nodes: list[int]
    """Vertices reached, in discovery order."""

    paths: dict[int, list[int]]
    """Map of vertex to path (list of vertices from the start vertex)."""

    edges: list[tuple[int, int]]
    """Tree edges (from, to) used to reach each vertex."""

    depth_reached: int
    """Deepest level expanded."""

    nodes_visited: int
    """Total vertices visited."""

    terminated_at: list[int]
    """Vertices where traversal stopped due to stop_condition."""


class TopologicalSortResult(TypedDict):
    """Result type for topological_sort()."""

    order: list[int]
    """Vertices in topological order (partial if the graph has a cycle)."""

    is_dag: bool
    """True if every vertex was ordered."""


class ShortestPathResult(TypedDict):
    """Result type for shortest_path()."""

    path: list[int] | None
    """Vertices from start to end, or None if no path found."""

    distance: int | None
    """Number of edges on the path, or None if no path found."""

    nodes_explored: int
    """Vertices discovered by the search."""

    error: str | None
    """Error message if no path found, None otherwise."""


class AllShortestPathsResult(TypedDict):
    """Result type for all_shortest_paths()."""

    paths: list[list[int]]
    """Every shortest path, each a list of vertices."""

    distance: int | None
    """Common length of all shortest paths."""

    path_count: int
    """Number of paths found."""

    error: str | None
    """Error message if no paths found."""


class ComponentsResult(TypedDict):
    """Result type for connected_components()."""

    components: list[list[int]]
    """Components as sorted vertex lists, largest first."""

    component_count: int
    """Number of components."""

    largest_size: int
    """Size of the largest component."""

    isolated_nodes: list[int]
    """Vertices with no edges."""


class CentralityResult(TypedDict):
    """Result type for centrality()."""

    results: list[dict[str, Any]]
    """List of {node: int, score: float} sorted by score descending."""

    centrality_type: str
    """Type of centrality calculated (degree, betweenness, etc.)."""

    graph_stats: dict[str, Any]
    """Basic graph statistics (nodes, edges, density)."""

    nodes_loaded: int
    """Total vertices in graph."""


# === SAFETY LIMITS ===
MAX_DEPTH = 50  # Absolute traversal depth limit for traverse()
MAX_NODES = 250_000  # Max vertices copied into NetworkX


class SubgraphTooLarge(Exception):
    """Raised when a graph is too large for a NetworkX-backed handler."""

    pass


def to_networkx(graph: AdjacencyGraph, max_nodes: int | None = None) -> nx.Graph:
    """
    Copy an AdjacencyGraph into NetworkX.

    Every vertex is added, including isolated ones.

    Args:
        graph: Source graph
        max_nodes: Override default MAX_NODES limit

    Returns:
        nx.DiGraph for directed graphs, nx.Graph otherwise

    Raises:
        SubgraphTooLarge: If the graph exceeds the node limit
    """
    limit = max_nodes if max_nodes is not None else MAX_NODES
    if graph.vertex_count > limit:
        raise SubgraphTooLarge(
            f"Graph has {graph.vertex_count:,} nodes, exceeds limit {limit:,}."
        )
    G = nx.DiGraph() if graph.directed else nx.Graph()
    G.add_nodes_from(range(graph.vertex_count))
    G.add_edges_from(graph.edges())
    return G
