"""
NetworkX-based network analysis handlers.

Provides centrality, connected components and degree statistics over an
AdjacencyGraph. The graph is copied into NetworkX for the algorithms
that need it; degree statistics are computed directly.
"""

from typing import Any, Literal

import networkx as nx

from ..graph import AdjacencyGraph
from .base import CentralityResult, ComponentsResult, to_networkx


def centrality(
    graph: AdjacencyGraph,
    centrality_type: Literal["degree", "betweenness", "closeness", "pagerank"] = "degree",
    top_n: int = 10,
) -> CentralityResult:
    """
    Calculate centrality for vertices in the graph.

    Returns the top N most central vertices with their scores. In a
    movie graph the top "degree" vertices are the busiest actors and the
    largest casts; "betweenness" finds the bridges between film circles.

    Args:
        graph: Graph to analyze
        centrality_type: Type of centrality to calculate:
            - "degree": Number of connections (fast)
            - "betweenness": Bridge vertices between clusters (slower)
            - "closeness": Average distance to all vertices (medium)
            - "pagerank": Importance based on incoming links (medium)
        top_n: Number of top vertices to return (default 10)

    Returns:
        dict with:
            - results: list of {node: int, score: float} sorted by score desc
            - centrality_type: type of centrality calculated
            - graph_stats: basic graph statistics
            - nodes_loaded: total vertices in graph

    Raises:
        SubgraphTooLarge: If the graph exceeds MAX_NODES
        ValueError: If centrality_type is unknown
    """
    G = to_networkx(graph)

    if centrality_type == "degree":
        scores = nx.degree_centrality(G)
    elif centrality_type == "betweenness":
        scores = nx.betweenness_centrality(G)
    elif centrality_type == "closeness":
        scores = nx.closeness_centrality(G)
    elif centrality_type == "pagerank":
        scores = nx.pagerank(G)
    else:
        raise ValueError(f"Unknown centrality type: {centrality_type}")

    # Ties broken by vertex id for stable output
    ranked = sorted(scores.items(), key=lambda x: (-x[1], x[0]))[:top_n]

    return {
        "results": [{"node": node, "score": score} for node, score in ranked],
        "centrality_type": centrality_type,
        "graph_stats": graph_density(graph, G),
        "nodes_loaded": G.number_of_nodes(),
    }


def connected_components(graph: AdjacencyGraph, min_size: int = 1) -> ComponentsResult:
    """
    Find connected components (weak components for directed graphs).

    In a movie graph, each component is a set of actors who can all reach
    one another; actors outside the base actor's component have no
    degrees of separation to it.

    Args:
        graph: Graph to analyze
        min_size: Minimum component size to return (default 1)

    Raises:
        SubgraphTooLarge: If the graph exceeds MAX_NODES
    """
    G = to_networkx(graph)

    if G.is_directed():
        components = list(nx.weakly_connected_components(G))
    else:
        components = list(nx.connected_components(G))

    components = [sorted(c) for c in components if len(c) >= min_size]
    components.sort(key=lambda c: (-len(c), c[0]))

    return {
        "components": components,
        "component_count": len(components),
        "largest_size": len(components[0]) if components else 0,
        "isolated_nodes": sorted(nx.isolates(G)),
    }


def graph_density(graph: AdjacencyGraph, G: nx.Graph | None = None) -> dict[str, Any]:
    """
    Basic graph statistics: size, density, connectivity and degree range.

    Args:
        graph: Graph to analyze
        G: Already-converted NetworkX copy of ``graph``, if available
    """
    if G is None:
        G = to_networkx(graph)

    stats: dict[str, Any] = {
        "nodes": G.number_of_nodes(),
        "edges": G.number_of_edges(),
        "density": nx.density(G),
        "is_directed": G.is_directed(),
    }

    if G.number_of_nodes() == 0:
        stats["is_connected"] = False
    elif G.is_directed():
        stats["is_connected"] = nx.is_weakly_connected(G)
    else:
        stats["is_connected"] = nx.is_connected(G)

    degrees = [graph.out_degree(v) for v in range(graph.vertex_count)]
    if degrees:
        stats["avg_degree"] = sum(degrees) / len(degrees)
        stats["max_degree"] = max(degrees)
        stats["min_degree"] = min(degrees)

    return stats


def degree_distribution(graph: AdjacencyGraph) -> dict[int, int]:
    """Out-degree frequency distribution: degree -> number of vertices."""
    counts: dict[int, int] = {}
    for v in range(graph.vertex_count):
        d = graph.out_degree(v)
        counts[d] = counts.get(d, 0) + 1
    return dict(sorted(counts.items()))


def degree_sequence(graph: AdjacencyGraph, top_n: int | None = None) -> list[tuple[int, int]]:
    """
    Vertices ranked by out-degree, highest first.

    Returns:
        List of (degree, vertex); equal degrees are ordered by descending
        vertex id, matching a descending sort on the pair
    """
    ranked = sorted(
        ((graph.out_degree(v), v) for v in range(graph.vertex_count)),
        reverse=True,
    )
    return ranked if top_n is None else ranked[:top_n]
