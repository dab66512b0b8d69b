"""
Graph operation handlers.

This package provides functional handlers over an AdjacencyGraph:
- traversal: depth-limited BFS with stop conditions, topological sort
- pathfinding: survey-backed shortest path, all shortest paths via NetworkX
- network: centrality, connected components, degree statistics
"""

from .base import (
    MAX_DEPTH,
    MAX_NODES,
    SubgraphTooLarge,
    to_networkx,
    # Result TypedDicts for type hints
    AllShortestPathsResult,
    CentralityResult,
    ComponentsResult,
    ShortestPathResult,
    TopologicalSortResult,
    TraverseResult,
)
from .network import (
    centrality,
    connected_components,
    degree_distribution,
    degree_sequence,
    graph_density,
)
from .pathfinding import (
    all_shortest_paths,
    shortest_path,
)
from .traversal import (
    topological_sort,
    traverse,
)

__all__ = [
    # Constants
    "MAX_DEPTH",
    "MAX_NODES",
    # Exceptions
    "SubgraphTooLarge",
    # Conversion
    "to_networkx",
    # Result TypedDicts
    "TraverseResult",
    "TopologicalSortResult",
    "ShortestPathResult",
    "AllShortestPathsResult",
    "ComponentsResult",
    "CentralityResult",
    # Traversal handlers
    "traverse",
    "topological_sort",
    # Pathfinding handlers
    "shortest_path",
    "all_shortest_paths",
    # Network handlers
    "centrality",
    "connected_components",
    "degree_distribution",
    "degree_sequence",
    "graph_density",
]
