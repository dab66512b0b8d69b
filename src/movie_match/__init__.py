"""
Movie Match - degrees of separation over an actor/movie graph.

This package computes "Kevin Bacon numbers" by surveying a bipartite
actor/movie graph with breadth-first search. The survey engine (BFS and
DFS) works over any adjacency-list graph and can be used on its own.
"""

__version__ = "0.1.0"
