"""
Pytest fixtures shared across the movie_match tests.

Provides:
- Small hand-checked graphs for survey tests
- A tiny movie database (two connected components)
- Random graphs for property tests against NetworkX
"""

import random

import pytest

from movie_match.engine import MovieMatch
from movie_match.graph import AdjacencyGraph, undirected_graph

# A - M1 - B - M2 - C, plus a separate D - M3 - E component
CHAIN_RECORDS = [
    "M1 (2001)/A/B",
    "M2 (2002)/B/C",
    "M3 (2003)/D/E",
]


def make_random_graph(seed: int, n: int = 40, m: int = 60, directed: bool = False) -> AdjacencyGraph:
    """Random multigraph (self-loops and repeated edges allowed)."""
    rng = random.Random(seed)
    g = AdjacencyGraph(n, directed=directed)
    for _ in range(m):
        g.add_edge(rng.randrange(n), rng.randrange(n))
    return g


@pytest.fixture
def diamond_graph() -> AdjacencyGraph:
    """
    Undirected graph with three components.

        0 - 1          5 - 6      7 (isolated)
        |   |
        2 - 3 - 4

    Adjacency: 0:[1,2] 1:[0,3] 2:[0,3] 3:[1,2,4] 4:[3] 5:[6] 6:[5] 7:[]
    """
    g = undirected_graph(8)
    for u, v in [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (5, 6)]:
        g.add_edge(u, v)
    return g


@pytest.fixture
def chain_records() -> list[str]:
    return list(CHAIN_RECORDS)


@pytest.fixture
def movie_match(chain_records) -> MovieMatch:
    """Engine loaded with the chain database (ids: M1=0 A=1 B=2 M2=3 C=4 M3=5 D=6 E=7)."""
    mm = MovieMatch()
    assert mm.load(chain_records)
    return mm


@pytest.fixture
def database_file(tmp_path, chain_records):
    """The chain database written to disk."""
    path = tmp_path / "movies.txt"
    path.write_text("\n".join(chain_records) + "\n", encoding="utf-8")
    return path


@pytest.fixture(params=[1, 7, 42, 1234])
def random_graph(request) -> AdjacencyGraph:
    return make_random_graph(request.param)


@pytest.fixture(params=[3, 11, 99])
def random_digraph(request) -> AdjacencyGraph:
    return make_random_graph(request.param, directed=True)
