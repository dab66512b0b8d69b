"""
Tests for DepthFirstSurvey.
"""

import pytest

from movie_match.graph import undirected_graph
from movie_match.survey import Color, DepthFirstSurvey, Survey, tree_path

W, B = Color.WHITE, Color.BLACK


class TestSingleSourceSearch:
    """Iterative DFS with resumable neighbor cursors."""

    def test_times_and_parents(self, diamond_graph):
        """Hand-traced DFS from vertex 0."""
        dfs = DepthFirstSurvey(diamond_graph)
        dfs.search_from(0)

        # 0 -> 1 -> 3 -> 2 (dead end), back to 3 -> 4
        assert dfs.discovery_time[:5] == [0, 1, 3, 2, 5]
        assert dfs.finish_time[:5] == [9, 8, 4, 7, 6]
        assert dfs.parent[:5] == [None, 0, 3, 1, 3]
        assert dfs.color == [B, B, B, B, B, W, W, W]
        assert dfs.discovery_time[5:] == [None, None, None]
        assert dfs.finish_time[5:] == [None, None, None]

    def test_self_loops_and_repeated_edges(self):
        """The color check, not edge de-duplication, prevents re-discovery."""
        g = undirected_graph(2)
        g.add_edge(0, 0)
        g.add_edge(0, 1)
        g.add_edge(0, 1)

        dfs = DepthFirstSurvey(g)
        dfs.search_from(0)

        assert dfs.discovery_time == [0, 1]
        assert dfs.finish_time == [3, 2]
        assert dfs.parent == [None, 0]

    def test_repeat_search_is_noop(self, diamond_graph):
        dfs = DepthFirstSurvey(diamond_graph)
        dfs.search_from(0)
        snapshot = (list(dfs.discovery_time), list(dfs.finish_time))

        dfs.search_from(0)

        assert (dfs.discovery_time, dfs.finish_time) == snapshot

    def test_trace_sees_stack(self):
        g = undirected_graph(3)
        g.add_edge(0, 1)
        g.add_edge(1, 2)
        snapshots = []
        dfs = DepthFirstSurvey(g, trace=snapshots.append)

        dfs.search_from(0)

        assert snapshots == [[0], [0, 1], [0, 1, 2], [0, 1], [0], []]


class TestVertexValidation:
    def test_negative_source_rejected(self):
        """-1 must not alias the last vertex."""
        g = undirected_graph(3)
        g.add_edge(1, 2)
        dfs = DepthFirstSurvey(g)

        with pytest.raises(IndexError):
            dfs.search_from(-1)

        assert dfs.color == [W, W, W]
        assert dfs.parent == [None, None, None]

    def test_negative_start_rejected(self, diamond_graph):
        with pytest.raises(IndexError):
            DepthFirstSurvey(diamond_graph).reset(-1)
        with pytest.raises(IndexError):
            DepthFirstSurvey(diamond_graph, start=-1)


class TestFullSearch:
    def test_all_components(self, diamond_graph):
        dfs = DepthFirstSurvey(diamond_graph)
        dfs.search_all()

        assert all(c is B for c in dfs.color)
        assert dfs.discovery_time[5:] == [10, 11, 14]
        assert dfs.finish_time[5:] == [13, 12, 15]
        assert dfs.infinite_time == 16
        # Both timestamps come from one clock covering [0, 2|V|)
        stamps = sorted(dfs.discovery_time + dfs.finish_time)
        assert stamps == list(range(16))

    def test_start_vertex_wraps_around(self, diamond_graph):
        dfs = DepthFirstSurvey(diamond_graph, start=7)
        dfs.search_all()

        assert dfs.discovery_time[7] == 0
        assert dfs.finish_time[7] == 1
        assert dfs.discovery_time[0] == 2


class TestReset:
    def test_reset_rewinds_cursors(self, diamond_graph):
        """A second run after reset reproduces the first exactly."""
        dfs = DepthFirstSurvey(diamond_graph)
        dfs.search_all()
        first = (list(dfs.discovery_time), list(dfs.finish_time), list(dfs.parent))

        dfs.reset()
        assert all(c is W for c in dfs.color)
        dfs.search_all()

        assert (dfs.discovery_time, dfs.finish_time, dfs.parent) == first

    def test_reset_resizes_after_graph_growth(self, diamond_graph):
        dfs = DepthFirstSurvey(diamond_graph)
        diamond_graph.set_vertex_count(12)
        dfs.reset()

        assert len(dfs.finish_time) == 12
        assert dfs.null_vertex == 12

    def test_satisfies_survey_protocol(self, diamond_graph):
        assert isinstance(DepthFirstSurvey(diamond_graph), Survey)


class TestProperties:
    """Invariants on random graphs, directed and undirected."""

    def _check_parenthesis(self, dfs):
        n = dfs.vertex_count
        for v in range(n):
            if dfs.color[v] is not B:
                continue
            assert dfs.discovery_time[v] < dfs.finish_time[v]
            # Every proper ancestor's interval strictly contains v's
            for u in tree_path(dfs.parent, v)[1:]:
                assert dfs.discovery_time[u] < dfs.discovery_time[v]
                assert dfs.finish_time[v] < dfs.finish_time[u]

    def test_parenthesis_property_undirected(self, random_graph):
        dfs = DepthFirstSurvey(random_graph)
        dfs.search_all()
        self._check_parenthesis(dfs)

    def test_parenthesis_property_directed(self, random_digraph):
        dfs = DepthFirstSurvey(random_digraph)
        dfs.search_all()
        self._check_parenthesis(dfs)

    def test_times_bounded(self, random_digraph):
        dfs = DepthFirstSurvey(random_digraph)
        dfs.search_all()

        bound = dfs.infinite_time
        assert all(0 <= t < bound for t in dfs.discovery_time)
        assert all(0 <= t < bound for t in dfs.finish_time)
        assert len(set(dfs.discovery_time + dfs.finish_time)) == 2 * dfs.vertex_count
