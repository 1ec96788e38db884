"""Tests for dfs.py"""

import pytest

from conftest import path_edges
from dfs import DepthFirstSearch
from errors import VertexOutOfRangeError, VertexTypeError
from static_graph import StaticGraph


class TestDepthFirstSearch:
    def test_empty_graph(self):
        dfs = DepthFirstSearch(StaticGraph(5, []), 0)
        assert dfs.source() == 0
        assert dfs.n_vert_reached() == 1
        assert not dfs.cycle_found()
        for v in range(5):
            assert dfs.is_reached(v) == (v == 0)
            assert dfs.parent(v) is None

    def test_partial_reach(self):
        dfs = DepthFirstSearch(StaticGraph(5, [(0, 1), (2, 3)]), 1)
        assert dfs.n_vert_reached() == 2
        assert dfs.is_reached(0)
        assert dfs.parent(0) == 1
        assert not dfs.is_reached(2)
        assert not dfs.cycle_found()

    def test_cycle(self):
        graph = StaticGraph(10, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)])
        dfs = DepthFirstSearch(graph, 0)
        assert dfs.n_vert_reached() == 5
        assert dfs.cycle_found()
        for v in range(5):
            assert dfs.is_reached(v)
            assert (dfs.parent(v) is None) == (v == 0)
        for v in range(5, 10):
            assert not dfs.is_reached(v)
            assert dfs.parent(v) is None

    def test_full_graph(self):
        edges = [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)]
        dfs = DepthFirstSearch(StaticGraph(4, edges), 3)
        assert dfs.source() == 3
        assert dfs.n_vert_reached() == 4
        assert dfs.cycle_found()
        for v in range(4):
            assert dfs.is_reached(v)
            assert (dfs.parent(v) is None) == (v == 3)

    def test_unreachable_cycle_not_reported(self):
        graph = StaticGraph(5, [(0, 1), (2, 3), (3, 4), (4, 2)])
        dfs = DepthFirstSearch(graph, 0)
        assert not dfs.cycle_found()
        assert dfs.n_vert_reached() == 2

    def test_tree_has_no_cycle(self, sample_graph):
        dfs = DepthFirstSearch(sample_graph, 3)
        assert not dfs.cycle_found()
        assert dfs.n_vert_reached() == 5
        assert dfs.parent(2) == 3
        assert dfs.parent(0) == 2

    def test_self_loop_is_cycle(self):
        assert DepthFirstSearch(StaticGraph(2, [(0, 0)]), 0).cycle_found()
        assert DepthFirstSearch(StaticGraph(2, [(0, 1), (1, 1)]), 0).cycle_found()

    def test_parallel_edge_is_cycle(self):
        # The child skips both copies leading up, the parent sees the child twice
        dfs = DepthFirstSearch(StaticGraph(2, [(0, 1), (0, 1)]), 0)
        assert dfs.cycle_found()
        assert dfs.n_vert_reached() == 2
        assert DepthFirstSearch(StaticGraph(2, [(0, 1), (0, 1)]), 1).cycle_found()

    def test_preorder_matches_recursive_order(self):
        # 0 - 1 - 2, 0 - 3: neighbors of 0 are placed as [1, 3]
        graph = StaticGraph(4, [(0, 1), (1, 2), (0, 3)])
        assert DepthFirstSearch(graph, 0).preorder() == [0, 1, 2, 3]

    def test_parent_array(self):
        dfs = DepthFirstSearch(StaticGraph(3, [(0, 1)]), 0)
        assert dfs.parent_array().tolist() == [0, 0, 2]

    def test_long_path_does_not_recurse(self):
        n = 200000
        dfs = DepthFirstSearch(StaticGraph(n, path_edges(n)), 0)
        assert dfs.n_vert_reached() == n
        assert dfs.parent(n - 1) == n - 2
        assert not dfs.cycle_found()

    def test_source_out_of_range(self):
        with pytest.raises(VertexOutOfRangeError, match="source"):
            DepthFirstSearch(StaticGraph(3, []), 3)

    def test_float_source_rejected(self):
        with pytest.raises(VertexTypeError, match="source"):
            DepthFirstSearch(StaticGraph(3, [(0, 1)]), 0.0)

    def test_float_accessor_rejected(self):
        dfs = DepthFirstSearch(StaticGraph(3, [(0, 1)]), 0)
        with pytest.raises(VertexTypeError):
            dfs.parent(1.0)
        with pytest.raises(VertexTypeError):
            dfs.is_reached(1.0)
