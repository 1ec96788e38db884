"""Tests for rooted_tree.py"""

import pytest

from conftest import path_edges, star_edges
from errors import NotATreeError, VertexOutOfRangeError
from rooted_tree import RootedTree
from static_graph import StaticGraph


def child_set(tree, v):
    return set(tree.children(v).tolist())


class TestRootedTree:
    def test_simple_tree(self, sample_graph):
        tree = RootedTree(sample_graph, 3)
        assert tree.root() == 3
        assert tree.n_vert() == 5
        assert tree.n_edges() == 4
        assert tree.parent(3) is None
        assert child_set(tree, 3) == {2, 4}
        assert tree.parent(2) == 3
        assert child_set(tree, 2) == {0, 1}
        assert tree.parent(0) == 2
        assert child_set(tree, 0) == set()
        assert tree.parent(1) == 2
        assert child_set(tree, 1) == set()
        assert tree.parent(4) == 3
        assert child_set(tree, 4) == set()

    def test_structure_invariants(self):
        graph = StaticGraph(7, [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (5, 6)])
        for root in range(7):
            tree = RootedTree(graph, root)
            assert tree.n_edges() == tree.n_vert() - 1
            orphans = [v for v in range(7) if tree.parent(v) is None]
            assert orphans == [root]
            listed = [c for v in range(7) for c in tree.children(v).tolist()]
            assert sorted(listed) == sorted(set(range(7)) - {root})
            for v in range(7):
                for c in tree.children(v).tolist():
                    assert tree.parent(c) == v

    def test_single_vertex(self):
        tree = RootedTree(StaticGraph(1, []), 0)
        assert tree.n_edges() == 0
        assert tree.parent(0) is None
        assert tree.postorder() == [0]
        assert tree.height() == 0

    def test_cycle_detection(self):
        graph = StaticGraph(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
        with pytest.raises(NotATreeError, match="cycle") as exc:
            RootedTree(graph, 1)
        assert exc.value.reason == "cycle"

    def test_disconnected_detection(self):
        graph = StaticGraph(4, [(0, 1), (2, 3)])
        with pytest.raises(NotATreeError, match="disconnected") as exc:
            RootedTree(graph, 1)
        assert exc.value.reason == "disconnected"
        assert exc.value.n_reached == 2
        assert exc.value.n_vert == 4

    def test_parallel_edge_is_not_a_tree(self):
        with pytest.raises(NotATreeError, match="cycle"):
            RootedTree(StaticGraph(2, [(0, 1), (0, 1)]), 0)

    def test_not_a_tree_is_value_error(self):
        with pytest.raises(ValueError):
            RootedTree(StaticGraph(3, [(0, 1)]), 0)

    def test_postorder(self, sample_graph):
        tree = RootedTree(sample_graph, 3)
        order = tree.postorder()
        assert sorted(order) == list(range(5))
        assert order[-1] == 3
        position = {v: i for i, v in enumerate(order)}
        for v in range(5):
            if v != 3:
                assert position[v] < position[tree.parent(v)]

    def test_preorder(self, sample_graph):
        tree = RootedTree(sample_graph, 3)
        order = tree.preorder()
        assert order[0] == 3
        position = {v: i for i, v in enumerate(order)}
        for v in range(5):
            if v != 3:
                assert position[tree.parent(v)] < position[v]

    def test_depth(self, sample_graph):
        tree = RootedTree(sample_graph, 3)
        assert [tree.depth(v) for v in range(5)] == [2, 2, 1, 0, 1]
        assert tree.height() == 2

    def test_long_path(self):
        n = 100000
        tree = RootedTree(StaticGraph(n, path_edges(n)), 0)
        assert tree.parent(n - 1) == n - 2
        assert tree.postorder()[0] == n - 1
        assert tree.height() == n - 1

    def test_star(self):
        tree = RootedTree(StaticGraph(6, star_edges(6)), 0)
        assert child_set(tree, 0) == {1, 2, 3, 4, 5}

    def test_out_of_range(self, sample_graph):
        tree = RootedTree(sample_graph, 3)
        with pytest.raises(VertexOutOfRangeError):
            tree.children(5)
        with pytest.raises(VertexOutOfRangeError):
            tree.parent(-1)
        with pytest.raises(VertexOutOfRangeError):
            RootedTree(sample_graph, 9)
