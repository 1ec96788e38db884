import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from static_graph import StaticGraph  # noqa: E402


@pytest.fixture
def sample_edges():
    #       3
    #      / \
    #     2   4
    #    / \
    #   0   1
    return [(3, 2), (2, 1), (0, 2), (4, 3)]


@pytest.fixture
def sample_graph(sample_edges):
    return StaticGraph(5, sample_edges)


def path_edges(n):
    return [(i, i + 1) for i in range(n - 1)]


def star_edges(n):
    return [(0, i) for i in range(1, n)]
