"""
Static Graph - Immutable CSR Adjacency for Integer-Indexed Vertices

Vertices are the integers 0..n-1. Adjacency is stored compactly in two
numpy arrays:

    offset[v]          - start of v's neighbor range (prefix sums of degree)
    neigh[offset[v]:]  - flat neighbor array, two entries per undirected edge

Construction is two-pass (count degrees, then place each half-edge through
a write cursor), which gives O(1) contiguous neighbor ranges without any
per-vertex list growth.
"""

import logging
import numbers
from typing import Iterable, Tuple

import numpy as np

from errors import VertexOutOfRangeError, VertexTypeError, check_vertex

logger = logging.getLogger(__name__)


class StaticGraph:
    """
    Immutable undirected graph over vertices 0..n-1.

    Example:
        >>> graph = StaticGraph(5, [(0, 1), (2, 3)])
        >>> graph.n_edges()
        2
        >>> graph.neighbors(1).tolist()
        [0]
    """

    def __init__(self, n_vert: int, edges: Iterable[Tuple[int, int]]):
        """
        Build the graph in time linear in n_vert + len(edges).

        Args:
            n_vert: Number of vertices
            edges: Pairs of adjacent vertices

        Raises:
            VertexTypeError: If n_vert or an endpoint is not an integer
            VertexOutOfRangeError: If an endpoint is outside 0..n_vert-1
            ValueError: If an edge is not a pair
        """
        if isinstance(n_vert, bool) or not isinstance(n_vert, numbers.Integral):
            raise VertexTypeError(n_vert, "vertex count")
        n_vert = int(n_vert)
        if n_vert < 0:
            raise VertexOutOfRangeError(n_vert, 0, "vertex count")

        records = list(edges)
        if not records:
            ends = np.empty((0, 2), dtype=np.int64)
        else:
            ends = np.asarray(records)
            if ends.ndim != 2 or ends.shape[1] != 2:
                raise ValueError(f"edges must be (u, v) pairs, got shape {ends.shape}")
            if not np.issubdtype(ends.dtype, np.integer):
                raise VertexTypeError(ends.dtype, "edge endpoint")
            ends = ends.astype(np.int64)
        if ends.size:
            lo, hi = int(ends.min()), int(ends.max())
            if lo < 0:
                raise VertexOutOfRangeError(lo, n_vert, "edge endpoint")
            if hi >= n_vert:
                raise VertexOutOfRangeError(hi, n_vert, "edge endpoint")

        # Pass 1: degree histogram -> prefix-sum offsets
        degree = np.bincount(ends.ravel(), minlength=n_vert)
        offset = np.zeros(n_vert, dtype=np.int64)
        if n_vert > 1:
            np.cumsum(degree[:-1], out=offset[1:])

        # Pass 2: scatter both halves of every edge
        cursor = offset.tolist()
        neigh = np.empty(2 * len(ends), dtype=np.int64)
        for u, v in ends.tolist():
            neigh[cursor[u]] = v
            cursor[u] += 1
            neigh[cursor[v]] = u
            cursor[v] += 1

        offset.flags.writeable = False
        neigh.flags.writeable = False
        self._offset = offset
        self._neigh = neigh

        logger.debug(f"Built static graph: {n_vert} vertices, {len(ends)} edges")

    def n_vert(self) -> int:
        """Number of vertices."""
        return len(self._offset)

    def n_edges(self) -> int:
        """Number of undirected edges."""
        return len(self._neigh) // 2

    def _bounds(self, vert: int) -> Tuple[int, int]:
        vert = check_vertex(vert, len(self._offset))
        start = int(self._offset[vert])
        if vert + 1 < len(self._offset):
            return start, int(self._offset[vert + 1])
        return start, len(self._neigh)

    def neighbors(self, vert: int) -> np.ndarray:
        """
        Return the neighbors of `vert` as a read-only array view.

        The order is unspecified but stable for a given graph.
        """
        start, end = self._bounds(vert)
        return self._neigh[start:end]

    def degree(self, vert: int) -> int:
        """Number of neighbor entries of `vert`."""
        start, end = self._bounds(vert)
        return end - start

    def __repr__(self):
        return f"StaticGraph(n_vert={self.n_vert()}, n_edges={self.n_edges()})"
