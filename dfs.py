"""
Depth-First Search with Cycle Detection

Explores every vertex reachable from a source, recording for each newly
discovered vertex the vertex that discovered it. A visited neighbor other
than the current vertex's parent is a non-tree edge and marks the search as
having found a cycle.

The traversal runs on an explicit work stack, so path-shaped graphs with
hundreds of thousands of vertices do not hit the interpreter's recursion
limit. Visit order matches the recursive formulation exactly.
"""

import logging
from typing import List, Optional

import numpy as np

from errors import check_vertex

logger = logging.getLogger(__name__)


class DepthFirstSearch:
    """
    Result of a depth-first search launched from a single source.

    Example:
        >>> from static_graph import StaticGraph
        >>> graph = StaticGraph(5, [(0, 1), (2, 3)])
        >>> dfs = DepthFirstSearch(graph, 1)
        >>> dfs.n_vert_reached()
        2
        >>> dfs.is_reached(0), dfs.is_reached(2)
        (True, False)
    """

    def __init__(self, graph, source: int):
        """
        Run DFS on `graph` from `source`.

        Args:
            graph: StaticGraph (neighbors are read through numpy views)
            source: Vertex to start from
        """
        n_vert = graph.n_vert()
        self._source = check_vertex(source, n_vert, "source")
        self._parent: List[int] = list(range(n_vert))
        self._order: List[int] = []
        self._cycle_found = False

        self._run(graph)

        logger.debug(f"DFS from {self._source}: reached {len(self._order)}/{n_vert}, "
                     f"cycle={self._cycle_found}")

    def _run(self, graph):
        parent = self._parent
        visited = [False] * len(parent)
        source = self._source

        visited[source] = True
        self._order.append(source)
        # Frames are [vertex, neighbor list, cursor]
        stack = [[source, graph.neighbors(source).tolist(), 0]]
        while stack:
            frame = stack[-1]
            vert, neighbors, pos = frame
            if pos == len(neighbors):
                stack.pop()
                continue
            frame[2] = pos + 1

            neigh = neighbors[pos]
            if not visited[neigh]:
                visited[neigh] = True
                parent[neigh] = vert
                self._order.append(neigh)
                stack.append([neigh, graph.neighbors(neigh).tolist(), 0])
            elif neigh == vert or neigh != parent[vert]:
                self._cycle_found = True

    def source(self) -> int:
        return self._source

    def parent(self, node: int) -> Optional[int]:
        """
        Return the vertex that discovered `node`.

        None for the source and for vertices that were never reached.
        """
        node = check_vertex(node, len(self._parent))
        if self._parent[node] == node:
            return None
        return self._parent[node]

    def is_reached(self, node: int) -> bool:
        """True for the source and every vertex with a recorded parent."""
        node = check_vertex(node, len(self._parent))
        return node == self._source or self._parent[node] != node

    def cycle_found(self) -> bool:
        """
        True if a non-tree edge was met. Any cycle reachable from the
        source is guaranteed to be found.
        """
        return self._cycle_found

    def n_vert_reached(self) -> int:
        """Number of distinct vertices reached, source included."""
        return len(self._order)

    def preorder(self) -> List[int]:
        """Vertices in discovery order, starting with the source."""
        return list(self._order)

    def parent_array(self) -> np.ndarray:
        """
        Copy of the parent array. parent[v] == v marks the source and
        unreached vertices.
        """
        return np.array(self._parent, dtype=np.int64)
