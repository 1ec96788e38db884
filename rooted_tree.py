"""
Rooted Tree - Tree View of a Static Graph

Validates through a depth-first search that a graph is a tree when rooted
at a chosen vertex (no reachable cycle, every vertex reachable), then lays
out the child lists in CSR form:

    offset[v]            - start of v's child range
    children[offset[v]:] - v's neighbors minus its own parent

The parent map comes straight from the search.
"""

import logging
from typing import List, Optional

import numpy as np

from dfs import DepthFirstSearch
from errors import NotATreeError, check_vertex

logger = logging.getLogger(__name__)


class RootedTree:
    """
    Integer-indexed tree with a dedicated root.

    Example:
        >>> from static_graph import StaticGraph
        >>> graph = StaticGraph(4, [(0, 1), (1, 2), (1, 3)])
        >>> tree = RootedTree(graph, 0)
        >>> tree.children(0).tolist()
        [1]
        >>> tree.parent(3)
        1
    """

    def __init__(self, graph, root: int):
        """
        Build the tree view of `graph` rooted at `root`.

        Args:
            graph: StaticGraph
            root: Root vertex

        Raises:
            NotATreeError: If a cycle is reachable from `root` or some
                vertex can not be reached from it
        """
        n_vert = graph.n_vert()
        dfs = DepthFirstSearch(graph, root)
        if dfs.cycle_found():
            raise NotATreeError("cycle", root, dfs.n_vert_reached(), n_vert)
        if dfs.n_vert_reached() < n_vert:
            raise NotATreeError("disconnected", root, dfs.n_vert_reached(), n_vert)

        self._root = int(root)
        parent = dfs.parent_array()

        # Count children per vertex: every neighbor except the parent
        n_children = np.array([graph.degree(v) for v in range(n_vert)], dtype=np.int64)
        n_children[np.arange(n_vert) != self._root] -= 1
        offset = np.zeros(n_vert, dtype=np.int64)
        if n_vert > 1:
            np.cumsum(n_children[:-1], out=offset[1:])

        cursor = offset.tolist()
        children = np.empty(int(n_children.sum()), dtype=np.int64)
        for vert in range(n_vert):
            up = parent[vert] if vert != self._root else -1
            for neigh in graph.neighbors(vert).tolist():
                if neigh != up:
                    children[cursor[vert]] = neigh
                    cursor[vert] += 1

        for array in (offset, children, parent):
            array.flags.writeable = False
        self._offset = offset
        self._children = children
        self._parent = parent
        self._preorder = dfs.preorder()
        self._depth: Optional[np.ndarray] = None

        logger.debug(f"Built rooted tree: root={self._root}, {n_vert} vertices")

    def root(self) -> int:
        return self._root

    def n_vert(self) -> int:
        return len(self._offset)

    def n_edges(self) -> int:
        """Number of tree edges, always n_vert() - 1."""
        return len(self._children)

    def children(self, node: int) -> np.ndarray:
        """Immediate children of `node` as a read-only view, unspecified order."""
        node = check_vertex(node, len(self._offset))
        start = int(self._offset[node])
        if node + 1 < len(self._offset):
            return self._children[start:int(self._offset[node + 1])]
        return self._children[start:]

    def parent(self, node: int) -> Optional[int]:
        """Parent of `node`; None only for the root."""
        node = check_vertex(node, len(self._offset))
        if node == self._root:
            return None
        return int(self._parent[node])

    def preorder(self) -> List[int]:
        """Every vertex after its parent (DFS discovery order)."""
        return list(self._preorder)

    def postorder(self) -> List[int]:
        """Every vertex after all of its descendants; the root comes last."""
        order = []
        stack = [self._root]
        while stack:
            vert = stack.pop()
            order.append(vert)
            stack.extend(self.children(vert).tolist())
        order.reverse()
        return order

    def depth(self, node: int) -> int:
        """Number of edges between `node` and the root."""
        node = check_vertex(node, len(self._offset))
        if self._depth is None:
            depth = np.zeros(self.n_vert(), dtype=np.int64)
            for vert in self._preorder[1:]:
                depth[vert] = depth[self._parent[vert]] + 1
            self._depth = depth
        return int(self._depth[node])

    def height(self) -> int:
        """Largest depth over all vertices."""
        return max(self.depth(v) for v in range(self.n_vert()))

    def __repr__(self):
        return f"RootedTree(root={self._root}, n_vert={self.n_vert()})"
