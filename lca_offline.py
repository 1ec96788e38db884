"""
Offline Lowest Common Ancestor (Tarjan's Algorithm)

All query pairs must be known up front. One postorder pass over the tree
answers every pair in O(n + q·α(n)):

1. Index each pair (v, u) under both v and u.
2. Walk the tree in postorder. On vertex v, mark it visited, then for
   every partner u that is already visited, LCA(v, u) is the designated
   root of u's component in a RootedDSU.
3. Fold v's component into its parent's with the parent as the major
   side, so each component stays rooted at its shallowest vertex whose
   subtree is still being processed.

Answers are keyed by the canonical (min, max) pair, so (a, b) and (b, a)
resolve identically.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Tuple

from disjoint_set import RootedDSU
from errors import UnknownQueryError, check_vertex

logger = logging.getLogger(__name__)

Pair = Tuple[int, int]


def canonical_pair(v: int, u: int) -> Pair:
    """Order a pair by value: (min, max)."""
    return (v, u) if v <= u else (u, v)


class OfflineLCA:
    """
    LCA answers for a fixed batch of vertex pairs.

    Example:
        >>> from static_graph import StaticGraph
        >>> from rooted_tree import RootedTree
        >>> tree = RootedTree(StaticGraph(4, [(0, 1), (2, 1), (1, 3)]), 3)
        >>> lca = OfflineLCA(tree, [(0, 2), (1, 3)])
        >>> lca.ancestor(2, 0)
        1
        >>> lca.ancestor(3, 1)
        3
    """

    def __init__(self, tree, queries: Iterable[Pair]):
        """
        Answer every pair in `queries` with one pass over `tree`.

        Args:
            tree: RootedTree to query
            queries: Pairs of vertices

        Raises:
            VertexOutOfRangeError: If a query names a vertex not in the tree
        """
        n_vert = tree.n_vert()
        self._queries: List[Pair] = []
        pending: List[List[int]] = [[] for _ in range(n_vert)]
        for v, u in queries:
            v = check_vertex(v, n_vert, "query vertex")
            u = check_vertex(u, n_vert, "query vertex")
            self._queries.append((v, u))
            pending[v].append(u)
            pending[u].append(v)

        visited = [False] * n_vert
        dsu = RootedDSU(n_vert)
        root = tree.root()
        result: Dict[Pair, int] = {}
        for vert in tree.postorder():
            visited[vert] = True
            for other in pending[vert]:
                if visited[other]:
                    result[canonical_pair(vert, other)] = dsu.find(other)
            if vert != root:
                dsu.union(major=tree.parent(vert), minor=vert)

        self._result = result
        self._n_vert = n_vert
        logger.debug(f"Answered {len(result)} distinct pairs from {len(self._queries)} queries")

    def ancestor(self, v: int, u: int) -> int:
        """
        Return the lowest common ancestor of `v` and `u`.

        Raises:
            VertexTypeError: If `v` or `u` is not an integer
            VertexOutOfRangeError: If `v` or `u` is not a tree vertex
            UnknownQueryError: If the unordered pair was not queried
                (self-pairs included)
        """
        pair = canonical_pair(check_vertex(v, self._n_vert, "query vertex"),
                              check_vertex(u, self._n_vert, "query vertex"))
        try:
            return self._result[pair]
        except KeyError:
            raise UnknownQueryError(pair) from None

    def answers(self) -> List[int]:
        """Ancestors in the order the queries were given."""
        return [self._result[canonical_pair(v, u)] for v, u in self._queries]

    def items(self) -> Iterator[Tuple[Pair, int]]:
        """Iterate (canonical pair, ancestor)."""
        return iter(self._result.items())

    def __contains__(self, pair) -> bool:
        v, u = pair
        return canonical_pair(v, u) in self._result

    def __len__(self) -> int:
        return len(self._result)
