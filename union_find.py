"""
Union-Find over the integers 0..n-1.

Standalone utility with no designated roots; see disjoint_set for the
structures used by the LCA engine.
"""

from typing import List


class UnionFind:
    """
    Plain integer-indexed union-find with path compression and union by
    height.

    Example:
        >>> uf = UnionFind(5)
        >>> uf.union(0, 1)
        0
        >>> uf.union(1, 2)
        0
        >>> uf.n_components()
        3
        >>> uf.connected(1, 3)
        False
    """

    def __init__(self, count: int):
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self.parent: List[int] = list(range(count))
        self.height: List[int] = [0] * count
        self.count = count

    def n_components(self) -> int:
        return self.count

    def find(self, ind: int) -> int:
        if not 0 <= ind < len(self.parent):
            raise IndexError(f"element {ind} out of range for {len(self.parent)} elements")
        root = ind
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[ind] != root:
            self.parent[ind], ind = root, self.parent[ind]
        return root

    def connected(self, left: int, right: int) -> bool:
        return self.find(left) == self.find(right)

    def union(self, left: int, right: int) -> int:
        """Merge two components and return the surviving representative."""
        left, right = self.find(left), self.find(right)
        if left == right:
            return left

        self.count -= 1
        if self.height[left] < self.height[right]:
            left, right = right, left
        self.parent[right] = left
        if self.height[left] == self.height[right]:
            self.height[left] += 1
        return left
