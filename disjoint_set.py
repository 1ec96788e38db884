"""
Disjoint Set Union with a Designated Root per Component

Two structures over the integers 0..n-1:

- DisjointSetUnion: path compression (two-pass) + union by height.
  find(x), union(a, b), connected(a, b) are O(α(n)) amortized.
- RootedDSU: wraps DisjointSetUnion and keeps, for every component, a
  semantic "designated root" that is independent of whichever element the
  height policy happens to pick as the physical representative.

Both find() methods rewrite parent pointers. They are mutating operations
even though they answer a question, so an instance must not be shared
between callers without external serialization.
"""

import logging
from typing import List

from errors import check_vertex

logger = logging.getLogger(__name__)


class DisjointSetUnion:
    """
    Integer-indexed disjoint set union.

    Example:
        >>> dsu = DisjointSetUnion(5)
        >>> dsu.union(0, 1)
        0
        >>> dsu.union(1, 2)
        0
        >>> dsu.n_components()
        3
        >>> dsu.connected(0, 2)
        True
    """

    def __init__(self, count: int):
        """
        Create `count` singleton components.

        Args:
            count: Number of elements (and initial components)
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        self._root: List[int] = list(range(count))
        self._height: List[int] = [0] * count
        self._count = count

    def __len__(self) -> int:
        return len(self._root)

    def n_components(self) -> int:
        """Current number of components."""
        return self._count

    def find(self, ind: int) -> int:
        """
        Return the representative of the component containing `ind`.

        Compresses the path as a side effect: the first walk locates the
        root without touching anything, the second walk points every node
        on the path straight at it. Requires exclusive access.
        """
        ind = check_vertex(ind, len(self._root), "element")
        root_of = self._root

        root = ind
        while root_of[root] != root:
            root = root_of[root]

        while root_of[ind] != root:
            next_ind = root_of[ind]
            root_of[ind] = root
            ind = next_ind

        return root

    def connected(self, left: int, right: int) -> bool:
        """Check whether two elements belong to the same component."""
        return self.find(left) == self.find(right)

    def union(self, left: int, right: int) -> int:
        """
        Merge the components of `left` and `right`.

        The shallower tree is attached under the deeper one. On a tie the
        root of `right` goes under the root of `left`, whose height grows
        by one. Already-connected elements are left untouched.

        Returns:
            Representative of the merged component
        """
        left = self.find(left)
        right = self.find(right)
        if left == right:
            return left

        self._count -= 1
        if self._height[left] < self._height[right]:
            self._root[left] = right
            return right
        if self._height[left] > self._height[right]:
            self._root[right] = left
            return left
        self._root[right] = left
        self._height[left] += 1
        return left


class RootedDSU:
    """
    Disjoint set union that remembers a designated root per component.

    After union(major=a, minor=b) the merged component is rooted wherever
    a's component was rooted, no matter which representative the height
    policy picked. Swapping the arguments changes the answer.

    Example:
        >>> dsu = RootedDSU(5)
        >>> dsu.union(major=1, minor=0)
        1
        >>> dsu.union(major=1, minor=2)
        1
        >>> dsu.find(2)
        1
    """

    def __init__(self, count: int):
        self._dsu = DisjointSetUnion(count)
        self._designated: List[int] = list(range(count))

    def __len__(self) -> int:
        return len(self._dsu)

    def n_components(self) -> int:
        return self._dsu.n_components()

    def representative(self, ind: int) -> int:
        """Raw DSU representative of `ind`'s component (mutating, see find)."""
        return self._dsu.find(ind)

    def find(self, ind: int) -> int:
        """Return the designated root of `ind`'s component (mutating)."""
        return self._designated[self._dsu.find(ind)]

    def connected(self, left: int, right: int) -> bool:
        return self._dsu.connected(left, right)

    def union(self, major: int, minor: int) -> int:
        """
        Merge the components of `major` and `minor`.

        The result inherits the designated root that `major`'s component
        had before the merge; `minor`'s root is dropped.

        Args:
            major: Element whose component root survives
            minor: Element whose component root is forsaken

        Returns:
            Designated root of the merged component
        """
        kept = self.find(major)
        repr_ = self._dsu.union(major, minor)
        self._designated[repr_] = kept
        return kept
