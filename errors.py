"""
Exceptions raised by the graph, disjoint-set and LCA modules.

Every error derives from GraphError so callers can catch the whole family
at once, while the secondary bases (IndexError, ValueError, KeyError) keep
the usual built-in semantics for code that does not know about them.
"""

import numbers
from typing import Optional, Tuple


class GraphError(Exception):
    """Base class for all library errors."""


class VertexOutOfRangeError(GraphError, IndexError):
    """A vertex index lies outside the declared range 0..n-1."""

    def __init__(self, vertex: int, n_vert: int, what: str = "vertex"):
        self.vertex = vertex
        self.n_vert = n_vert
        super().__init__(f"{what} {vertex} out of range for {n_vert} vertices")


class VertexTypeError(GraphError, TypeError):
    """A vertex index is not an integer (floats and bools are rejected)."""

    def __init__(self, vertex, what: str = "vertex"):
        self.vertex = vertex
        super().__init__(f"{what} must be an integer, got {vertex!r}")


class NotATreeError(GraphError, ValueError):
    """
    Raised when a graph can not be viewed as a tree rooted at a vertex.

    Attributes:
        reason: "cycle" or "disconnected"
        n_reached: number of vertices reached from the root
        n_vert: number of vertices in the graph
    """

    def __init__(self, reason: str, root: int, n_reached: int, n_vert: int):
        self.reason = reason
        self.root = root
        self.n_reached = n_reached
        self.n_vert = n_vert
        if reason == "cycle":
            message = f"graph has a cycle reachable from root {root}"
        else:
            message = (f"graph is disconnected: {n_reached} of {n_vert} "
                       f"vertices reachable from root {root}")
        super().__init__(message)


class UnknownQueryError(GraphError, KeyError):
    """The requested pair was not part of the original query batch."""

    def __init__(self, pair: Tuple[int, int]):
        self.pair = pair
        super().__init__(pair)

    def __str__(self):
        return f"pair {self.pair} was not queried"


class ConfigError(GraphError, ValueError):
    """Invalid configuration or batch document."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


def check_vertex(vertex: int, n_vert: int, what: str = "vertex") -> int:
    """
    Return `vertex` as an int.

    Raises:
        VertexTypeError: If `vertex` is not an integer
        VertexOutOfRangeError: If `vertex` is outside 0..n_vert-1
    """
    if isinstance(vertex, bool) or not isinstance(vertex, numbers.Integral):
        raise VertexTypeError(vertex, what)
    vertex = int(vertex)
    if not 0 <= vertex < n_vert:
        raise VertexOutOfRangeError(vertex, n_vert, what)
    return vertex
