"""
Bottom-up mergesort.

Runs of width 1, 2, 4, ... are merged pairwise. Each pass reads the
previous pass's buffer and writes a new one, O(n log n) overall.
"""

from typing import Any, Callable, List, Optional, Sequence, TypeVar

T = TypeVar("T")


def merge(left: Sequence[T], right: Sequence[T],
          key: Optional[Callable[[T], Any]] = None) -> List[T]:
    """Merge two sorted sequences into a new sorted list."""
    out: List[T] = []
    _merge_into(left, 0, len(left), right, 0, len(right), out, key)
    return out


def _merge_into(a, i, a_end, b, j, b_end, out, key):
    while i < a_end and j < b_end:
        x, y = a[i], b[j]
        if key is None:
            take_right = y < x
        else:
            take_right = key(y) < key(x)
        if take_right:
            out.append(y)
            j += 1
        else:
            out.append(x)
            i += 1
    out.extend(a[i:a_end])
    out.extend(b[j:b_end])


def mergesort(values: Sequence[T], key: Optional[Callable[[T], Any]] = None) -> List[T]:
    """
    Return a new sorted list of `values`; the input is not modified.

    Args:
        values: Mutually comparable values
        key: Optional function computing the comparison key

    Stability is not part of the contract.
    """
    primary = list(values)
    n = len(primary)
    width = 1
    while width < n:
        secondary: List[T] = []
        for start in range(0, n, 2 * width):
            mid = min(start + width, n)
            end = min(start + 2 * width, n)
            # A trailing run without a partner is copied through
            _merge_into(primary, start, mid, primary, mid, end, secondary, key)
        primary = secondary
        width *= 2
    return primary
