"""
Heap Sort
=========
In-place heap sort, O(n log n) in every case, O(1) extra memory, not stable.

The range ``[lo, hi)`` is viewed as an implicit binary max-heap on offsets
relative to ``lo``: node ``k`` has children ``2k+1`` and ``2k+2``.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Optional

from sortlab.algorithms.base import prepare, swap
from sortlab.comparator import Comparator
from sortlab.metrics import SortMetrics


def sift_down(
    seq: MutableSequence[Any],
    start: int,
    size: int,
    cmp: Comparator,
    metrics: SortMetrics,
    base: int = 0,
) -> None:
    """
    Move the node at offset ``start`` down a heap of ``size`` nodes rooted at
    ``seq[base]``, always towards the larger child, until it is no smaller
    than its children.
    """
    node = start
    child = 2 * node + 1
    while child < size:
        if child + 1 < size and cmp.less(seq[base + child], seq[base + child + 1]):
            child += 1
        if not cmp.less(seq[base + node], seq[base + child]):
            break
        swap(seq, base + node, base + child, metrics)
        node = child
        child = 2 * node + 1


def heapify(
    seq: MutableSequence[Any],
    size: int,
    cmp: Comparator,
    metrics: SortMetrics,
    base: int = 0,
) -> None:
    # bottom-up build with sift-down is O(n), sift-up would be O(n log n)
    for node in range(size // 2 - 1, -1, -1):
        sift_down(seq, node, size, cmp, metrics, base)


def heap_sort(
    seq: MutableSequence[Any],
    comparator: Any = None,
    *,
    lo: int = 0,
    hi: Optional[int] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """Build a max-heap, then repeatedly move the root behind the shrinking heap."""
    cmp, stats, lo, hi = prepare(seq, comparator, lo, hi, metrics)
    n = hi - lo
    heapify(seq, n, cmp, stats, lo)
    for end in range(n - 1, 0, -1):
        swap(seq, lo, lo + end, stats)
        sift_down(seq, 0, end, cmp, stats, lo)
