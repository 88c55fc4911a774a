"""
Merge Sort
==========
Top-down and bottom-up merge sort sharing one auxiliary buffer.

Both variants are stable, O(n log n) in every case, and allocate exactly
one buffer of ``hi - lo`` slots per top-level call. Every merge writes into
that buffer and copies the merged range back, so no merge level allocates.

The buffer is indexed relative to ``lo`` (``base``), which lets a caller
sort any ``[lo, hi)`` window of a larger sequence.
"""

from __future__ import annotations

from typing import Any, List, MutableSequence, Optional

from sortlab.algorithms.base import insertion_pass, prepare
from sortlab.algorithms.sort_errors import (
    DEFAULT_MERGESORT_CUTOFF,
    MERGESORT_CUTOFF_ENV,
    debug_enabled,
    resolve_int_setting,
)
from sortlab.comparator import Comparator
from sortlab.metrics import SortMetrics

DEBUG_MODE = debug_enabled()


def merge(
    seq: MutableSequence[Any],
    aux: List[Any],
    lo: int,
    mid: int,
    hi: int,
    cmp: Comparator,
    metrics: SortMetrics,
    base: int = 0,
) -> None:
    """
    Merge sorted ``seq[lo:mid]`` and ``seq[mid:hi]`` into
    ``aux[lo - base : hi - base]``.

    Ties take from the left run (stable). ``seq`` is left untouched; the
    caller copies the range back.
    """
    i, j, k = lo, mid, lo - base
    while i < mid and j < hi:
        if cmp.less(seq[j], seq[i]):
            aux[k] = seq[j]
            j += 1
        else:
            aux[k] = seq[i]
            i += 1
        k += 1

    # Drain whichever run remains
    while i < mid:
        aux[k] = seq[i]
        i += 1
        k += 1
    while j < hi:
        aux[k] = seq[j]
        j += 1
        k += 1
    metrics.writes += hi - lo


def _copy_back(
    seq: MutableSequence[Any],
    aux: List[Any],
    lo: int,
    hi: int,
    metrics: SortMetrics,
    base: int,
) -> None:
    for k in range(lo, hi):
        seq[k] = aux[k - base]
    metrics.writes += hi - lo


def _allocate_buffer(n: int, metrics: SortMetrics) -> List[Any]:
    metrics.buffer_allocations += 1
    return [None] * n


def _split_merge(
    seq: MutableSequence[Any],
    aux: List[Any],
    lo: int,
    hi: int,
    cmp: Comparator,
    metrics: SortMetrics,
    cutoff: int,
    base: int,
    depth: int,
) -> None:
    metrics.record_depth(depth)
    if hi - lo <= max(cutoff, 1):
        if hi - lo > 1:
            insertion_pass(seq, lo, hi, cmp, metrics)
        return

    mid = lo + (hi - lo) // 2
    _split_merge(seq, aux, lo, mid, cmp, metrics, cutoff, base, depth + 1)
    _split_merge(seq, aux, mid, hi, cmp, metrics, cutoff, base, depth + 1)

    # Halves already in order: concatenation is sorted and stable
    if not cmp.less(seq[mid], seq[mid - 1]):
        return
    merge(seq, aux, lo, mid, hi, cmp, metrics, base)
    _copy_back(seq, aux, lo, hi, metrics, base)


def merge_sort_top_down(
    seq: MutableSequence[Any],
    comparator: Any = None,
    *,
    cutoff: Optional[int] = None,
    lo: int = 0,
    hi: Optional[int] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """
    Recursively halve ``[lo, hi)``, sort both halves, merge them.

    ``cutoff`` (or SORTLAB_MERGESORT_CUTOFF) finishes ranges of at most that
    many elements with insertion sort.
    """
    cmp, stats, lo, hi = prepare(seq, comparator, lo, hi, metrics)
    cutoff = resolve_int_setting(cutoff, MERGESORT_CUTOFF_ENV, DEFAULT_MERGESORT_CUTOFF)
    if hi - lo < 2:
        return
    aux = _allocate_buffer(hi - lo, stats)
    _split_merge(seq, aux, lo, hi, cmp, stats, cutoff, lo, 0)


def merge_sort_bottom_up(
    seq: MutableSequence[Any],
    comparator: Any = None,
    *,
    cutoff: Optional[int] = None,
    lo: int = 0,
    hi: Optional[int] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """
    Merge runs of width 1, 2, 4, ... until one run covers ``[lo, hi)``.

    Each pass sweeps left to right merging ``[i, i+w)`` with ``[i+w, i+2w)``
    (clamped at ``hi``) into the buffer, then copies the pass back. With a
    ``cutoff`` above 1, runs of that length are insertion sorted first and
    merging starts at that width.
    """
    cmp, stats, lo, hi = prepare(seq, comparator, lo, hi, metrics)
    cutoff = resolve_int_setting(cutoff, MERGESORT_CUTOFF_ENV, DEFAULT_MERGESORT_CUTOFF)
    n = hi - lo
    if n < 2:
        return
    aux = _allocate_buffer(n, stats)

    width = 1
    if cutoff > 1:
        for start in range(lo, hi, cutoff):
            insertion_pass(seq, start, min(start + cutoff, hi), cmp, stats)
        width = cutoff

    while width < n:
        for start in range(lo, hi, 2 * width):
            mid = min(start + width, hi)
            end = min(start + 2 * width, hi)
            # an unpaired tail (mid == end) is copied through unchanged
            merge(seq, aux, start, mid, end, cmp, stats, lo)
        _copy_back(seq, aux, lo, hi, stats, lo)

        if DEBUG_MODE:
            print(f"[MS DEBUG] pass width={width} range=[{lo}, {hi})")
        width *= 2
