"""
Shell Sort
==========
Insertion sort over elements ``gap`` apart, for a shrinking sequence of
gaps ending at 1. The final gap-1 pass is plain insertion sort, so the gap
sequence changes the running time only, never the result.

Named gap sequences:

- ``halving`` (default): n/2, n/4, ..., 1
- ``knuth``:   ..., 40, 13, 4, 1  (h = 3h + 1, largest below n/3)
- ``ciura``:   ..., 301, 132, 57, 23, 10, 4, 1 (extended by x2.25)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, MutableSequence, Optional, Union

from sortlab.algorithms.base import insertion_pass, prepare
from sortlab.algorithms.sort_errors import InvalidGapSequenceError
from sortlab.metrics import SortMetrics

CIURA_GAPS = (1, 4, 10, 23, 57, 132, 301, 701)


def halving_gaps(n: int) -> List[int]:
    gaps = []
    gap = n // 2
    while gap > 0:
        gaps.append(gap)
        gap //= 2
    return gaps or [1]


def knuth_gaps(n: int) -> List[int]:
    gaps = [1]
    while gaps[-1] * 3 + 1 <= n // 3:
        gaps.append(gaps[-1] * 3 + 1)
    return gaps[::-1]


def ciura_gaps(n: int) -> List[int]:
    gaps = [g for g in CIURA_GAPS if g < n] or [1]
    if gaps[-1] == CIURA_GAPS[-1]:
        gap = int(gaps[-1] * 2.25)
        while gap < n:
            gaps.append(gap)
            gap = int(gap * 2.25)
    return gaps[::-1]


GAP_SEQUENCES: Dict[str, Callable[[int], List[int]]] = {
    "halving": halving_gaps,
    "knuth": knuth_gaps,
    "ciura": ciura_gaps,
}

GapSpec = Union[None, str, Iterable[int]]


def resolve_gaps(gaps: GapSpec, n: int) -> List[int]:
    """
    Turn a gap specification into a strictly descending list ending at 1.

    Explicit sequences are de-duplicated and sorted; a missing final gap of
    1 is appended.
    """
    if gaps is None:
        return halving_gaps(n)
    if isinstance(gaps, str):
        try:
            return GAP_SEQUENCES[gaps](n)
        except KeyError:
            raise InvalidGapSequenceError(
                gaps, f"Unknown gap sequence {gaps!r} (available: {', '.join(GAP_SEQUENCES)})"
            ) from None

    resolved = set()
    for gap in gaps:
        if isinstance(gap, bool) or not isinstance(gap, int) or gap < 1:
            raise InvalidGapSequenceError(gaps)
        resolved.add(gap)
    resolved.add(1)
    return sorted(resolved, reverse=True)


def shell_sort(
    seq: MutableSequence[Any],
    comparator: Any = None,
    *,
    gaps: GapSpec = None,
    lo: int = 0,
    hi: Optional[int] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """Shell sort ``seq[lo:hi]`` in place. Not stable."""
    cmp, stats, lo, hi = prepare(seq, comparator, lo, hi, metrics)
    n = hi - lo
    if n < 2:
        return
    for gap in resolve_gaps(gaps, n):
        if gap < n:
            insertion_pass(seq, lo, hi, cmp, stats, gap=gap)
