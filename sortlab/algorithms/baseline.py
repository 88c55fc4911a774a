"""
Reference Baseline
==================
Adapters over the platform sorts, used only as a correctness oracle and a
timing baseline. Nothing here is reimplemented:

- stable:   ``list.sort`` (Timsort)
- unstable: ``numpy.sort(kind="quicksort")`` (introsort) for natural
  ordering over homogeneous int/float data that numpy holds without
  conversion; every other input goes through ``list.sort``, whose stable
  result also satisfies the unstable contract.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Iterable, List, MutableSequence, Optional

import numpy as np

from sortlab.algorithms.base import prepare
from sortlab.comparator import Comparator, resolve_comparator
from sortlab.metrics import SortMetrics

NUMPY_KINDS = {int: "iu", float: "f"}


def _write_back(seq: MutableSequence[Any], values: List[Any], lo: int, metrics: SortMetrics) -> None:
    for offset, value in enumerate(values):
        seq[lo + offset] = value
    metrics.writes += len(values)


def _timsort(values: List[Any], cmp: Comparator, counting: bool) -> None:
    if cmp.is_natural and not counting:
        values.sort()
    else:
        values.sort(key=cmp_to_key(cmp))


def builtin_stable_sort(
    seq: MutableSequence[Any],
    comparator: Any = None,
    *,
    lo: int = 0,
    hi: Optional[int] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """Sort ``seq[lo:hi]`` in place with the built-in stable sort."""
    cmp, stats, lo, hi = prepare(seq, comparator, lo, hi, metrics)
    values = [seq[k] for k in range(lo, hi)]
    _timsort(values, cmp, metrics is not None)
    _write_back(seq, values, lo, stats)


def _numpy_sortable(values: List[Any]) -> bool:
    if not values or len({type(v) for v in values}) != 1:
        return False
    kinds = NUMPY_KINDS.get(type(values[0]))
    if kinds is None:
        return False
    # ints past the int64/uint64 range come back as float64 or object
    return np.asarray(values).dtype.kind in kinds


def builtin_unstable_sort(
    seq: MutableSequence[Any],
    comparator: Any = None,
    *,
    lo: int = 0,
    hi: Optional[int] = None,
    metrics: Optional[SortMetrics] = None,
) -> None:
    """Sort ``seq[lo:hi]`` in place with the platform's unstable sort."""
    cmp, stats, lo, hi = prepare(seq, comparator, lo, hi, metrics)
    values = [seq[k] for k in range(lo, hi)]

    # Counting needs comparator calls, which numpy never makes
    if metrics is None and cmp.is_natural and _numpy_sortable(values):
        values = np.sort(np.asarray(values), kind="quicksort").tolist()
    else:
        _timsort(values, cmp, metrics is not None)
    _write_back(seq, values, lo, stats)


def oracle_sorted(values: Iterable[Any], comparator: Any = None) -> List[Any]:
    """Return a new stably sorted list; the input is never mutated."""
    cmp = resolve_comparator(comparator)
    result = list(values)
    _timsort(result, cmp, False)
    return result
