"""
Sort Validators
===============
Checks for the sortedness, permutation and stability properties every
algorithm must satisfy. Used by the tests and by the benchmark harness to
reject a wrong result before it is timed.
"""

from collections import Counter
from typing import Any, List, Optional, Sequence, Tuple

from sortlab.algorithms.baseline import oracle_sorted
from sortlab.comparator import resolve_comparator


def first_violation(seq: Sequence[Any], comparator: Any = None) -> Optional[int]:
    """
    Return the first index ``i`` with ``seq[i] > seq[i + 1]``, or None.
    """
    cmp = resolve_comparator(comparator)
    for i in range(len(seq) - 1):
        if cmp.greater(seq[i], seq[i + 1]):
            return i
    return None


def is_sorted(seq: Sequence[Any], comparator: Any = None) -> bool:
    return first_violation(seq, comparator) is None


def assert_sorted(seq: Sequence[Any], comparator: Any = None) -> None:
    """Raise AssertionError naming the first out-of-order pair."""
    i = first_violation(seq, comparator)
    if i is not None:
        raise AssertionError(f"ordering failed at index {i + 1}: {seq[i]!r} > {seq[i + 1]!r}")


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """
    True iff ``a`` and ``b`` hold the same multiset of elements.

    Unhashable elements fall back to comparing sorted copies.
    """
    if len(a) != len(b):
        return False
    try:
        return Counter(a) == Counter(b)
    except TypeError:
        return oracle_sorted(a) == oracle_sorted(b)


def tag_with_index(values: Sequence[Any]) -> List[Tuple[Any, int]]:
    """Pair every element with its original position: ``(value, index)``."""
    return [(value, index) for index, value in enumerate(values)]


def is_stable(tagged_result: Sequence[Tuple[Any, int]], comparator: Any = None) -> bool:
    """
    Check a sorted list of ``(value, original_index)`` pairs for stability:
    among values that compare equal, original indices must increase.

    ``comparator`` orders the bare values, as it did for the sort itself.
    """
    cmp = resolve_comparator(comparator)
    for (a, ia), (b, ib) in zip(tagged_result, tagged_result[1:]):
        if cmp.equal(a, b) and ia > ib:
            return False
    return True


def matches_baseline(original: Sequence[Any], result: Sequence[Any], comparator: Any = None) -> bool:
    """
    True iff ``result`` is sorted and a permutation of ``original``.

    Elements that compare equal may legitimately differ in order from the
    stable baseline, even under natural ordering when ``<`` ties distinct
    objects, so no exact list equality is required.
    """
    return is_sorted(result, comparator) and is_permutation(original, result)
