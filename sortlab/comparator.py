"""
Comparator
==========
Total-order predicate shared by every algorithm.

A ``Comparator`` can be built three ways:

- ``Comparator()``            natural ordering, using only ``<``
- ``Comparator(key=fn)``      natural ordering of ``fn(element)``
- ``Comparator(cmp=fn)``      three-way function returning <0, 0 or >0

Algorithms only ever ask ``less(a, b)`` or ``compare(a, b)``; they never
mutate the elements they compare.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Optional

from sortlab.algorithms.sort_errors import InvalidComparatorError
from sortlab.metrics import SortMetrics


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


class Comparator:
    def __init__(
        self,
        cmp: Optional[Callable[[Any, Any], int]] = None,
        *,
        key: Optional[Callable[[Any], Any]] = None,
        reverse: bool = False,
    ) -> None:
        if cmp is not None and key is not None:
            raise InvalidComparatorError((cmp, key))
        self._cmp = cmp
        self._key = key
        self.reverse = reverse

    # ── Constructors ─────────────────────────────────────────

    @classmethod
    def natural(cls, reverse: bool = False) -> "Comparator":
        return cls(reverse=reverse)

    @classmethod
    def by_key(cls, key: Callable[[Any], Any], reverse: bool = False) -> "Comparator":
        return cls(key=key, reverse=reverse)

    @classmethod
    def from_cmp(cls, cmp: Callable[[Any, Any], int], reverse: bool = False) -> "Comparator":
        return cls(cmp, reverse=reverse)

    @property
    def is_natural(self) -> bool:
        """True for plain ``<`` ordering with no key, cmp function or reversal."""
        return self._cmp is None and self._key is None and not self.reverse

    # ── Core ─────────────────────────────────────────────────

    def _raw(self, a: Any, b: Any) -> Ordering:
        if self._cmp is not None:
            result = self._cmp(a, b)
            if result < 0:
                return Ordering.LESS
            if result > 0:
                return Ordering.GREATER
            return Ordering.EQUAL

        if self._key is not None:
            a, b = self._key(a), self._key(b)
        if a < b:
            return Ordering.LESS
        if b < a:
            return Ordering.GREATER
        return Ordering.EQUAL

    def compare(self, a: Any, b: Any) -> Ordering:
        result = self._raw(a, b)
        if self.reverse:
            return Ordering(-result)
        return result

    def less(self, a: Any, b: Any) -> bool:
        return self.compare(a, b) is Ordering.LESS

    def less_equal(self, a: Any, b: Any) -> bool:
        return self.compare(a, b) is not Ordering.GREATER

    def greater(self, a: Any, b: Any) -> bool:
        return self.compare(a, b) is Ordering.GREATER

    def equal(self, a: Any, b: Any) -> bool:
        return self.compare(a, b) is Ordering.EQUAL

    def __call__(self, a: Any, b: Any) -> int:
        """Three-way int result, usable with ``functools.cmp_to_key``."""
        return int(self.compare(a, b))

    def __repr__(self) -> str:
        if self._cmp is not None:
            kind = f"cmp={getattr(self._cmp, '__name__', self._cmp)!s}"
        elif self._key is not None:
            kind = f"key={getattr(self._key, '__name__', self._key)!s}"
        else:
            kind = "natural"
        return f"Comparator({kind}{', reverse=True' if self.reverse else ''})"


class CountingComparator(Comparator):
    """Delegates to ``inner`` and counts every comparison into ``metrics``."""

    def __init__(self, inner: Comparator, metrics: SortMetrics) -> None:
        super().__init__()
        self.inner = inner
        self.metrics = metrics

    @property
    def is_natural(self) -> bool:
        return self.inner.is_natural

    def compare(self, a: Any, b: Any) -> Ordering:
        self.metrics.comparisons += 1
        return self.inner.compare(a, b)

    def __repr__(self) -> str:
        return f"CountingComparator({self.inner!r})"


def resolve_comparator(comparator: Any = None) -> Comparator:
    """
    Normalize the ``comparator`` argument every sort accepts.

    ``None`` gives natural ordering, a ``Comparator`` is used as-is and any
    other callable is treated as a three-way ``cmp(a, b)`` function.
    """
    if comparator is None:
        return Comparator()
    if isinstance(comparator, Comparator):
        return comparator
    if callable(comparator):
        return Comparator(comparator)
    raise InvalidComparatorError(comparator)
