"""
Sort argument errors and tunable limits.
"""

from __future__ import annotations

import os
from typing import Any, Iterable, Optional, Sequence, Tuple

DEFAULT_QUICKSORT_CUTOFF = 0
DEFAULT_MERGESORT_CUTOFF = 0
DEFAULT_BENCH_TIME_LIMIT_MS = 500
DEFAULT_BENCH_REPETITIONS = 100

QUICKSORT_CUTOFF_ENV = "SORTLAB_QUICKSORT_CUTOFF"
MERGESORT_CUTOFF_ENV = "SORTLAB_MERGESORT_CUTOFF"
BENCH_TIME_LIMIT_ENV = "SORTLAB_BENCH_TIME_LIMIT_MS"
BENCH_REPETITIONS_ENV = "SORTLAB_BENCH_REPETITIONS"
DEBUG_ENV = "SORTLAB_DEBUG"


class SortError(RuntimeError):
    """Base class for every error raised by sortlab."""


class InvalidRangeError(SortError):
    """
    Raised when an explicit ``[lo, hi)`` range does not fit the sequence.
    """

    def __init__(self, lo: int, hi: int, length: int) -> None:
        super().__init__(f"Invalid range [{lo}, {hi}) for sequence of length {length}")
        self.lo = lo
        self.hi = hi
        self.length = length


class InvalidGapSequenceError(SortError):
    """Raised when a shell sort gap sequence holds a non-positive or non-integer gap."""

    def __init__(self, gaps: Any, message: Optional[str] = None) -> None:
        super().__init__(message or f"Invalid gap sequence: {gaps!r}")
        self.gaps = gaps


class InvalidComparatorError(SortError):
    """Raised when something that is neither a Comparator nor a callable is passed as comparator."""

    def __init__(self, comparator: Any) -> None:
        super().__init__(f"Cannot use {comparator!r} as a comparator")
        self.comparator = comparator


class UnknownAlgorithmError(SortError):
    """Raised by the registry for an algorithm name it does not know."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = tuple(available)
        message = f"Unknown sorting algorithm {name!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


def check_range(seq: Sequence[Any], lo: int = 0, hi: Optional[int] = None) -> Tuple[int, int]:
    """
    Resolve ``hi=None`` to ``len(seq)`` and validate ``0 <= lo <= hi <= len(seq)``.
    """
    length = len(seq)
    if hi is None:
        hi = length
    if lo < 0 or hi > length or lo > hi:
        raise InvalidRangeError(lo, hi, length)
    return lo, hi


def resolve_int_setting(
    explicit: Optional[int],
    env_name: str,
    default: int,
    minimum: int = 0,
) -> int:
    """
    Resolve an integer setting.

    Priority:
    1) explicit argument
    2) environment variable ``env_name``
    3) ``default``

    Values that do not parse, or fall below ``minimum``, resolve to ``default``.
    """
    raw = explicit
    if raw is None:
        raw = os.getenv(env_name)
    if raw is None:
        return default

    try:
        value = int(raw)
        if value >= minimum:
            return value
    except (TypeError, ValueError):
        pass
    return default


def debug_enabled() -> bool:
    """True when SORTLAB_DEBUG is set to a truthy value."""
    return os.getenv(DEBUG_ENV, "").strip().lower() in ("1", "true", "yes", "on")
