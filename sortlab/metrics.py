"""
Sort Metrics
============
Operation counters collected while a sort runs.

Counting is opt-in: pass a ``SortMetrics`` instance as ``metrics=`` to any
sort and it is filled in place. Counters accumulate across calls until
``reset()`` is called, so one instance can total a whole benchmark batch.
"""

from dataclasses import asdict, dataclass, fields, replace
from typing import Dict


@dataclass
class SortMetrics:
    """Snapshot of the work a sort performed."""
    comparisons: int = 0         # comparator invocations
    swaps: int = 0               # pairwise exchanges
    writes: int = 0              # single-slot stores (shifts, merge copies)
    partitions: int = 0          # quicksort partition passes
    max_depth: int = 0           # deepest native recursion level reached
    buffer_allocations: int = 0  # auxiliary buffers allocated (merge sort)
    elapsed: float = 0.0         # wall-clock seconds, filled by the harness

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, f.default)

    def snapshot(self) -> "SortMetrics":
        return replace(self)

    def merge(self, other: "SortMetrics") -> "SortMetrics":
        """Add ``other`` into this instance; depth keeps the maximum."""
        self.comparisons += other.comparisons
        self.swaps += other.swaps
        self.writes += other.writes
        self.partitions += other.partitions
        self.buffer_allocations += other.buffer_allocations
        self.elapsed += other.elapsed
        self.max_depth = max(self.max_depth, other.max_depth)
        return self

    def record_depth(self, depth: int) -> None:
        if depth > self.max_depth:
            self.max_depth = depth

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)
