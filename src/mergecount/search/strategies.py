"""
Insertion-point search strategies used by the merge engine.

Both strategies answer the same question: the leftmost index in the sorted
slice seq[lo:hi] at which `probe` could be inserted keeping it sorted (the
lower bound, like `bisect.bisect_left`). They return identical indices and
differ only in how many comparisons they spend getting there:

- LinearSearch: one comparison per element smaller than the probe, plus
  one failing comparison unless the slice runs out. O(k).
- GallopingSearch: probe offsets 0, 1, 3, 7, 15, ... until the probe is
  bracketed, then binary-search inside the bracket. O(log k).

where k is the distance from `lo` to the answer.

All comparisons go through the strategy's recorder. Indices are absolute
positions in `seq`; nothing is sliced or copied.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

__all__ = ["LinearSearch", "GallopingSearch", "lower_bound", "SEARCHES"]


def lower_bound(seq: Sequence, probe, lo: int, hi: int, less: Callable) -> int:
    """Binary search for the first i in [lo, hi) with not less(seq[i], probe)."""
    while lo < hi:
        mid = (lo + hi) // 2
        if less(seq[mid], probe):
            lo = mid + 1
        else:
            hi = mid
    return lo


class LinearSearch:
    name = "lin"

    def __init__(self, recorder) -> None:
        self.recorder = recorder

    def locate(self, seq: Sequence, probe, lo: int = 0, hi: Optional[int] = None) -> int:
        if hi is None:
            hi = len(seq)
        less = self.recorder.less
        while lo < hi and less(seq[lo], probe):
            lo += 1
        return lo


class GallopingSearch:
    name = "exp"

    def __init__(self, recorder) -> None:
        self.recorder = recorder

    def locate(self, seq: Sequence, probe, lo: int = 0, hi: Optional[int] = None) -> int:
        if hi is None:
            hi = len(seq)
        less = self.recorder.less
        size = hi - lo

        # Gallop: seq[lo + last_below] < probe holds for every accepted step.
        i = 0
        last_below = 0
        step = 1
        while i < size and less(seq[lo + i], probe):
            last_below = i
            i += step
            step *= 2

        if i == 0:
            # Empty slice, or the first element is already >= probe.
            return lo

        if i < size:
            # seq[lo + i] >= probe is known, so it bounds the search.
            return lower_bound(seq, probe, lo + last_below + 1, lo + i, less)

        # Overran the slice. The final element decides whether the answer is
        # the end; when it was the last accepted step it is already known.
        if last_below == size - 1 or less(seq[hi - 1], probe):
            return hi
        return lower_bound(seq, probe, lo + last_below + 1, hi - 1, less)


SEARCHES = {
    LinearSearch.name: LinearSearch,
    GallopingSearch.name: GallopingSearch,
}
