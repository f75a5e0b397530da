"""
Asymmetric galloping merge of two adjacent sorted runs.

`MergeEngine.merge(items, lo, mid, hi)` merges items[lo:mid] (the left run)
and items[mid:hi] (the right run) in place. Insertion points are found with
the engine's search strategy, alternating between the runs:

    left  cursor x, right cursor y
    repeat while x < mid:
        find in the right run the first element not smaller than items[x];
        bulk-copy the right elements before it.
        if the right run is exhausted: bulk-copy the rest of the left run.
        else find in the left run the first element not smaller than
        items[y]; bulk-copy the left elements before it.

Bookkeeping that keeps each unordered pair compared at most once per merge:

- after the first round the right search starts at y + 1: items[y] was the
  answer of the previous left search, so it is already known not smaller
  than the probe.
- the left search starts at x + 1 for the same reason, and a single
  remaining left element is copied without searching.

Whatever is left of the right run when the left run runs out is already in
its final position, so it is neither buffered nor copied back.

The scratch buffer is owned by the caller and reused across merges; the
merge of [lo, hi) writes to the same index range of the buffer.
"""

from __future__ import annotations

from typing import List, MutableSequence

__all__ = ["MergeEngine"]


class MergeEngine:
    def __init__(self, search, buffer: List) -> None:
        self.search = search
        self.recorder = search.recorder
        self.buffer = buffer

    def merge(self, items: MutableSequence, lo: int, mid: int, hi: int) -> None:
        if hi > len(self.buffer):
            raise ValueError(f"scratch buffer too small: {len(self.buffer)} < {hi}")

        with self.recorder.recording_pairs():
            written = self._merge_into_buffer(items, lo, mid, hi)

        items[lo:lo + written] = self.buffer[lo:lo + written]

    def _merge_into_buffer(self, items: MutableSequence, lo: int, mid: int, hi: int) -> int:
        locate = self.search.locate
        buf = self.buffer
        out = lo
        x = lo
        y = mid
        first = True

        while x < mid:
            if y < hi:
                start = y if first else y + 1
                y_stop = locate(items, items[x], start, hi)
                buf[out:out + (y_stop - y)] = items[y:y_stop]
                out += y_stop - y
                y = y_stop

            if y == hi:
                buf[out:out + (mid - x)] = items[x:mid]
                out += mid - x
                x = mid
            elif x + 1 == mid:
                buf[out] = items[x]
                out += 1
                x = mid
            else:
                x_stop = locate(items, items[y], x + 1, mid)
                buf[out:out + (x_stop - x)] = items[x:x_stop]
                out += x_stop - x
                x = x_stop

            first = False

        return out - lo
