"""
Comparison instrumentation.

`ComparisonRecorder.less(a, b)` is the single place where two items are
ordered. Every comparison made by the merge engine, by both search
strategies and by the baseline sorts passes through it, so the counts are
total for whatever region has counting enabled.

Two independent switches control what is recorded:

- counting: per-key participation counts plus the total number of
  comparisons. Enabled around the measured sort call only, so that dataset
  generation and verification do not pollute the statistic.
- pair recording: the normalized (min, max) key pairs compared during one
  merge call, used by the dedup self-test. Only active when the recorder was
  built with `check_pairs=True`; performance runs leave it off.

Public API (stable):
    ComparisonRecorder(n=0, *, check_pairs=False)
    .reset(n) / .less(a, b) / .validate_no_duplicate_pairs()
    .counting() / .paused() / .recording_pairs()   # context managers
    .max_count() / .mean_count()
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Tuple

import numpy as np

from mergecount.errors import DuplicateComparisonError

__all__ = ["ComparisonRecorder"]


class ComparisonRecorder:
    def __init__(self, n: int = 0, *, check_pairs: bool = False) -> None:
        self.check_pairs = bool(check_pairs)
        self.counting_enabled = False
        self.pair_recording_enabled = False
        self.counts: List[int] = []
        self.comparisons = 0
        self.compared_pairs: List[Tuple[int, int]] = []
        self.reset(n)

    def reset(self, n: int) -> None:
        """Zero the counts for a fresh trial over keys [0, n)."""
        if n < 0:
            raise ValueError("n must be nonnegative")
        self.counts = [0] * n
        self.comparisons = 0
        self.compared_pairs.clear()

    # ------------------------- the comparison hook ------------------------- #

    def less(self, a, b) -> bool:
        ka = a.key
        kb = b.key
        if self.counting_enabled:
            self.counts[ka] += 1
            self.counts[kb] += 1
            self.comparisons += 1
        if self.pair_recording_enabled:
            self.compared_pairs.append((ka, kb) if ka < kb else (kb, ka))
        return ka < kb

    # ------------------------- dedup self-test ------------------------- #

    def validate_no_duplicate_pairs(self) -> None:
        """
        Raise DuplicateComparisonError if any pair was compared twice since
        the last clear, then clear the recorded pairs.

        No-op unless pair recording is currently enabled.
        """
        if not self.pair_recording_enabled:
            return
        snapshot = sorted(self.compared_pairs)
        self.compared_pairs.clear()
        for i in range(1, len(snapshot)):
            if snapshot[i] == snapshot[i - 1]:
                pair = snapshot[i]
                occurrences = snapshot.count(pair)
                raise DuplicateComparisonError(pair, occurrences, self.counts)

    # ------------------------- switches ------------------------- #

    @contextmanager
    def counting(self) -> Iterator["ComparisonRecorder"]:
        prev = self.counting_enabled
        self.counting_enabled = True
        try:
            yield self
        finally:
            self.counting_enabled = prev

    @contextmanager
    def paused(self) -> Iterator["ComparisonRecorder"]:
        prev = self.counting_enabled
        self.counting_enabled = False
        try:
            yield self
        finally:
            self.counting_enabled = prev

    @contextmanager
    def recording_pairs(self) -> Iterator["ComparisonRecorder"]:
        """
        Scope one merge call: clear pairs on entry, validate on normal exit.

        Does nothing unless the recorder was built with check_pairs=True.
        """
        if not self.check_pairs:
            yield self
            return
        self.pair_recording_enabled = True
        self.compared_pairs.clear()
        try:
            yield self
            self.validate_no_duplicate_pairs()
        finally:
            self.pair_recording_enabled = False
            self.compared_pairs.clear()

    # ------------------------- statistics ------------------------- #

    def max_count(self) -> int:
        if not self.counts:
            return 0
        return int(np.max(np.asarray(self.counts, dtype=np.int64)))

    def mean_count(self) -> float:
        if not self.counts:
            return 0.0
        return float(np.mean(np.asarray(self.counts, dtype=np.int64)))
