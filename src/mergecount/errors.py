"""
Error types raised when an instrumented sort misbehaves.

An invariant violation means the algorithm under measurement is wrong, so
any further numbers from the sweep would be meaningless. The algorithms
raise; the harness (`mergecount.bench`) decides to abort and prints the
attached diagnostics.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "InvariantViolation",
    "DuplicateComparisonError",
    "UnsortedResultError",
    "PermutationMismatchError",
    "SweepAborted",
]


class InvariantViolation(RuntimeError):
    """Base class for self-test failures; `diagnostics` holds the context."""

    def __init__(self, message: str, diagnostics: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.diagnostics: Dict[str, Any] = dict(diagnostics or {})


class DuplicateComparisonError(InvariantViolation):
    """The same unordered pair of keys was compared twice within one merge."""

    def __init__(self, pair, occurrences: int, counts=None) -> None:
        lo, hi = pair
        super().__init__(
            f"pair ({lo}, {hi}) compared {occurrences} times in a single merge",
            {"pair": (lo, hi), "occurrences": occurrences, "counts": list(counts or [])},
        )
        self.pair = (lo, hi)
        self.occurrences = occurrences


class UnsortedResultError(InvariantViolation):
    """A sort variant returned a sequence that is not strictly ascending."""

    def __init__(self, index: int, left_key: int, right_key: int) -> None:
        super().__init__(
            f"not ascending at i={index}: {left_key} >= {right_key}",
            {"index": index, "left_key": left_key, "right_key": right_key},
        )
        self.index = index


class PermutationMismatchError(InvariantViolation):
    """Output keys are not the same multiset as the input keys."""

    def __init__(self, diff: Dict[int, int]) -> None:
        # Only report a handful of keys; a broken merge can touch all of them.
        shown = dict(sorted(diff.items())[:10])
        super().__init__(
            f"output is not a permutation of the input ({len(diff)} keys differ)",
            {"counter_diff": shown, "keys_differing": len(diff)},
        )
        self.diff = diff


class SweepAborted(RuntimeError):
    """Raised by the runner when a trial reports an invariant violation."""

    def __init__(self, algo: str, n: int, seed: int, error: str, diagnostics: Dict[str, Any]) -> None:
        super().__init__(f"{algo} at n={n} (seed={seed}): {error}")
        self.algo = algo
        self.n = n
        self.seed = seed
        self.error = error
        self.diagnostics = diagnostics
