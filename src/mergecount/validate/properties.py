"""
Property helpers for validating sort results.

Two flavours:

- Plain helpers over key sequences (`is_ascending`, `first_violation_index`,
  `is_permutation`, `permutation_counter_diff`). These use Python's own
  integer comparisons and are meant for tests and diagnostics.

- Recorder-aware verification (`is_sorted`, `ensure_sorted`,
  `ensure_permutation`) used by the harness right after a measured sort.
  Comparisons go through the recorder, with counting paused so that
  verification does not pollute the statistic.

Public API (stable):
    is_ascending(keys) -> bool
    first_violation_index(keys) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict[int, int]
    is_sorted(items, recorder) -> bool
    ensure_sorted(items, recorder) -> None
    ensure_permutation(before, after) -> None
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Sequence

from mergecount.errors import PermutationMismatchError, UnsortedResultError
from mergecount.instrument import Item, keys_of

__all__ = [
    "is_ascending",
    "first_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_sorted",
    "ensure_sorted",
    "ensure_permutation",
]


def is_ascending(keys: Sequence[int]) -> bool:
    """Return True iff keys[i] < keys[i+1] for all i."""
    return first_violation_index(keys) is None


def first_violation_index(keys: Sequence[int]) -> int | None:
    """Return the first index i where keys[i] >= keys[i+1], or None."""
    for i in range(len(keys) - 1):
        if not keys[i] < keys[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> Dict[int, int]:
    """
    Return a dict of key -> count difference (count_a - count_b).

    Empty dict means `a` and `b` have identical multiplicities.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[int, int] = {}
    for k in set(ca) | set(cb):
        d = ca.get(k, 0) - cb.get(k, 0)
        if d != 0:
            diff[k] = d
    return diff


# ------------------------- recorder-aware checks ------------------------- #


def _first_unsorted(items: Sequence[Item], recorder) -> int | None:
    with recorder.paused():
        for i in range(len(items) - 1):
            if not recorder.less(items[i], items[i + 1]):
                return i
    return None


def is_sorted(items: Sequence[Item], recorder) -> bool:
    return _first_unsorted(items, recorder) is None


def ensure_sorted(items: Sequence[Item], recorder) -> None:
    """Raise UnsortedResultError unless `items` is strictly ascending."""
    i = _first_unsorted(items, recorder)
    if i is not None:
        raise UnsortedResultError(i, items[i].key, items[i + 1].key)


def ensure_permutation(before: Sequence[Item], after: Sequence[Item]) -> None:
    diff = permutation_counter_diff(keys_of(after), keys_of(before))
    if diff:
        raise PermutationMismatchError(diff)
