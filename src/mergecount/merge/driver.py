"""
Recursive top-down merge sort over a pluggable search strategy.

Public API (stable):
    merge_sort(items: list[Item], search) -> None     # sorts in place
"""

from __future__ import annotations

from typing import MutableSequence

from mergecount.merge.engine import MergeEngine

__all__ = ["merge_sort", "is_power_of_two"]


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def merge_sort(items: MutableSequence, search) -> None:
    """
    Sort `items` in place, merging halves with `search` as the insertion
    point finder.

    The length must be 0 or a power of two so every level splits evenly.
    One scratch buffer of len(items) slots is allocated here and shared by
    all merges of this call.
    """
    n = len(items)
    if n == 0:
        return
    if not is_power_of_two(n):
        raise ValueError(f"merge_sort needs a power-of-two length; got {n}")

    engine = MergeEngine(search, [None] * n)
    _sort(items, 0, n, engine)


def _sort(items: MutableSequence, lo: int, hi: int, engine: MergeEngine) -> None:
    if hi - lo <= 1:
        return
    mid = lo + (hi - lo) // 2
    _sort(items, lo, mid, engine)
    _sort(items, mid, hi, engine)
    engine.merge(items, lo, mid, hi)
