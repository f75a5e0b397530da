"""
Oracle for sort correctness.

Inputs are permutations of [0, n), so the only correct output is the
identity [0, 1, ..., n-1]. Checking against it needs no comparisons and
therefore never touches the recorder.

Public API (stable):
    oracle_keys(n: int) -> list[int]
    equals_oracle(out: list[Item]) -> bool
"""

from __future__ import annotations

from typing import List, Sequence

from mergecount.instrument import Item, keys_of

ORACLE_NAME: str = "identity_permutation"

__all__ = ["ORACLE_NAME", "oracle_keys", "equals_oracle"]


def oracle_keys(n: int) -> List[int]:
    return list(range(n))


def equals_oracle(out: Sequence[Item]) -> bool:
    """True iff the keys of `out` are exactly 0, 1, ..., len(out) - 1."""
    return keys_of(out) == oracle_keys(len(out))
