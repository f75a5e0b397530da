"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_keys
        equals_oracle

    - Property checks:
        is_ascending
        first_violation_index
        is_permutation
        permutation_counter_diff
        is_sorted
        ensure_sorted
        ensure_permutation
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_keys
from .properties import (
    ensure_permutation,
    ensure_sorted,
    first_violation_index,
    is_ascending,
    is_permutation,
    is_sorted,
    permutation_counter_diff,
)

__all__ = [
    "ORACLE_NAME",
    "oracle_keys",
    "equals_oracle",
    "is_ascending",
    "first_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_sorted",
    "ensure_sorted",
    "ensure_permutation",
]
