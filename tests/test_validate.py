"""
Verification helpers.
"""

from __future__ import annotations

import pytest

from mergecount.errors import PermutationMismatchError, UnsortedResultError
from mergecount.instrument import ComparisonRecorder, items_from_keys
from mergecount.validate import (
    ensure_permutation,
    ensure_sorted,
    equals_oracle,
    first_violation_index,
    is_ascending,
    is_permutation,
    is_sorted,
    oracle_keys,
    permutation_counter_diff,
)


def test_plain_key_helpers() -> None:
    assert is_ascending([])
    assert is_ascending([0, 1, 5])
    assert not is_ascending([0, 2, 2])
    assert first_violation_index([0, 1, 3, 2]) == 2
    assert first_violation_index([0, 1]) is None
    assert is_permutation([2, 0, 1], [0, 1, 2])
    assert not is_permutation([0, 1], [0, 1, 1])
    assert permutation_counter_diff([0, 1, 1], [0, 1, 2]) == {1: 1, 2: -1}


def test_oracle() -> None:
    assert oracle_keys(3) == [0, 1, 2]
    assert equals_oracle(items_from_keys([0, 1, 2]))
    assert not equals_oracle(items_from_keys([1, 0, 2]))


def test_recorder_checks_do_not_count() -> None:
    rec = ComparisonRecorder(4)
    items = items_from_keys([0, 1, 2, 3])
    with rec.counting():
        assert is_sorted(items, rec)
        ensure_sorted(items, rec)
        assert rec.counting_enabled is True
    assert rec.counts == [0, 0, 0, 0]
    assert rec.comparisons == 0


def test_ensure_sorted_reports_first_violation() -> None:
    rec = ComparisonRecorder(4)
    with pytest.raises(UnsortedResultError) as excinfo:
        ensure_sorted(items_from_keys([0, 2, 1, 3]), rec)
    assert excinfo.value.index == 1
    assert excinfo.value.diagnostics == {"index": 1, "left_key": 2, "right_key": 1}


def test_ensure_permutation() -> None:
    ensure_permutation(items_from_keys([1, 0]), items_from_keys([0, 1]))
    with pytest.raises(PermutationMismatchError) as excinfo:
        ensure_permutation(items_from_keys([1, 0, 2]), items_from_keys([0, 1, 1]))
    assert excinfo.value.diff == {1: 1, 2: -1}
