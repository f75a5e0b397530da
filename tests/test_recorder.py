"""
Tests for the comparison hook and the duplicate-pair self-test.
"""

from __future__ import annotations

import pytest

from mergecount.errors import DuplicateComparisonError
from mergecount.instrument import ComparisonRecorder, InstrumentedKey, Item


def test_less_returns_key_order_without_counting() -> None:
    rec = ComparisonRecorder(3)
    assert rec.less(Item(0), Item(2)) is True
    assert rec.less(Item(2), Item(0)) is False
    assert rec.less(Item(1), Item(1)) is False
    assert rec.counts == [0, 0, 0]
    assert rec.comparisons == 0


def test_counting_scope_counts_both_keys() -> None:
    rec = ComparisonRecorder(4)
    with rec.counting():
        rec.less(Item(0), Item(3))
        rec.less(Item(3), Item(1))
    rec.less(Item(0), Item(1))  # outside the scope

    assert rec.counts == [1, 1, 0, 2]
    assert rec.comparisons == 2
    assert sum(rec.counts) == 2 * rec.comparisons
    assert rec.counting_enabled is False


def test_paused_restores_counting() -> None:
    rec = ComparisonRecorder(2)
    with rec.counting():
        with rec.paused():
            rec.less(Item(0), Item(1))
        assert rec.counting_enabled is True
        rec.less(Item(0), Item(1))
    assert rec.comparisons == 1


def test_reset_zeroes_state() -> None:
    rec = ComparisonRecorder(2)
    with rec.counting():
        rec.less(Item(0), Item(1))
    rec.reset(5)
    assert rec.counts == [0] * 5
    assert rec.comparisons == 0


def test_reset_rejects_negative_size() -> None:
    with pytest.raises(ValueError):
        ComparisonRecorder(-1)


def test_max_and_mean_counts() -> None:
    rec = ComparisonRecorder(4)
    with rec.counting():
        rec.less(Item(0), Item(1))
        rec.less(Item(0), Item(2))
        rec.less(Item(0), Item(3))
    assert rec.max_count() == 3
    assert rec.mean_count() == pytest.approx(6 / 4)
    assert ComparisonRecorder(0).max_count() == 0
    assert ComparisonRecorder(0).mean_count() == 0.0


def test_instrumented_key_routes_through_recorder() -> None:
    rec = ComparisonRecorder(2)
    a = InstrumentedKey(Item(0), rec)
    b = InstrumentedKey(Item(1), rec)
    with rec.counting():
        assert a < b
        assert b > a
        assert not (b < a)
    assert rec.comparisons == 3
    assert rec.counts == [3, 3]


# ------------------------- pair recording ------------------------- #

def test_distinct_pairs_pass_validation() -> None:
    rec = ComparisonRecorder(4, check_pairs=True)
    with rec.recording_pairs():
        rec.less(Item(0), Item(1))
        rec.less(Item(2), Item(1))
        rec.less(Item(3), Item(0))
    assert rec.compared_pairs == []
    assert rec.pair_recording_enabled is False


def test_repeated_pair_is_detected_regardless_of_argument_order() -> None:
    rec = ComparisonRecorder(4, check_pairs=True)
    with pytest.raises(DuplicateComparisonError) as excinfo:
        with rec.recording_pairs():
            rec.less(Item(2), Item(1))
            rec.less(Item(0), Item(3))
            rec.less(Item(1), Item(2))
    err = excinfo.value
    assert err.pair == (1, 2)
    assert err.occurrences == 2
    assert err.diagnostics["pair"] == (1, 2)
    assert rec.pair_recording_enabled is False


def test_pairs_are_cleared_between_scopes() -> None:
    rec = ComparisonRecorder(2, check_pairs=True)
    with rec.recording_pairs():
        rec.less(Item(0), Item(1))
    with rec.recording_pairs():
        rec.less(Item(0), Item(1))


def test_pair_recording_is_off_without_check_pairs() -> None:
    rec = ComparisonRecorder(2)
    with rec.recording_pairs():
        rec.less(Item(0), Item(1))
        rec.less(Item(0), Item(1))
        assert rec.compared_pairs == []


def test_validate_is_noop_outside_recording() -> None:
    rec = ComparisonRecorder(2, check_pairs=True)
    rec.compared_pairs.extend([(0, 1), (0, 1)])
    rec.validate_no_duplicate_pairs()
    assert rec.compared_pairs == [(0, 1), (0, 1)]


def test_error_inside_scope_propagates_and_disables_recording() -> None:
    rec = ComparisonRecorder(2, check_pairs=True)
    with pytest.raises(KeyError):
        with rec.recording_pairs():
            rec.less(Item(0), Item(1))
            raise KeyError("boom")
    assert rec.pair_recording_enabled is False
    assert rec.compared_pairs == []
