"""
Search strategies: lower-bound contract, equivalence and comparison counts.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from mergecount.instrument import ComparisonRecorder, Item, items_from_keys
from mergecount.search import GallopingSearch, LinearSearch, lower_bound

STRATEGIES = [LinearSearch, GallopingSearch]


def _evens(size: int) -> List[Item]:
    return items_from_keys(range(0, 2 * size, 2))


# ------------------------- exhaustive small ranges ------------------------- #

@pytest.mark.parametrize("search_cls", STRATEGIES)
@pytest.mark.parametrize("size", range(0, 18))
def test_locate_matches_bisect_on_every_probe(search_cls, size: int) -> None:
    seq = _evens(size)
    keys = [it.key for it in seq]
    search = search_cls(ComparisonRecorder())
    for probe in range(-1, 2 * size + 1):
        assert search.locate(seq, Item(probe)) == bisect_left(keys, probe), (size, probe)


@pytest.mark.parametrize("search_cls", STRATEGIES)
def test_locate_respects_lo_hi_window(search_cls) -> None:
    seq = _evens(12)
    keys = [it.key for it in seq]
    search = search_cls(ComparisonRecorder())
    for lo in range(0, 13):
        for hi in range(lo, 13):
            for probe in range(-1, 25):
                got = search.locate(seq, Item(probe), lo, hi)
                assert got == bisect_left(keys, probe, lo, hi), (lo, hi, probe)


@settings(deadline=None, max_examples=200)
@given(
    st.lists(st.integers(min_value=0, max_value=500), unique=True, max_size=80).map(sorted),
    st.integers(min_value=-5, max_value=505),
)
def test_strategies_agree(keys: List[int], probe: int) -> None:
    seq = items_from_keys(keys)
    rec = ComparisonRecorder()
    lin = LinearSearch(rec).locate(seq, Item(probe))
    exp = GallopingSearch(rec).locate(seq, Item(probe))
    assert lin == exp == bisect_left(keys, probe)


# ------------------------- galloping boundary cases ------------------------- #

@pytest.mark.parametrize("probe, expected", [(3, 0), (7, 1), (5, 0)])
def test_galloping_single_element(probe: int, expected: int) -> None:
    search = GallopingSearch(ComparisonRecorder())
    assert search.locate([Item(5)], Item(probe)) == expected


def test_galloping_single_element_window_inside_longer_sequence() -> None:
    seq = _evens(6)  # 0 2 4 6 8 10
    search = GallopingSearch(ComparisonRecorder())
    assert search.locate(seq, Item(5), 3, 4) == 3
    assert search.locate(seq, Item(7), 3, 4) == 4
    assert search.locate(seq, Item(6), 3, 4) == 3


def test_galloping_empty_range_returns_start() -> None:
    search = GallopingSearch(ComparisonRecorder())
    assert search.locate(_evens(4), Item(100), 2, 2) == 2


# ------------------------- comparison counts ------------------------- #

def _count(search_cls, seq: List[Item], probe: int, n_keys: int) -> int:
    rec = ComparisonRecorder(n_keys)
    with rec.counting():
        search_cls(rec).locate(seq, Item(probe))
    return rec.comparisons


@pytest.mark.parametrize("size", [1, 2, 5, 16])
def test_linear_count_is_smaller_elements_plus_one_failure(size: int) -> None:
    seq = _evens(size)
    for probe in range(0, 2 * size):
        smaller = sum(1 for it in seq if it.key < probe)
        extra = 1 if smaller < size else 0
        assert _count(LinearSearch, seq, probe, 2 * size) == smaller + extra


def test_galloping_is_logarithmic_in_distance() -> None:
    size = 1024
    seq = _evens(size)
    for probe in (2 * size - 1, 2 * size - 3, size, 1):
        assert _count(GallopingSearch, seq, probe, 2 * size) <= 2 * 10 + 2


def test_galloping_beats_linear_far_from_start() -> None:
    seq = _evens(256)
    probe = 2 * 200 + 1
    assert _count(GallopingSearch, seq, probe, 512) < _count(LinearSearch, seq, probe, 512)


@pytest.mark.parametrize("search_cls", STRATEGIES)
@pytest.mark.parametrize("size", range(1, 20))
def test_locate_never_compares_an_element_twice(search_cls, size: int) -> None:
    seq = _evens(size)
    for probe in range(0, 2 * size):
        if probe % 2 == 0:
            continue  # probes must not share a key with the range
        rec = ComparisonRecorder(2 * size, check_pairs=True)
        with rec.recording_pairs():
            search_cls(rec).locate(seq, Item(probe))


def test_lower_bound_helper() -> None:
    seq = _evens(8)
    rec = ComparisonRecorder()
    assert lower_bound(seq, Item(7), 0, 8, rec.less) == 4
    assert lower_bound(seq, Item(7), 5, 8, rec.less) == 5
    assert lower_bound(seq, Item(100), 0, 8, rec.less) == 8
