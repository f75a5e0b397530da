"""
Comparison-count harness for one trial.

We measure exactly one call to an algorithm's `sort(items, recorder=...,
config=...)` per trial, with comparison counting enabled only around that
call. Copying, verification and statistics happen outside the counted
region so they do not pollute the numbers.

Public API (stable):
    count_sort_call(... ) -> dict

Returned dict schema:
    {
        "algo": str,
        "n": int,
        "logn": int,                  # floor(log2 n), 0 for n <= 1
        "maxc": int,                  # max comparisons any key took part in
        "avgc": float,                # mean comparisons per key
        "comparisons": int,           # total comparison invocations
        "status": "ok" | "invariant_violation",
        "error": str | None,
        "diagnostics": dict | None,   # populated for invariant violations
    }
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from mergecount.errors import InvariantViolation
from mergecount.instrument import ComparisonRecorder, Item
from mergecount.validate import ensure_permutation, ensure_sorted

__all__ = ["count_sort_call", "floor_log2"]


def floor_log2(n: int) -> int:
    return n.bit_length() - 1 if n > 0 else 0


def count_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[Item]],
    items: List[Item],
    recorder: ComparisonRecorder,
    config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Count the comparisons made by `algo_fn(items, recorder=..., config=config)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for records).
    algo_fn : Callable[..., list[Item]]
        Callable implementing sort(items, *, recorder, config=None).
    items : list[Item]
        Input permutation of keys [0, n). Not mutated; the algorithm gets a copy.
    recorder : ComparisonRecorder
        Reset to n keys at the start of the trial.
    config : dict | None
        Algorithm configuration passed through unchanged.

    Returns
    -------
    dict
        See module docstring for exact schema. Invariant violations raised by
        the sort or by verification are reported with
        status="invariant_violation". Any other exception propagates: the
        config was already checked when the algorithm was resolved, so an
        error here is a defect in the sort itself.
    """
    n = len(items)
    result: Dict[str, Any] = {
        "algo": algo_name,
        "n": n,
        "logn": floor_log2(n),
        "maxc": 0,
        "avgc": 0.0,
        "comparisons": 0,
        "status": "ok",
        "error": None,
        "diagnostics": None,
    }

    recorder.reset(n)
    arg = list(items)
    try:
        with recorder.counting():
            out = algo_fn(arg, recorder=recorder, config=config)
        ensure_sorted(out, recorder)
        ensure_permutation(items, out)
    except InvariantViolation as e:
        result["status"] = "invariant_violation"
        result["error"] = f"{type(e).__name__}: {e}"
        result["diagnostics"] = e.diagnostics
        return result

    result["maxc"] = recorder.max_count()
    result["avgc"] = recorder.mean_count()
    result["comparisons"] = recorder.comparisons
    return result
