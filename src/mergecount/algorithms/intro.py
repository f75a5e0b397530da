"""
Unstable-sort control: NumPy's object-array sort.

For dtype=object NumPy orders elements with a three-way compare built from
rich comparisons: it asks `a < b` and, only when that fails, `a > b` to tell
"greater" from "equal". Keys are distinct, so that second answer already
follows from the failed `<`; ThreeWayKey answers it without counting, which
keeps one recorded comparison per compare the sort performs, the same
accounting as the `<`-only variants.

kind="quicksort" is NumPy's introsort; "heapsort" is accepted as well.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np

from mergecount.instrument import InstrumentedKey, Item

NAME = "intro"
SUPPORTED_KINDS = {"quicksort", "heapsort"}


class ThreeWayKey(InstrumentedKey):
    __slots__ = ("_not_below",)

    def __init__(self, item: Item, recorder) -> None:
        super().__init__(item, recorder)
        # The key this one last failed `<` against, if that was the latest compare.
        self._not_below = None

    def __lt__(self, other: "ThreeWayKey") -> bool:
        below = self.recorder.less(self.item, other.item)
        self._not_below = None if below else other
        return below

    def __gt__(self, other: "ThreeWayKey") -> bool:
        if self._not_below is other:
            self._not_below = None
            return self.item.key != other.item.key
        return self.recorder.less(other.item, self.item)


def check_config(config: Optional[Dict[str, Any]]) -> str:
    kind = (config or {}).get("kind", "quicksort")
    if kind not in SUPPORTED_KINDS:
        raise ValueError(f"intro.config.kind must be one of {sorted(SUPPORTED_KINDS)}; got {kind!r}")
    extra = sorted(set(config or {}) - {"kind"})
    if extra:
        raise ValueError(f"intro.config has unknown keys: {extra}")
    return kind


def sort(items: List[Item], *, recorder, config: Optional[Dict[str, Any]] = None) -> List[Item]:
    kind = check_config(config)

    arr = np.empty(len(items), dtype=object)
    for i, it in enumerate(items):
        arr[i] = ThreeWayKey(it, recorder)
    arr.sort(kind=kind)
    return [k.item for k in arr]
