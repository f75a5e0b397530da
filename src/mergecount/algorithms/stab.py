"""
Stable-sort control: Python's built-in `sorted` (Timsort).

Timsort only ever asks `<`, so wrapping each item in an InstrumentedKey is
enough for every comparison to be counted.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mergecount.algorithms._merge_variant import check_no_config
from mergecount.instrument import InstrumentedKey, Item

NAME = "stab"


def check_config(config: Optional[Dict[str, Any]]) -> None:
    check_no_config(NAME, config)


def sort(items: List[Item], *, recorder, config: Optional[Dict[str, Any]] = None) -> List[Item]:
    check_config(config)
    return sorted(items, key=lambda it: InstrumentedKey(it, recorder))
