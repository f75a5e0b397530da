"""Merge sort whose merge step finds insertion points by linear scan."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mergecount.algorithms._merge_variant import check_no_config, run_merge_sort
from mergecount.instrument import Item
from mergecount.search import LinearSearch

NAME = "lin"


def check_config(config: Optional[Dict[str, Any]]) -> None:
    check_no_config(NAME, config)


def sort(items: List[Item], *, recorder, config: Optional[Dict[str, Any]] = None) -> List[Item]:
    return run_merge_sort(LinearSearch, items, recorder=recorder, config=config)
