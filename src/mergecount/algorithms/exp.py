"""Merge sort whose merge step finds insertion points by galloping search."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mergecount.algorithms._merge_variant import check_no_config, run_merge_sort
from mergecount.instrument import Item
from mergecount.search import GallopingSearch

NAME = "exp"


def check_config(config: Optional[Dict[str, Any]]) -> None:
    check_no_config(NAME, config)


def sort(items: List[Item], *, recorder, config: Optional[Dict[str, Any]] = None) -> List[Item]:
    return run_merge_sort(GallopingSearch, items, recorder=recorder, config=config)
