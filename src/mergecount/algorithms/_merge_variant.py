"""Shared body of the merge sort variants: copy, sort in place, return."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mergecount.instrument import Item
from mergecount.merge import merge_sort


def check_no_config(name: str, config: Optional[Dict[str, Any]]) -> None:
    if config:
        raise ValueError(f"{name} takes no config; got {config!r}")


def run_merge_sort(
    search_cls, items: List[Item], *, recorder, config: Optional[Dict[str, Any]] = None
) -> List[Item]:
    check_no_config(search_cls.name, config)
    out = list(items)
    merge_sort(out, search_cls(recorder))
    return out
