"""
The unit being sorted.

An `Item` carries an integer key. For a working set of size n the keys are a
permutation of [0, n), which lets the recorder index its counts by key.

Items deliberately do not define rich comparison: every order comparison has
to go through `ComparisonRecorder.less` so that it gets counted. Code that can
only talk to `<` (Python's `sorted`, NumPy object sorts) wraps items in
`InstrumentedKey` instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

__all__ = ["Item", "InstrumentedKey", "items_from_keys", "keys_of"]


@dataclass(frozen=True, eq=True, order=False)
class Item:
    key: int


class InstrumentedKey:
    """Adapter that routes `<` and `>` to the recorder's comparison hook."""

    __slots__ = ("item", "recorder")

    def __init__(self, item: Item, recorder) -> None:
        self.item = item
        self.recorder = recorder

    def __lt__(self, other: "InstrumentedKey") -> bool:
        return self.recorder.less(self.item, other.item)

    def __gt__(self, other: "InstrumentedKey") -> bool:
        return self.recorder.less(other.item, self.item)

    def __repr__(self) -> str:
        return f"InstrumentedKey({self.item.key})"


def items_from_keys(keys: Iterable[int]) -> List[Item]:
    return [Item(int(k)) for k in keys]


def keys_of(items: Iterable[Item]) -> List[int]:
    return [it.key for it in items]
