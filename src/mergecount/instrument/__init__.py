"""
Instrumentation public API.

Re-exports:
    Item, InstrumentedKey, items_from_keys, keys_of
    ComparisonRecorder
"""

from .item import InstrumentedKey, Item, items_from_keys, keys_of
from .recorder import ComparisonRecorder

__all__ = ["Item", "InstrumentedKey", "items_from_keys", "keys_of", "ComparisonRecorder"]
