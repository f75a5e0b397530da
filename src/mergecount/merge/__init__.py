"""
Merge engine and recursive driver.

Re-exports:
    MergeEngine
    merge_sort, is_power_of_two
"""

from .driver import is_power_of_two, merge_sort
from .engine import MergeEngine

__all__ = ["MergeEngine", "merge_sort", "is_power_of_two"]
