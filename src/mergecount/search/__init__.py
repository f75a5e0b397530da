"""
Search strategies public API.

Re-export the strategies so callers can write:
    from mergecount.search import LinearSearch, GallopingSearch
"""

from .strategies import SEARCHES, GallopingSearch, LinearSearch, lower_bound

__all__ = ["LinearSearch", "GallopingSearch", "lower_bound", "SEARCHES"]
