"""
Datasets package public API.

Re-export the dataset generator so callers can write:
    from mergecount.datasets import make_dataset, make_rng, SUPPORTED_DISTS
"""

from .generators import SUPPORTED_DISTS, make_dataset, make_rng

__all__ = ["make_dataset", "make_rng", "SUPPORTED_DISTS"]
