"""
Dataset generators for comparison-count trials.

Every distribution returns a permutation of the keys [0, n) wrapped as
Items. The bijection lets the comparison recorder index its counts by key.

Currently implemented:
- dist == "permutation":
    Uniformly random permutation drawn with rng.permutation(n).

- dist == "nearly_sorted":
    Start from [0, 1, ..., n-1] then perform ceil(swap_frac * n) random
    index swaps using the provided RNG.

- dist == "reversed":
    Deterministic reversed order: [n-1, n-2, ..., 0].

- dist == "sorted":
    Deterministic identity: [0, 1, ..., n-1].

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[Item]
    make_rng(seed: int) -> numpy.random.Generator

Conventions:
- The caller supplies the RNG (seeded upstream) so that every algorithm of a
  trial can be handed the same permutation.
- "reversed" and "sorted" ignore params and RNG.
"""

from __future__ import annotations

from typing import Any, Dict, List

import numpy as np

from mergecount.instrument import Item, items_from_keys

SUPPORTED_DISTS = {
    "permutation",
    "nearly_sorted",
    "reversed",
    "sorted",
}
__all__ = ["SUPPORTED_DISTS", "make_dataset", "make_rng"]


def make_rng(seed: int) -> np.random.Generator:
    # Trial seeds are reduced mod 2**64 upstream; PCG64 accepts any nonnegative int.
    return np.random.default_rng(int(seed))


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[Item]:
    """
    Generate a permutation dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification, e.g.

            {"dist": "permutation"}
            {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}
            {"dist": "reversed"}

    rng : numpy.random.Generator
        Random number generator owned by the caller.

    Returns
    -------
    list[Item]
        Items whose keys are a permutation of [0, n).

    Raises
    ------
    ValueError
        If inputs are invalid or if the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}

    if dist == "permutation":
        if n == 0:
            return []
        return items_from_keys(rng.permutation(n).tolist())

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        keys = list(range(n))
        # ceil so a small nonzero frac makes at least one swap
        num_swaps = int(np.ceil(swap_frac * n))
        if n == 0 or num_swaps <= 0:
            return items_from_keys(keys)
        idxs = rng.integers(0, n, size=2 * num_swaps)
        for k in range(num_swaps):
            i = int(idxs[2 * k])
            j = int(idxs[2 * k + 1])
            keys[i], keys[j] = keys[j], keys[i]
        return items_from_keys(keys)

    if dist == "reversed":
        return items_from_keys(range(n - 1, -1, -1))

    if dist == "sorted":
        return items_from_keys(range(n))

    raise ValueError(f"Unhandled dataset dist: {dist!r}")


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    """
    Parse and validate swap_frac in [0.0, 1.0] for nearly_sorted.
    Default to 0.05 if not provided.
    """
    val = params.get("swap_frac", 0.05)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}"
        )
    return x
