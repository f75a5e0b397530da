"""
Sweep configuration.

A sweep is described by an optional YAML file; every key has a default, and
with no file at all the sweep reproduces the classic behaviour: sizes
16 .. 2**16, all four algorithms, a wall-clock seed, running until
interrupted.

Example (experiments/configs/default.yaml):

    experiment_name: merge_compares
    seed: 12345
    rounds: 3
    min_log2: 4
    max_log2: 14
    check_pairs: false
    dataset: {dist: permutation}
    algorithms:
      - name: lin
      - name: exp
      - name: stab
      - name: intro
        config: {kind: quicksort}
    output_dir: experiments/runs
"""

from __future__ import annotations

import importlib
import time
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from mergecount.algorithms import ALGORITHMS
from mergecount.datasets import SUPPORTED_DISTS
from mergecount.merge import is_power_of_two

__all__ = [
    "AlgoSpec",
    "SweepConfig",
    "load_config",
    "parse_config",
    "resolve_algorithms",
    "trial_seed",
    "DEFAULT_MIN_LOG2",
    "DEFAULT_MAX_LOG2",
]

DEFAULT_MIN_LOG2 = 4
DEFAULT_MAX_LOG2 = 16
_SEED_MOD = 2**64
_KNOWN_KEYS = {
    "experiment_name",
    "seed",
    "rounds",
    "sizes",
    "min_log2",
    "max_log2",
    "check_pairs",
    "dataset",
    "algorithms",
    "output_dir",
    "progress",
}


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Any
    config: Dict[str, Any]


@dataclass(frozen=True)
class SweepConfig:
    experiment_name: str = "merge_compares"
    seed: int = 0
    rounds: Optional[int] = None
    sizes: List[int] = field(default_factory=list)
    check_pairs: bool = False
    dataset: Dict[str, Any] = field(default_factory=lambda: {"dist": "permutation"})
    algorithms: List[Dict[str, Any]] = field(default_factory=list)
    output_dir: Optional[Path] = None
    progress: bool = True

    def with_overrides(self, **overrides: Any) -> "SweepConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "output_dir" in changes:
            changes["output_dir"] = Path(changes["output_dir"])
        if "rounds" in changes:
            changes["rounds"] = _parse_rounds(changes["rounds"])
        if "seed" in changes and changes["seed"] < 0:
            raise ValueError(f"seed must be a nonnegative integer; got {changes['seed']!r}")
        return replace(self, **changes)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "experiment_name": self.experiment_name,
            "seed": self.seed,
            "rounds": self.rounds,
            "sizes": list(self.sizes),
            "check_pairs": self.check_pairs,
            "dataset": dict(self.dataset),
            "algorithms": [dict(a) for a in self.algorithms],
            "output_dir": str(self.output_dir) if self.output_dir is not None else None,
            "progress": self.progress,
        }


# ------------------------- loading ------------------------- #

def load_config(path: Optional[Path]) -> SweepConfig:
    if path is None:
        return parse_config({})
    with Path(path).open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    return parse_config(raw or {})


def parse_config(raw: Dict[str, Any]) -> SweepConfig:
    if not isinstance(raw, dict):
        raise ValueError("sweep config must be a mapping")
    unknown = sorted(set(raw) - _KNOWN_KEYS)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    seed = raw.get("seed")
    if seed is None:
        seed = time.time_ns()
    if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
        raise ValueError(f"seed must be a nonnegative integer; got {seed!r}")

    dataset = dict(raw.get("dataset") or {"dist": "permutation"})
    if dataset.get("dist") not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dataset.get('dist')!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    algorithms = raw.get("algorithms")
    if algorithms is None:
        algorithms = [{"name": name} for name in ALGORITHMS]
    if not isinstance(algorithms, list) or not algorithms:
        raise ValueError("Config 'algorithms' must be a non-empty list")
    algorithms = [a if isinstance(a, dict) else {"name": a} for a in algorithms]

    output_dir = raw.get("output_dir")

    return SweepConfig(
        experiment_name=str(raw.get("experiment_name", "merge_compares")),
        seed=seed,
        rounds=_parse_rounds(raw.get("rounds")),
        sizes=_parse_sizes(raw),
        check_pairs=bool(raw.get("check_pairs", False)),
        dataset=dataset,
        algorithms=algorithms,
        output_dir=Path(output_dir) if output_dir is not None else None,
        progress=bool(raw.get("progress", True)),
    )


def resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        name = entry.get("name", None)
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        try:
            mod = importlib.import_module(f"mergecount.algorithms.{name}")
        except ImportError as e:
            raise ImportError(f"Could not import algorithm module 'mergecount.algorithms.{name}': {e!r}") from e

        if not hasattr(mod, "sort"):
            raise AttributeError(
                f"Algorithm module '{name}' must define a callable `sort(items, *, recorder, config=None)`"
            )

        config = entry.get("config", {})
        if config is None:
            config = {}
        elif not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        # Config errors surface here, before any trial runs.
        check = getattr(mod, "check_config", None)
        if check is not None:
            check(config)

        specs.append(AlgoSpec(name=name, sort_fn=getattr(mod, "sort"), config=config))
    return specs


def trial_seed(seed: int, round_idx: int, n: int) -> int:
    """Seed shared by every algorithm at (round, n); shifts each round."""
    return (seed * (123 + round_idx) + n) % _SEED_MOD


# ------------------------- helpers ------------------------- #

def _parse_rounds(val: Any) -> Optional[int]:
    if val is None:
        return None
    if isinstance(val, bool) or not isinstance(val, int) or val < 1:
        raise ValueError(f"rounds must be a positive integer or null; got {val!r}")
    return val


def _parse_sizes(raw: Dict[str, Any]) -> List[int]:
    if "sizes" in raw:
        sizes = raw["sizes"]
        if not isinstance(sizes, list) or not sizes:
            raise ValueError("Config 'sizes' must be a non-empty list of powers of two")
        for n in sizes:
            if isinstance(n, bool) or not isinstance(n, int) or not is_power_of_two(n):
                raise ValueError(f"Config 'sizes' must hold powers of two; got {n!r}")
        return list(sizes)

    lo = raw.get("min_log2", DEFAULT_MIN_LOG2)
    hi = raw.get("max_log2", DEFAULT_MAX_LOG2)
    if not isinstance(lo, int) or not isinstance(hi, int) or lo < 0 or lo > hi:
        raise ValueError(f"min_log2/max_log2 invalid: {lo!r}, {hi!r}")
    return [1 << k for k in range(lo, hi + 1)]
