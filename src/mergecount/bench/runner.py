"""
Sweep runner: measures comparison counts for every algorithm over a range
of power-of-two sizes, round after round.

Usage (from repo root):
    python -m mergecount.bench.runner                      # defaults, runs until Ctrl-C
    python -m mergecount.bench.runner experiments/configs/default.yaml
    mergecount-sweep --rounds 2 --seed 7 --check-pairs

Outputs:
    - stdout: CSV record stream `algo,n,logn,maxc,avgc`, one row per trial
    - stderr: rich status messages and a tqdm bar over sizes
    - optional run directory (config `output_dir`):
        config_resolved.yaml    # the config we actually used
        meta.json               # environment info (python, numpy, cpu/ram, git commit)
        results.csv             # same rows as stdout
        summary.csv             # per (algo, n): trials, max maxc, mean/std avgc

Design notes:
- For each (round, n) we draw ONE permutation and hand the same input to
  every algorithm.
- An invariant violation aborts the sweep (SweepAborted); numbers measured
  by a broken sort are worthless. Algorithm configs are checked before the
  first trial, and any other error raised by a sort propagates.
- Ctrl-C ends an open-ended sweep cleanly; the summary is still written.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import itertools
import json
import os
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from tqdm import tqdm

from mergecount.bench.config import SweepConfig, load_config, resolve_algorithms, trial_seed
from mergecount.bench.measure import count_sort_call
from mergecount.bench.report import RecordWriter, aggregate_summary, print_rich_summary
from mergecount.datasets import make_dataset, make_rng
from mergecount.errors import SweepAborted
from mergecount.instrument import ComparisonRecorder

__all__ = ["run_sweep", "main"]


# ------------------------- helpers: IO & meta ------------------------- #

def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{_timestamp()}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
        return out.decode("utf-8").strip()
    except (OSError, subprocess.CalledProcessError):
        return None


def _gather_meta(cfg: SweepConfig) -> Dict[str, Any]:
    import platform
    meta = {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "seed": cfg.seed,
        "check_pairs": cfg.check_pairs,
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }
    return meta


# ------------------------- core runner ------------------------- #

def run_sweep(
    cfg: SweepConfig,
    *,
    out: Optional[TextIO] = None,
    console: Optional[Console] = None,
) -> Optional[Path]:
    """
    Run the sweep described by `cfg`, streaming CSV rows to `out`.

    Returns the run directory when `cfg.output_dir` is set, else None.
    Raises SweepAborted when any trial reports an invariant violation.
    """
    out = sys.stdout if out is None else out
    console = Console(stderr=True) if console is None else console

    algos = resolve_algorithms(cfg.algorithms)
    recorder = ComparisonRecorder(check_pairs=cfg.check_pairs)

    run_dir: Optional[Path] = None
    results_file: Optional[TextIO] = None
    if cfg.output_dir is not None:
        run_dir = _ensure_run_dir(cfg.output_dir, cfg.experiment_name)
        _write_yaml(cfg.as_dict(), run_dir / "config_resolved.yaml")
        with (run_dir / "meta.json").open("w", encoding="utf-8") as f:
            json.dump(_gather_meta(cfg), f, indent=2)
        results_file = (run_dir / "results.csv").open("w", encoding="utf-8")
        console.print(f"[bold green]Run directory:[/bold green] {run_dir}")

    console.print(f"[bold]Experiment:[/bold] {cfg.experiment_name}")
    console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")
    console.print(f"[bold]Seed:[/bold] {cfg.seed}  [bold]check_pairs:[/bold] {cfg.check_pairs}")

    writer = RecordWriter(out, results_file)
    writer.header()

    rounds = itertools.count() if cfg.rounds is None else range(cfg.rounds)
    try:
        for round_idx in rounds:
            size_iter = tqdm(
                cfg.sizes,
                desc=f"round {round_idx}",
                unit="n",
                leave=False,
                disable=not cfg.progress,
            )
            for n in size_iter:
                seed = trial_seed(cfg.seed, round_idx, int(n))
                base_items = make_dataset(int(n), cfg.dataset, make_rng(seed))

                for a_spec in algos:
                    res = count_sort_call(
                        algo_name=a_spec.name,
                        algo_fn=a_spec.sort_fn,
                        items=base_items,
                        recorder=recorder,
                        config=a_spec.config,
                    )

                    if res["status"] == "invariant_violation":
                        raise SweepAborted(a_spec.name, int(n), seed, res["error"], res["diagnostics"])
                    writer.row(res)
    except KeyboardInterrupt:
        console.print("[bold yellow]Interrupted.[/bold yellow]")
    finally:
        if results_file is not None:
            results_file.close()

    if run_dir is not None:
        summary_df = aggregate_summary(run_dir / "results.csv")
        summary_df.to_csv(run_dir / "summary.csv", index=False)
        print_rich_summary(summary_df, list(cfg.sizes), console)
        console.print("[bold green]Done.[/bold green] Wrote:")
        for name in ("results.csv", "summary.csv", "meta.json", "config_resolved.yaml"):
            console.print(f" - {run_dir / name}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Count comparisons of galloping vs. linear merge sort against baseline sorts."
    )
    p.add_argument("config", type=str, nargs="?", default=None, help="Path to YAML sweep config (optional)")
    p.add_argument("--rounds", type=int, default=None, help="Number of sweep rounds (default: forever)")
    p.add_argument("--seed", type=int, default=None, help="Base seed (default: wall clock)")
    p.add_argument("--check-pairs", action="store_true", default=None, help="Enable the duplicate-pair self-test")
    p.add_argument("--output-dir", type=str, default=None, help="Write run artifacts under this directory")
    p.add_argument("--no-progress", dest="progress", action="store_false", default=None, help="Hide the progress bar")
    return p.parse_args(argv)


def _print_abort(console: Console, err: SweepAborted) -> None:
    console.print(f"[bold red]Sweep aborted:[/bold red] {err}")
    for key, val in err.diagnostics.items():
        if key == "counts":
            # Full per-key counts are huge; show the worst offenders.
            top = sorted(enumerate(val), key=lambda kv: kv[1], reverse=True)[:10]
            val = {k: c for k, c in top}
        console.print(f"  [bold]{key}:[/bold] {val}")


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    console = Console(stderr=True)

    config_path = Path(args.config).resolve() if args.config else None
    if config_path is not None and not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")

    cfg = load_config(config_path).with_overrides(
        rounds=args.rounds,
        seed=args.seed,
        check_pairs=args.check_pairs,
        output_dir=args.output_dir,
        progress=args.progress,
    )
    try:
        run_sweep(cfg, console=console)
    except SweepAborted as e:
        _print_abort(console, e)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
