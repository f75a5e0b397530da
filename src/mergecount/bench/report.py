"""
Record stream and summaries.

The primary output is a CSV record stream on stdout:

    algo,n,logn,maxc,avgc
    lin,16,4,9,6.25
    ...

one row per (algorithm, size) trial, flushed as it is produced so the
stream can be piped while an open-ended sweep is still running.

When a run directory is used, the same rows go to results.csv and are
aggregated per (algo, n) into summary.csv with pandas.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO, Tuple

import pandas as pd
from rich.console import Console
from rich.table import Table

__all__ = [
    "CSV_COLUMNS",
    "CSV_HEADER",
    "format_row",
    "RecordWriter",
    "aggregate_summary",
    "print_rich_summary",
]

CSV_COLUMNS = ("algo", "n", "logn", "maxc", "avgc")
CSV_HEADER = ",".join(CSV_COLUMNS)

_SUMMARY_COLUMNS = ["algo", "n", "logn", "trials", "maxc_max", "avgc_mean", "avgc_std"]


def format_row(result: Dict[str, Any]) -> str:
    # %g keeps six significant digits, like a default iostream double.
    return (
        f"{result['algo']},{int(result['n'])},{int(result['logn'])},"
        f"{int(result['maxc'])},{float(result['avgc']):g}"
    )


class RecordWriter:
    """Writes the header once, then one line per trial to every sink."""

    def __init__(self, *sinks: TextIO) -> None:
        self.sinks = [s for s in sinks if s is not None]
        self.rows = 0

    def header(self) -> None:
        self._emit(CSV_HEADER)

    def row(self, result: Dict[str, Any]) -> None:
        self._emit(format_row(result))
        self.rows += 1

    def _emit(self, line: str) -> None:
        for sink in self.sinks:
            sink.write(line)
            sink.write("\n")
            sink.flush()


def aggregate_summary(results_csv: Path) -> pd.DataFrame:
    if not results_csv.exists():
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = pd.read_csv(results_csv)
    if df.empty:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)

    out = (
        df.groupby(["algo", "n"], as_index=False)
        .agg(
            logn=("logn", "first"),
            trials=("maxc", "count"),
            maxc_max=("maxc", "max"),
            avgc_mean=("avgc", "mean"),
            avgc_std=("avgc", "std"),
        )
    )
    # A single trial has no spread.
    out["avgc_std"] = out["avgc_std"].fillna(0.0)
    return out[_SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def print_rich_summary(summary: pd.DataFrame, sizes: List[int], console: Console) -> None:
    table = Table(title="Comparisons per element (mean avgc, max maxc)")
    table.add_column("Algorithm", style="bold")
    picks: List[Tuple[str, Optional[int]]] = []
    if sizes:
        first = sizes[0]
        mid = sizes[len(sizes) // 2]
        last = sizes[-1]
        picks = [("n=" + str(first), first), ("n=" + str(mid), mid), ("n=" + str(last), last)]
        # Collapse duplicates for short sweeps.
        picks = list(dict.fromkeys(picks))
        for hdr, _ in picks:
            table.add_column(hdr, justify="right")

    for algo in summary["algo"].unique():
        row = [f"[bold]{algo}[/]"]
        for _, npick in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == npick)]
            if s.empty:
                row.append("—")
            else:
                avg = float(s["avgc_mean"].values[0])
                mx = int(s["maxc_max"].values[0])
                row.append(f"{avg:.2f} ({mx})")
        table.add_row(*row)
    console.print()
    console.print(table)
    console.print()
