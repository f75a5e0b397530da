"""
Benchmark harness public API.

Re-exports:
    count_sort_call, floor_log2
    CSV_HEADER, format_row
    SweepConfig, load_config
    run_sweep
"""

from .config import SweepConfig, load_config
from .measure import count_sort_call, floor_log2
from .report import CSV_HEADER, format_row
from .runner import run_sweep

__all__ = [
    "count_sort_call",
    "floor_log2",
    "CSV_HEADER",
    "format_row",
    "SweepConfig",
    "load_config",
    "run_sweep",
]
