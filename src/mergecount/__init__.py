"""
mergecount: comparison counts of merge sort with linear vs. galloping merges.

Each element is an Item with an integer key; a ComparisonRecorder counts how
often every key takes part in an order comparison. The merge engine finds
insertion points with a pluggable search strategy, and the benchmark harness
reports the max and mean per-key counts per input size.
"""

__version__ = "0.1.0"
