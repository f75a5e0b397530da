"""
Sort variants under measurement.

Each module `mergecount.algorithms.<name>` exposes

    sort(items: list[Item], *, recorder, config: dict | None = None) -> list[Item]

which returns a new sorted list and leaves `items` untouched. Every
comparison it makes is reported to `recorder`. Each module also exposes

    check_config(config: dict | None) -> ...

which raises ValueError for a config the variant cannot run with. The
harness calls it once when resolving algorithms, before anything is
measured.
"""

ALGORITHMS = ("lin", "exp", "stab", "intro")

__all__ = ["ALGORITHMS"]
