# src/storage/layout.py — v1
"""Output file naming.

A run writes two files next to each other, both derived from one prefix:
``<prefix>_partition.txt`` and ``<prefix>_metrics.txt``.
"""

from __future__ import annotations

from pathlib import Path

PARTITION_SUFFIX = "_partition.txt"
METRICS_SUFFIX = "_metrics.txt"
FIELD_SEPARATOR = "\t"
MODULARITY_KEY = "modularity"


def partition_path(prefix: str | Path) -> Path:
    """Return the partition file for an output prefix."""
    return Path(f"{prefix}{PARTITION_SUFFIX}")


def metrics_path(prefix: str | Path) -> Path:
    """Return the metrics file for an output prefix."""
    return Path(f"{prefix}{METRICS_SUFFIX}")
