# src/storage/partition_io.py — v1
"""Partition and metrics output adapter.

Partition files hold one ``<vertex name>\\t<community id>`` line per vertex in
vertex id order; metrics files hold ``modularity\\t<Q>``. read_partition()
parses a partition file back into a name-keyed mapping.
"""

from __future__ import annotations

import logging
from pathlib import Path

from gncommunities.core.errors import PartitionFormatError
from gncommunities.core.models import Partition, partition_by_name
from gncommunities.storage import layout

logger = logging.getLogger(__name__)


def format_partition(partition: Partition | dict[str, int]) -> list[str]:
    """Render a partition as text lines.

    Accepts either a Vertex-keyed partition or a name-keyed mapping.
    """
    named = _as_named(partition)
    return [f"{name}{layout.FIELD_SEPARATOR}{cid}" for name, cid in named.items()]


def write_partition(path: str | Path, partition: Partition | dict[str, int]) -> Path:
    """Write a partition file, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        "".join(f"{line}\n" for line in format_partition(partition)), encoding="utf-8",
    )
    return path


def write_metrics(path: str | Path, modularity: float) -> Path:
    """Write the metrics file holding the modularity value."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        f"{layout.MODULARITY_KEY}{layout.FIELD_SEPARATOR}{modularity!r}\n",
        encoding="utf-8",
    )
    return path


def write_results(
    prefix: str | Path,
    partition: Partition | dict[str, int],
    modularity: float,
) -> tuple[Path, Path]:
    """Write ``<prefix>_partition.txt`` and ``<prefix>_metrics.txt``."""
    partition_file = write_partition(layout.partition_path(prefix), partition)
    metrics_file = write_metrics(layout.metrics_path(prefix), modularity)
    logger.info("Wrote partition and metrics to %s_* files", prefix)
    return partition_file, metrics_file


def read_partition(path: str | Path) -> dict[str, int]:
    """Parse a partition file back into ``{vertex name: community id}``.

    Raises:
        PartitionFormatError: On a line without exactly two fields or with a
            non-integer community id.
    """
    result: dict[str, int] = {}
    text = Path(path).read_text(encoding="utf-8")
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        name, sep, cid = line.rpartition(layout.FIELD_SEPARATOR)
        if not sep or not name:
            raise PartitionFormatError(f"{path}:{lineno}: expected '<name>\\t<id>'")
        try:
            result[name] = int(cid)
        except ValueError:
            raise PartitionFormatError(
                f"{path}:{lineno}: community id {cid!r} is not an integer"
            ) from None
    return result


def read_metrics(path: str | Path) -> float:
    """Read the modularity value back from a metrics file."""
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        key, _, value = line.partition(layout.FIELD_SEPARATOR)
        if key == layout.MODULARITY_KEY:
            return float(value)
    raise PartitionFormatError(f"{path}: no {layout.MODULARITY_KEY} line")


def _as_named(partition: Partition | dict[str, int]) -> dict[str, int]:
    if not partition:
        return {}
    first = next(iter(partition))
    if isinstance(first, str):
        return dict(partition)  # type: ignore[arg-type]
    return partition_by_name(partition)  # type: ignore[arg-type]
