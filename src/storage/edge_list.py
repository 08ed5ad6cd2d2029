# src/storage/edge_list.py — v1
"""Edge-list input adapter.

One edge per line, two vertex names split on a delimiter regex. Blank lines
and lines starting with ``#`` are ignored, as are lines with fewer than two
tokens. Extra tokens (weights, timestamps) are ignored. Self-loops and
repeated pairs are absorbed by the Graph.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from gncommunities.graph.graph import Graph

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "\t"


def parse_edge_list(lines: Iterable[str], delimiter: str = DEFAULT_DELIMITER) -> Graph:
    """Build a graph from edge-list lines.

    Args:
        lines: Text lines (trailing newlines allowed).
        delimiter: Regular expression separating the two vertex names.

    Returns:
        New Graph with vertices in order of first appearance.
    """
    splitter = re.compile(delimiter)
    graph = Graph()
    skipped = 0
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = splitter.split(line)
        if len(parts) < 2:
            skipped += 1
            continue
        a, b = parts[0].strip(), parts[1].strip()
        if not a or not b:
            skipped += 1
            continue
        graph.add_edge(a, b)

    if skipped:
        logger.warning("Skipped %d malformed edge-list lines", skipped)
    return graph


def load_edge_list(path: str | Path, delimiter: str = DEFAULT_DELIMITER) -> Graph:
    """Read an edge-list file into a graph."""
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        graph = parse_edge_list(fh, delimiter)
    logger.info(
        "Loaded %s: %d vertices, %d edges",
        path.name, graph.vertex_count, graph.edge_count,
    )
    return graph


def format_edge_list(graph: Graph, delimiter: str = DEFAULT_DELIMITER) -> list[str]:
    """One ``u<delimiter>v`` line per edge, in edge order."""
    return [f"{e.u.name}{delimiter}{e.v.name}" for e in graph.edges()]


def write_edge_list(
    graph: Graph,
    path: str | Path,
    delimiter: str = DEFAULT_DELIMITER,
) -> Path:
    """Write ``graph`` as an edge list. Isolated vertices are not represented."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = format_edge_list(graph, delimiter)
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path
