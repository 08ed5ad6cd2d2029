# src/community/modularity.py — v1
"""Newman modularity of a vertex partition.

    Q = 1/(2m) * sum over ordered pairs (i, j) in the same community of
        (A_ij - k_i * k_j / (2m))

Only same-community pairs are visited (i == j included), which gives the
same value as the dense double loop over all vertex pairs. Q is 0 for a graph
without edges.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence
from typing import TYPE_CHECKING

from gncommunities.core.errors import PartitionCoverageError
from gncommunities.core.models import Partition, Vertex

if TYPE_CHECKING:
    from gncommunities.graph.graph import Graph

logger = logging.getLogger(__name__)


def modularity(graph: Graph, partition: Partition) -> float:
    """Modularity Q of ``partition`` on ``graph``.

    Args:
        graph: Graph the partition is evaluated against.
        partition: Community id for every vertex of ``graph``. Extra entries
            for vertices not in the graph are ignored.

    Returns:
        Q, or 0.0 if the graph has no edges.

    Raises:
        PartitionCoverageError: If a vertex of ``graph`` has no community.
    """
    vertices = graph.vertices()
    missing = [v.name for v in vertices if v not in partition]
    if missing:
        raise PartitionCoverageError(missing)

    m = graph.edge_count
    if m == 0:
        return 0.0
    two_m = 2.0 * m

    members: dict[int, list[Vertex]] = defaultdict(list)
    for v in vertices:
        members[partition[v]].append(v)

    q = 0.0
    for community in members.values():
        for i in community:
            k_i = graph.degree(i)
            for j in community:
                a_ij = 1.0 if graph.has_edge(i, j) else 0.0
                q += a_ij - (k_i * graph.degree(j)) / two_m
    return q / two_m


def score_partitions(graph: Graph, partitions: Sequence[Partition]) -> list[float]:
    """Modularity of each partition, in order."""
    return [modularity(graph, p) for p in partitions]


def best_index(scores: Sequence[float]) -> int:
    """Index of the highest score; the earliest one wins a tie.

    Raises:
        ValueError: If ``scores`` is empty.
    """
    if not scores:
        raise ValueError("No partitions to choose from")
    return max(range(len(scores)), key=scores.__getitem__)


def best_partition(
    graph: Graph,
    partitions: Sequence[Partition],
) -> tuple[int, Partition, float]:
    """Pick the partition with the highest modularity (first one on ties).

    Returns:
        (index, partition, modularity).

    Raises:
        ValueError: If ``partitions`` is empty.
    """
    scores = score_partitions(graph, partitions)
    best = best_index(scores)
    logger.debug(
        "Best partition: round %d of %d, Q=%.6f", best + 1, len(scores), scores[best],
    )
    return best, partitions[best], scores[best]
