# src/community/girvan_newman.py — v1
"""Girvan-Newman community detection by iterative edge removal.

Each round scores the remaining edges, removes every edge tied at the maximum
score and records the connected components of what is left. The loop stops
when no edges remain, so a full run ends with every vertex in its own
community. Choosing the best round (highest modularity) is left to the
caller; see community.modularity.best_partition().

Ties are exact float equality. Symmetric structures produce bit-identical
scores, and no tolerance is applied for near-ties from accumulated rounding.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from types import MappingProxyType
from typing import TYPE_CHECKING

from gncommunities.betweenness.strategies import (
    BetweennessState,
    BetweennessStrategy,
    ExactBetweenness,
    IncrementalBetweenness,
)
from gncommunities.core.models import Edge, EdgeScores, Partition, community_count
from gncommunities.logging.context import set_iteration_context

if TYPE_CHECKING:
    from gncommunities.graph.graph import Graph

logger = logging.getLogger(__name__)


def max_score_edges(scores: EdgeScores) -> list[Edge]:
    """All edges whose score equals the maximum, in edge order."""
    if not scores:
        return []
    top = max(scores.values())
    return sorted(edge for edge, score in scores.items() if score == top)


class GirvanNewman:
    """Edge-removal loop parameterized by a betweenness strategy.

    Args:
        strategy: Edge-scoring backend (exact by default).
        max_iterations: Stop after this many rounds (None = until no edges).
    """

    def __init__(
        self,
        strategy: BetweennessStrategy | None = None,
        max_iterations: int | None = None,
    ) -> None:
        if max_iterations is not None and max_iterations < 1:
            raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")
        self.strategy = strategy or ExactBetweenness()
        self.max_iterations = max_iterations
        self.last_scores: EdgeScores = {}

    def run(self, graph: Graph) -> list[Partition]:
        """Run to completion on a copy of ``graph``.

        Returns:
            One read-only partition per round, from the first removal to the
            fully disconnected graph.
        """
        return list(self.iter_partitions(graph))

    def iter_partitions(self, graph: Graph) -> Iterator[Partition]:
        """Yield the partition recorded after each round.

        The input graph is copied; stopping the iteration early leaves it
        untouched as well.
        """
        working = graph.copy()
        partition = working.connected_components()
        state: BetweennessState | None = None
        iteration = 0

        logger.info(
            "Starting %s: %d vertices, %d edges, %d components",
            self.strategy.name, working.vertex_count, working.edge_count,
            community_count(partition),
        )

        try:
            while working.edge_count > 0:
                if self.max_iterations is not None and iteration >= self.max_iterations:
                    logger.info("Stopped after %d rounds (max_iterations)", iteration)
                    break
                iteration += 1
                set_iteration_context(iteration)

                scores = self.strategy.compute(working, state)
                removed = max_score_edges(scores)
                for edge in removed:
                    working.remove_edge(edge.u, edge.v)

                previous_partition = partition
                partition = MappingProxyType(dict(working.connected_components()))
                self.last_scores = scores
                state = BetweennessState(
                    scores=scores, partition=previous_partition, removed_edges=removed,
                )

                logger.debug(
                    "Removed %d edge(s) at score %.6g; %d edges left, %d communities",
                    len(removed), scores[removed[0]], working.edge_count,
                    community_count(partition),
                )
                yield partition
        finally:
            set_iteration_context(None)

        logger.info("Finished %s after %d rounds", self.strategy.name, iteration)


def run_exact(graph: Graph, max_iterations: int | None = None) -> list[Partition]:
    """Girvan-Newman with full betweenness recomputation every round."""
    return GirvanNewman(ExactBetweenness(), max_iterations).run(graph)


def run_incremental(graph: Graph, max_iterations: int | None = None) -> list[Partition]:
    """Girvan-Newman recomputing only the components touched by each removal."""
    return GirvanNewman(IncrementalBetweenness(), max_iterations).run(graph)
