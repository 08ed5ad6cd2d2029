# src/api/facade.py — v1
"""Public API facade for community detection.

Usage:
    from gncommunities.api.facade import detect_communities, run_exact
    partitions = run_exact(graph)
    result = detect_communities(graph, settings)

The graph passed in is never modified.
"""

from __future__ import annotations

import logging
import random
import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from gncommunities.api.models import DetectionResult
from gncommunities.betweenness.sampler import sampled_edge_betweenness
from gncommunities.betweenness.strategies import SampledBetweenness, create_strategy
from gncommunities.community import modularity as _modularity
from gncommunities.community.girvan_newman import GirvanNewman
from gncommunities.config.settings import Settings
from gncommunities.core.models import (
    EdgeScores,
    Partition,
    SamplingParams,
    partition_by_name,
)
from gncommunities.logging.context import clear_context, set_run_context

if TYPE_CHECKING:
    from gncommunities.graph.graph import Graph

logger = logging.getLogger(__name__)


def run_exact(
    graph: Graph,
    incremental: bool = False,
    max_iterations: int | None = None,
) -> list[Partition]:
    """Girvan-Newman with exact betweenness; one partition per round."""
    strategy = create_strategy("gn-incremental" if incremental else "gn")
    return GirvanNewman(strategy, max_iterations).run(graph)


def run_sampling(
    graph: Graph,
    params: SamplingParams | None = None,
    rng: random.Random | None = None,
) -> EdgeScores:
    """Approximate edge betweenness by shortest-path sampling."""
    return sampled_edge_betweenness(graph, params, rng)


def modularity(graph: Graph, partition: Partition) -> float:
    """Modularity Q of ``partition`` on ``graph``."""
    return _modularity.modularity(graph, partition)


def detect_communities(
    graph: Graph,
    settings: Settings | None = None,
    rng: random.Random | None = None,
) -> DetectionResult:
    """Run the configured algorithm and select the highest-modularity round.

    Args:
        graph: Input graph (not modified).
        settings: Algorithm, sampling and iteration settings. Loaded from
            .env if None.
        rng: Random source for the bsa backend. Seeded from
            ``settings.random_seed`` if None.

    Returns:
        DetectionResult with every round's partition and modularity.

    Raises:
        InvalidParameterError: If sampling parameters are out of range.
    """
    settings = settings or Settings()
    run_id = _generate_run_id()
    set_run_context(run_id, settings.algorithm)

    if rng is None:
        rng = random.Random(settings.random_seed)

    try:
        strategy = create_strategy(
            settings.algorithm, params=settings.sampling_params(), rng=rng,
        )
        detector = GirvanNewman(strategy, settings.max_iterations)
        partitions = detector.run(graph)

        if not partitions:
            # No edges to remove: the components are the only candidate.
            partitions = [graph.connected_components()]

        scores = _modularity.score_partitions(graph, partitions)
        best = _modularity.best_index(scores)

        logger.info(
            "Best cut at round %d of %d: %d communities, Q=%.6f",
            best + 1, len(partitions), len(set(partitions[best].values())), scores[best],
        )
    finally:
        clear_context()

    return DetectionResult(
        algorithm=strategy.name,
        run_id=run_id,
        vertex_count=graph.vertex_count,
        edge_count=graph.edge_count,
        iterations=len(partitions) if graph.edge_count else 0,
        partitions=[partition_by_name(p) for p in partitions],
        modularities=scores,
        best_index=best,
        best_modularity=scores[best],
        best_partition=partition_by_name(partitions[best]),
        vertex_diameter=(
            strategy.vertex_diameter if isinstance(strategy, SampledBetweenness) else None
        ),
    )


def _generate_run_id() -> str:
    """Generate run_id: {yyyymmdd_hhmmss}_{uuid8}."""
    now = datetime.now(timezone.utc)
    return f"{now.strftime('%Y%m%d_%H%M%S')}_{uuid.uuid4().hex[:8]}"
