# src/betweenness/strategies.py — v1
"""Edge-scoring backends for the Girvan-Newman loop.

The detector only sees BetweennessStrategy.compute(); the incremental
backend additionally consumes the state threaded forward from the previous
round (scores, partition before the removal, removed edges).
"""

from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gncommunities.betweenness.brandes import (
    edge_betweenness,
    recompute_edge_betweenness,
)
from gncommunities.betweenness.sampler import (
    estimate_vertex_diameter,
    sampled_edge_betweenness,
)
from gncommunities.core.models import Edge, EdgeScores, Partition, SamplingParams

if TYPE_CHECKING:
    from gncommunities.graph.graph import Graph

logger = logging.getLogger(__name__)


class UnsupportedAlgorithmError(ValueError):
    """Raised when no strategy is registered under the requested name."""


@dataclass
class BetweennessState:
    """What the previous round knew when it removed its edges."""

    scores: EdgeScores
    partition: Partition
    removed_edges: list[Edge] = field(default_factory=list)


class BetweennessStrategy(ABC):
    """Scores every edge of a graph for removal."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Algorithm identifier (e.g. 'gn', 'bsa')."""

    @abstractmethod
    def compute(
        self, graph: Graph, previous: BetweennessState | None = None,
    ) -> EdgeScores:
        """Return a score for every edge currently in ``graph``."""


class ExactBetweenness(BetweennessStrategy):
    """Full Brandes recomputation every round."""

    @property
    def name(self) -> str:
        return "gn"

    def compute(
        self, graph: Graph, previous: BetweennessState | None = None,
    ) -> EdgeScores:
        return edge_betweenness(graph)


class IncrementalBetweenness(BetweennessStrategy):
    """Brandes restricted to the components touched by the last removal."""

    @property
    def name(self) -> str:
        return "gn-incremental"

    def compute(
        self, graph: Graph, previous: BetweennessState | None = None,
    ) -> EdgeScores:
        if previous is None:
            return edge_betweenness(graph)
        return recompute_edge_betweenness(
            graph, previous.scores, previous.partition, previous.removed_edges,
        )


class SampledBetweenness(BetweennessStrategy):
    """Randomized shortest-path sampling.

    The vertex diameter is estimated once, on the first graph seen, and
    reused for later rounds unless supplied in ``params``.
    """

    def __init__(
        self,
        params: SamplingParams | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.params = params or SamplingParams()
        self.rng = rng or random.Random()
        self._vertex_diameter = self.params.vertex_diameter

    @property
    def name(self) -> str:
        return "bsa"

    @property
    def vertex_diameter(self) -> int | None:
        return self._vertex_diameter

    def compute(
        self, graph: Graph, previous: BetweennessState | None = None,
    ) -> EdgeScores:
        if self._vertex_diameter is None and graph.vertex_count > 0:
            self._vertex_diameter = estimate_vertex_diameter(
                graph, self.params.diameter_samples, self.rng,
            )
        return sampled_edge_betweenness(
            graph, self.params, self.rng, vertex_diameter=self._vertex_diameter,
        )


_STRATEGIES: dict[str, type[BetweennessStrategy]] = {
    "gn": ExactBetweenness,
    "gn-incremental": IncrementalBetweenness,
    "bsa": SampledBetweenness,
}


def available_strategies() -> list[str]:
    return sorted(_STRATEGIES)


def create_strategy(
    name: str,
    params: SamplingParams | None = None,
    rng: random.Random | None = None,
) -> BetweennessStrategy:
    """Instantiate the strategy registered under ``name``.

    Raises:
        UnsupportedAlgorithmError: If ``name`` is not registered.
    """
    cls = _STRATEGIES.get(name)
    if cls is None:
        raise UnsupportedAlgorithmError(
            f"Unknown algorithm: {name!r}. Available: {', '.join(available_strategies())}"
        )
    if cls is SampledBetweenness:
        return SampledBetweenness(params=params, rng=rng)
    logger.debug("Using %s strategy", name)
    return cls()
