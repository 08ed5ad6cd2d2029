# src/betweenness/sampler.py — v1
"""Approximate edge betweenness from randomly sampled shortest paths.

Each of r trials draws a pair of distinct, mutually reachable vertices,
picks ONE of their shortest paths uniformly at random and credits 1/r to
every edge on it. r is derived from the vertex diameter VD and the
accuracy/confidence parameters:

    r = ceil(c / eps^2 * (floor(log2(VD - 2)) + 1 + ln(1 / delta)))

Scores are therefore fractions of sampled pairs; rescale_to_pair_count()
puts them on the scale of the exact engine.
"""

from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING

from gncommunities.core.errors import InvalidParameterError
from gncommunities.core.models import (
    Edge,
    EdgeScores,
    Partition,
    SamplingParams,
    Vertex,
)
from gncommunities.graph.paths import shortest_path_dag

if TYPE_CHECKING:
    from gncommunities.graph.graph import Graph

logger = logging.getLogger(__name__)


def estimate_vertex_diameter(graph: Graph, samples: int, rng: random.Random) -> int:
    """Estimate the vertex diameter from ``samples`` random BFS trials.

    A trial sums the two largest distances from a random vertex, i.e. the
    longest concatenation of two shortest paths through it. A vertex with a
    single reachable neighbour contributes its one distance, an isolated
    vertex contributes 0. The mean is rounded up.
    """
    if samples < 1:
        raise InvalidParameterError(f"diameter samples must be >= 1, got {samples}")

    total = 0
    for _ in range(samples):
        source = graph.random_vertex(rng)
        distances = sorted(
            (d for v, d in graph.bfs_distances(source).items() if v != source),
            reverse=True,
        )
        total += sum(distances[:2])
    return math.ceil(total / samples)


def compute_sample_size(
    vertex_diameter: int,
    epsilon: float,
    delta: float,
    c: float = 1.0,
) -> int:
    """Number of path samples needed for an (epsilon, delta) approximation.

    Raises:
        InvalidParameterError: If VD <= 2 or epsilon/delta outside (0, 1).
    """
    if vertex_diameter <= 2:
        raise InvalidParameterError(
            f"vertex diameter must be greater than 2, got {vertex_diameter}"
        )
    if not 0.0 < epsilon < 1.0:
        raise InvalidParameterError(f"epsilon must be in (0, 1), got {epsilon}")
    if not 0.0 < delta < 1.0:
        raise InvalidParameterError(f"delta must be in (0, 1), got {delta}")
    if c <= 0:
        raise InvalidParameterError(f"c must be positive, got {c}")

    d = math.floor(math.log2(vertex_diameter - 2)) + 1
    return math.ceil(c / (epsilon * epsilon) * (d + math.log(1.0 / delta)))


def random_shortest_path(
    graph: Graph,
    source: Vertex,
    target: Vertex,
    rng: random.Random,
) -> list[Edge] | None:
    """Draw one shortest source-target path uniformly among all of them.

    Walking back from the target, the current vertex w holds sigma[w]
    tickets; predecessor p owns a contiguous block of sigma[p] of them and
    wins if the drawn ticket falls in its block.

    Returns:
        Path edges from target back to source, [] if source == target,
        None if target is unreachable.
    """
    dag = shortest_path_dag(graph, source)
    if not dag.reaches(target):
        return None

    sigma = dag.sigma
    path: list[Edge] = []
    current = target
    while current != source:
        ticket = rng.randrange(sigma[current])
        upper = 0
        for chosen in dag.predecessors[current]:
            upper += sigma[chosen]
            if ticket < upper:
                break
        else:
            # sigma[current] is the sum of its predecessors' sigmas
            raise RuntimeError(f"Inconsistent path counts at {current.name!r}")
        path.append(Edge(chosen, current))
        current = chosen
    return path


def sampled_edge_betweenness(
    graph: Graph,
    params: SamplingParams | None = None,
    rng: random.Random | None = None,
    vertex_diameter: int | None = None,
) -> EdgeScores:
    """Approximate betweenness of every edge in ``graph``.

    Args:
        graph: Graph to sample. Not modified.
        params: Sampling parameters (defaults if None).
        rng: Random source; a fresh unseeded one if None.
        vertex_diameter: Overrides both ``params.vertex_diameter`` and
            estimation (used to reuse an earlier estimate).

    Returns:
        Map covering every present edge; unsampled edges score 0.

    Raises:
        InvalidParameterError: Before any sampling, if parameters are invalid.
    """
    params = params or SamplingParams()
    rng = rng or random.Random()

    scores: EdgeScores = {e: 0.0 for e in graph.edges()}
    if graph.vertex_count < 2:
        return scores

    vd = vertex_diameter if vertex_diameter is not None else params.vertex_diameter
    if vd is None:
        vd = estimate_vertex_diameter(graph, params.diameter_samples, rng)
    logger.info("Vertex diameter VD(G): %d", vd)

    r = compute_sample_size(vd, params.epsilon, params.delta, params.c)
    logger.info("Sample size r: %d", r)

    components = graph.connected_components()
    increment = 1.0 / r
    skipped = 0
    for _ in range(r):
        pair = _draw_pair(graph, components, params.retry_budget, rng)
        if pair is None:
            skipped += 1
            continue
        path = random_shortest_path(graph, pair[0], pair[1], rng)
        if path is None:
            skipped += 1
            continue
        for edge in path:
            scores[edge] += increment

    if skipped:
        logger.debug("Skipped %d of %d sampling trials", skipped, r)
    return scores


def rescale_to_pair_count(scores: EdgeScores, graph: Graph) -> EdgeScores:
    """Multiply sampled fractions by the number of mutually reachable pairs."""
    sizes: dict[int, int] = {}
    for label in graph.connected_components().values():
        sizes[label] = sizes.get(label, 0) + 1
    pairs = sum(n * (n - 1) // 2 for n in sizes.values())
    return {edge: score * pairs for edge, score in scores.items()}


def _draw_pair(
    graph: Graph,
    components: Partition,
    retry_budget: int,
    rng: random.Random,
) -> tuple[Vertex, Vertex] | None:
    """Draw u, then redraw v until it differs from u and shares its component."""
    u = graph.random_vertex(rng)
    for _ in range(retry_budget):
        v = graph.random_vertex(rng)
        if v != u and components[v] == components[u]:
            return u, v
    return None
