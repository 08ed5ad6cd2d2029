# src/graph/paths.py — v1
"""Single-source shortest-path DAG for unweighted graphs.

One BFS records, for every vertex reachable from the source, its hop distance,
the number of distinct shortest paths reaching it (sigma) and its
predecessors on those paths. Exact betweenness accumulates over this DAG;
the sampler walks it backwards to draw a uniform random shortest path.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gncommunities.core.models import Vertex

if TYPE_CHECKING:
    from gncommunities.graph.graph import Graph


@dataclass
class ShortestPathDag:
    """BFS result from a single source."""

    source: Vertex
    order: list[Vertex] = field(default_factory=list)
    distance: dict[Vertex, int] = field(default_factory=dict)
    sigma: dict[Vertex, int] = field(default_factory=dict)
    predecessors: dict[Vertex, list[Vertex]] = field(default_factory=dict)

    def reaches(self, vertex: Vertex) -> bool:
        return vertex in self.distance


def shortest_path_dag(graph: Graph, source: Vertex) -> ShortestPathDag:
    """Run BFS from ``source`` and return its shortest-path DAG.

    ``v`` is a predecessor of ``w`` iff they are adjacent and
    ``distance[w] == distance[v] + 1``. ``order`` is BFS discovery order, so
    iterating it backwards visits vertices furthest first.
    """
    dag = ShortestPathDag(source=source)
    distance = dag.distance
    sigma = dag.sigma
    preds = dag.predecessors

    distance[source] = 0
    sigma[source] = 1
    preds[source] = []
    queue = deque([source])
    while queue:
        v = queue.popleft()
        dag.order.append(v)
        next_dist = distance[v] + 1
        for w in graph.iter_neighbors(v):
            if w not in distance:
                distance[w] = next_dist
                sigma[w] = 0
                preds[w] = []
                queue.append(w)
            if distance[w] == next_dist:
                sigma[w] += sigma[v]
                preds[w].append(v)
    return dag
