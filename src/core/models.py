# src/core/models.py — v1
"""Shared domain models used across modules.

Vertex and Edge are hashable value types keyed by integer id so they can be
used directly in betweenness maps and partitions. Run-level configuration and
results are Pydantic models.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from pydantic import BaseModel, Field


# === GRAPH PRIMITIVES ===


@dataclass(frozen=True, order=True)
class Vertex:
    """Graph vertex. Identity and ordering come from ``id``; ``name`` is metadata."""

    id: int
    name: str = field(compare=False)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, order=True)
class Edge:
    """Undirected edge stored with the lower-id endpoint first."""

    u: Vertex
    v: Vertex

    def __post_init__(self) -> None:
        if self.u == self.v:
            raise ValueError(f"Self-loop on vertex {self.u.name!r} is not an edge")
        if self.v < self.u:
            u, v = self.v, self.u
            object.__setattr__(self, "u", u)
            object.__setattr__(self, "v", v)

    @classmethod
    def of(cls, a: Vertex, b: Vertex) -> Edge:
        return cls(a, b)

    def __iter__(self) -> Iterator[Vertex]:
        yield self.u
        yield self.v

    def other(self, vertex: Vertex) -> Vertex:
        """Return the endpoint opposite ``vertex``."""
        if vertex == self.u:
            return self.v
        if vertex == self.v:
            return self.u
        raise ValueError(f"{vertex.name!r} is not an endpoint of {self}")

    def __str__(self) -> str:
        return f"{self.u.name}-{self.v.name}"


# Vertex -> community id. Recorded partitions are read-only mappings.
Partition = Mapping[Vertex, int]

# Edge -> betweenness score.
EdgeScores = dict[Edge, float]


def partition_by_name(partition: Partition) -> dict[str, int]:
    """Name-keyed copy of a partition, in vertex id order."""
    return {v.name: partition[v] for v in sorted(partition)}


def community_count(partition: Partition) -> int:
    return len(set(partition.values()))


# === CONFIGURATION ===


class SamplingParams(BaseModel):
    """Parameters of randomized betweenness sampling.

    epsilon, delta and vertex_diameter are range-checked when the sample size
    is derived, so an invalid combination fails before any sampling work.
    """

    epsilon: float = 0.2
    delta: float = 0.3
    c: float = Field(default=1.0, gt=0)
    vertex_diameter: int | None = None
    diameter_samples: int = Field(default=10, ge=1)
    retry_budget: int = Field(default=100, ge=1)

