# src/api/models.py — v1
"""API-level result model returned by facade.detect_communities()."""

from __future__ import annotations

from pydantic import BaseModel, Field


class DetectionResult(BaseModel):
    """Outcome of a full community detection run.

    Partitions are name-keyed snapshots, one per edge-removal round.
    """

    algorithm: str
    run_id: str
    vertex_count: int = 0
    edge_count: int = 0
    iterations: int = 0
    partitions: list[dict[str, int]] = Field(default_factory=list)
    modularities: list[float] = Field(default_factory=list)
    best_index: int = 0
    best_modularity: float = 0.0
    best_partition: dict[str, int] = Field(default_factory=dict)
    vertex_diameter: int | None = None

    @property
    def community_count(self) -> int:
        return len(set(self.best_partition.values()))
