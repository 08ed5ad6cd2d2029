# src/core/errors.py — v1
"""Exception hierarchy shared by the graph, betweenness and community modules.

Unreachable targets are not errors: path sampling returns None instead.
"""

from __future__ import annotations


class CommunityDetectionError(Exception):
    """Base class for all gncommunities errors."""


class InvalidParameterError(CommunityDetectionError, ValueError):
    """Sampling parameter (epsilon, delta, vertex diameter) out of range."""


class EmptyGraphError(CommunityDetectionError, LookupError):
    """Raised when a vertex is requested from a graph with no vertices."""


class UnknownVertexError(CommunityDetectionError, KeyError):
    """Raised when a vertex name is not present in the graph."""


class PartitionCoverageError(CommunityDetectionError, KeyError):
    """Raised when a partition does not cover every vertex of the graph."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        preview = ", ".join(missing[:5])
        more = f" (+{len(missing) - 5} more)" if len(missing) > 5 else ""
        super().__init__(f"Partition is missing {len(missing)} vertices: {preview}{more}")

    def __str__(self) -> str:
        return str(self.args[0])


class PartitionFormatError(CommunityDetectionError, ValueError):
    """Raised when a partition file line cannot be parsed."""
