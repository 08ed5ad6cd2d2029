# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides small named graphs with known community structure, a seeded random
source and temp directories. No external I/O.
"""

from __future__ import annotations

import random
from pathlib import Path

import networkx as nx
import pytest

from gncommunities.graph.graph import Graph


# === FIXTURES: Sample graphs ===


@pytest.fixture
def path3() -> Graph:
    """A-B-C."""
    return Graph.from_edge_pairs([("A", "B"), ("B", "C")])


@pytest.fixture
def two_edges() -> Graph:
    """Two disjoint edges A-B and C-D."""
    return Graph.from_edge_pairs([("A", "B"), ("C", "D")])


@pytest.fixture
def barbell() -> Graph:
    """Two triangles joined by the bridge c-d."""
    return Graph.from_edge_pairs([
        ("a", "b"), ("b", "c"), ("a", "c"),
        ("c", "d"),
        ("d", "e"), ("e", "f"), ("d", "f"),
    ])


@pytest.fixture
def clustered() -> Graph:
    """Two dense 4-vertex clusters connected by a single bridge A4-B1."""
    pairs = [
        ("A1", "A2"), ("A2", "A3"), ("A3", "A4"), ("A1", "A3"), ("A1", "A4"),
        ("B1", "B2"), ("B2", "B3"), ("B3", "B4"), ("B1", "B3"), ("B1", "B4"),
        ("A4", "B1"),
    ]
    return Graph.from_edge_pairs(pairs)


@pytest.fixture
def karate() -> Graph:
    """Zachary's karate club (34 vertices, 78 edges)."""
    return Graph.from_networkx(nx.karate_club_graph())


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for deterministic sampling."""
    return random.Random(1234)


@pytest.fixture
def make_random_graph():
    """Factory for Erdos-Renyi graphs, possibly disconnected."""

    def _make(n: int, p: float, seed: int) -> Graph:
        return Graph.from_networkx(nx.gnp_random_graph(n, p, seed=seed))

    return _make


# === FIXTURES: Temp dirs ===


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Temporary output directory."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def edge_list_file(tmp_path: Path) -> Path:
    """Tab-separated edge list of the barbell graph with comments and blanks."""
    path = tmp_path / "barbell.tsv"
    path.write_text(
        "# barbell: two triangles and a bridge\n"
        "a\tb\n"
        "b\tc\n"
        "a\tc\n"
        "\n"
        "c\td\n"
        "d\te\n"
        "e\tf\n"
        "d\tf\n",
        encoding="utf-8",
    )
    return path
