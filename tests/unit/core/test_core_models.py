# tests/unit/core/test_core_models.py — v1
"""Tests for core/models.py — Vertex, Edge, partition helpers, SamplingParams."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from gncommunities.core.models import (
    Edge,
    SamplingParams,
    Vertex,
    community_count,
    partition_by_name,
)


class TestVertex:
    def test_identity_is_id(self):
        assert Vertex(1, "a") == Vertex(1, "renamed")
        assert hash(Vertex(1, "a")) == hash(Vertex(1, "b"))
        assert Vertex(1, "a") != Vertex(2, "a")

    def test_ordered_by_id(self):
        assert sorted([Vertex(3, "a"), Vertex(0, "z")]) == [Vertex(0, "z"), Vertex(3, "a")]

    def test_str_is_name(self):
        assert str(Vertex(5, "alice")) == "alice"

    def test_frozen(self):
        v = Vertex(0, "a")
        with pytest.raises(AttributeError):
            v.id = 1  # type: ignore[misc]


class TestEdge:
    def test_canonical_order(self):
        a, b = Vertex(0, "a"), Vertex(1, "b")
        e = Edge(b, a)
        assert (e.u, e.v) == (a, b)

    def test_undirected_equality(self):
        a, b = Vertex(0, "a"), Vertex(1, "b")
        assert Edge(a, b) == Edge(b, a) == Edge.of(b, a)
        assert len({Edge(a, b), Edge(b, a)}) == 1

    def test_self_loop_rejected(self):
        a = Vertex(0, "a")
        with pytest.raises(ValueError, match="Self-loop"):
            Edge(a, a)

    def test_iter_and_other(self):
        a, b, c = Vertex(0, "a"), Vertex(1, "b"), Vertex(2, "c")
        e = Edge(b, a)
        assert list(e) == [a, b]
        assert e.other(a) == b
        assert e.other(b) == a
        with pytest.raises(ValueError):
            e.other(c)

    def test_ordering_and_str(self):
        a, b, c = Vertex(0, "a"), Vertex(1, "b"), Vertex(2, "c")
        assert sorted([Edge(b, c), Edge(a, c), Edge(a, b)]) == [
            Edge(a, b), Edge(a, c), Edge(b, c),
        ]
        assert str(Edge(c, a)) == "a-c"


class TestPartitionHelpers:
    def test_partition_by_name_in_id_order(self):
        partition = {Vertex(2, "c"): 1, Vertex(0, "a"): 0, Vertex(1, "b"): 0}
        named = partition_by_name(partition)
        assert list(named) == ["a", "b", "c"]
        assert named == {"a": 0, "b": 0, "c": 1}

    def test_community_count(self):
        partition = {Vertex(0, "a"): 4, Vertex(1, "b"): 4, Vertex(2, "c"): 9}
        assert community_count(partition) == 2
        assert community_count({}) == 0


class TestSamplingParams:
    def test_defaults(self):
        p = SamplingParams()
        assert p.epsilon == 0.2
        assert p.delta == 0.3
        assert p.c == 1.0
        assert p.vertex_diameter is None
        assert p.diameter_samples == 10
        assert p.retry_budget == 100

    @pytest.mark.parametrize("field", ["diameter_samples", "retry_budget"])
    def test_counts_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            SamplingParams(**{field: 0})

    def test_c_must_be_positive(self):
        with pytest.raises(ValidationError):
            SamplingParams(c=0)
