# tests/unit/storage/test_partition_io.py — v1
"""Tests for storage/partition_io.py and storage/layout.py — result files."""

from __future__ import annotations

from pathlib import Path

import pytest

from gncommunities.core.errors import PartitionFormatError
from gncommunities.graph.graph import Graph
from gncommunities.storage.layout import metrics_path, partition_path
from gncommunities.storage.partition_io import (
    format_partition,
    read_metrics,
    read_partition,
    write_metrics,
    write_partition,
    write_results,
)


class TestLayout:
    def test_paths(self, tmp_path: Path):
        assert partition_path(tmp_path / "run") == tmp_path / "run_partition.txt"
        assert metrics_path("out") == Path("out_metrics.txt")


class TestFormatPartition:
    def test_vertex_keyed_in_id_order(self, barbell: Graph):
        partition = barbell.connected_components()
        assert format_partition(partition)[:2] == ["a\t0", "b\t0"]
        assert len(format_partition(partition)) == 6

    def test_name_keyed(self):
        assert format_partition({"x": 1, "y": 0}) == ["x\t1", "y\t0"]

    def test_empty(self):
        assert format_partition({}) == []


class TestPartitionFiles:
    def test_write_and_read(self, two_edges: Graph, tmp_output_dir: Path):
        path = write_partition(tmp_output_dir / "p.txt", two_edges.connected_components())
        assert read_partition(path) == {"A": 0, "B": 0, "C": 1, "D": 1}

    def test_names_with_spaces(self, tmp_output_dir: Path):
        path = write_partition(tmp_output_dir / "p.txt", {"New York": 2})
        assert read_partition(path) == {"New York": 2}

    def test_read_rejects_missing_separator(self, tmp_path: Path):
        path = tmp_path / "bad.txt"
        path.write_text("a\t0\nb 1\n", encoding="utf-8")
        with pytest.raises(PartitionFormatError, match=":2:"):
            read_partition(path)

    def test_read_rejects_non_integer(self, tmp_path: Path):
        path = tmp_path / "bad.txt"
        path.write_text("a\tzero\n", encoding="utf-8")
        with pytest.raises(PartitionFormatError, match="not an integer"):
            read_partition(path)

    def test_read_skips_blank_lines(self, tmp_path: Path):
        path = tmp_path / "p.txt"
        path.write_text("a\t0\n\nb\t1\n", encoding="utf-8")
        assert read_partition(path) == {"a": 0, "b": 1}


class TestMetricsFiles:
    def test_exact_round_trip(self, tmp_output_dir: Path):
        q = 5 / 14
        path = write_metrics(tmp_output_dir / "m.txt", q)
        assert path.read_text(encoding="utf-8").startswith("modularity\t")
        assert read_metrics(path) == q

    def test_missing_key(self, tmp_path: Path):
        path = tmp_path / "m.txt"
        path.write_text("other\t1\n", encoding="utf-8")
        with pytest.raises(PartitionFormatError):
            read_metrics(path)


class TestWriteResults:
    def test_writes_both_files(self, barbell: Graph, tmp_output_dir: Path):
        prefix = tmp_output_dir / "barbell"
        p_file, m_file = write_results(prefix, barbell.connected_components(), 0.25)
        assert p_file == tmp_output_dir / "barbell_partition.txt"
        assert m_file == tmp_output_dir / "barbell_metrics.txt"
        assert read_partition(p_file) == {n: 0 for n in "abcdef"}
        assert read_metrics(m_file) == 0.25
