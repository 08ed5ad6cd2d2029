# tests/unit/test_main.py — v1
"""Tests for main.py — CLI entry point."""

from __future__ import annotations

from pathlib import Path

import pytest

from gncommunities.main import (
    EXIT_FAILURE,
    EXIT_INVALID_PARAMETER,
    EXIT_OK,
    _build_parser,
    main,
)
from gncommunities.storage.partition_io import read_metrics, read_partition


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch):
    """Run from an empty directory so no stray .env is picked up."""
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Parser tests
# ---------------------------------------------------------------------------

class TestBuildParser:
    def test_version_flag(self):
        parser = _build_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--version"])
        assert exc_info.value.code == 0

    def test_detect_subcommand(self):
        args = _build_parser().parse_args(
            ["detect", "-i", "edges.tsv", "-o", "res/run", "-a", "bsa", "--seed", "3"],
        )
        assert args.command == "detect"
        assert args.input == Path("edges.tsv")
        assert args.prefix == "res/run"
        assert args.algorithm == "bsa"
        assert args.seed == 3

    def test_detect_defaults_left_to_settings(self):
        args = _build_parser().parse_args(["detect", "-i", "edges.tsv"])
        assert args.algorithm is None
        assert args.prefix is None
        assert args.delimiter is None
        assert args.max_iterations is None

    def test_detect_requires_input(self):
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["detect"])

    def test_betweenness_subcommand(self):
        args = _build_parser().parse_args(["betweenness", "-i", "e.tsv", "--top", "3"])
        assert args.command == "betweenness"
        assert args.algorithm == "gn"
        assert args.top == 3

    def test_rejects_unknown_algorithm(self):
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["detect", "-i", "e.tsv", "-a", "louvain"])


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class TestMain:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == EXIT_FAILURE
        assert "usage" in capsys.readouterr().out

    def test_detect_writes_results(self, edge_list_file: Path, tmp_path: Path, capsys):
        prefix = tmp_path / "barbell"
        code = main(["detect", "-i", str(edge_list_file), "-o", str(prefix)])
        assert code == EXIT_OK

        partition = read_partition(f"{prefix}_partition.txt")
        assert partition == {"a": 0, "b": 0, "c": 0, "d": 1, "e": 1, "f": 1}
        assert read_metrics(f"{prefix}_metrics.txt") == pytest.approx(5 / 14)

        out = capsys.readouterr().out
        assert "Communities:  2" in out
        assert "Modularity:   0.357143" in out

    def test_detect_incremental(self, edge_list_file: Path, tmp_path: Path):
        prefix = tmp_path / "inc"
        code = main(["detect", "-i", str(edge_list_file), "-o", str(prefix), "-a", "gn-incremental"])
        assert code == EXIT_OK
        assert read_metrics(f"{prefix}_metrics.txt") == pytest.approx(5 / 14)

    def test_detect_custom_delimiter(self, tmp_path: Path):
        edges = tmp_path / "edges.csv"
        edges.write_text("a,b\nb,c\na,c\nc,d\n", encoding="utf-8")
        code = main(["detect", "-i", str(edges), "-d", ",", "-o", str(tmp_path / "csv")])
        assert code == EXIT_OK
        assert set(read_partition(tmp_path / "csv_partition.txt")) == {"a", "b", "c", "d"}

    def test_missing_input(self, tmp_path: Path):
        assert main(["detect", "-i", str(tmp_path / "nope.tsv")]) == EXIT_FAILURE

    def test_invalid_sampling_parameter(self, edge_list_file: Path):
        code = main(["detect", "-i", str(edge_list_file), "-a", "bsa", "--epsilon", "1.5"])
        assert code == EXIT_INVALID_PARAMETER

    def test_non_positive_max_iterations(self, edge_list_file: Path, tmp_path: Path):
        code = main([
            "detect", "-i", str(edge_list_file), "-o", str(tmp_path / "run"),
            "--max-iterations", "0",
        ])
        assert code == EXIT_INVALID_PARAMETER
        assert not (tmp_path / "run_partition.txt").exists()

    def test_invalid_algorithm_in_env_file(self, edge_list_file: Path, tmp_path: Path):
        (tmp_path / ".env").write_text("ALGORITHM=louvain\n", encoding="utf-8")
        assert main(["detect", "-i", str(edge_list_file)]) == EXIT_INVALID_PARAMETER

    def test_non_positive_retry_budget_in_env_file(self, edge_list_file: Path, tmp_path: Path):
        (tmp_path / ".env").write_text("SAMPLING_RETRY_BUDGET=0\n", encoding="utf-8")
        code = main(["betweenness", "-i", str(edge_list_file), "-a", "bsa"])
        assert code == EXIT_INVALID_PARAMETER

    def test_vertex_diameter_too_small(self, edge_list_file: Path):
        code = main([
            "betweenness", "-i", str(edge_list_file), "-a", "bsa", "--vertex-diameter", "2",
        ])
        assert code == EXIT_INVALID_PARAMETER

    def test_betweenness_ranked(self, edge_list_file: Path, capsys):
        assert main(["betweenness", "-i", str(edge_list_file), "--top", "1"]) == EXIT_OK
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == ["c\td\t9.000000"]

    def test_betweenness_sampled(self, edge_list_file: Path, capsys):
        code = main(["betweenness", "-i", str(edge_list_file), "-a", "bsa", "--seed", "1"])
        assert code == EXIT_OK
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 7
        assert lines[0].startswith("c\td\t")
