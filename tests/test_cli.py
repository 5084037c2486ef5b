"""Integration tests for the run_generator.py command line entry point.

Runs main() in-process for exit codes and output files, plus one
subprocess run of the script itself.
"""

import json
import subprocess
import sys
from pathlib import Path

import pytest

from run_generator import USAGE, build_parser, config_from_params, main
from src.output import read_graph

REPO_ROOT = Path(__file__).resolve().parent.parent


def _args(out: Path, *params: str) -> list[str]:
    return [*params, str(out)]


class TestUsage:
    """Wrong positional counts print usage and exit 0."""

    @pytest.mark.parametrize("argv", [[], ["5"], ["5", "3", "0", "false", "false"]])
    def test_wrong_count_prints_usage(self, argv, capsys) -> None:
        assert main(argv) == 0
        assert capsys.readouterr().out.strip() == USAGE

    def test_too_many_params_prints_usage(self, tmp_path: Path, capsys) -> None:
        argv = ["5", "3", "0", "false", "false", str(tmp_path / "g.txt"), "extra"]
        assert main(argv) == 0
        assert "Usage:" in capsys.readouterr().out
        assert not (tmp_path / "g.txt").exists()

    def test_unknown_flag_counts_toward_positionals(self, capsys) -> None:
        assert main(["5", "3", "--foo"]) == 0
        assert capsys.readouterr().out.strip() == USAGE

    def test_parser_usage_has_single_prefix(self) -> None:
        usage = build_parser().format_usage()
        assert usage.startswith("usage: run_generator.py")
        assert "Usage:" not in usage


class TestParams:
    """Positional string parsing."""

    def test_flags_require_literal_true(self) -> None:
        cfg = config_from_params(["5", "3", "1", "True", "yes", "out"], None, 256)
        assert cfg.has_cycles is False
        assert cfg.shuffle is False

        cfg = config_from_params(["5", "3", "1", "true", "true", "out"], 7, 10)
        assert cfg.has_cycles is True
        assert cfg.shuffle is True
        assert cfg.seed == 7
        assert cfg.max_retries == 10

    def test_non_integer_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="num_vertices must be an integer"):
            config_from_params(["five", "3", "1", "false", "false", "out"], None, 256)


class TestGenerate:
    """Successful generation runs."""

    def test_backbone_only_scenario(self, tmp_path: Path) -> None:
        out = tmp_path / "graph.txt"
        assert main(_args(out, "5", "3", "0", "false", "false")) == 0
        assert out.read_text() == "5\n2\n0 1\n1 2\n"

    def test_dash_prefixed_output_name(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert main(["5", "3", "0", "false", "false", "-graph.txt"]) == 0
        assert (tmp_path / "-graph.txt").read_text() == "5\n2\n0 1\n1 2\n"

    def test_acyclic_run(self, tmp_path: Path) -> None:
        out = tmp_path / "graph.txt"
        argv = _args(out, "40", "8", "30", "false", "false") + ["--seed", "3"]
        assert main(argv) == 0

        n, edges = read_graph(out)
        assert n == 40
        assert len(edges) == 7 + 30
        assert all(src < dst for src, dst in edges)

    def test_cyclic_shuffled_run(self, tmp_path: Path) -> None:
        out = tmp_path / "graph.txt"
        argv = _args(out, "40", "8", "30", "true", "true") + ["--seed", "3"]
        assert main(argv) == 0

        n, edges = read_graph(out)
        assert len(edges) == 37
        assert len(set(edges)) == 37
        assert all(src != dst for src, dst in edges)

    def test_same_seed_same_file(self, tmp_path: Path) -> None:
        a, b = tmp_path / "a.txt", tmp_path / "b.txt"
        assert main(_args(a, "30", "5", "20", "true", "true") + ["--seed", "9"]) == 0
        assert main(_args(b, "30", "5", "20", "true", "true") + ["--seed", "9"]) == 0
        assert a.read_text() == b.read_text()

    def test_metadata_sidecar(self, tmp_path: Path) -> None:
        out, meta = tmp_path / "graph.txt", tmp_path / "graph.json"
        argv = _args(out, "20", "4", "5", "false", "false") + [
            "--seed", "1", "--metadata", str(meta),
        ]
        assert main(argv) == 0
        data = json.loads(meta.read_text())
        assert data["seed"] == 1
        assert data["num_edges"] == 8


class TestFailures:
    """Validation and infeasibility exit with status 1 and write nothing."""

    def test_depth_exceeds_vertices(self, tmp_path: Path, capsys) -> None:
        out = tmp_path / "graph.txt"
        assert main(_args(out, "3", "5", "0", "false", "false")) == 1
        assert "min_graph_depth" in capsys.readouterr().err
        assert not out.exists()

    def test_cycles_without_additional_edges(self, tmp_path: Path, capsys) -> None:
        out = tmp_path / "graph.txt"
        assert main(_args(out, "5", "3", "0", "true", "false")) == 1
        assert "has_cycles" in capsys.readouterr().err
        assert not out.exists()

    def test_non_integer_parameter(self, tmp_path: Path) -> None:
        out = tmp_path / "graph.txt"
        assert main(_args(out, "5", "x", "0", "false", "false")) == 1
        assert not out.exists()

    def test_infeasible_acyclic_request(self, tmp_path: Path, capsys) -> None:
        """4 vertices with a full backbone leave only 3 free acyclic pairs."""
        out = tmp_path / "graph.txt"
        argv = _args(out, "4", "4", "4", "false", "false") + ["--seed", "42"]
        assert main(argv) == 1
        assert "Too many iterations" in capsys.readouterr().err
        assert not out.exists()

    def test_bad_option_value_exits_one(self, tmp_path: Path, capsys) -> None:
        out = tmp_path / "graph.txt"
        argv = _args(out, "5", "3", "0", "false", "false") + ["--seed", "abc"]
        assert main(argv) == 1
        assert "--seed" in capsys.readouterr().err
        assert not out.exists()

    def test_retry_budget_option(self, tmp_path: Path) -> None:
        out = tmp_path / "graph.txt"
        argv = _args(out, "1", "0", "1", "false", "false") + ["--max-retries", "0"]
        assert main(argv) == 1
        assert not out.exists()


class TestScript:
    """The script runs as a standalone command."""

    def test_script_subprocess(self, tmp_path: Path) -> None:
        out = tmp_path / "graph.txt"
        result = subprocess.run(
            [sys.executable, "run_generator.py", "5", "3", "0", "false", "false", str(out)],
            capture_output=True,
            text=True,
            cwd=REPO_ROOT,
        )
        assert result.returncode == 0, result.stderr
        assert out.read_text() == "5\n2\n0 1\n1 2\n"

    def test_script_usage_exit_zero(self) -> None:
        result = subprocess.run(
            [sys.executable, "run_generator.py"],
            capture_output=True,
            text=True,
            cwd=REPO_ROOT,
        )
        assert result.returncode == 0
        assert "Usage:" in result.stdout
