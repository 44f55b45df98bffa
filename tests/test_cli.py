"""CLI tests using click's CliRunner."""

from __future__ import annotations

import sys
import textwrap
from pathlib import Path

import pytest
from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

import aoc2024  # noqa: E402
from aoc2024.cli import cli  # noqa: E402


DAY1 = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


@pytest.fixture
def config_file(tmp_path):
    inputs = tmp_path / "inputs"
    inputs.mkdir()
    (inputs / "day01.txt").write_text(DAY1, encoding="utf-8")
    path = tmp_path / "config.yaml"
    path.write_text(
        textwrap.dedent(
            f"""
            inputs:
              dir: "{inputs}"
            answers:
              1: [11, 31]
            """
        ).strip() + "\n",
        encoding="utf-8",
    )
    return path


def test_solve_prints_both_parts(config_file):
    result = CliRunner().invoke(cli, ["--config", str(config_file), "solve", "1"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[-2:] == ["11", "31"]


def test_solve_reads_stdin(config_file):
    result = CliRunner().invoke(
        cli,
        ["--config", str(config_file), "solve", "3", "--input", "-"],
        input="xmul(2,4)don't()mul(5,5)\n",
    )
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[-2:] == ["33", "8"]


def test_solve_accepts_params(config_file, tmp_path):
    puzzle = tmp_path / "bytes.txt"
    puzzle.write_text("1,1\n", encoding="utf-8")
    result = CliRunner().invoke(
        cli,
        [
            "--config", str(config_file), "solve", "18", "--input", str(puzzle),
            "--param", "width=3", "--param", "height=3", "--param", "fallen=1",
        ],
    )
    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[-2:] == ["4", ""]


def test_solve_reports_malformed_input(config_file):
    result = CliRunner().invoke(
        cli, ["--config", str(config_file), "solve", "1", "--input", "-"], input="3\n"
    )
    assert result.exit_code == 1
    assert "no right value" in result.output


def test_solve_rejects_unknown_day(config_file):
    result = CliRunner().invoke(cli, ["--config", str(config_file), "solve", "24"])
    assert result.exit_code != 0


def test_run_all_marks_answers(config_file):
    result = CliRunner().invoke(cli, ["--config", str(config_file), "run-all", "--days", "1,2"])
    assert result.exit_code == 0, result.output
    assert "✅ Day 01: 11 31" in result.output
    assert "Day 02: no input" in result.output


def test_run_all_fails_on_mismatch(config_file, tmp_path):
    (tmp_path / "inputs" / "day01.txt").write_text("1 1\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["--config", str(config_file), "run-all", "--days", "1"])
    assert result.exit_code == 1
    assert "expected: 11 31" in result.output


def test_list_shows_titles(config_file):
    result = CliRunner().invoke(cli, ["--config", str(config_file), "list"])
    assert result.exit_code == 0, result.output
    assert "Day 01: Historian Hysteria" in result.output
    assert "Day 23: LAN Party" in result.output


def test_status_command(config_file):
    result = CliRunner().invoke(cli, ["--config", str(config_file), "status"])
    assert result.exit_code == 0, result.output
    assert "Configuration is valid" in result.output
    assert "Inputs available: 1 of 23 days" in result.output


def test_programmatic_api(config_file):
    assert aoc2024.solve(1, DAY1) == (11, 31)
    assert aoc2024.run(1, config_path=str(config_file)) == (11, 31)
    results = aoc2024.run_all("1", config_path=str(config_file))
    assert [r.status for r in results] == ["correct"]
    info = aoc2024.status(str(config_file))
    assert info["valid"] is True
    assert info["inputs_available"] == [1]


def test_status_for_missing_config(tmp_path):
    info = aoc2024.status(str(tmp_path / "nope.yaml"))
    assert info["valid"] is False
    assert "not found" in info["error"]


def test_status_command_fails_on_error(config_file, monkeypatch):
    def broken_manager(*args, **kwargs):
        raise RuntimeError("config unreadable")

    monkeypatch.setattr("aoc2024.cli.ConfigManager", broken_manager)
    result = CliRunner().invoke(cli, ["--config", str(config_file), "status"])
    assert result.exit_code == 1
    assert "Error checking status: config unreadable" in result.output
