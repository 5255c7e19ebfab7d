"""
Tests for the command-line interface.
"""

import json
import sys

import pytest

import main


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["ripsgrid", *argv])
    return main.main()


class TestAnalyzeCommand:
    def test_points_string(self, monkeypatch, capsys):
        code = run_cli(monkeypatch, "analyze", "--points", "0,0;0,2;2,2;2,0", "--epsilon", "2", "--show-holes")
        out = capsys.readouterr().out
        assert code == 0
        assert "beta0 (components) = 1" in out
        assert "beta1 (holes)      = 1" in out
        assert "hole 0:" in out

    def test_json_roundtrip(self, monkeypatch, tmp_path):
        problem = tmp_path / "problem.json"
        problem.write_text(json.dumps({"epsilon": 2, "points": [[0, 0], [0, 2], [2, 2], [2, 0]]}))
        result = tmp_path / "result.json"

        code = run_cli(monkeypatch, "analyze", "--input", str(problem), "--output", str(result))
        assert code == 0

        data = json.loads(result.read_text())
        assert data["beta1"] == 1
        assert len(data["holes"][0]) == 4

    def test_epsilon_flag_overrides_file(self, monkeypatch, tmp_path):
        problem = tmp_path / "problem.json"
        problem.write_text(json.dumps({"epsilon": 2, "points": [[0, 0], [0, 2], [2, 2], [2, 0]]}))
        result = tmp_path / "result.json"

        run_cli(monkeypatch, "analyze", "-i", str(problem), "-e", "4", "-o", str(result))
        data = json.loads(result.read_text())
        assert data["epsilon"] == 4
        assert data["beta1"] == 0

    def test_duplicate_points_fail(self, monkeypatch, capsys):
        code = run_cli(monkeypatch, "analyze", "--points", "0,0;0,0", "--epsilon", "2")
        assert code == 1
        assert "Error" in capsys.readouterr().out

    def test_missing_input(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "analyze") == 1

    @pytest.mark.parametrize("payload", [
        {"epsilon": 2, "points": [[0, 0], 5]},
        {"epsilon": 2, "points": None},
        {"epsilon": 2, "points": [[0.5, 1], [2, 2]]},
        {"epsilon": 2},
        [[0, 0], [0, 2]],
    ])
    def test_malformed_problem_file(self, monkeypatch, capsys, tmp_path, payload):
        problem = tmp_path / "problem.json"
        problem.write_text(json.dumps(payload))

        code = run_cli(monkeypatch, "analyze", "--input", str(problem))
        assert code == 1
        assert "Error:" in capsys.readouterr().out

    def test_invalid_json(self, monkeypatch, capsys, tmp_path):
        problem = tmp_path / "problem.json"
        problem.write_text("{not json")
        assert run_cli(monkeypatch, "analyze", "--input", str(problem)) == 1

    def test_unwritable_output(self, monkeypatch, capsys, tmp_path):
        out = tmp_path / "missing_dir" / "result.json"
        code = run_cli(monkeypatch, "analyze", "--points", "0,0;0,2", "-e", "2", "-o", str(out))
        assert code == 1
        assert "Error:" in capsys.readouterr().out


class TestOtherCommands:
    def test_random(self, monkeypatch, capsys):
        code = run_cli(monkeypatch, "random", "--board", "5", "--count", "6", "--seed", "3")
        out = capsys.readouterr().out
        assert code == 0
        assert "Random board 5x5, 6 stones" in out

    def test_random_unwritable_output(self, monkeypatch, capsys, tmp_path):
        out = tmp_path / "missing_dir" / "result.json"
        code = run_cli(monkeypatch, "random", "--board", "4", "--count", "3", "--seed", "1", "-o", str(out))
        assert code == 1
        assert "Error:" in capsys.readouterr().out

    @pytest.mark.parametrize("example", ["square", "filled", "two-squares", "ring", "all"])
    def test_demo(self, monkeypatch, example):
        assert run_cli(monkeypatch, "demo", "--example", example) == 0

    def test_info(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "info") == 0
        assert "NetworkX" in capsys.readouterr().out

    def test_no_command(self, monkeypatch):
        assert run_cli(monkeypatch) == 0
