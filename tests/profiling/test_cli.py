"""Tests for the taskgraph-lite command line."""
from __future__ import annotations

from pathlib import Path

import pytest

from taskgraph_lite.cli import main
from taskgraph_lite.profiling.datasets import build_dataset
from taskgraph_lite.storage.json_graph import save_graph


def run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


@pytest.fixture
def dag_file(tmp_path: Path) -> Path:
    return save_graph(build_dataset("small_dag_1"), tmp_path / "small_dag_1.json")


class TestCli:
    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run([]) == 0
        assert "usage: taskgraph-lite" in capsys.readouterr().out

    def test_generate(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        out = tmp_path / "data"
        assert run(["generate", "--out", str(out)]) == 0
        assert len(list(out.glob("*.json"))) == 9
        assert capsys.readouterr().out.count("Generated: ") == 9

    def test_analyze(self, dag_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["analyze", str(dag_file)]) == 0
        out = capsys.readouterr().out
        assert f"=== {dag_file} ===" in out
        assert "Critical length: 10" in out

    def test_analyze_source(self, dag_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["analyze", str(dag_file), "--source", "4"]) == 0
        assert "DAG paths from deploy:" in capsys.readouterr().out

    def test_analyze_missing_file(
        self, dag_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        missing = tmp_path / "missing.json"
        assert run(["analyze", str(missing), str(dag_file)]) == 1
        captured = capsys.readouterr()
        assert f"error: cannot load {missing}" in captured.err
        assert "Critical length" in captured.out

    def test_analyze_bad_document(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text('{"vertices": 0}')
        assert run(["analyze", str(bad)]) == 1
        assert "cannot load" in capsys.readouterr().err

    @pytest.mark.parametrize("content", [
        b"\xff\xfe not json",
        b'{"vertices": 2, "edges": 5}',
        b'{"vertices": 2, "edges": [{"from": 0.9, "to": 1.7}]}',
    ])
    def test_analyze_malformed_file_exits_cleanly(
        self, content: bytes, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        bad = tmp_path / "bad.json"
        bad.write_bytes(content)
        assert run(["analyze", str(bad)]) == 1
        assert "cannot load" in capsys.readouterr().err

    def test_benchmark_files(self, dag_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["benchmark", str(dag_file)]) == 0
        out = capsys.readouterr().out
        assert "small_dag_1" in out
        assert "DAG-Longest" in out
        assert "Total:" in out

    def test_benchmark_builtin_suite(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["-v", "benchmark", "--cprofile"]) == 0
        out = capsys.readouterr().out
        assert "large_complex_scc" in out
        assert "--- cProfile top functions ---" in out

    def test_benchmark_missing_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(["benchmark", str(tmp_path / "nope.json")]) == 1
        assert "cannot load" in capsys.readouterr().err
