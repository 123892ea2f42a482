from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from scientist.cli import app
from scientist.publish import JsonlRecorder


runner = CliRunner()


def _results(tmp_path) -> Path:
    path = Path(tmp_path) / "results.jsonl"
    recorder = JsonlRecorder(path)
    recorder.new("search").add_control(lambda: 1).add_candidate(lambda: 1).run()
    recorder.new("search").add_control(lambda: 1).add_candidate(lambda: 2).run()
    recorder.new("billing").add_control(lambda: 1).add_candidate(lambda: 1).run()
    return path


def test_summarize_prints_each_experiment(tmp_path) -> None:
    result = runner.invoke(app, ["summarize", str(_results(tmp_path))])

    assert result.exit_code == 0, result.output
    assert "billing: runs=1 matched=1 mismatched=0" in result.output
    assert "search: runs=2 matched=1 mismatched=1" in result.output
    assert "mean durations: candidate=" in result.output


def test_summarize_filters_by_experiment(tmp_path) -> None:
    result = runner.invoke(app, ["summarize", str(_results(tmp_path)), "--experiment", "billing"])

    assert result.exit_code == 0, result.output
    assert "billing:" in result.output
    assert "search:" not in result.output


def test_summarize_unknown_experiment_fails(tmp_path) -> None:
    result = runner.invoke(app, ["summarize", str(_results(tmp_path)), "--experiment", "nope"])

    assert result.exit_code == 1
    assert "no results for experiment nope" in result.output


def test_summarize_missing_file_fails(tmp_path) -> None:
    result = runner.invoke(app, ["summarize", str(Path(tmp_path) / "missing.jsonl")])

    assert result.exit_code == 1
    assert "results file not found" in result.output


def test_toggles_lists_experiments(tmp_path) -> None:
    path = Path(tmp_path) / "toggles.yaml"
    path.write_text(
        "experiments:\n  search:\n    percent: 12.5\n  billing:\n    enabled: false\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["toggles", str(path)])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "billing: disabled percent=100",
        "search: enabled percent=12.5",
    ]


def test_toggles_reports_invalid_files(tmp_path) -> None:
    path = Path(tmp_path) / "toggles.yaml"
    path.write_text("experiments: nope\n", encoding="utf-8")

    result = runner.invoke(app, ["toggles", str(path)])

    assert result.exit_code == 1
    assert "experiments must be a mapping" in result.output


def test_toggles_requires_a_path() -> None:
    result = runner.invoke(app, ["toggles"])

    assert result.exit_code == 1
    assert "SCIENTIST_TOGGLES_PATH" in result.output
