"""Command-line utilities for scientist."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from .config import get_settings
from .eval.summary import summarize as summarize_results
from .logging_setup import configure_scientist_logging
from .publish.toggles import ToggleConfigError, load_toggles


app = typer.Typer(name="scientist")


@app.callback()
def main() -> None:
    """Inspect experiment results and toggles."""

    configure_scientist_logging(level=get_settings().SCIENTIST_LOG_LEVEL)


@app.command()
def summarize(
    results_path: str,
    experiment: Optional[str] = None,
) -> None:
    """Summarise a results JSONL file, one line per experiment."""

    path = Path(results_path)
    if not path.exists():
        typer.echo(f"Error: results file not found at {path}")
        raise typer.Exit(1)

    summaries = summarize_results(path)
    if experiment is not None:
        summaries = [summary for summary in summaries if summary.name == experiment]
        if not summaries:
            typer.echo(f"Error: no results for experiment {experiment}")
            raise typer.Exit(1)

    for summary in summaries:
        durations = ", ".join(
            f"{name}={value}ms" for name, value in summary.mean_duration_ms.items()
        )
        typer.echo(
            f"{summary.name}: runs={summary.runs} matched={summary.matched} "
            f"mismatched={summary.mismatched} ignored={summary.ignored} "
            f"control_failures={summary.control_failures} "
            f"candidate_failures={summary.candidate_failures}"
        )
        if durations:
            typer.echo(f"  mean durations: {durations}")


@app.command()
def toggles(path: Optional[str] = typer.Argument(None)) -> None:
    """Validate a toggles file and list its experiments."""

    toggles_path = path or get_settings().SCIENTIST_TOGGLES_PATH
    if toggles_path is None:
        typer.echo("Error: pass a toggles file or set SCIENTIST_TOGGLES_PATH")
        raise typer.Exit(1)

    try:
        loaded = load_toggles(Path(toggles_path))
    except (ToggleConfigError, OSError) as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    for name, toggle in sorted(loaded.items()):
        state = "enabled" if toggle.enabled else "disabled"
        typer.echo(f"{name}: {state} percent={toggle.percent:g}")


if __name__ == "__main__":  # pragma: no cover
    app()
