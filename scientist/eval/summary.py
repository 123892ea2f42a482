"""Results file summarisation utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, Field

from ..schemas import model_dump


class ExperimentSummary(BaseModel):
    name: str
    runs: int = 0
    matched: int = 0
    mismatched: int = 0
    ignored: int = 0
    control_failures: int = 0
    candidate_failures: int = 0
    mean_duration_ms: Dict[str, float] = Field(default_factory=dict)


class _Tally:
    def __init__(self, name: str) -> None:
        self.summary = ExperimentSummary(name=name)
        self.durations: Dict[str, List[float]] = {}

    def add(self, record: Dict[str, Any]) -> None:
        summary = self.summary
        summary.runs += 1
        if record.get("matched"):
            summary.matched += 1
        if record.get("mismatched"):
            summary.mismatched += 1
        if record.get("ignored"):
            summary.ignored += 1

        control = record.get("control")
        if isinstance(control, dict):
            if control.get("failure"):
                summary.control_failures += 1
            self._duration(control)

        candidates = record.get("candidates")
        if not isinstance(candidates, list):
            candidates = []
        for candidate in candidates:
            if not isinstance(candidate, dict):
                continue
            if candidate.get("failure"):
                summary.candidate_failures += 1
            self._duration(candidate)

    def _duration(self, observation: Dict[str, Any]) -> None:
        duration = observation.get("duration_ms")
        if isinstance(duration, (int, float)) and not isinstance(duration, bool):
            self.durations.setdefault(str(observation.get("name")), []).append(float(duration))

    def finish(self) -> ExperimentSummary:
        self.summary.mean_duration_ms = {
            name: round(sum(values) / len(values), 3)
            for name, values in sorted(self.durations.items())
        }
        return self.summary


def summarize(results_path: Path) -> List[ExperimentSummary]:
    """Summarise a results JSONL file per experiment and write summary.json."""

    if not results_path.exists():
        raise FileNotFoundError(results_path)

    tallies: Dict[str, _Tally] = {}
    with results_path.open("r", encoding="utf-8") as handle:
        for line in handle:
            if not line.strip():
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError:
                continue
            if not isinstance(record, dict):
                continue

            name = str(record.get("experiment", "unknown"))
            tally = tallies.get(name)
            if tally is None:
                tally = tallies[name] = _Tally(name)
            tally.add(record)

    summaries = [tallies[name].finish() for name in sorted(tallies)]

    summary_path = results_path.with_name("summary.json")
    summary_path.write_text(
        json.dumps([model_dump(summary) for summary in summaries], indent=2),
        encoding="utf-8",
    )
    return summaries


__all__ = ["ExperimentSummary", "summarize"]
