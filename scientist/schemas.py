"""Pydantic records for published experiment results."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .core.observation import Observation
from .core.result import Result


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _jsonable(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return repr(value)
    return value


def model_dump(model: BaseModel) -> Dict[str, Any]:
    if hasattr(model, "model_dump"):
        return model.model_dump(mode="json")
    return json.loads(model.json())  # type: ignore[attr-defined]


def model_validate(cls: type, data: Dict[str, Any]) -> Any:
    if hasattr(cls, "model_validate"):
        return cls.model_validate(data)  # type: ignore[attr-defined]
    return cls.parse_obj(data)  # type: ignore[attr-defined]


class FailureRecord(BaseModel):
    kind: str
    message: str


class ObservationRecord(BaseModel):
    """One observation, reduced to JSON-safe fields."""

    name: str
    timestamp: float
    duration_ms: Optional[float] = None
    value: Any = None
    cleaned_value: Any = None
    failure: Optional[FailureRecord] = None

    @classmethod
    def from_observation(cls, observation: Observation) -> "ObservationRecord":
        failure = None
        if observation.failure is not None:
            failure = FailureRecord(
                kind=observation.failure.kind,
                message=observation.failure.message,
            )
        return cls(
            name=observation.name,
            timestamp=observation.timestamp,
            duration_ms=observation.duration,
            value=_jsonable(observation.value),
            cleaned_value=_jsonable(observation.cleaned_value),
            failure=failure,
        )


class ResultRecord(BaseModel):
    """Single line of a results file."""

    experiment: str
    context: Dict[str, Any] = Field(default_factory=dict)
    matched: bool
    mismatched: List[str] = Field(default_factory=list)
    ignored: List[str] = Field(default_factory=list)
    control: ObservationRecord
    candidates: List[ObservationRecord] = Field(default_factory=list)
    published_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def from_result(cls, result: Result) -> "ResultRecord":
        experiment = result.experiment
        return cls(
            experiment=experiment.name,
            context={str(key): _jsonable(value) for key, value in experiment.context.items()},
            matched=result.matched,
            mismatched=[obs.name for obs in result.mismatched],
            ignored=[obs.name for obs in result.ignored],
            control=ObservationRecord.from_observation(result.control),
            candidates=[ObservationRecord.from_observation(obs) for obs in result.candidates],
        )


__all__ = [
    "FailureRecord",
    "ObservationRecord",
    "ResultRecord",
    "model_dump",
    "model_validate",
]
