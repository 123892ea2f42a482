"""Per-experiment enablement loaded from a YAML toggles file."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

from .logging_module import LoggingCallbackModule
from ..config import get_settings


@dataclass(frozen=True)
class ExperimentToggle:
    enabled: bool = True
    percent: float = 100.0


class ToggleConfigError(ValueError):
    pass


def load_toggles(path: Path) -> Dict[str, ExperimentToggle]:
    raw = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if raw is None:
        raise ToggleConfigError(f"Toggles file is empty: {path}")
    if not isinstance(raw, Mapping):
        raise ToggleConfigError("Toggles file must be a mapping")

    experiments = raw.get("experiments")
    if not isinstance(experiments, Mapping):
        raise ToggleConfigError("experiments must be a mapping")

    toggles: Dict[str, ExperimentToggle] = {}
    for name, value in experiments.items():
        if not isinstance(name, str) or not name.strip():
            raise ToggleConfigError("experiment names must be non-empty strings")
        toggles[name] = _parse_toggle(name, value)
    return toggles


def _parse_toggle(name: str, value: object) -> ExperimentToggle:
    if value is None:
        return ExperimentToggle()
    if not isinstance(value, Mapping):
        raise ToggleConfigError(f"experiments.{name} must be a mapping")

    enabled = value.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ToggleConfigError(f"experiments.{name}.enabled must be a boolean")

    percent = value.get("percent", 100)
    if isinstance(percent, bool) or not isinstance(percent, (int, float)):
        raise ToggleConfigError(f"experiments.{name}.percent must be a number")
    if not 0 <= percent <= 100:
        raise ToggleConfigError(f"experiments.{name}.percent must be between 0 and 100")

    return ExperimentToggle(enabled=enabled, percent=float(percent))


class ToggledCallbackModule(LoggingCallbackModule):
    """Enable one named experiment according to its toggle.

    Unknown experiments are disabled. An enabled toggle runs the experiment
    on ``percent`` percent of calls.
    """

    def __init__(
        self,
        name: str,
        toggles: Optional[Mapping[str, ExperimentToggle]] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.name = name
        self._toggles = dict(toggles) if toggles is not None else _default_toggles()
        self._rng = rng or random.Random()

    def default_name(self) -> str:
        return self.name

    def enabled(self) -> bool:
        toggle = self._toggles.get(self.name)
        if toggle is None or not toggle.enabled:
            return False
        if toggle.percent >= 100:
            return True
        return self._rng.random() * 100 < toggle.percent


def _default_toggles() -> Dict[str, ExperimentToggle]:
    path = get_settings().SCIENTIST_TOGGLES_PATH
    if path is None:
        return {}
    return load_toggles(Path(path))


__all__ = [
    "ExperimentToggle",
    "ToggleConfigError",
    "ToggledCallbackModule",
    "load_toggles",
]
