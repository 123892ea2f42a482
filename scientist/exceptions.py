"""Errors raised by experiments."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core.experiment import Experiment
    from .core.result import Result


class ScientistError(Exception):
    pass


class DuplicateNameError(ScientistError, ValueError):
    """An experiment was given two observables with the same name."""

    def __init__(self, experiment: "Experiment", name: str) -> None:
        self.experiment = experiment
        self.name = name
        super().__init__(
            f'Experiment "{experiment.name}" already has an observable called "{name}"'
        )


class MissingControlError(ScientistError, ValueError):
    """An experiment was run without a control."""

    def __init__(self, experiment: "Experiment") -> None:
        self.experiment = experiment
        super().__init__(f'Experiment "{experiment.name}" was run without a control')


class MismatchError(ScientistError):
    """A run configured to raise on mismatches produced one."""

    def __init__(self, result: "Result") -> None:
        self.result = result
        super().__init__(f"Experiment {result.experiment.name} had mismatched observations")


__all__ = [
    "ScientistError",
    "DuplicateNameError",
    "MissingControlError",
    "MismatchError",
]
