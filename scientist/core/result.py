"""Experiment results: observations classified against the control."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Tuple

from .observation import Observation

if TYPE_CHECKING:
    from .experiment import Experiment


@dataclass(frozen=True)
class Result:
    """Every observation from one run, plus which candidates disagreed.

    ``mismatched`` and ``ignored`` split the candidates that did not match
    the control; a candidate is never in both.
    """

    experiment: "Experiment"
    control: Observation
    candidates: Tuple[Observation, ...] = ()
    mismatched: Tuple[Observation, ...] = ()
    ignored: Tuple[Observation, ...] = ()

    @classmethod
    def new(
        cls,
        experiment: "Experiment",
        control: Observation,
        candidates: Sequence[Observation],
    ) -> "Result":
        not_matching = [
            candidate
            for candidate in candidates
            if not experiment.observations_match(control, candidate)
        ]
        ignored: list[Observation] = []
        mismatched: list[Observation] = []
        for candidate in not_matching:
            if experiment.should_ignore_mismatch(control, candidate):
                ignored.append(candidate)
            else:
                mismatched.append(candidate)

        return cls(
            experiment=experiment,
            control=control,
            candidates=tuple(candidates),
            mismatched=tuple(mismatched),
            ignored=tuple(ignored),
        )

    @property
    def matched(self) -> bool:
        """True when every candidate matched the control outright."""

        return not (self.is_mismatched or self.is_ignored)

    @property
    def is_mismatched(self) -> bool:
        return bool(self.mismatched)

    @property
    def is_ignored(self) -> bool:
        return bool(self.ignored)

    @property
    def observations(self) -> Tuple[Observation, ...]:
        return (self.control, *self.candidates)

    def candidate(self, name: str) -> Optional[Observation]:
        for observation in self.candidates:
            if observation.name == name:
                return observation
        return None


__all__ = ["Result"]
