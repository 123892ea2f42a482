"""A single timed execution of one experiment observable."""

from __future__ import annotations

import operator
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

from .failures import Failure, RaisedFailure, ThrownFailure, capture

if TYPE_CHECKING:
    from .experiment import Experiment


Comparator = Callable[[Any, Any], bool]


@dataclass(frozen=True)
class Observation:
    name: str
    experiment: "Experiment" = field(repr=False, compare=False)
    timestamp: float
    value: Any = None
    cleaned_value: Any = None
    failure: Optional[Failure] = None
    duration: Optional[float] = None

    @classmethod
    def new(cls, experiment: "Experiment", name: str, observable: Callable[[], Any]) -> "Observation":
        """Run ``observable`` once and record what happened.

        ``duration`` is wall-clock milliseconds. Failures are captured rather
        than propagated; value, cleaned value and duration stay ``None`` when
        the observable fails.
        """

        timestamp = time.time()
        started = time.perf_counter()
        try:
            value = observable()
        except Exception as error:
            return cls(name=name, experiment=experiment, timestamp=timestamp, failure=capture(error))
        duration = (time.perf_counter() - started) * 1000.0

        if experiment.cleaner is None:
            cleaned = value
        else:
            cleaned = experiment.guarded("clean", experiment.cleaner, value)

        return cls(
            name=name,
            experiment=experiment,
            timestamp=timestamp,
            value=value,
            cleaned_value=cleaned,
            duration=duration,
        )

    @property
    def raised(self) -> bool:
        return isinstance(self.failure, RaisedFailure)

    @property
    def thrown(self) -> bool:
        return isinstance(self.failure, ThrownFailure)

    @property
    def failed(self) -> bool:
        return self.failure is not None

    def equivalent(self, other: "Observation", comparator: Comparator = operator.eq) -> bool:
        """Whether two observations agree.

        Successful observations are compared by value with ``comparator``.
        Two failures agree when they are the same failure; the comparator is
        not consulted for them.
        """

        if self.failure is None and other.failure is None:
            return bool(comparator(self.value, other.value))
        if self.failure is None or other.failure is None:
            return False
        return self.failure == other.failure

    def resignal(self) -> None:
        if self.failure is not None:
            self.failure.resignal()


__all__ = ["Observation", "Comparator"]
