"""Immutable experiment configuration and the run protocol."""

from __future__ import annotations

import logging
import operator
import random
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .callbacks import DEFAULT_CALLBACKS, CallbackModule, Operation
from .failures import Thrown
from .observation import Comparator, Observation
from .result import Result
from ..exceptions import DuplicateNameError, MismatchError, MissingControlError

logger = logging.getLogger(__name__)

CONTROL = "control"

Observable = Callable[[], Any]
Cleaner = Callable[[Any], Any]
IgnorePredicate = Callable[[Any, Any], bool]


def _empty_observables() -> Mapping[str, Observable]:
    return MappingProxyType({})


@dataclass(frozen=True, eq=False)
class Experiment:
    """A control code path and the candidates meant to replace it.

    Experiments are values: every builder method returns a new experiment
    and leaves the receiver untouched, so a base configuration can seed any
    number of runs.

    Usage::

        experiment = (
            Experiment.new("widget-permissions")
            .add_control(lambda: legacy_permissions(user))
            .add_candidate(lambda: new_permissions(user))
        )
        allowed = experiment.run()
    """

    name: str = "experiment"
    context: Mapping[str, Any] = field(default_factory=dict)
    candidates: Mapping[str, Observable] = field(default_factory=_empty_observables)
    comparator: Comparator = operator.eq
    cleaner: Optional[Cleaner] = None
    ignore_predicates: Tuple[IgnorePredicate, ...] = ()
    run_if_fn: Optional[Callable[[], bool]] = None
    before_run_fn: Optional[Callable[[], Any]] = None
    raise_on_mismatch: bool = False
    callbacks: CallbackModule = field(default=DEFAULT_CALLBACKS, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", MappingProxyType(dict(self.context)))
        object.__setattr__(self, "candidates", MappingProxyType(dict(self.candidates)))

    @classmethod
    def new(
        cls,
        name: Optional[str] = None,
        *,
        context: Optional[Mapping[str, Any]] = None,
        raise_on_mismatch: Optional[bool] = None,
        callbacks: Optional[CallbackModule] = None,
    ) -> "Experiment":
        module = callbacks if callbacks is not None else DEFAULT_CALLBACKS
        return module.new(name, context=context, raise_on_mismatch=raise_on_mismatch)

    # ------------------------------------------------------------------
    # Builder
    # ------------------------------------------------------------------
    def add_control(self, observable: Observable) -> "Experiment":
        return self.add_observable(CONTROL, observable)

    def add_candidate(self, observable: Observable, name: str = "candidate") -> "Experiment":
        return self.add_observable(name, observable)

    def add_observable(self, name: str, observable: Observable) -> "Experiment":
        if name in self.candidates:
            raise DuplicateNameError(self, name)
        observables: Dict[str, Observable] = dict(self.candidates)
        observables[name] = observable
        return replace(self, candidates=observables)

    def compare_with(self, comparator: Comparator) -> "Experiment":
        return replace(self, comparator=comparator)

    def clean_with(self, cleaner: Cleaner) -> "Experiment":
        return replace(self, cleaner=cleaner)

    def ignore(self, predicate: IgnorePredicate) -> "Experiment":
        return replace(self, ignore_predicates=(*self.ignore_predicates, predicate))

    def set_run_if(self, run_if_fn: Callable[[], bool]) -> "Experiment":
        return replace(self, run_if_fn=run_if_fn)

    def set_before_run(self, before_run_fn: Callable[[], Any]) -> "Experiment":
        return replace(self, before_run_fn=before_run_fn)

    def set_raise_on_mismatch(self, flag: bool = True) -> "Experiment":
        return replace(self, raise_on_mismatch=flag)

    # ------------------------------------------------------------------
    # Running
    # ------------------------------------------------------------------
    def run(self, *, result: bool = False) -> Any:
        """Run the experiment and return the control's value.

        With ``result=True`` the :class:`Result` is returned instead, unless
        the experiment did not run, in which case there is none and the
        control's value is returned. A failing control is re-raised with its
        original traceback.
        """

        control = self.candidates.get(CONTROL)
        if control is None:
            raise MissingControlError(self)

        if not self.should_run():
            logger.debug("Experiment %s skipped; running control only", self.name)
            return control()

        if self.before_run_fn is not None:
            self.before_run_fn()

        observables = list(self.candidates.items())
        random.shuffle(observables)
        logger.debug(
            "Experiment %s running %s",
            self.name,
            ", ".join(name for name, _ in observables),
        )
        observations = [Observation.new(self, name, observable) for name, observable in observables]

        control_observation = next(obs for obs in observations if obs.name == CONTROL)
        candidates = [obs for obs in observations if obs.name != CONTROL]
        outcome = Result.new(self, control_observation, candidates)

        self.guarded("publish", self.callbacks.publish, outcome)

        if self.raise_on_mismatch and outcome.is_mismatched:
            raise MismatchError(outcome)
        if result:
            return outcome
        control_observation.resignal()
        return control_observation.value

    def should_run(self) -> bool:
        if len(self.candidates) <= 1:
            return False
        return bool(self.guarded("enabled", self.callbacks.enabled)) and self.run_if_allows()

    def run_if_allows(self) -> bool:
        if self.run_if_fn is None:
            return True
        return bool(self.guarded("run_if", self.run_if_fn))

    def observations_match(self, control: Observation, candidate: Observation) -> bool:
        return bool(self.guarded("compare", control.equivalent, candidate, self.comparator))

    def should_ignore_mismatch(self, control: Observation, candidate: Observation) -> bool:
        for predicate in self.ignore_predicates:
            if self.guarded("ignore", predicate, control.value, candidate.value):
                return True
        return False

    def guarded(self, operation: Operation, fn: Callable[..., Any], *args: Any) -> Any:
        """Call ``fn`` and hand any failure to the callback module.

        Returns ``None`` when ``fn`` failed and the module's hook returned
        instead of raising.
        """

        try:
            return fn(*args)
        except Exception as error:
            failure = error

        logger.debug("Experiment %s: %s failed with %r", self.name, operation, failure)
        if isinstance(failure, Thrown):
            self.callbacks.on_thrown(self, operation, failure.payload)
        else:
            self.callbacks.on_raised(self, operation, failure)
        return None


__all__ = ["Experiment", "CONTROL", "Observable", "Cleaner", "IgnorePredicate"]
