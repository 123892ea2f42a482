"""Callback module contract consulted by every experiment run."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Literal, Mapping, Optional

from .failures import Thrown

if TYPE_CHECKING:
    from .experiment import Experiment
    from .result import Result


Operation = Literal["enabled", "compare", "clean", "ignore", "run_if", "publish"]


class CallbackModule(ABC):
    """Policy for a family of experiments.

    Subclasses decide whether experiments run (:meth:`enabled`) and what
    happens to their results (:meth:`publish`). The error hooks receive
    failures from guarded operations; by default they re-raise, which makes
    those failures fatal to the caller. Override them to log and carry on.
    """

    #: Default for experiments created through :meth:`new`.
    raise_on_mismatch: bool = False

    @abstractmethod
    def enabled(self) -> bool:
        """Return whether experiments should run their candidates."""

    @abstractmethod
    def publish(self, result: "Result") -> None:
        """Report the result of a run."""

    def default_name(self) -> str:
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    def default_context(self) -> Dict[str, Any]:
        return {}

    def on_raised(self, experiment: "Experiment", operation: Operation, error: Exception) -> None:
        raise error

    def on_thrown(self, experiment: "Experiment", operation: Operation, payload: Any) -> None:
        raise Thrown(payload)

    def new(
        self,
        name: Optional[str] = None,
        *,
        context: Optional[Mapping[str, Any]] = None,
        raise_on_mismatch: Optional[bool] = None,
    ) -> "Experiment":
        """Create an experiment that reports to this module."""

        from .experiment import Experiment

        merged = dict(self.default_context())
        merged.update(context or {})
        if raise_on_mismatch is None:
            raise_on_mismatch = self.raise_on_mismatch
        return Experiment(
            name=name if name is not None else self.default_name(),
            context=merged,
            raise_on_mismatch=raise_on_mismatch,
            callbacks=self,
        )


class DefaultCallbackModule(CallbackModule):
    """Always enabled; results are never published."""

    def default_name(self) -> str:
        return "experiment"

    def enabled(self) -> bool:
        return True

    def publish(self, result: "Result") -> None:
        return None


DEFAULT_CALLBACKS = DefaultCallbackModule()


__all__ = ["Operation", "CallbackModule", "DefaultCallbackModule", "DEFAULT_CALLBACKS"]
