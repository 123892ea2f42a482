"""Callback module that reports through :mod:`logging` and never escalates."""

from __future__ import annotations

import logging
from typing import Any

from ..core.callbacks import CallbackModule, Operation
from ..core.experiment import Experiment
from ..core.result import Result

logger = logging.getLogger(__name__)


class LoggingCallbackModule(CallbackModule):
    """Log results and guarded failures instead of raising them."""

    def enabled(self) -> bool:
        return True

    def publish(self, result: Result) -> None:
        name = result.experiment.name
        if result.matched:
            logger.info("Experiment %s matched (%d candidates)", name, len(result.candidates))
            return
        logger.warning(
            "Experiment %s mismatched=%s ignored=%s",
            name,
            [obs.name for obs in result.mismatched],
            [obs.name for obs in result.ignored],
        )

    def on_raised(self, experiment: Experiment, operation: Operation, error: Exception) -> None:
        logger.error(
            "Experiment %s: %s raised %s",
            experiment.name,
            operation,
            type(error).__name__,
            exc_info=(type(error), error, error.__traceback__),
        )

    def on_thrown(self, experiment: Experiment, operation: Operation, payload: Any) -> None:
        logger.error("Experiment %s: %s threw %r", experiment.name, operation, payload)


__all__ = ["LoggingCallbackModule"]
