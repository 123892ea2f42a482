"""Carefully refactor critical code paths by running old and new side by side."""

from .core import (
    CONTROL,
    DEFAULT_CALLBACKS,
    CallbackModule,
    DefaultCallbackModule,
    Experiment,
    Observation,
    Operation,
    RaisedFailure,
    Result,
    Thrown,
    ThrownFailure,
    throw,
)
from .exceptions import DuplicateNameError, MismatchError, MissingControlError, ScientistError

__all__ = [
    "CONTROL",
    "CallbackModule",
    "DefaultCallbackModule",
    "DEFAULT_CALLBACKS",
    "DuplicateNameError",
    "Experiment",
    "MismatchError",
    "MissingControlError",
    "Observation",
    "Operation",
    "RaisedFailure",
    "Result",
    "ScientistError",
    "Thrown",
    "ThrownFailure",
    "throw",
]
