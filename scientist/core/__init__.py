"""Experiment engine: configuration, observations and results."""

from .callbacks import DEFAULT_CALLBACKS, CallbackModule, DefaultCallbackModule, Operation
from .experiment import CONTROL, Experiment
from .failures import RaisedFailure, Thrown, ThrownFailure, throw
from .observation import Observation
from .result import Result

__all__ = [
    "CONTROL",
    "CallbackModule",
    "DefaultCallbackModule",
    "DEFAULT_CALLBACKS",
    "Experiment",
    "Observation",
    "Operation",
    "RaisedFailure",
    "Result",
    "Thrown",
    "ThrownFailure",
    "throw",
]
