"""Callback modules for publishing experiment results."""

from .jsonl import JsonlRecorder
from .logging_module import LoggingCallbackModule
from .toggles import ExperimentToggle, ToggleConfigError, ToggledCallbackModule, load_toggles

__all__ = [
    "JsonlRecorder",
    "LoggingCallbackModule",
    "ExperimentToggle",
    "ToggleConfigError",
    "ToggledCallbackModule",
    "load_toggles",
]
