"""Result file analysis."""

from .summary import ExperimentSummary, summarize

__all__ = ["ExperimentSummary", "summarize"]
