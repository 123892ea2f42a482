"""Failures captured while observing a candidate.

Python has a single exception channel, so the two ways a candidate can fail
are told apart by type: any ordinary ``Exception`` is a *raised* failure, and
a :class:`Thrown` signal carries an arbitrary payload as a *thrown* failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType
from typing import Any, NoReturn, Optional, Union


class Thrown(Exception):
    """Signal carrying an arbitrary payload out of an observed block."""

    def __init__(self, payload: Any) -> None:
        super().__init__(payload)
        self.payload = payload


def throw(payload: Any) -> NoReturn:
    """Abort the current block, handing ``payload`` to whoever observes it."""

    raise Thrown(payload)


@dataclass(frozen=True, eq=False)
class RaisedFailure:
    exception: Exception

    @property
    def kind(self) -> str:
        return type(self.exception).__name__

    @property
    def message(self) -> str:
        return str(self.exception)

    @property
    def traceback(self) -> Optional[TracebackType]:
        return self.exception.__traceback__

    def resignal(self) -> NoReturn:
        raise self.exception.with_traceback(self.traceback)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RaisedFailure):
            return NotImplemented
        return (
            type(self.exception) is type(other.exception)
            and self.exception.args == other.exception.args
        )

    def __hash__(self) -> int:
        return hash((type(self.exception), repr(self.exception.args)))


@dataclass(frozen=True)
class ThrownFailure:
    payload: Any

    kind = "thrown"

    @property
    def message(self) -> str:
        return repr(self.payload)

    def resignal(self) -> NoReturn:
        raise Thrown(self.payload)


Failure = Union[RaisedFailure, ThrownFailure]


def capture(error: Exception) -> Failure:
    if isinstance(error, Thrown):
        return ThrownFailure(error.payload)
    return RaisedFailure(error)


__all__ = [
    "Thrown",
    "throw",
    "RaisedFailure",
    "ThrownFailure",
    "Failure",
    "capture",
]
