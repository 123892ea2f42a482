from __future__ import annotations

import dataclasses
import time
import traceback

import pytest

from scientist import Experiment, Observation, RaisedFailure, Thrown, ThrownFailure, throw


def _raise(error: Exception):
    def observable():
        raise error

    return observable


def test_it_runs_and_records_execution() -> None:
    def observable():
        time.sleep(0.1)
        return "control"

    observation = Observation.new(Experiment.new("test"), "control", observable)

    assert observation.value == "control"
    assert observation.cleaned_value == "control"
    assert observation.failure is None
    assert 90 <= observation.duration < 1000
    assert observation.timestamp <= time.time()


def test_it_swallows_exceptions() -> None:
    observation = Observation.new(Experiment.new("test"), "control", _raise(RuntimeError("foo")))

    assert observation.raised
    assert observation.failed
    assert not observation.thrown
    assert isinstance(observation.failure, RaisedFailure)
    assert observation.failure.kind == "RuntimeError"
    assert observation.failure.message == "foo"
    assert observation.value is None
    assert observation.cleaned_value is None
    assert observation.duration is None


def test_it_swallows_throws() -> None:
    observation = Observation.new(Experiment.new("test"), "control", lambda: throw("foo"))

    assert observation.thrown
    assert observation.failed
    assert observation.failure == ThrownFailure("foo")


def test_it_does_not_capture_base_exceptions() -> None:
    def interrupt():
        raise SystemExit(3)

    with pytest.raises(SystemExit):
        Observation.new(Experiment.new("test"), "control", interrupt)


def test_it_compares_values() -> None:
    experiment = Experiment.new("test")
    control = Observation.new(experiment, "control", lambda: 4 - 1)
    candidate = Observation.new(experiment, "candidate", lambda: 1 + 2)

    assert control.equivalent(candidate)


def test_it_compares_values_with_a_function() -> None:
    experiment = Experiment.new("test")
    control = Observation.new(experiment, "control", lambda: 3)
    candidate = Observation.new(experiment, "candidate", lambda: "3")

    assert not control.equivalent(candidate)
    assert control.equivalent(candidate, lambda x, y: str(x) == y)


def test_it_compares_types_of_exceptions() -> None:
    experiment = Experiment.new("test")
    control = Observation.new(experiment, "control", _raise(RuntimeError("foo")))
    candidate = Observation.new(experiment, "candidate", _raise(ValueError("foo")))

    assert not control.equivalent(candidate)


def test_it_compares_exception_messages() -> None:
    experiment = Experiment.new("test")
    control = Observation.new(experiment, "control", _raise(ValueError("foo")))
    candidate = Observation.new(experiment, "candidate", _raise(ValueError("bar")))
    twin = Observation.new(experiment, "twin", _raise(ValueError("foo")))

    assert not control.equivalent(candidate)
    assert control.equivalent(twin)


def test_failures_are_compared_without_the_comparator() -> None:
    experiment = Experiment.new("test")
    control = Observation.new(experiment, "control", lambda: throw("payload"))
    candidate = Observation.new(experiment, "candidate", lambda: throw("payload"))
    succeeded = Observation.new(experiment, "succeeded", lambda: "payload")

    def never(x, y):
        raise AssertionError("comparator should not be called")

    assert control.equivalent(candidate, never)
    assert not control.equivalent(succeeded, never)
    assert not succeeded.equivalent(control, never)
    assert not control.equivalent(Observation.new(experiment, "raised", _raise(RuntimeError("payload"))))


def test_it_cleans_values_with_the_experiment_cleaner() -> None:
    experiment = Experiment.new("test").clean_with(lambda value: value["id"])
    observation = Observation.new(experiment, "control", lambda: {"id": 7, "noise": object()})

    assert observation.cleaned_value == 7
    assert observation.value["id"] == 7


def test_resignal_is_a_noop_without_a_failure() -> None:
    Observation.new(Experiment.new("test"), "control", lambda: 1).resignal()


def test_resignal_preserves_the_original_traceback() -> None:
    def deep_failure():
        raise LookupError("missing")

    observation = Observation.new(Experiment.new("test"), "control", deep_failure)

    with pytest.raises(LookupError, match="missing") as excinfo:
        observation.resignal()

    frames = [frame.name for frame in traceback.extract_tb(excinfo.value.__traceback__)]
    assert frames[-1] == "deep_failure"


def test_resignal_rethrows_the_payload() -> None:
    payload = {"reason": "quota"}
    observation = Observation.new(Experiment.new("test"), "control", lambda: throw(payload))

    with pytest.raises(Thrown) as excinfo:
        observation.resignal()

    assert excinfo.value.payload is payload


def test_observations_are_immutable() -> None:
    observation = Observation.new(Experiment.new("test"), "control", lambda: 1)

    with pytest.raises(dataclasses.FrozenInstanceError):
        observation.value = 2  # type: ignore[misc]
