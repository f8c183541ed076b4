"""Shared fixtures for the counting tests."""

from __future__ import annotations

import pytest

from pyhmm.count_model.sample import SupervisedSample
from pyhmm.count_model.symbols import ObservationSequence, StateSequence
from pyhmm.count_model.transition_emission_counter import TransitionEmissionCounter


def make_sample(states: str, observations: str) -> SupervisedSample:
    """Builds a sample from two whitespace separated strings."""
    return SupervisedSample(
        StateSequence.of(*states.split()),
        ObservationSequence.of(*observations.split()),
    )


@pytest.fixture
def aba_counter() -> TransitionEmissionCounter:
    counter = TransitionEmissionCounter(order=1)
    counter.ingest(make_sample("A B A", "x y x"))
    return counter


@pytest.fixture
def corpus() -> list[SupervisedSample]:
    return [
        make_sample("A B A", "x y x"),
        make_sample("A A B B", "x x y z"),
        make_sample("B A B", "y x y"),
        make_sample("C", "w"),
        make_sample("A B A B A", "x y x y x"),
    ]


@pytest.fixture(name="make_sample")
def make_sample_fixture():
    return make_sample
