from __future__ import annotations

import pytest

from pyhmm.count_model.dictionary import Dictionary, IdentityDictionary
from pyhmm.count_model.symbols import Observation, ObservationSequence, State, StateSequence


def test_intern_returns_canonical_indexed_handles() -> None:
    dictionary = Dictionary()

    interned = dictionary.intern(StateSequence.of("A", "B", "A"))

    assert interned == StateSequence.of("A", "B", "A")
    assert interned[0] is interned[2]
    assert [state.index for state in interned] == [0, 1, 0]
    assert dictionary.get_state("B") is interned[1]
    assert dictionary.state_count == 2


def test_states_and_observations_are_numbered_separately() -> None:
    dictionary = Dictionary()
    dictionary.intern(StateSequence.of("A"))

    observations = dictionary.intern(ObservationSequence.of("x", "y"))

    assert [observation.index for observation in observations] == [0, 1]
    assert list(dictionary.observations()) == [Observation("x"), Observation("y")]
    assert list(dictionary.states()) == [State("A")]
    assert dictionary.get_observation("z") is None


def test_interning_again_reuses_handles() -> None:
    dictionary = Dictionary()
    first = dictionary.intern(ObservationSequence.of("x"))
    second = dictionary.intern(ObservationSequence.of("x"))

    assert first[0] is second[0]
    assert dictionary.observation_count == 1


def test_intern_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        Dictionary().intern(("A", "B"))


def test_identity_dictionary_returns_its_input() -> None:
    sequence = StateSequence.of("A")

    assert IdentityDictionary().intern(sequence) is sequence
