from __future__ import annotations

from pyhmm.count_model.symbols import (
    Emission,
    Observation,
    ObservationSequence,
    State,
    StateSequence,
    Transition,
)


def test_state_equality_ignores_dictionary_index() -> None:
    assert State("A", 3) == State("A")
    assert hash(State("A", 3)) == hash(State("A"))
    assert State("A") != State("B")


def test_state_sequence_is_structural_map_key() -> None:
    first = StateSequence.of("A", "B")
    second = StateSequence((State("A"), State("B")))

    assert first == second
    assert {first: 1}[second] == 1
    assert StateSequence.of("B", "A") != first
    assert StateSequence.of("A", "B", "A") != first


def test_sequence_accepts_lists() -> None:
    sequence = StateSequence([State("A")])

    assert sequence.elements == (State("A"),)


def test_slicing_keeps_sequence_type() -> None:
    sequence = StateSequence.of("A", "B", "C")

    assert sequence[0] == State("A")
    assert sequence[-1] == State("C")
    assert sequence[:2] == StateSequence.of("A", "B")
    assert isinstance(sequence[1:], StateSequence)
    assert len(sequence) == 3
    assert list(sequence) == [State("A"), State("B"), State("C")]


def test_state_and_observation_sequences_never_compare_equal() -> None:
    assert StateSequence.of("a") != ObservationSequence.of("a")
    assert ObservationSequence.of("a")[0] == Observation("a")


def test_transition_and_emission_render_readably() -> None:
    transition = Transition(StateSequence.of("A", "B"), State("C"))

    assert str(transition) == "A B->C"
    assert transition.order == 2
    assert str(Emission(State("A"), Observation("x"))) == "A->x"
    assert Emission(State("A"), Observation("x")) == Emission(State("A", 0), Observation("x", 0))
