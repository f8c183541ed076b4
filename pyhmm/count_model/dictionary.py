from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Protocol, TypeVar
from pyhmm.count_model.symbols import (
    Observation,
    ObservationSequence,
    State,
    StateSequence,
    SymbolSequence,
)

SequenceType = TypeVar("SequenceType", bound=SymbolSequence)


class SymbolDictionary(Protocol):
    def intern(self, sequence: SequenceType) -> SequenceType:
        ...


class IdentityDictionary:
    """Treats every handle as already canonical."""

    def intern(self, sequence: SequenceType) -> SequenceType:
        return sequence


@dataclass(slots=True)
class Dictionary:
    """
    Maps raw state and observation values to one canonical handle each.

    Handles are numbered densely, per kind, in the order they are first seen, so
    the first state interned gets index 0.
    """

    _states: Dict[Any, State] = field(default_factory=lambda: {})
    _observations: Dict[Any, Observation] = field(default_factory=lambda: {})

    def intern(self, sequence: SequenceType) -> SequenceType:
        if isinstance(sequence, StateSequence):
            return StateSequence(tuple(self.intern_state(s) for s in sequence))
        if isinstance(sequence, ObservationSequence):
            return ObservationSequence(
                tuple(self.intern_observation(o) for o in sequence)
            )
        raise TypeError(f"cannot intern {type(sequence).__name__}")

    def intern_state(self, state: State) -> State:
        return self._get_or_add(self._states, State, state.value)

    def intern_observation(self, observation: Observation) -> Observation:
        return self._get_or_add(self._observations, Observation, observation.value)

    def get_state(self, value) -> State:
        return self._states.get(value, None)

    def get_observation(self, value) -> Observation:
        return self._observations.get(value, None)

    def states(self) -> Iterator[State]:
        return iter(self._states.values())

    def observations(self) -> Iterator[Observation]:
        return iter(self._observations.values())

    @property
    def state_count(self) -> int:
        return len(self._states)

    @property
    def observation_count(self) -> int:
        return len(self._observations)

    @staticmethod
    def _get_or_add(symbols: Dict, symbol_type, value):
        symbol = symbols.get(value, None)
        if symbol is None:
            symbol = symbol_type(value, len(symbols))
            symbols[value] = symbol
        return symbol
