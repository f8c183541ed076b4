from dataclasses import dataclass
from typing import Iterable, Iterator, Union
from pyhmm.count_model.symbols import ObservationSequence, StateSequence


class MisalignedSampleError(ValueError):
    def __init__(self, state_length: int, observation_length: int) -> None:
        super().__init__(
            f"state sequence has {state_length} elements but observation sequence has {observation_length}"
        )
        self.state_length = state_length
        self.observation_length = observation_length


def check_alignment(
    state_sequence: StateSequence,
    observation_sequence: ObservationSequence,
) -> None:
    if len(state_sequence) != len(observation_sequence):
        raise MisalignedSampleError(len(state_sequence), len(observation_sequence))


@dataclass(slots=True, frozen=True, eq=True)
class SupervisedSample:
    state_sequence: StateSequence  # the labels
    observation_sequence: ObservationSequence  # what each label emitted, position by position

    def __post_init__(self) -> None:
        check_alignment(self.state_sequence, self.observation_sequence)

    @staticmethod
    def from_pairs(pairs: Iterable) -> "SupervisedSample":
        """Builds a sample from (observation, state) pairs, e.g. ("dog", "NN")."""
        pairs = tuple(pairs)
        return SupervisedSample(
            StateSequence.of(*(state for observation, state in pairs)),
            ObservationSequence.of(*(observation for observation, state in pairs)),
        )

    def __len__(self) -> int:
        return len(self.state_sequence)

    def __str__(self) -> str:
        return " ".join(
            f"{observation}/{state}"
            for state, observation in zip(self.state_sequence, self.observation_sequence)
        )


Samples = Union[Iterable[SupervisedSample], Iterator[SupervisedSample]]
