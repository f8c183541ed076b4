from dataclasses import dataclass
from typing import ClassVar, Type
from pyhmm.count_model.link_counter import LinkCounter
from pyhmm.count_model.source_data import SourceData
from pyhmm.count_model.symbols import Observation, State


@dataclass(slots=True)
class EmissionEntry(SourceData):
    """Counts for one state; total == sum(destination_counts.values())."""

    def observe_emission(self, observation: Observation, num: int = 1) -> None:
        self.observe_total(num)
        self.observe_destination(observation, num)


@dataclass(slots=True)
class EmissionTable(LinkCounter):
    entry_type: ClassVar[Type[SourceData]] = EmissionEntry

    def observe_emission(
        self,
        state: State,
        observation: Observation,
        num: int = 1,
    ) -> None:
        self.get_source_data(state).observe_emission(observation, num)

    def state_count(self, state: State) -> int:
        return self.get_total(state)

    def emission_count(self, state: State, observation: Observation) -> int:
        return self.get_count(state, observation)
