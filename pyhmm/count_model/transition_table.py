from dataclasses import dataclass
from typing import ClassVar, Type
from pyhmm.count_model.link_counter import LinkCounter
from pyhmm.count_model.source_data import SourceData
from pyhmm.count_model.symbols import State, StateSequence


@dataclass(slots=True)
class TransitionEntry(SourceData):
    """
    Counts for one state sequence, which plays two roles at once.

    As an n-gram, total is its history count: how often the sequence occurs in
    the training data. As a context, destination_counts holds how often each
    target state directly followed it. A context occurrence is always also a
    history occurrence, so total >= sum(destination_counts.values()).
    """

    def observe_history(self, num: int = 1) -> None:
        self.observe_total(num)

    def observe_target(self, target: State, num: int = 1) -> None:
        self.observe_destination(target, num)


@dataclass(slots=True)
class TransitionTable(LinkCounter):
    entry_type: ClassVar[Type[SourceData]] = TransitionEntry

    def observe_history(
        self,
        sequence: StateSequence,
        num: int = 1,
    ) -> None:
        self.get_source_data(sequence).observe_history(num)

    def observe_transition(
        self,
        context: StateSequence,
        target: State,
        num: int = 1,
    ) -> None:
        entry = self.find_source_data(context)
        if entry is None:
            # context never counted as a history: count this occurrence once
            entry = self.get_source_data(context)
            entry.observe_history(num)
        entry.observe_target(target, num)

    def history_count(self, sequence: StateSequence) -> int:
        return self.get_total(sequence)

    def transition_count(self, context: StateSequence, target: State) -> int:
        return self.get_count(context, target)
