from typing import Any, Iterator, Optional, Tuple, Union
from pyhmm.count_model import config
from pyhmm.count_model.dictionary import Dictionary, SymbolDictionary
from pyhmm.count_model.emission_table import EmissionTable
from pyhmm.count_model.link_count_data import LinkCountData
from pyhmm.count_model.sample import Samples, SupervisedSample, check_alignment
from pyhmm.count_model.sequence_counter import SampleCounter
from pyhmm.count_model.symbols import (
    Emission,
    Observation,
    State,
    StateSequence,
    Transition,
)
from pyhmm.count_model.transition_table import TransitionTable
from pyhmm.count_model.window_counter import enumerate_windows


"""
order = 2, states a b c:

length 1: a  b  c          histories, emissions a->x0 b->x1 c->x2
length 2: ab bc            histories, transitions a->b b->c
length 3: abc              history (top), transition ab->c
"""


def check_order(order: int) -> int:
    if isinstance(order, bool) or not isinstance(order, int) or order < 1:
        raise ValueError(f"order must be a positive integer: order = {order!r}")
    return order


def check_cutoff(cutoff: int) -> int:
    if isinstance(cutoff, bool) or not isinstance(cutoff, int) or cutoff < 0:
        raise ValueError(f"cutoff must be a non-negative integer: cutoff = {cutoff!r}")
    return cutoff


class TransitionEmissionCounter(SampleCounter):
    """
    Counts state n-grams, context -> state transitions and state -> observation
    emissions of labeled samples for an HMM of the given order.

    Both tables are cumulative over observe_sample calls. apply_cutoff prunes
    them in place; samples observed after pruning are counted but not pruned
    until apply_cutoff runs again.
    """

    _order: int
    _cutoff: int
    _count_top_histories: bool
    _dictionary: SymbolDictionary
    _transition_table: TransitionTable
    _emission_table: EmissionTable
    _pruned: bool

    def __init__(
        self,
        order: int = config.DEFAULT_ORDER,
        cutoff: int = config.DEFAULT_CUTOFF,
        dictionary: Optional[SymbolDictionary] = None,
        count_top_histories: bool = config.DEFAULT_COUNT_TOP_HISTORIES,
    ) -> None:
        super().__init__()
        self._order = check_order(order)
        self._cutoff = check_cutoff(cutoff)
        self._count_top_histories = count_top_histories
        self._dictionary = Dictionary() if dictionary is None else dictionary
        self._transition_table = TransitionTable()
        self._emission_table = EmissionTable()
        self._pruned = False

    @classmethod
    def from_samples(
        cls,
        samples: Samples,
        order: int = config.DEFAULT_ORDER,
        cutoff: int = config.DEFAULT_CUTOFF,
        dictionary: Optional[SymbolDictionary] = None,
        count_top_histories: bool = config.DEFAULT_COUNT_TOP_HISTORIES,
    ) -> "TransitionEmissionCounter":
        counter = cls(order, cutoff, dictionary, count_top_histories)
        counter.observe_samples(samples)
        counter.apply_cutoff()
        return counter

    @property
    def order(self) -> int:
        return self._order

    @property
    def cutoff(self) -> int:
        return self._cutoff

    @property
    def dictionary(self) -> SymbolDictionary:
        return self._dictionary

    @property
    def transition_table(self) -> TransitionTable:
        return self._transition_table

    @property
    def emission_table(self) -> EmissionTable:
        return self._emission_table

    @property
    def pruned(self) -> bool:
        return self._pruned

    def observe_sample(
        self,
        sample: SupervisedSample,
    ) -> None:
        self.ingest(sample)

    def ingest(
        self,
        sample: SupervisedSample,
        order: Optional[int] = None,
    ) -> None:
        order = self._order if order is None else check_order(order)
        check_alignment(sample.state_sequence, sample.observation_sequence)

        dictionary = self._dictionary
        state_sequence = dictionary.intern(sample.state_sequence)
        observation_sequence = dictionary.intern(sample.observation_sequence)

        transition_table = self._transition_table
        emission_table = self._emission_table
        for length in range(1, order + 2):
            count_history = length <= order or self._count_top_histories
            for start, window in enumerate_windows(state_sequence, length):
                if count_history:
                    transition_table.observe_history(window)

                if length > 1:
                    transition_table.observe_transition(window[:-1], window[-1])
                else:
                    # alignment is by absolute position in the sample
                    emission_table.observe_emission(
                        window[0], observation_sequence[start]
                    )

    def apply_cutoff(
        self,
        threshold: Optional[int] = None,
    ) -> int:
        """
        Removes every transition target and emitted observation counted fewer
        than threshold times (default: the configured cutoff), subtracting it
        from its entry's total. Entries left without targets/observations by this
        are removed. Returns the number of links removed.
        """
        threshold = self._cutoff if threshold is None else check_cutoff(threshold)
        removed = self._transition_table.prune(threshold)
        removed += self._emission_table.prune(threshold)
        self._pruned = True
        return removed

    def history_count(self, sequence: StateSequence) -> int:
        return self._transition_table.history_count(sequence)

    def transition_count(
        self,
        context: Union[Transition, StateSequence],
        target: Optional[State] = None,
    ) -> int:
        if isinstance(context, Transition):
            context, target = context.context, context.target
        return self._transition_table.transition_count(context, target)

    def emission_count(
        self,
        state: Union[Emission, State],
        observation: Optional[Observation] = None,
    ) -> int:
        if isinstance(state, Emission):
            state, observation = state.state, state.observation
        return self._emission_table.emission_count(state, observation)

    def state_count(self, state: State) -> int:
        """Number of positions labeled with state, i.e. the emission denominator."""
        return self._emission_table.state_count(state)

    def get_transition_link(
        self,
        context: Union[Transition, StateSequence],
        target: Optional[State] = None,
    ) -> LinkCountData:
        if isinstance(context, Transition):
            context, target = context.context, context.target
        return self._transition_table.get_link_count(context, target)

    def get_emission_link(
        self,
        state: Union[Emission, State],
        observation: Optional[Observation] = None,
    ) -> LinkCountData:
        if isinstance(state, Emission):
            state, observation = state.state, state.observation
        return self._emission_table.get_link_count(state, observation)

    def contains(
        self,
        key: Union[StateSequence, State, Emission, Transition],
        other: Any = None,
    ) -> bool:
        if isinstance(key, Transition):
            return self._transition_table.contains_link(key.context, key.target)
        if isinstance(key, Emission):
            return self._emission_table.contains_link(key.state, key.observation)
        if isinstance(key, StateSequence):
            if other is None:
                return self._transition_table.contains_source(key)
            return self._transition_table.contains_link(key, other)
        if isinstance(key, State):
            if other is None:
                return self._emission_table.contains_source(key)
            return self._emission_table.contains_link(key, other)
        raise TypeError(f"cannot look up {type(key).__name__}")

    def contexts(self) -> Iterator[StateSequence]:
        return self._transition_table.sources()

    def states(self) -> Iterator[State]:
        return self._emission_table.sources()

    def observations(self) -> Iterator[Observation]:
        seen = set()
        for state, observation, num in self._emission_table.links():
            if observation not in seen:
                seen.add(observation)
                yield observation

    def transitions(self) -> Iterator[Tuple[Transition, int]]:
        return (
            (Transition(context, target), num)
            for context, target, num in self._transition_table.links()
        )

    def emissions(self) -> Iterator[Tuple[Emission, int]]:
        return (
            (Emission(state, observation), num)
            for state, observation, num in self._emission_table.links()
        )
