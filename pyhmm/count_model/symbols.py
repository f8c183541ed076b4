from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, Tuple, Type, Union


@dataclass(slots=True, frozen=True, eq=True)
class State:
    value: Any  # the interned label
    index: int = field(default=-1, compare=False)  # dictionary id, -1 when not indexed

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True, frozen=True, eq=True)
class Observation:
    value: Any
    index: int = field(default=-1, compare=False)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True, frozen=True, eq=True)
class SymbolSequence:
    """
    Immutable run of symbols, hashable by content so it can key a count table.
    Slicing returns the same sequence type.
    """

    elements: Tuple[Any, ...]
    element_type: ClassVar[Type] = object

    def __post_init__(self) -> None:
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))

    @classmethod
    def of(cls, *values) -> "SymbolSequence":
        return cls(tuple(cls.element_type(value) for value in values))

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator:
        return iter(self.elements)

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return type(self)(self.elements[index])
        return self.elements[index]

    def __str__(self) -> str:
        return " ".join(str(element) for element in self.elements)


@dataclass(slots=True, frozen=True, eq=True)
class StateSequence(SymbolSequence):
    element_type: ClassVar[Type] = State


@dataclass(slots=True, frozen=True, eq=True)
class ObservationSequence(SymbolSequence):
    element_type: ClassVar[Type] = Observation


@dataclass(slots=True, frozen=True, eq=True)
class Transition:
    context: StateSequence  # the preceding states
    target: State  # the state that follows them

    @property
    def order(self) -> int:
        return len(self.context)

    def __str__(self) -> str:
        return f"{self.context}->{self.target}"


@dataclass(slots=True, frozen=True, eq=True)
class Emission:
    state: State
    observation: Observation

    def __str__(self) -> str:
        return f"{self.state}->{self.observation}"

