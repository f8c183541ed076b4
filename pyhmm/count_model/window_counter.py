from typing import Iterator, List, Tuple, TypeVar
from pyhmm.count_model.symbols import SymbolSequence

SequenceType = TypeVar("SequenceType", bound=SymbolSequence)


def enumerate_windows(
    sequence: SequenceType,
    length: int,
) -> Iterator[Tuple[int, SequenceType]]:
    """
    Yields (start, window) for every contiguous window of the given length, in
    order of start position. Nothing is yielded when length > len(sequence).
    """
    if length < 1:
        raise ValueError(f"window length must be at least 1: {length}")
    for start in range(len(sequence) - length + 1):
        yield start, sequence[start : start + length]


def generate_windows(
    sequence: SequenceType,
    length: int,
) -> List[SequenceType]:
    return [window for start, window in enumerate_windows(sequence, length)]
