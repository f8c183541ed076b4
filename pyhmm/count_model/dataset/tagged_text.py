from typing import Iterator, Optional
from nltk.tag import str2tuple
from pyhmm.count_model import config
from pyhmm.count_model.sample import SupervisedSample


def parse_tagged_line(
    line: str,
    sep: str = config.DEFAULT_TAG_SEPARATOR,
    line_number: Optional[int] = None,
) -> SupervisedSample:
    """
    Parses one whitespace separated "word/TAG" sentence. Tags are upper-cased the
    way nltk.tag.str2tuple does it.
    """
    pairs = []
    for token in line.split():
        observation, state = str2tuple(token, sep=sep)
        if state is None or len(observation) == 0:
            where = "" if line_number is None else f" on line {line_number}"
            raise ValueError(f"token {token!r}{where} is not of the form word{sep}TAG")
        pairs.append((observation, state))
    return SupervisedSample.from_pairs(pairs)


def read_tagged_lines(
    lines,
    sep: str = config.DEFAULT_TAG_SEPARATOR,
) -> Iterator[SupervisedSample]:
    for line_number, line in enumerate(lines, start=1):
        if len(line.strip()) == 0:
            continue
        yield parse_tagged_line(line, sep, line_number)


def read_tagged_text(
    filename: str,
    sep: str = config.DEFAULT_TAG_SEPARATOR,
    encoding: str = "utf-8",
) -> Iterator[SupervisedSample]:
    print(f"Loading {filename}...")
    num_samples = 0
    with open(filename, encoding=encoding) as file:
        for sample in read_tagged_lines(file, sep):
            num_samples += 1
            yield sample
    print(f"{num_samples} samples read from {filename}")
