from __future__ import annotations

import pytest

from pyhmm.count_model.dataset.tagged_text import (
    parse_tagged_line,
    read_tagged_lines,
    read_tagged_text,
)
from pyhmm.count_model.symbols import Observation, ObservationSequence, State, StateSequence
from pyhmm.count_model.transition_emission_counter import TransitionEmissionCounter


def test_parse_tagged_line_upper_cases_tags() -> None:
    sample = parse_tagged_line("the/dt dog/NN barks/vbz")

    assert sample.state_sequence == StateSequence.of("DT", "NN", "VBZ")
    assert sample.observation_sequence == ObservationSequence.of("the", "dog", "barks")


def test_parse_tagged_line_splits_on_the_last_separator() -> None:
    sample = parse_tagged_line("1/2/CD")

    assert sample.observation_sequence == ObservationSequence.of("1/2")
    assert sample.state_sequence == StateSequence.of("CD")


def test_custom_separator() -> None:
    sample = parse_tagged_line("the_DT dog_NN", sep="_")

    assert sample.state_sequence == StateSequence.of("DT", "NN")


@pytest.mark.parametrize("line", ["the dog/NN", "/NN"])
def test_malformed_tokens_are_rejected(line: str) -> None:
    with pytest.raises(ValueError, match="line 3"):
        parse_tagged_line(line, line_number=3)


def test_read_tagged_lines_skips_blank_lines() -> None:
    samples = list(read_tagged_lines(["a/X b/Y\n", "\n", "c/X\n"]))

    assert [len(sample) for sample in samples] == [2, 1]


def test_read_tagged_text_feeds_the_counter(tmp_path, capsys) -> None:
    path = tmp_path / "train.txt"
    path.write_text("the/DT dog/NN\nthe/DT cat/NN\n", encoding="utf-8")

    counter = TransitionEmissionCounter.from_samples(read_tagged_text(str(path)))

    assert counter.transition_count(StateSequence.of("DT"), State("NN")) == 2
    assert counter.emission_count(State("DT"), Observation("the")) == 2
    assert "2 samples read" in capsys.readouterr().out
