from dataclasses import dataclass
import numpy
import pandas
from pyhmm.count_model.link_counter import LinkCounter
from pyhmm.count_model.transition_emission_counter import TransitionEmissionCounter


@dataclass
class CountSummary:
    entries: int  # sources in the table
    links: int  # (source, destination) pairs
    total: int  # sum of link counts
    mean: float
    max: int
    singletons: int  # links seen exactly once


def summarize_table(table: LinkCounter) -> CountSummary:
    counts = numpy.fromiter(
        (num for src, dst, num in table.links()),
        dtype=numpy.int64,
    )
    if counts.size == 0:
        return CountSummary(len(table), 0, 0, 0.0, 0, 0)
    return CountSummary(
        entries=len(table),
        links=int(counts.size),
        total=int(counts.sum()),
        mean=float(counts.mean()),
        max=int(counts.max()),
        singletons=int(numpy.count_nonzero(counts == 1)),
    )


def _links_frame(table: LinkCounter, src_name: str, dst_name: str) -> pandas.DataFrame:
    rows = [
        (src, dst, num, source_data.total)
        for src, source_data in table.items()
        for dst, num in source_data.destinations()
    ]
    return pandas.DataFrame(
        rows,
        columns=[src_name, dst_name, "count", "total"],
    )


def transition_frame(counter: TransitionEmissionCounter) -> pandas.DataFrame:
    """One row per (context, target) with its count and the context's history count."""
    df = _links_frame(counter.transition_table, "context", "target")
    df["order"] = df["context"].map(len).astype("int32")
    return df


def emission_frame(counter: TransitionEmissionCounter) -> pandas.DataFrame:
    return _links_frame(counter.emission_table, "state", "observation")
