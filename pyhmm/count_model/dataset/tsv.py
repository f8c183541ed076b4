from typing import List
import pandas
from pyhmm.count_model import config
from pyhmm.count_model.sample import SupervisedSample


def load_tsv_file(filename: str, sep: str = "\t") -> pandas.DataFrame:
    """Reads a token-per-row file with sample id, observation and state columns."""
    return pandas.read_csv(
        filename,
        sep=sep,
        names=config.TSV_COLUMNS,
        dtype=str,
        keep_default_na=False,
        quoting=3,  # csv.QUOTE_NONE, tokens may be quote characters
    )


def frame_to_samples(df: pandas.DataFrame) -> List[SupervisedSample]:
    samples = []
    for sample_id, group in df.groupby(config.TSV_SAMPLE_COLUMN, sort=False):
        samples.append(
            SupervisedSample.from_pairs(
                zip(
                    group[config.TSV_OBSERVATION_COLUMN],
                    group[config.TSV_STATE_COLUMN],
                )
            )
        )
    return samples


def read_tsv_samples(filename: str, sep: str = "\t") -> List[SupervisedSample]:
    print(f"Loading {filename}...")
    samples = frame_to_samples(load_tsv_file(filename, sep))
    print(f"{len(samples)} samples read from {filename}")
    return samples
