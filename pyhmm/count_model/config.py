"""
Counting configuration.

Defaults for the transition/emission counter and the sample readers.
"""

# Counter
DEFAULT_ORDER = 1  # Number of preceding states a transition is conditioned on
DEFAULT_CUTOFF = 0  # Links seen fewer times than this are pruned; 0 keeps everything
DEFAULT_COUNT_TOP_HISTORIES = True  # Also count the order+1 n-grams as histories

# Tagged text ("word/TAG word/TAG ...")
DEFAULT_TAG_SEPARATOR = "/"

# Token-per-row TSV files
TSV_SAMPLE_COLUMN = "sample_id"
TSV_OBSERVATION_COLUMN = "observation"
TSV_STATE_COLUMN = "state"
TSV_COLUMNS = [TSV_SAMPLE_COLUMN, TSV_OBSERVATION_COLUMN, TSV_STATE_COLUMN]
