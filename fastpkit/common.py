"""Shared constants and filter result codes."""

from enum import IntEnum

FASTP_VER = "0.21.0"

ATCG_BASES = ("A", "T", "C", "G")

# Upper bound on the number of read packs queued for processing.
PACK_NUM_LIMIT = 10_000_000

# Number of reads held in one pack.
PACK_SIZE = 1000

# Number of packs that may be held in memory before the producer waits.
PACK_IN_MEM_LIMIT = 500

# Above this number of standalone reads a warning is given.
WARN_STANDALONE_READ_LIMIT = 10000

# Number of filter result slots, including the reserved gaps.
FILTER_RESULT_TYPES = 32


class FilterResult(IntEnum):
    """Outcome of filtering a read; a larger value means a worse result."""

    PASS_FILTER = 0
    FAIL_POLY_X = 4
    FAIL_OVERLAP = 8
    FAIL_N_BASE = 12
    FAIL_LENGTH = 16
    FAIL_TOO_LONG = 17
    FAIL_QUALITY = 20
    FAIL_COMPLEXITY = 24

    @property
    def label(self) -> str:
        """The report name of this result."""
        return FAILED_TYPES[self.value]


FAILED_TYPES = (
    "passed", "", "", "",
    "failed_polyx_filter", "", "", "",
    "failed_bad_overlap", "", "", "",
    "failed_too_many_n_bases", "", "", "",
    "failed_too_short", "failed_too_long", "", "",
    "failed_quality_filter", "", "", "",
    "failed_low_complexity", "", "", "",
    "", "", "", "",
)


def failed_type_name(code) -> str:
    """Return the report name for a filter result code (empty for reserved slots)."""
    index = int(code)
    if not 0 <= index < FILTER_RESULT_TYPES:
        raise ValueError(f"filter result code out of range: {index}")
    return FAILED_TYPES[index]