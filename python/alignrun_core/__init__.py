"""Core utilities for LCS based string comparison."""

from .errors import (
    AlignmentError,
    AlignmentLimitError,
    AlignmentInvariantError,
)
from .alignment import (
    DEFAULT_MAX_CELLS,
    check_alignment_size,
    build_alignment_table,
    backtrack_matches,
    align,
)
from .runs import (
    Run,
    extract_runs,
    common_runs,
)
from .substrings import (
    Segment,
    partition,
    common_substrings,
    differing_substrings,
)

__all__ = [
    "AlignmentError",
    "AlignmentLimitError",
    "AlignmentInvariantError",
    "DEFAULT_MAX_CELLS",
    "check_alignment_size",
    "build_alignment_table",
    "backtrack_matches",
    "align",
    "Run",
    "extract_runs",
    "common_runs",
    "Segment",
    "partition",
    "common_substrings",
    "differing_substrings",
]
