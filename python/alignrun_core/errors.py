"""Exceptions raised by the alignment engine."""

from __future__ import annotations


class AlignmentError(Exception):
    """Base class for alignment failures."""


class AlignmentLimitError(AlignmentError, ValueError):
    """The alignment table for the given inputs would exceed ``max_cells``."""

    def __init__(self, len1: int, len2: int, max_cells: int) -> None:
        self.len1 = len1
        self.len2 = len2
        self.max_cells = max_cells
        super().__init__(
            f"Alignment of {len1} x {len2} characters needs {len1 * len2} cells, "
            f"above the limit of {max_cells}"
        )


class AlignmentInvariantError(AlignmentError, RuntimeError):
    """Backtracking produced a match path that is not a valid LCS."""
