"""LCS alignment table and match path recovery."""

from __future__ import annotations

import logging
from typing import List, Tuple

import numpy as np

from .errors import AlignmentInvariantError, AlignmentLimitError

logger = logging.getLogger(__name__)

Match = Tuple[int, int]  # (index in s1, index in s2)

# Upper bound on len(s1) * len(s2); the table holds one int32 per cell, so
# the default caps it at 100 MB. LCS lengths never exceed min(len1, len2).
DEFAULT_MAX_CELLS = 25_000_000


def check_alignment_size(len1: int, len2: int, max_cells: int | None) -> None:
    """Raise :class:`AlignmentLimitError` if the table would exceed ``max_cells``.

    ``None`` disables the check.
    """

    if max_cells is not None and len1 * len2 > max_cells:
        raise AlignmentLimitError(len1, len2, max_cells)


def _code_points(text: str) -> np.ndarray:
    return np.fromiter(map(ord, text), dtype=np.int32, count=len(text))


def build_alignment_table(
    s1: str,
    s2: str,
    *,
    max_cells: int | None = DEFAULT_MAX_CELLS,
) -> np.ndarray:
    """Return the LCS length table for every prefix pair of ``s1`` and ``s2``.

    ``table[i, j]`` is the length of the longest common subsequence of
    ``s1[:i]`` and ``s2[:j]``; row 0 and column 0 are zero.

    Each row is filled in one numpy step. With ``prev`` the row above, the
    candidate for column ``j`` is ``prev[j-1] + 1`` on a character match and
    ``prev[j]`` otherwise; the row is the running maximum of the candidates.
    A match candidate is never below its left neighbour, so this equals the
    usual cell-by-cell recurrence.
    """

    len1, len2 = len(s1), len(s2)
    check_alignment_size(len1, len2, max_cells)

    table = np.zeros((len1 + 1, len2 + 1), dtype=np.int32)
    if len1 == 0 or len2 == 0:
        return table

    codes1 = _code_points(s1)
    codes2 = _code_points(s2)
    for i in range(1, len1 + 1):
        prev = table[i - 1]
        candidate = np.where(codes2 == codes1[i - 1], prev[:-1] + 1, prev[1:])
        table[i, 1:] = np.maximum.accumulate(candidate)

    logger.debug("Built %dx%d alignment table, LCS length %d", len1 + 1, len2 + 1, table[len1, len2])
    return table


def backtrack_matches(s1: str, s2: str, table: np.ndarray) -> List[Match]:
    """Walk ``table`` from its far corner and return one LCS as index pairs.

    Ties between the upper and left neighbours move up (skipping a character
    of ``s1``). When several optimal alignments exist this rule decides which
    one, and therefore which runs, is reported. The returned pairs are in
    ascending order.
    """

    i, j = len(s1), len(s2)
    if table.shape != (i + 1, j + 1):
        raise AlignmentInvariantError(
            f"Table shape {table.shape} does not fit inputs of length {i} and {j}"
        )

    matches: List[Match] = []
    while i > 0 and j > 0:
        if s1[i - 1] == s2[j - 1]:
            matches.append((i - 1, j - 1))
            i -= 1
            j -= 1
        elif table[i - 1, j] >= table[i, j - 1]:
            i -= 1
        else:
            j -= 1
    matches.reverse()

    expected = int(table[len(s1), len(s2)])
    if len(matches) != expected:
        raise AlignmentInvariantError(
            f"Backtracking recovered {len(matches)} matches, table reports {expected}"
        )
    for (prev1, prev2), (cur1, cur2) in zip(matches, matches[1:]):
        if cur1 <= prev1 or cur2 <= prev2:
            raise AlignmentInvariantError(
                f"Match ({cur1}, {cur2}) does not follow ({prev1}, {prev2})"
            )
    return matches


def align(
    s1: str,
    s2: str,
    *,
    max_cells: int | None = DEFAULT_MAX_CELLS,
) -> List[Match]:
    """Return the ascending LCS match path of ``s1`` against ``s2``."""

    table = build_alignment_table(s1, s2, max_cells=max_cells)
    matches = backtrack_matches(s1, s2, table)
    logger.debug("Recovered %d matches", len(matches))
    return matches
