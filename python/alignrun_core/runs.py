"""Coalesce LCS match paths into maximal contiguous runs."""

from __future__ import annotations

import logging
from typing import List, NamedTuple, Sequence

from .alignment import DEFAULT_MAX_CELLS, Match, align
from .errors import AlignmentInvariantError

logger = logging.getLogger(__name__)


class Run(NamedTuple):
    """A block of characters matched contiguously in both strings."""

    start1: int
    start2: int
    length: int
    value: str

    @property
    def end1(self) -> int:
        return self.start1 + self.length


def extract_runs(s1: str, matches: Sequence[Match]) -> List[Run]:
    """Merge consecutive ``matches`` into maximal runs ordered by ``start1``.

    Two matches belong to the same run when both indices advance by exactly
    one. ``matches`` must be strictly increasing in both coordinates.
    """

    if not matches:
        return []

    runs: List[Run] = []
    start1, start2 = matches[0]
    length = 1
    for (prev1, prev2), (cur1, cur2) in zip(matches, matches[1:]):
        if cur1 <= prev1 or cur2 <= prev2:
            raise AlignmentInvariantError(
                f"Match ({cur1}, {cur2}) does not follow ({prev1}, {prev2})"
            )
        if cur1 == prev1 + 1 and cur2 == prev2 + 1:
            length += 1
            continue
        runs.append(Run(start1, start2, length, s1[start1 : start1 + length]))
        start1, start2 = cur1, cur2
        length = 1
    runs.append(Run(start1, start2, length, s1[start1 : start1 + length]))
    return runs


def common_runs(
    s1: str,
    s2: str,
    *,
    max_cells: int | None = DEFAULT_MAX_CELLS,
) -> List[Run]:
    """Return every maximal run of the LCS alignment, unfiltered."""

    if not s1 or not s2:
        return []
    runs = extract_runs(s1, align(s1, s2, max_cells=max_cells))
    logger.debug("Coalesced alignment into %d runs", len(runs))
    return runs
