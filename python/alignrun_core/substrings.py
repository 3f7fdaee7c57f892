"""Maximal common and differing substrings of two strings.

Both views come from the same decomposition of ``s1``: the runs of its LCS
alignment against ``s2`` and the gaps around them. ``min_length`` only picks
which pieces are reported; it never changes the decomposition.
"""

from __future__ import annotations

from typing import List, NamedTuple, Sequence

from .alignment import DEFAULT_MAX_CELLS
from .runs import Run, common_runs


class Segment(NamedTuple):
    """A piece of ``s1``: either a common run or a gap between runs."""

    start: int
    text: str
    common: bool


def _segments(s1: str, runs: Sequence[Run]) -> List[Segment]:
    segments: List[Segment] = []
    current = 0
    for run in runs:
        if run.start1 > current:
            segments.append(Segment(current, s1[current : run.start1], False))
        segments.append(Segment(run.start1, run.value, True))
        current = run.end1
    if current < len(s1):
        segments.append(Segment(current, s1[current:], False))
    return segments


def partition(
    s1: str,
    s2: str,
    *,
    max_cells: int | None = DEFAULT_MAX_CELLS,
) -> List[Segment]:
    """Split ``s1`` into ordered common runs and gaps.

    Joining the ``text`` of every segment gives back ``s1``.
    """

    if not s1:
        return []
    if not s2:
        return [Segment(0, s1, False)]
    return _segments(s1, common_runs(s1, s2, max_cells=max_cells))


def common_substrings(
    s1: str,
    s2: str,
    min_length: int,
    *,
    max_cells: int | None = DEFAULT_MAX_CELLS,
) -> List[str]:
    """Return the maximal common substrings of at least ``min_length`` characters.

    Results appear verbatim in both strings and follow their order in ``s1``.
    Empty inputs or ``min_length < 1`` give an empty list.
    """

    if not s1 or not s2 or min_length < 1:
        return []
    return [
        run.value
        for run in common_runs(s1, s2, max_cells=max_cells)
        if run.length >= min_length
    ]


def differing_substrings(
    s1: str,
    s2: str,
    min_length: int,
    *,
    max_cells: int | None = DEFAULT_MAX_CELLS,
) -> List[str]:
    """Return the pieces of ``s1`` outside the common runs, at least ``min_length`` long.

    An empty ``s2`` leaves all of ``s1`` as a single difference.
    """

    if not s1 or min_length < 1:
        return []
    return [
        segment.text
        for segment in partition(s1, s2, max_cells=max_cells)
        if not segment.common and len(segment.text) >= min_length
    ]
