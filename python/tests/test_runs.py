"""Tests for run extraction."""

import pytest

from alignrun_core.errors import AlignmentInvariantError
from alignrun_core.runs import Run, common_runs, extract_runs


def test_consecutive_matches_merge():
    """Matches advancing together by one form a single run."""
    runs = extract_runs("abcxdef", [(0, 0), (1, 1), (2, 2), (4, 4), (5, 5), (6, 6)])

    assert runs == [Run(0, 0, 3, "abc"), Run(4, 4, 3, "def")]
    assert runs[1].end1 == 7


def test_shift_in_second_string_splits_run():
    """A run breaks when only one index advances by one."""
    runs = extract_runs("abcd", [(0, 0), (1, 1), (2, 3), (3, 4)])

    assert [(r.start1, r.start2, r.length) for r in runs] == [(0, 0, 2), (2, 3, 2)]


def test_single_and_empty_match_lists():
    """One match is one run; no matches is no runs."""
    assert extract_runs("xyz", [(1, 5)]) == [Run(1, 5, 1, "y")]
    assert extract_runs("xyz", []) == []


def test_non_increasing_matches_are_rejected():
    """Out of order matches cannot come from a valid alignment."""
    with pytest.raises(AlignmentInvariantError):
        extract_runs("abc", [(1, 1), (1, 2)])
    with pytest.raises(AlignmentInvariantError):
        extract_runs("abc", [(0, 2), (1, 1)])


def test_common_runs_from_strings():
    """Runs are found straight from the two strings."""
    runs = common_runs("Hello there, how are you", "Hello there how are you")

    assert [r.value for r in runs] == ["Hello there", " how are you"]
    assert [(r.start1, r.start2) for r in runs] == [(0, 0), (12, 11)]


def test_common_runs_empty_inputs():
    """Nothing is aligned when either string is empty."""
    assert common_runs("", "abc") == []
    assert common_runs("abc", "") == []


if __name__ == "__main__":
    pytest.main([__file__])
