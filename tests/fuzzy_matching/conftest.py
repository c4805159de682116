"""Shared fixtures for fuzzy matching tests."""

from typing import Tuple

import pytest

from fuzzy_substring.fuzzy_matching.models import MatchResult


@pytest.fixture
def result_contiguous_late() -> MatchResult:
    """Contiguous match starting at offset 5."""
    return MatchResult(offset=5, positions=(5, 6), extra_chars=0, trailing_chars=3)


@pytest.fixture
def result_gapped_early() -> MatchResult:
    """Match with one gap, starting at offset 0."""
    return MatchResult(offset=0, positions=(0, 2), extra_chars=1, trailing_chars=7)


@pytest.fixture
def result_gapped_late() -> MatchResult:
    """Match with one gap, starting at offset 4."""
    return MatchResult(offset=4, positions=(4, 6), extra_chars=1, trailing_chars=0)


@pytest.fixture
def result_gapped_early_short_tail() -> MatchResult:
    """Same gaps and offset as ``result_gapped_early`` but a shorter tail."""
    return MatchResult(offset=0, positions=(0, 2), extra_chars=1, trailing_chars=2)


@pytest.fixture
def sample_results(
    result_contiguous_late: MatchResult,
    result_gapped_early: MatchResult,
    result_gapped_late: MatchResult,
    result_gapped_early_short_tail: MatchResult,
) -> Tuple[MatchResult, ...]:
    """Unsorted results for ranking tests."""
    return (result_gapped_late, result_gapped_early, result_contiguous_late, result_gapped_early_short_tail)
