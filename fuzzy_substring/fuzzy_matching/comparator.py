"""
Ordering of match results, best first.

Used by callers that rank many targets against one query; never used inside a
single match.
"""

from functools import cmp_to_key
from typing import Iterable, List, Literal, Tuple

from fuzzy_substring.fuzzy_matching.models import MatchResult


def match_result_sort_key(result: MatchResult) -> Tuple[int, int, int]:
    """Sort key in ranking order: extra chars, then offset, then trailing chars."""
    return (result.extra_chars, result.offset, result.trailing_chars)


def compare_match_results(a: MatchResult, b: MatchResult) -> Literal[-1, 0, 1]:
    """
    Compare two results for sorting, better matches first.

    Precedence:
    1. Fewer extra characters between the matched characters
    2. Smaller offset (match starts earlier)
    3. Fewer trailing characters after the match

    Returns:
        -1 if ``a`` ranks before ``b``, 1 if after, 0 if they are equal on all three
    """
    if a.extra_chars != b.extra_chars:
        return -1 if a.extra_chars < b.extra_chars else 1

    if a.offset != b.offset:
        return -1 if a.offset < b.offset else 1

    if a.trailing_chars != b.trailing_chars:
        return -1 if a.trailing_chars < b.trailing_chars else 1

    # Equal matches, order does not matter
    return 0


def sort_match_results(results: Iterable[MatchResult]) -> List[MatchResult]:
    """Stable sort of ``results``, best match first."""
    return sorted(results, key=cmp_to_key(compare_match_results))
