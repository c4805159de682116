"""Fuzzy substring matching and ranking."""

from fuzzy_substring.fuzzy_matching import (
    MatchResult,
    compare_match_results,
    match_fuzzy,
    sort_match_results,
)

__all__ = [
    "MatchResult",
    "compare_match_results",
    "match_fuzzy",
    "sort_match_results",
]
