"""Fuzzy substring matching.

This package finds a short query inside a longer target with the query's
characters in order but not necessarily contiguous, and orders the resulting
matches for ranking.
"""

from fuzzy_substring.fuzzy_matching.comparator import (
    compare_match_results,
    match_result_sort_key,
    sort_match_results,
)
from fuzzy_substring.fuzzy_matching.enumerator import enumerate_chains
from fuzzy_substring.fuzzy_matching.indexer import find_occurrences, fold_case, index_occurrences
from fuzzy_substring.fuzzy_matching.matcher import match_fuzzy
from fuzzy_substring.fuzzy_matching.models import (
    CharacterLimit,
    MatchResult,
    RankedTarget,
)
from fuzzy_substring.fuzzy_matching.selector import (
    calculate_extra_chars,
    select_best_chain,
    within_character_limit,
)

__all__ = [
    "CharacterLimit",
    "MatchResult",
    "RankedTarget",
    "calculate_extra_chars",
    "compare_match_results",
    "enumerate_chains",
    "find_occurrences",
    "fold_case",
    "index_occurrences",
    "match_fuzzy",
    "match_result_sort_key",
    "select_best_chain",
    "sort_match_results",
    "within_character_limit",
]
