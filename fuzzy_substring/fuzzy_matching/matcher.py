"""
Fuzzy substring matching of a query inside a single target.

``match_fuzzy`` ties the indexer, the enumerator and the selector together.
No match, for whatever reason, is reported as None.
"""

from aletk.utils import get_logger

from fuzzy_substring.fuzzy_matching.enumerator import enumerate_chains
from fuzzy_substring.fuzzy_matching.indexer import fold_case, index_occurrences
from fuzzy_substring.fuzzy_matching.models import CharacterLimit, MatchResult
from fuzzy_substring.fuzzy_matching.selector import select_best_chain


logger = get_logger(__name__)


def match_fuzzy(
    query: str,
    target: str,
    character_limit: CharacterLimit | None = None,
    max_chains: int | None = None,
) -> MatchResult | None:
    """Try to find ``query`` in ``target`` in a fuzzy manner.

    The query characters must appear in the target in order, not necessarily
    next to each other. Matching is case-insensitive.

    Args:
        query: the string to search with
        target: the string to search in
        character_limit: maximum count per character inside the matched span,
            e.g. ``{" ": 6, ".": 0}``; None or empty for no constraint
        max_chains: upper bound on the candidate chains explored; None for no bound

    Returns:
        The best MatchResult, or None if the query does not match
    """
    if max_chains is not None and max_chains < 1:
        raise ValueError(f"max_chains must be a positive integer, got {max_chains}")

    if not target or not query or len(target) < len(query):
        return None

    query_lower = fold_case(query)
    target_lower = fold_case(target)

    occurrences = index_occurrences(query_lower, target_lower)
    if occurrences is None:
        logger.debug(f"No occurrences for some character of {query!r} in {target!r}")
        return None

    best = select_best_chain(
        enumerate_chains(occurrences, max_chains=max_chains),
        target_lower,
        character_limit or {},
    )
    if best is None:
        logger.debug(f"No chain of {query!r} in {target!r} satisfies the character limit")
        return None

    extra_chars, chain = best
    logger.debug(f"Matched {query!r} in {target!r} at {chain} with {extra_chars} extra chars")

    return MatchResult(
        offset=chain[0],
        positions=chain,
        extra_chars=extra_chars,
        trailing_chars=len(target) - (chain[-1] + 1),
    )
