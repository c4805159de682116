"""
Scoring and selection of candidate chains.
"""

from typing import Iterable, Sequence, Tuple

from fuzzy_substring.fuzzy_matching.indexer import find_occurrences, fold_case
from fuzzy_substring.fuzzy_matching.models import CharacterLimit


def calculate_extra_chars(chain: Sequence[int]) -> int:
    """Number of unmatched characters between consecutive matched positions.

    Examples:
        [0, 1, 2, 3] => 0
        [0, 5, 7]    => 5
        [9, 12, 13]  => 2
    """
    return sum(current - previous - 1 for previous, current in zip(chain, chain[1:]))


def within_character_limit(target: str, chain: Sequence[int], character_limit: CharacterLimit) -> bool:
    """Check the span ``target[chain[0]:chain[-1]]`` against the configured limits.

    The final matched character is outside the span. Keys are case-folded, and
    ``target`` is expected to be case-folded already. Empty keys are ignored.
    """
    if not character_limit:
        return True

    span = target[chain[0] : chain[-1]]

    for character, limit in character_limit.items():
        if not character:
            continue

        if len(find_occurrences(span, fold_case(character))) > limit:
            return False

    return True


def select_best_chain(
    chains: Iterable[Tuple[int, ...]],
    target: str,
    character_limit: CharacterLimit,
) -> Tuple[int, Tuple[int, ...]] | None:
    """Pick the chain with the fewest extra characters.

    Chains failing the character limit are skipped. On a tie the chain seen
    first wins. Scanning stops at the first chain with zero extra characters.

    Returns:
        ``(extra_chars, chain)`` of the best chain, or None if no chain survives
    """
    best: Tuple[int, Tuple[int, ...]] | None = None

    for chain in chains:
        if not within_character_limit(target, chain, character_limit):
            continue

        extra_chars = calculate_extra_chars(chain)
        if best is None or extra_chars < best[0]:
            best = (extra_chars, chain)

        # Nothing beats a contiguous match
        if best[0] == 0:
            break

    return best
