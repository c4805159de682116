"""
Occurrence indexing: where does each query character occur in the target?

Pure functions, no I/O and no logging.
"""

from typing import List


def fold_case(text: str) -> str:
    """Lowercase ``text`` one character at a time, keeping its length.

    Characters whose lowercase form is not a single character (such as "İ")
    are kept as they are, so positions in the result are positions in ``text``.
    """
    return "".join(c.lower() if len(c.lower()) == 1 else c for c in text)


def find_occurrences(target: str, needle: str, start: int = 0) -> List[int]:
    """Every position at or after ``start`` where ``needle`` occurs in ``target``.

    Overlapping occurrences are all reported.

    Examples:
        find_occurrences("aaaaa", "b")      => []
        find_occurrences("aabaaba", "b")    => [2, 5]
        find_occurrences("aabaaba", "b", 3) => [5]

    Args:
        target: string to search in
        needle: string to look for (must not be empty)
        start: first position to consider

    Returns:
        Ascending list of positions
    """
    if not needle:
        raise ValueError("Cannot search for an empty string")

    positions: List[int] = []
    match_index = target.find(needle, start)
    while match_index >= 0:
        positions.append(match_index)
        match_index = target.find(needle, match_index + 1)

    return positions


def index_occurrences(query: str, target: str) -> List[List[int]] | None:
    """Build the candidate positions for every query character.

    Both strings are expected to be case-folded already (see ``fold_case``).
    The search window of character ``i`` starts one past the *first*
    occurrence of character ``i - 1``, not past each of its occurrences. Occurrences of a later
    character that lie before that first occurrence never become candidates.

    Returns:
        One ascending position list per query character, or None as soon as a
        character has no occurrence inside its window
    """
    occurrences_per_char: List[List[int]] = []

    for character in query:
        start = occurrences_per_char[-1][0] + 1 if occurrences_per_char else 0
        occurrences = find_occurrences(target, character, start)

        if not occurrences:
            return None

        occurrences_per_char.append(occurrences)

    return occurrences_per_char
