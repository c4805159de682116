"""
Enumeration of candidate chains over indexed occurrences.

A chain holds one target position per query character, strictly increasing.
Chains are kept in an arena (a list indexed by chain id) and driven by an
explicit stack of ``(chain_id, depth)`` entries instead of recursion.
"""

from bisect import bisect_right
from typing import Iterator, List, Sequence, Tuple


def enumerate_chains(
    occurrences: Sequence[Sequence[int]],
    max_chains: int | None = None,
) -> Iterator[Tuple[int, ...]]:
    """Lazily produce every complete chain reachable from the indexed occurrences.

    One chain is seeded per occurrence of the first query character. At each
    following depth a chain is extended once, by the first occurrence strictly
    greater than its last position; chains are never forked. A chain that
    cannot be extended is a dead end and is dropped.

    Chains are yielded lazily in seed order, so a consumer that stops early
    also stops the enumeration.

    Args:
        occurrences: ascending position lists, one per query character
        max_chains: maximum number of seeded chains; None for no bound

    Returns:
        Iterator over complete chains, one position per query character
    """
    if max_chains is not None and max_chains < 1:
        raise ValueError(f"max_chains must be a positive integer, got {max_chains}")

    return _walk_chains(occurrences, max_chains)


def _walk_chains(occurrences: Sequence[Sequence[int]], max_chains: int | None) -> Iterator[Tuple[int, ...]]:
    if not occurrences:
        return

    depth_count = len(occurrences)
    seeds = occurrences[0] if max_chains is None else occurrences[0][:max_chains]

    chains: List[List[int]] = [[position] for position in seeds]
    # Reversed so that popping walks the seeds in ascending order
    stack: List[Tuple[int, int]] = [(chain_id, 1) for chain_id in reversed(range(len(chains)))]

    while stack:
        chain_id, depth = stack.pop()
        chain = chains[chain_id]

        if depth == depth_count:
            yield tuple(chain)
            continue

        candidates = occurrences[depth]
        next_index = bisect_right(candidates, chain[-1])
        if next_index == len(candidates):
            continue

        chain.append(candidates[next_index])
        stack.append((chain_id, depth + 1))
