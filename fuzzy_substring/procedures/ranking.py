"""
Ranks many candidate targets against a single query.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Dict, Iterable, List, Sequence

from aletk.ResultMonad import Err, Ok
from aletk.utils import get_logger
from pydantic import BaseModel, Field, field_validator

from fuzzy_substring.fuzzy_matching.comparator import compare_match_results
from fuzzy_substring.fuzzy_matching.matcher import match_fuzzy
from fuzzy_substring.fuzzy_matching.models import CharacterLimit, RankedTarget

lgr = get_logger(__name__)


class RankConfig(BaseModel):
    character_limit: Dict[str, int] = Field(default_factory=dict)
    top_n: int | None = Field(default=None, ge=1)
    max_chains: int | None = Field(default=None, ge=1)

    @field_validator("character_limit")
    @classmethod
    def validate_character_limit(cls, value: Dict[str, int]) -> Dict[str, int]:
        for character, limit in value.items():
            if not character:
                raise ValueError("Character limit keys cannot be empty.")
            if limit < 0:
                raise ValueError(f"Character limit for {character!r} must be non-negative, got {limit}.")
        return value


def parse_character_limit(specs: Sequence[str]) -> Ok[Dict[str, int]] | Err:
    """
    Parse ``CHAR=N`` specs into a character limit mapping.

    The character is everything before the last ``=``, so ``"==0"`` limits the
    ``=`` sign. Later specs for the same character override earlier ones.
    """
    parsed: Dict[str, int] = {}

    for spec in specs:
        character, separator, raw_limit = spec.rpartition("=")

        if not separator or not character:
            return Err(message=f"Invalid character limit '{spec}'. Expected CHAR=N.", code=-1)

        try:
            limit = int(raw_limit)
        except ValueError:
            return Err(message=f"Invalid count in character limit '{spec}'. Expected an integer.", code=-1)

        if limit < 0:
            return Err(message=f"Character limit '{spec}' cannot be negative.", code=-1)

        parsed[character] = limit

    return Ok(out=parsed)


def rank_targets(
    query: str,
    targets: Iterable[str],
    character_limit: CharacterLimit | None = None,
    max_chains: int | None = None,
    top_n: int | None = None,
) -> List[RankedTarget]:
    """Match ``query`` against every target and return the matches, best first.

    Targets that do not match are dropped. Matches that compare equal keep
    their input order.
    """
    ranked: List[RankedTarget] = []

    for index, target in enumerate(targets):
        result = match_fuzzy(query, target, character_limit, max_chains=max_chains)
        if result is None:
            continue
        ranked.append(RankedTarget(target=target, result=result, index=index))

    lgr.debug(f"{len(ranked)} target(s) matched {query!r}")

    ranked.sort(key=cmp_to_key(lambda a, b: compare_match_results(a.result, b.result)))

    return ranked if top_n is None else ranked[:top_n]

