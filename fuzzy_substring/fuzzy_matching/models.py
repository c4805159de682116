"""Data models for fuzzy substring matching.

All models are frozen attrs classes: a match is produced once per call and
never mutated afterwards.
"""

from typing import Any, Mapping, Tuple

import attrs


type CharacterLimit = Mapping[str, int]
"""
Maximum allowed count per character inside a matched span.

Example: ``{" ": 6, ".": 0}`` accepts spans with at most six spaces and no dots.
Keys are compared case-insensitively. An empty mapping means no constraint.
"""


def _validate_positions(instance: "MatchResult", attribute: attrs.Attribute, value: Tuple[int, ...]) -> None:
    if not value:
        raise ValueError("MatchResult positions cannot be empty")

    if value[0] < 0:
        raise ValueError(f"MatchResult positions must be non-negative, got {value}")

    if any(current <= previous for previous, current in zip(value, value[1:])):
        raise ValueError(f"MatchResult positions must be strictly increasing, got {value}")


############
# MatchResult
############


@attrs.define(frozen=True, slots=True)
class MatchResult:
    """
    Outcome of a successful fuzzy match of a query inside a target.

    Args:
        offset: position of the first matched character
        positions: matched position for each query character, strictly increasing
        extra_chars: unmatched characters between the first and last matched positions (lower is better)
        trailing_chars: characters after the last matched position (lower is better)
    """

    offset: int = attrs.field(validator=attrs.validators.ge(0))
    positions: Tuple[int, ...] = attrs.field(converter=tuple, validator=_validate_positions)
    extra_chars: int = attrs.field(validator=attrs.validators.ge(0))
    trailing_chars: int = attrs.field(validator=attrs.validators.ge(0))

    def __attrs_post_init__(self) -> None:
        if self.offset != self.positions[0]:
            raise ValueError(f"MatchResult offset {self.offset} must equal the first position {self.positions[0]}")

        gaps = sum(current - previous - 1 for previous, current in zip(self.positions, self.positions[1:]))
        if self.extra_chars != gaps:
            raise ValueError(f"MatchResult extra_chars {self.extra_chars} must equal the gaps between positions ({gaps})")

    def to_json_summary(self) -> dict[str, Any]:
        """Compact, JSON-serialisable view of the match."""
        return {
            "offset": self.offset,
            "positions": list(self.positions),
            "extra_chars": self.extra_chars,
            "trailing_chars": self.trailing_chars,
        }


############
# RankedTarget
############


@attrs.define(frozen=True, slots=True)
class RankedTarget:
    """
    A target string paired with its match against a fixed query.

    Args:
        target: the candidate string as supplied by the caller
        result: the best match of the query inside ``target``
        index: position of ``target`` in the caller's input
    """

    target: str
    result: MatchResult
    index: int = 0

    def to_json_summary(self) -> dict[str, Any]:
        return {"target": self.target, "index": self.index, **self.result.to_json_summary()}
