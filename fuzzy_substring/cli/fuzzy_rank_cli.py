"""
CLI entry point for ranking candidate strings against a fuzzy query.

This is the imperative shell: it parses arguments, reads the targets, and
prints the ranked matches. All matching happens in the pure core.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Sequence, TextIO

from aletk.ResultMonad import Err
from aletk.utils import get_logger, lginf
from pydantic import ValidationError

from fuzzy_substring.fuzzy_matching.models import RankedTarget
from fuzzy_substring.procedures.ranking import RankConfig, parse_character_limit, rank_targets

lgr = get_logger(__name__)


EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_USAGE = 2


# ============================================================================
# Input / Output
# ============================================================================


def read_targets(stream: TextIO) -> List[str]:
    """One target per line; trailing newlines stripped, blank lines skipped."""
    return [line.rstrip("\r\n") for line in stream if line.strip()]


def format_ranked_target(ranked: RankedTarget) -> str:
    result = ranked.result
    return f"{result.extra_chars} {result.offset} {result.trailing_chars}\t{ranked.target}"


# ============================================================================
# CLI Argument Parsing
# ============================================================================


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Rank lines of text by how well they fuzzy-match a query."
    )

    parser.add_argument(
        "query",
        type=str,
        help="Query to search for.",
    )

    parser.add_argument(
        "--targets",
        "-t",
        type=str,
        default=None,
        help="File with one target per line (default: read from stdin).",
    )

    parser.add_argument(
        "--limit",
        "-l",
        action="append",
        default=[],
        metavar="CHAR=N",
        help="Allow at most N occurrences of CHAR inside a match. Repeatable.",
    )

    parser.add_argument(
        "--top-n",
        "-n",
        type=int,
        default=None,
        help="Only print the N best matches (default: all).",
    )

    parser.add_argument(
        "--max-chains",
        type=int,
        default=None,
        help="Upper bound on candidate chains explored per target (default: unbounded).",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print matches as a JSON array.",
    )

    return parser.parse_args(argv)


# ============================================================================
# Main CLI Entry Point (Imperative Shell)
# ============================================================================


def cli(argv: Sequence[str] | None = None, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """
    Main CLI entry point.

    Returns the process exit status: 0 if something matched, 1 if nothing
    matched, 2 on invalid arguments.
    """
    frame = "cli"
    args = parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    limit_result = parse_character_limit(args.limit)
    if isinstance(limit_result, Err):
        lgr.error(limit_result.message)
        return EXIT_USAGE

    try:
        config = RankConfig(
            character_limit=limit_result.out,
            top_n=args.top_n,
            max_chains=args.max_chains,
        )
    except ValidationError as e:
        lgr.error(f"Invalid configuration: {e}")
        return EXIT_USAGE

    if args.targets is not None:
        targets_path = Path(args.targets)
        if not targets_path.exists():
            lgr.error(f"Targets file not found: {targets_path}")
            return EXIT_USAGE
        try:
            with open(targets_path, "r", encoding="utf-8") as f:
                targets = read_targets(f)
        except (OSError, UnicodeDecodeError) as e:
            lgr.error(f"Cannot read targets file {targets_path}: {e}")
            return EXIT_USAGE
    else:
        targets = read_targets(stdin)

    lginf(frame, f"Ranking {len(targets)} target(s) against {args.query!r}", lgr)

    ranked = rank_targets(
        args.query,
        targets,
        character_limit=config.character_limit,
        max_chains=config.max_chains,
        top_n=config.top_n,
    )

    if args.json:
        stdout.write(json.dumps([item.to_json_summary() for item in ranked], ensure_ascii=False) + "\n")
    else:
        for item in ranked:
            stdout.write(format_ranked_target(item) + "\n")

    lginf(frame, f"{len(ranked)} match(es)", lgr)

    return EXIT_OK if ranked else EXIT_NO_MATCH


def main() -> None:
    sys.exit(cli())


if __name__ == "__main__":
    main()
