"""Tests for the fuzzy rank CLI module."""

import io
import json
from pathlib import Path

import pytest

from fuzzy_substring.cli.fuzzy_rank_cli import (
    EXIT_NO_MATCH,
    EXIT_OK,
    EXIT_USAGE,
    cli,
    format_ranked_target,
    parse_args,
    read_targets,
)
from fuzzy_substring.fuzzy_matching.models import MatchResult, RankedTarget


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def targets_text() -> str:
    return "foo bar\nxyz\n\nfb\nf..b\n"


@pytest.fixture
def targets_file(tmp_path: Path, targets_text: str) -> Path:
    path = tmp_path / "targets.txt"
    path.write_text(targets_text, encoding="utf-8")
    return path


# ============================================================================
# Helper tests
# ============================================================================


class TestReadTargets:
    def test_skips_blank_lines_and_strips_newlines(self, targets_text: str) -> None:
        assert read_targets(io.StringIO(targets_text)) == ["foo bar", "xyz", "fb", "f..b"]

    def test_keeps_inner_whitespace(self) -> None:
        assert read_targets(io.StringIO("  a b  \r\n")) == ["  a b  "]


class TestFormatRankedTarget:
    def test_format(self) -> None:
        result = MatchResult(offset=0, positions=(0, 4), extra_chars=3, trailing_chars=2)
        assert format_ranked_target(RankedTarget(target="foo bar", result=result)) == "3 0 2\tfoo bar"


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_args(["fb"])
        assert args.query == "fb"
        assert args.targets is None
        assert args.limit == []
        assert args.top_n is None
        assert args.max_chains is None
        assert args.json is False

    def test_repeated_limits(self) -> None:
        args = parse_args(["fb", "-l", " =0", "--limit", ".=1"])
        assert args.limit == [" =0", ".=1"]


# ============================================================================
# cli tests
# ============================================================================


class TestCli:
    def test_ranks_stdin(self, targets_text: str) -> None:
        out = io.StringIO()
        status = cli(["fb"], stdin=io.StringIO(targets_text), stdout=out)
        assert status == EXIT_OK
        assert out.getvalue().splitlines() == ["0 0 0\tfb", "2 0 0\tf..b", "3 0 2\tfoo bar"]

    def test_reads_targets_file(self, targets_file: Path) -> None:
        out = io.StringIO()
        status = cli(["fb", "--targets", str(targets_file), "-n", "1"], stdout=out)
        assert status == EXIT_OK
        assert out.getvalue().splitlines() == ["0 0 0\tfb"]

    def test_json_output(self, targets_text: str) -> None:
        out = io.StringIO()
        status = cli(["fb", "--json"], stdin=io.StringIO(targets_text), stdout=out)
        assert status == EXIT_OK
        parsed = json.loads(out.getvalue())
        assert [item["target"] for item in parsed] == ["fb", "f..b", "foo bar"]
        assert parsed[2]["positions"] == [0, 4]

    def test_character_limit(self, targets_text: str) -> None:
        out = io.StringIO()
        status = cli(["fb", "-l", " =0"], stdin=io.StringIO(targets_text), stdout=out)
        assert status == EXIT_OK
        assert out.getvalue().splitlines() == ["0 0 0\tfb", "2 0 0\tf..b"]

    def test_no_match(self, targets_text: str) -> None:
        out = io.StringIO()
        status = cli(["qq"], stdin=io.StringIO(targets_text), stdout=out)
        assert status == EXIT_NO_MATCH
        assert out.getvalue() == ""

    def test_invalid_limit(self, targets_text: str) -> None:
        out = io.StringIO()
        status = cli(["fb", "-l", "nope"], stdin=io.StringIO(targets_text), stdout=out)
        assert status == EXIT_USAGE
        assert out.getvalue() == ""

    def test_invalid_top_n(self, targets_text: str) -> None:
        status = cli(["fb", "-n", "0"], stdin=io.StringIO(targets_text), stdout=io.StringIO())
        assert status == EXIT_USAGE

    def test_missing_targets_file(self, tmp_path: Path) -> None:
        status = cli(["fb", "-t", str(tmp_path / "missing.txt")], stdout=io.StringIO())
        assert status == EXIT_USAGE

    def test_targets_file_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.txt"
        path.write_bytes("café\n".encode("latin-1"))
        out = io.StringIO()
        status = cli(["fb", "-t", str(path)], stdout=out)
        assert status == EXIT_USAGE
        assert out.getvalue() == ""

    def test_targets_path_is_directory(self, tmp_path: Path) -> None:
        status = cli(["fb", "-t", str(tmp_path)], stdout=io.StringIO())
        assert status == EXIT_USAGE
