from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Multi-value chapter ordering.
3. Unset flags staying None so they do not mask config file values.
"""

import pytest

from booksummary.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_value_flags_mapping() -> None:
    args = parse_args([
        "-n", "/notes",
        "-f", "git",
        "-t", "My Book",
        "-o", "TOC.md",
    ])

    overrides = args_to_overrides(args)

    assert overrides["notes_dir"] == "/notes"
    assert overrides["format"] == "git"
    assert overrides["title"] == "My Book"
    assert overrides["output_file"] == "TOC.md"


def test_cli_sort_accepts_several_values_and_repeats() -> None:
    args = parse_args(["-s", "part4", "part3", "--sort", "part1"])

    assert args_to_overrides(args)["sort"] == ["part4", "part3", "part1"]


def test_cli_defaults_are_none_in_overrides() -> None:
    overrides = args_to_overrides(parse_args([]))

    assert overrides == {
        "notes_dir": None,
        "format": None,
        "title": None,
        "sort": None,
        "output_file": None,
    }


def test_cli_runtime_flags() -> None:
    args = parse_args(["-y", "--dry-run", "-vvv", "-d", "--log-file", "run.log"])

    assert args.overwrite is True
    assert args.dry_run is True
    assert args.verbose == 3
    assert args.debug is True
    assert args.log_file == "run.log"


def test_cli_version_exits_cleanly(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        parse_args(["--version"])

    assert exc_info.value.code == 0
    assert "book-summary" in capsys.readouterr().out
