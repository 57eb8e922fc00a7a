from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the raw argparse
namespace into configuration overrides for the summary pipeline.
"""

import argparse
from typing import Any, Dict

from booksummary import __version__
from booksummary.domain.constants import (
    APP_NAME,
    DEFAULT_NOTES_DIR,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_TITLE,
)

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the book-summary CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Generate a SUMMARY.md table of contents for mdBook or GitBook.",
    )

    # --- Book Layout ---
    p.add_argument(
        "-n", "--notesdir",
        dest="notes_dir",
        default=None,
        help=f"Notes dir where to parse all your notes from (default: {DEFAULT_NOTES_DIR}).",
    )
    p.add_argument(
        "-f", "--format",
        dest="format",
        default=None,
        help="Output format: 'md' (mdBook) or 'git' (GitBook). Default: md.",
    )
    p.add_argument(
        "-t", "--title",
        dest="title",
        default=None,
        help=f"Title for the summary (default: {DEFAULT_TITLE}).",
    )
    p.add_argument(
        "-s", "--sort",
        dest="sort",
        nargs="+",
        action="extend",
        default=None,
        metavar="CHAPTER",
        help="Start with the following chapters (space separated).",
    )
    p.add_argument(
        "-o", "--outputfile",
        dest="output_file",
        default=None,
        help=f"Output file, relative to the notes dir (default: {DEFAULT_OUTPUT_FILE}).",
    )

    # --- Runtime Constraints and Safety ---
    p.add_argument(
        "-y", "--overwrite",
        action="store_true",
        help="Overwrite an existing summary file without asking.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the summary to stdout instead of writing it.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration as JSON and exit.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Verbose mode (-v, -vv, -vvv).",
    )
    p.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this (rotating) file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Unset flags map to None so the merge step can tell them apart from
    explicit values.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    return {
        "notes_dir": args.notes_dir,
        "format": args.format,
        "title": args.title,
        "sort": list(args.sort) if args.sort else None,
        "output_file": args.output_file,
    }
