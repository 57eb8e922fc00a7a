from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, resolution of the
configuration hierarchy (CLI flag > book config file > default), the
interactive overwrite confirmation, pipeline execution and reporting.
"""

import json
import logging
import os
import sys
from typing import Any, Callable, Dict, List, Optional

from booksummary.core.pipeline.engine import run_pipeline
from booksummary.core.pipeline.validator import validate_config
from booksummary.domain.book_models import BookFormat, UnknownFormatError
from booksummary.domain.config import ConfigError, get_default_config, load_book_config
from booksummary.domain.pipeline_models import SummaryResult
from booksummary.infra.fs import get_output_path, normalize_path, output_exists
from booksummary.infra.logging import (
    LoggingConfig,
    configure_logging,
    level_for_verbosity,
)
from booksummary.interface.cli import args as cli_args

logger = logging.getLogger(__name__)

_YES_ANSWERS = ("y", "Y", "")
_NO_ANSWERS = ("n", "N")

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        ask: Callable[[str], str] = input,
) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        ask: Prompt function used for the overwrite confirmation.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 usage error).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional rotating file)
    logging_conf = LoggingConfig(
        level=level_for_verbosity(args.verbose, args.debug),
        console=True,
        log_file=args.log_file,
    )
    configure_logging(logging_conf)

    logger.debug(f"CLI arguments: {vars(args)}")

    # 3. Resolve configuration hierarchy
    overrides = cli_args.args_to_overrides(args)
    try:
        raw_conf = _resolve_config(overrides)
        clean_conf, warnings = validate_config(raw_conf, strict=False)
    except UnknownFormatError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except ConfigError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(_jsonable(clean_conf), ensure_ascii=False, indent=2))
        return 0

    # 4. Pre-flight verification
    notes_dir = normalize_path(clean_conf["notes_dir"], os.getcwd())
    if not os.path.isdir(notes_dir):
        msg = f"Path {notes_dir} not found!"
        logger.error(msg)
        print(f"Error: {msg}", file=sys.stderr)
        return 1

    overwrite = bool(args.overwrite)
    output_path = get_output_path(notes_dir, clean_conf["output_file"])
    if output_exists(output_path) and not overwrite and not args.dry_run:
        if not confirm_overwrite(clean_conf["output_file"], ask):
            logger.info("Overwrite declined. Nothing written.")
            return 0
        overwrite = True

    # 5. Pipeline execution phase
    try:
        result = run_pipeline(clean_conf, overwrite=overwrite, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    # 6. Output rendering phase
    _print_report(result, verbose=args.verbose)
    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _resolve_config(overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Layer defaults, book config file values and CLI overrides.

    The book config file is looked up in the notes dir given on the command
    line (or the default one) and read according to the selected dialect.

    Raises:
        UnknownFormatError: If the dialect selector is not recognized.
        ConfigError: If a book config file cannot be parsed.
    """
    conf = get_default_config()

    book_format = BookFormat.parse(overrides.get("format") or conf["format"])
    lookup_dir = normalize_path(overrides.get("notes_dir"), conf["notes_dir"])
    conf.update(load_book_config(lookup_dir, book_format))

    return _merge_config(conf, overrides)


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of the non-None overrides into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out


def confirm_overwrite(file_name: str, ask: Callable[[str], str] = input) -> bool:
    """
    Ask until the user accepts (y/Y/empty) or declines (n/N) the overwrite.

    End of input counts as a refusal.
    """
    prompt = f"File {file_name} already exists, do you want to overwrite it? [Y/n] "
    while True:
        try:
            answer = ask(prompt).strip()
        except EOFError:
            return False
        if answer in _YES_ANSWERS:
            return True
        if answer in _NO_ANSWERS:
            return False

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_report(result: SummaryResult, verbose: int = 0) -> None:
    """Print the outcome of a run; the summary itself on a dry run."""
    for message in result.rejected:
        print(f"Warning: {message}", file=sys.stderr)

    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return

    if result.dry_run:
        sys.stdout.write(result.content)
        return

    print(f"Successfully created {result.output_path}")
    if verbose > 0:
        print(f"{result.entries} note(s), format: {result.book_format}, title: {result.title!r}")


def _jsonable(conf: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(conf)
    fmt = out.get("format")
    if isinstance(fmt, BookFormat):
        out["format"] = fmt.value
    return out

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
