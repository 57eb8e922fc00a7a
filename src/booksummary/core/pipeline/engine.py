from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates one summary run:
1. Validates configuration and the notes directory.
2. Enumerates the markdown notes.
3. Builds the book tree and renders the summary.
4. Checks for an existing summary file.
5. Writes the summary (unless simulating).
"""

import logging
import os
from typing import Any, Dict, Iterable, List, Optional, Sequence

from booksummary.core.analysis.book_builder import build_book
from booksummary.core.analysis.summary_renderer import render_summary
from booksummary.core.pipeline.validator import validate_config
from booksummary.core.services.scanner import list_note_entries
from booksummary.domain.book_models import BookFormat, MalformedPathError
from booksummary.domain.pipeline_models import (
    SummaryResult,
    create_error_result,
    create_success_result,
)
from booksummary.infra.fs import (
    get_output_path,
    normalize_path,
    output_exists,
    write_text_file,
)

logger = logging.getLogger(__name__)


def generate_summary(
        entries: Iterable[str],
        title: str,
        book_format: BookFormat,
        sort: Optional[Sequence[str]] = None,
        errors: Optional[List[MalformedPathError]] = None,
) -> str:
    """Build the book tree for `entries` and render it in one step."""
    book = build_book(title, entries, errors)
    logger.debug(f"Book tree: {book!r}")
    return render_summary(book, book_format, sort)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        overwrite: bool = False,
        dry_run: bool = False,
) -> SummaryResult:
    """
    Execute the full summary pipeline.

    Args:
        config: The configuration dictionary (raw or partial).
        overwrite: If True, replace an existing summary file.
        dry_run: If True, render without writing to disk.

    Returns:
        SummaryResult: Object containing status, rendered content and paths.

    Raises:
        UnknownFormatError: If the configured dialect is not recognized.
    """
    logger.info("Summary generation started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    notes_dir = normalize_path(cfg["notes_dir"], os.getcwd())
    if not os.path.isdir(notes_dir):
        msg = f"Path {notes_dir} not found!"
        logger.error(msg)
        return create_error_result(msg, cfg, notes_dir)

    output_path = get_output_path(notes_dir, cfg["output_file"])

    # -------------------------------------------------------------------------
    # 2) Discovery, Build & Render
    # -------------------------------------------------------------------------
    try:
        entries = list_note_entries(notes_dir, cfg["output_file"])
    except OSError as e:
        msg = f"Failed to scan {notes_dir}: {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, notes_dir, output_path)

    logger.debug(f"Entries: {entries}")

    errors: List[MalformedPathError] = []
    content = generate_summary(entries, cfg["title"], cfg["format"], cfg["sort"], errors)
    accepted = len(entries) - len(errors)

    # -------------------------------------------------------------------------
    # 3) Overwrite Check
    # -------------------------------------------------------------------------
    if dry_run:
        logger.info(f"Dry run: {output_path} left untouched.")
        return create_success_result(
            cfg, notes_dir, output_path, content, accepted,
            rejected=[str(e) for e in errors], written=False, dry_run=True,
        )

    if output_exists(output_path) and not overwrite:
        msg = "Existing summary file detected and overwrite=False. Aborting."
        logger.warning(f"{msg} File: {output_path}")
        return create_error_result(
            msg, cfg, notes_dir, output_path, existing_file=output_path, content=content,
        )

    # -------------------------------------------------------------------------
    # 4) Persistence
    # -------------------------------------------------------------------------
    try:
        write_text_file(output_path, content)
    except OSError as e:
        msg = f"Couldn't write {output_path}: {e}"
        logger.critical(msg)
        return create_error_result(msg, cfg, notes_dir, output_path, content=content)

    logger.info(f"Summary written to {output_path}")
    return create_success_result(
        cfg, notes_dir, output_path, content, accepted,
        rejected=[str(e) for e in errors],
    )
