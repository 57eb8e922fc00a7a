from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object returned by the summary pipeline to the
interface layer, together with the factories used to build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SummaryResult:
    """
    Unified result of a complete summary generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        notes_dir: Normalized notes directory that was scanned.
        output_path: Absolute path of the summary file.
        title: Book title used for the heading.
        book_format: Dialect value ('md' or 'git').
        entries: Number of note paths placed in the book tree.
        rejected: Messages for note paths rejected as malformed.
        content: Rendered summary text.
        written: Whether the summary was persisted to disk.
        existing_file: Output path that blocked the write, if any.
        dry_run: Whether the run was a simulation.
    """
    ok: bool
    error: str

    notes_dir: str
    output_path: str
    title: str
    book_format: str

    entries: int = 0
    rejected: List[str] = field(default_factory=list)
    content: str = ""
    written: bool = False
    existing_file: str = ""
    dry_run: bool = False

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        notes_dir: str,
        output_path: str = "",
        existing_file: str = "",
        content: str = "",
) -> SummaryResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        cfg: The validated configuration used during the failed run.
        notes_dir: The target notes directory.
        output_path: Calculated summary file path.
        existing_file: File that caused the collision abort.
        content: Rendered text, when rendering already happened.

    Returns:
        SummaryResult: An immutable error result object.
    """
    return SummaryResult(
        ok=False,
        error=error,
        notes_dir=notes_dir,
        output_path=output_path,
        title=cfg.get("title", ""),
        book_format=_format_value(cfg.get("format")),
        content=content,
        existing_file=existing_file,
    )


def create_success_result(
        cfg: Dict[str, Any],
        notes_dir: str,
        output_path: str,
        content: str,
        entries: int,
        rejected: Optional[List[str]] = None,
        written: bool = True,
        dry_run: bool = False,
) -> SummaryResult:
    """
    Create a successful pipeline result instance.

    Args:
        cfg: Final configuration used during execution.
        notes_dir: Normalized notes directory.
        output_path: Absolute summary file path.
        content: Rendered summary text.
        entries: Number of accepted note paths.
        rejected: Messages for rejected note paths.
        written: Whether the file was written.
        dry_run: Whether the run was a simulation.

    Returns:
        SummaryResult: An immutable success result object.
    """
    return SummaryResult(
        ok=True,
        error="",
        notes_dir=notes_dir,
        output_path=output_path,
        title=cfg.get("title", ""),
        book_format=_format_value(cfg.get("format")),
        entries=entries,
        rejected=rejected or [],
        content=content,
        written=written,
        dry_run=dry_run,
    )


def _format_value(value: Any) -> str:
    """Flatten a BookFormat member (or raw selector) into its string value."""
    return str(getattr(value, "value", value or ""))
