from __future__ import annotations

"""
Book Tree Builder.

Turns a flat, ordered sequence of slash-delimited note paths into the
recursive Chapter tree consumed by the summary renderer. Ordering is the
order of first appearance in the input; nothing is sorted here.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from booksummary.domain.book_models import Chapter, MalformedPathError

logger = logging.getLogger(__name__)

SEPARATOR = "/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_book(
        title: str,
        entries: Iterable[str],
        errors: Optional[List[MalformedPathError]] = None,
) -> Chapter:
    """
    Build the book tree for the given note paths.

    Args:
        title: Book title, used as the root chapter name.
        entries: Relative note paths using '/' as separator.
        errors: Optional accumulator receiving one error per rejected entry.

    Returns:
        Chapter: Root of the freshly built tree.
    """
    book = Chapter(name=title)
    add_entries(book, entries, errors)
    return book


def add_entries(
        chapter: Chapter,
        entries: Iterable[str],
        errors: Optional[List[MalformedPathError]] = None,
) -> None:
    """
    Place every entry into `chapter`, skipping malformed ones.

    A malformed entry is logged and reported through `errors`; the rest of
    the entries are still processed.
    """
    for entry in entries:
        try:
            segments = validate_entry(entry)
        except MalformedPathError as e:
            logger.warning(f"Skipping note entry: {e}")
            if errors is not None:
                errors.append(e)
            continue

        _insert(chapter, segments, entry)


def validate_entry(entry: str) -> List[str]:
    """
    Split an entry into its segments, rejecting unusable paths.

    Raises:
        MalformedPathError: If the entry is empty or has an empty segment.
    """
    if not entry:
        raise MalformedPathError(entry, "empty path")

    segments = entry.split(SEPARATOR)
    if segments[-1] == "":
        raise MalformedPathError(entry, "no file name after the last separator")
    if any(segment == "" for segment in segments):
        raise MalformedPathError(entry, "empty path segment")

    return segments

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _insert(chapter: Chapter, segments: Sequence[str], entry: str) -> None:
    """Recursively descend one segment at a time; the leaf keeps the full path."""
    if len(segments) == 1:
        chapter.files.append(entry)
        return

    child = chapter.ensure_chapter(segments[0])
    _insert(child, segments[1:], entry)
