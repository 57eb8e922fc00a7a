from __future__ import annotations

"""
Summary Renderer.

Converts a Chapter tree into the SUMMARY.md table of contents understood
by mdBook and GitBook. Handles chapter ordering, README promotion to the
chapter heading, title derivation and per-level indentation.
"""

import posixpath
from typing import List, Optional, Sequence

from titlecase import titlecase

from booksummary.domain.book_models import BookFormat, Chapter
from booksummary.domain.constants import INDENT_WIDTH, README_NAME

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_summary(
        book: Chapter,
        book_format: BookFormat,
        sort: Optional[Sequence[str]] = None,
) -> str:
    """
    Render the complete summary document for a book tree.

    Layout:
        # <title>

        <marker> [File](file.md)
        <marker> [Chapter](chapter/README.md)
            <marker> [Page](chapter/page.md)

    Args:
        book: Root chapter; its name is emitted verbatim as the heading.
        book_format: Output dialect (marker glyph and unlinked heading style).
        sort: Chapter names rendered first at the top level, matched
              case-insensitively. Unknown names are ignored.

    Returns:
        str: The summary text, every line terminated by a newline.
    """
    lines: List[str] = [f"# {book.name}", ""]

    _render_files(book.files, book_format, 0, lines)
    for chapter in order_chapters(book.chapters, sort):
        _render_chapter(chapter, book_format, 0, lines)

    return "\n".join(lines) + "\n"


def order_chapters(
        chapters: Sequence[Chapter],
        sort: Optional[Sequence[str]] = None,
) -> List[Chapter]:
    """
    Put the chapters named in `sort` first, then the rest in original order.
    """
    ordered: List[Chapter] = []
    taken = set()

    for name in sort or ():
        key = name.lower()
        for chapter in chapters:
            if id(chapter) not in taken and chapter.name.lower() == key:
                ordered.append(chapter)
                taken.add(id(chapter))
                break

    ordered.extend(c for c in chapters if id(c) not in taken)
    return ordered


def make_title_case(name: str) -> str:
    """
    Derive a display title from a file stem or directory name.

    Drops ordering prefixes ('01-', '3_'), turns underscores into spaces
    and title-cases the words: '1-chapter_1' -> 'Chapter 1'.
    """
    start = 0
    while start < len(name) and not name[start].isalpha():
        start += 1

    text = name[start:].replace("_", " ")
    if not text:
        return ""
    return titlecase(text)


def is_readme(path: str) -> bool:
    """True if the final segment of `path` is README.md (any case)."""
    return posixpath.basename(path).lower() == README_NAME


def find_readme(files: Sequence[str]) -> Optional[str]:
    return next((f for f in files if is_readme(f)), None)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _render_chapter(
        chapter: Chapter,
        book_format: BookFormat,
        level: int,
        lines: List[str],
) -> None:
    """Emit the chapter heading, its own files, then its sub-chapters."""
    title = make_title_case(chapter.name)
    readme = find_readme(chapter.files)

    if readme is not None:
        heading = f"[{title}]({readme})"
    else:
        heading = book_format.chapter_heading(title)

    lines.append(f"{_indent(level)}{book_format.marker} {heading}")

    _render_files(chapter.files, book_format, level + 1, lines)
    for sub in chapter.chapters:
        _render_chapter(sub, book_format, level + 1, lines)


def _render_files(
        files: Sequence[str],
        book_format: BookFormat,
        level: int,
        lines: List[str],
) -> None:
    """One link line per file; README entries are promoted, not listed."""
    indent = _indent(level)
    for path in files:
        if is_readme(path):
            continue
        lines.append(f"{indent}{book_format.marker} [{_file_title(path)}]({path})")


def _file_title(path: str) -> str:
    stem, _ = posixpath.splitext(posixpath.basename(path))
    return make_title_case(stem)


def _indent(level: int) -> str:
    return " " * (INDENT_WIDTH * level)
