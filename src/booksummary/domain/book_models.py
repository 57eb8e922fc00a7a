from __future__ import annotations

"""
Book Structure Data Models.

Provides the recursive chapter node produced by the book builder, the
closed set of output dialects understood by the summary renderer, and the
domain errors raised while building or configuring a summary.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from booksummary.domain.constants import BOOK_CONFIG_FILES

# -----------------------------------------------------------------------------
# DOMAIN ERRORS
# -----------------------------------------------------------------------------

class BookSummaryError(Exception):
    """Base class for every error raised by the summary domain."""


class MalformedPathError(BookSummaryError, ValueError):
    """
    Raised for a note entry that cannot be placed in the book tree.

    Attributes:
        entry: The offending relative path, verbatim.
        reason: Short human readable explanation.
    """

    def __init__(self, entry: str, reason: str) -> None:
        self.entry = entry
        self.reason = reason
        super().__init__(f"Malformed path {entry!r}: {reason}")


class UnknownFormatError(BookSummaryError, ValueError):
    """Raised when a dialect selector matches no known book format."""

    def __init__(self, value: object) -> None:
        self.value = value
        known = ", ".join(sorted(_FORMAT_ALIASES))
        super().__init__(f"Unknown book format {value!r} (expected one of: {known})")

# -----------------------------------------------------------------------------
# OUTPUT DIALECTS
# -----------------------------------------------------------------------------

class BookFormat(Enum):
    """
    Output dialect of the generated summary.

    Each member fixes the list marker prefixed to every line and the heading
    emitted for a chapter that has no README to link to.
    """
    MDBOOK = "md"
    GITBOOK = "git"

    @property
    def marker(self) -> str:
        return "-" if self is BookFormat.MDBOOK else "*"

    @property
    def config_files(self) -> Tuple[str, ...]:
        """Book config filenames read for this dialect, in precedence order."""
        return BOOK_CONFIG_FILES[self.value]

    def chapter_heading(self, title: str) -> str:
        """Heading text for a chapter without a linkable index file."""
        if self is BookFormat.MDBOOK:
            return f"[{title}](#)"
        return title

    @classmethod
    def parse(cls, value: object) -> BookFormat:
        """
        Resolve a dialect selector ('md', 'mdbook', 'git', 'gitbook').

        Args:
            value: Raw selector, usually coming from the CLI or a config dict.

        Returns:
            BookFormat: The matching member.

        Raises:
            UnknownFormatError: If the selector is not recognized.
        """
        if isinstance(value, BookFormat):
            return value
        if isinstance(value, str):
            member = _FORMAT_ALIASES.get(value.strip().lower())
            if member is not None:
                return member
        raise UnknownFormatError(value)


_FORMAT_ALIASES: Dict[str, BookFormat] = {
    "md": BookFormat.MDBOOK,
    "mdbook": BookFormat.MDBOOK,
    "git": BookFormat.GITBOOK,
    "gitbook": BookFormat.GITBOOK,
}

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass
class Chapter:
    """
    A node of the book tree.

    The root node is named after the book title; every other node is named
    after one directory segment.

    Attributes:
        name: Path segment (or book title for the root).
        files: Full relative paths of the notes directly under this node.
        chapters: Child chapters in order of first appearance.
    """
    name: str
    files: List[str] = field(default_factory=list)
    chapters: List[Chapter] = field(default_factory=list)

    # Name lookup; `chapters` stays the source of iteration order
    _index: Dict[str, Chapter] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        for chapter in self.chapters:
            self._index.setdefault(chapter.name, chapter)

    def get_chapter(self, name: str) -> Optional[Chapter]:
        return self._index.get(name)

    def ensure_chapter(self, name: str) -> Chapter:
        """Return the child called `name`, appending a new one if missing."""
        chapter = self._index.get(name)
        if chapter is None:
            chapter = Chapter(name=name)
            self.chapters.append(chapter)
            self._index[name] = chapter
        return chapter
