from __future__ import annotations

"""
Note Discovery Service.

Walks a notes directory and produces the ordered list of relative markdown
paths fed to the book builder. Hidden entries are pruned, siblings are
visited in name order and the generated summary itself is left out.
"""

import logging
import os
import posixpath
from typing import Iterator, List, Tuple

from booksummary.domain.constants import DEFAULT_OUTPUT_FILE, NOTE_EXTENSION, README_NAME

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def list_note_entries(notes_dir: str, output_file: str = DEFAULT_OUTPUT_FILE) -> List[str]:
    """
    Enumerate the markdown notes below `notes_dir`.

    Args:
        notes_dir: Root directory of the book sources.
        output_file: Summary filename (relative to `notes_dir`) to exclude.

    Returns:
        List[str]: Relative '/'-separated paths in depth-first name order.

    Raises:
        NotADirectoryError: If `notes_dir` is not an existing directory.
    """
    root = os.path.abspath(notes_dir)
    if not os.path.isdir(root):
        raise NotADirectoryError(f"Path {notes_dir} not found!")

    excluded = posixpath.normpath(output_file.replace(os.sep, "/"))
    entries: List[str] = []

    for rel_path in _walk_sorted(root, ""):
        if rel_path == excluded:
            continue
        if rel_path.lower() == README_NAME:
            continue
        if not rel_path.lower().endswith(NOTE_EXTENSION):
            continue
        entries.append(rel_path)

    logger.debug(f"Discovered {len(entries)} note(s) in {root}")
    return entries


def is_hidden(name: str) -> bool:
    return name.startswith(".")


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _walk_sorted(directory: str, prefix: str) -> Iterator[str]:
    """Yield relative file paths, visiting siblings (files and dirs) by name."""
    try:
        children = _list_dir(directory)
    except OSError as e:
        logger.warning(f"Cannot read directory {directory}: {e}")
        return

    for name, is_dir in children:
        if is_hidden(name):
            continue
        rel_path = f"{prefix}{name}"
        if is_dir:
            yield from _walk_sorted(os.path.join(directory, name), f"{rel_path}/")
        else:
            yield rel_path


def _list_dir(directory: str) -> List[Tuple[str, bool]]:
    with os.scandir(directory) as it:
        # Linked directories are listed, not entered
        children = [(entry.name, entry.is_dir(follow_symlinks=False)) for entry in it]
    children.sort(key=lambda child: child[0])
    return children
