from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and the physical persistence of the generated
summary. Keeps 'os' level details out of the pipeline.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def get_output_path(notes_dir: str, output_file: str) -> str:
    """Resolve the summary file location inside the notes directory."""
    return os.path.join(notes_dir, output_file)


def output_exists(path: str) -> bool:
    return os.path.exists(path)

# -----------------------------------------------------------------------------
# PERSISTENCE API
# -----------------------------------------------------------------------------

def write_text_file(path: str, content: str) -> None:
    """
    Write `content` verbatim (UTF-8, no newline translation) to `path`.

    Args:
        path: Target file path. Parent directories are created if missing.
        content: Full file content.

    Raises:
        OSError: If the file cannot be created or written.
    """
    parent = os.path.dirname(os.path.abspath(path))
    os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    logger.debug(f"Wrote {len(content)} characters to {path}")
