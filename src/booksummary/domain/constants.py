from __future__ import annotations

"""
Domain Constants.

Centralizes application-wide defaults shared by the CLI, the configuration
layer and the summary pipeline.
"""

from typing import Dict, Tuple

APP_NAME = "book-summary"

DEFAULT_TITLE = "Summary"
DEFAULT_NOTES_DIR = "."
DEFAULT_OUTPUT_FILE = "SUMMARY.md"
DEFAULT_FORMAT = "md"

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

INDENT_WIDTH = 4
README_NAME = "readme.md"
NOTE_EXTENSION = ".md"

# -----------------------------------------------------------------------------
# BOOK CONFIG FILES (per dialect value)
# -----------------------------------------------------------------------------

BOOK_CONFIG_FILES: Dict[str, Tuple[str, ...]] = {
    "md": ("book.toml",),
    "git": ("book.json", "book.js"),
}
