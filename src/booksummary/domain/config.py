from __future__ import annotations

"""
Configuration Domain Management.

Provides the built-in defaults of a summary run and reads the optional
book configuration files shipped with mdBook (book.toml) and GitBook
(book.json / book.js) projects.
"""

import json
import logging
import os
import tomllib
from typing import Any, Dict, Optional

from booksummary.domain.book_models import BookFormat, BookSummaryError
from booksummary.domain.constants import (
    DEFAULT_FORMAT,
    DEFAULT_NOTES_DIR,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_TITLE,
)

logger = logging.getLogger(__name__)

# Keys of each config file format mapped onto our configuration keys
_TOML_KEYS: Dict[str, str] = {"title": "title", "src": "notes_dir"}
_JSON_KEYS: Dict[str, str] = {"title": "title", "root": "notes_dir"}


class ConfigError(BookSummaryError):
    """Raised when a book config file exists but cannot be read or parsed."""

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "notes_dir": DEFAULT_NOTES_DIR,
        "title": DEFAULT_TITLE,
        "format": DEFAULT_FORMAT,
        "sort": None,
        "output_file": DEFAULT_OUTPUT_FILE,
    }

# -----------------------------------------------------------------------------
# Book Config Files
# -----------------------------------------------------------------------------

def load_book_config(notes_dir: str, book_format: BookFormat) -> Dict[str, Any]:
    """
    Collect configuration values from the dialect's book config files.

    Files are read in the dialect's precedence order; the first file that
    provides a key wins. A `src`/`root` entry is resolved against the
    directory holding the config file.

    Args:
        notes_dir: Directory where the config files are looked up.
        book_format: Dialect selecting which files to read.

    Returns:
        Dict[str, Any]: Subset of configuration keys found ('title', 'notes_dir').

    Raises:
        ConfigError: If a config file exists but cannot be read or parsed.
    """
    found: Dict[str, Any] = {}

    for file_name in book_format.config_files:
        path = os.path.join(notes_dir, file_name)
        if not os.path.isfile(path):
            logger.debug(f"Book config file {path} not found.")
            continue

        logger.debug(f"Found book config file: {path}")
        values = _read_config_file(path)

        for key, value in values.items():
            if key == "notes_dir" and not os.path.isabs(value):
                value = os.path.normpath(os.path.join(notes_dir, value))
            if key not in found:
                logger.debug(f"Found `{key}` in {file_name}: {value}")
                found[key] = value

    return found


def _read_config_file(path: str) -> Dict[str, str]:
    """Parse one config file and map its known keys onto ours."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except OSError as e:
        raise ConfigError(f"Couldn't read {path}: {e}") from e

    if path.endswith(".toml"):
        try:
            data = tomllib.loads(raw)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e
        section = data.get("book", {})
        return _pick_strings(section, _TOML_KEYS, path)

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e
    return _pick_strings(data, _JSON_KEYS, path)


def _pick_strings(data: Any, key_map: Dict[str, str], path: str) -> Dict[str, str]:
    """Keep the string values of the mapped keys, warning about anything else."""
    out: Dict[str, str] = {}
    if not isinstance(data, dict):
        logger.warning(f"Ignoring {path}: expected a table/object at the top level.")
        return out

    for source_key, target_key in key_map.items():
        value: Optional[Any] = data.get(source_key)
        if value is None:
            continue
        if not isinstance(value, str):
            logger.warning(
                f"Ignoring `{source_key}` in {path}: expected str, "
                f"received {type(value).__name__}."
            )
            continue
        out[target_key] = value
    return out
