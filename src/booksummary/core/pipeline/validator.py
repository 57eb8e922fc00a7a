from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between the interface layer and the summary pipeline. Coerces
untrusted values (CLI flags, book config files) into the expected types,
injects defaults and resolves the output dialect.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from booksummary.domain.book_models import BookFormat
from booksummary.domain.config import get_default_config

logger = logging.getLogger(__name__)

_SORT_SPLIT_RX = re.compile(r"[\s,]+")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration (with
        'format' resolved to a BookFormat) and a list of warnings.

    Raises:
        UnknownFormatError: If the dialect selector is not recognized, in
            every mode. A wrong dialect is never replaced by the default.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        config = {}

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if v is not None})

    for field in ("notes_dir", "output_file"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["title"] = _as_title(merged.get("title"), defaults["title"], warnings, strict)
    merged["sort"] = _as_sort(merged.get("sort"), warnings, strict)
    merged["format"] = BookFormat.parse(merged.get("format"))

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_title(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Titles are kept verbatim; an empty title is legal."""
    if isinstance(value, str):
        return value
    if value is None:
        return fallback

    msg = f"Invalid field 'title': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_sort(value: Any, warnings: List[str], strict: bool) -> Optional[List[str]]:
    """Accept a list of names or a comma/space separated string."""
    if value is None:
        return None

    if isinstance(value, str):
        items = [x for x in _SORT_SPLIT_RX.split(value) if x]
        return items or None

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str) and item.strip():
                out.append(item.strip())
                continue
            msg = f"Invalid item in 'sort[{i}]': expected non-empty str."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Item discarded.")
        return out or None

    msg = f"Invalid field 'sort': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Ignoring preferred order.")
    return None
