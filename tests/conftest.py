from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: a sample notes directory and sample entry lists.
"""

import os
import sys
from pathlib import Path
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def readme_entries() -> List[str]:
    """Two parts, each with a README and two pages."""
    return [
        "part1/README.md",
        "part1/WritingIsGood.md",
        "part1/GitbookIsNice.md",
        "part2/README.md",
        "part2/First_part_of_part_2.md",
        "part2/Second_part_of_part_2.md",
    ]


@pytest.fixture
def notes_dir(tmp_path: Path) -> Path:
    """
    Create a notes directory mirroring a small GitBook project.

    Structure:
    /book
      .hidden/ignored.md
      README.md
      about.md
      notes.txt
      chapter1/Zeta.md
      chapter1/file1.md
      chapter1/.draft.md
      chapter2/Overview.md
      chapter2/README.md
      chapter2/file2.md
      chapter2/subchap/info.md
    """
    root = tmp_path / "book"
    root.mkdir()

    files = [
        ".hidden/ignored.md",
        "README.md",
        "about.md",
        "notes.txt",
        "chapter1/Zeta.md",
        "chapter1/file1.md",
        "chapter1/.draft.md",
        "chapter2/Overview.md",
        "chapter2/README.md",
        "chapter2/file2.md",
        "chapter2/subchap/info.md",
    ]
    for rel in files:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"# {rel}\n", encoding="utf-8")

    return root
