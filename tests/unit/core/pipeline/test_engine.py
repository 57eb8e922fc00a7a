from __future__ import annotations

"""
Unit tests for the Summary Pipeline Engine.

Verifies the scan -> build -> render -> write flow, overwrite protection,
dry runs and error results.
"""

from pathlib import Path
from typing import List
from unittest.mock import patch

import pytest

from booksummary.core.pipeline.engine import generate_summary, run_pipeline
from booksummary.domain.book_models import BookFormat, MalformedPathError, UnknownFormatError

EXPECTED_GITBOOK = (
    "# Summary\n"
    "\n"
    "* [About](about.md)\n"
    "* Chapter1\n"
    "    * [Zeta](chapter1/Zeta.md)\n"
    "    * [File1](chapter1/file1.md)\n"
    "* [Chapter2](chapter2/README.md)\n"
    "    * [Overview](chapter2/Overview.md)\n"
    "    * [File2](chapter2/file2.md)\n"
    "    * Subchap\n"
    "        * [Info](chapter2/subchap/info.md)\n"
)


def test_generate_summary_collects_rejected_entries() -> None:
    errors: List[MalformedPathError] = []

    out = generate_summary(["alpha.md", "b/"], "Notes", BookFormat.MDBOOK, errors=errors)

    assert out == "# Notes\n\n- [Alpha](alpha.md)\n"
    assert len(errors) == 1


def test_run_pipeline_writes_summary(notes_dir: Path) -> None:
    result = run_pipeline({"notes_dir": str(notes_dir), "format": "git"})

    assert result.ok, result.error
    assert result.written is True
    assert result.entries == 7
    assert result.book_format == "git"

    summary = notes_dir / "SUMMARY.md"
    assert summary.read_text(encoding="utf-8") == EXPECTED_GITBOOK
    assert result.output_path == str(summary)


def test_run_pipeline_refuses_to_overwrite(notes_dir: Path) -> None:
    summary = notes_dir / "SUMMARY.md"
    summary.write_text("keep me", encoding="utf-8")

    result = run_pipeline({"notes_dir": str(notes_dir)})

    assert result.ok is False
    assert result.existing_file == str(summary)
    assert summary.read_text(encoding="utf-8") == "keep me"


def test_run_pipeline_overwrite_replaces_and_skips_old_summary(notes_dir: Path) -> None:
    summary = notes_dir / "SUMMARY.md"
    summary.write_text("stale", encoding="utf-8")

    result = run_pipeline({"notes_dir": str(notes_dir), "format": "git"}, overwrite=True)

    assert result.ok
    assert summary.read_text(encoding="utf-8") == EXPECTED_GITBOOK


def test_run_pipeline_dry_run_writes_nothing(notes_dir: Path) -> None:
    result = run_pipeline(
        {"notes_dir": str(notes_dir), "title": "Book", "sort": ["chapter2"]},
        dry_run=True,
    )

    assert result.ok
    assert result.dry_run is True
    assert result.written is False
    assert not (notes_dir / "SUMMARY.md").exists()
    assert result.content.startswith("# Book\n\n- [About](about.md)\n- [Chapter2](chapter2/README.md)\n")


def test_run_pipeline_missing_directory(tmp_path: Path) -> None:
    result = run_pipeline({"notes_dir": str(tmp_path / "nope")})

    assert result.ok is False
    assert "not found" in result.error


def test_run_pipeline_unknown_format_raises(notes_dir: Path) -> None:
    with pytest.raises(UnknownFormatError):
        run_pipeline({"notes_dir": str(notes_dir), "format": "asciidoc"})


def test_run_pipeline_write_failure_returns_error(notes_dir: Path) -> None:
    with patch(
        "booksummary.core.pipeline.engine.write_text_file",
        side_effect=PermissionError("denied"),
    ):
        result = run_pipeline({"notes_dir": str(notes_dir)})

    assert result.ok is False
    assert "denied" in result.error
    assert result.content.startswith("# Summary\n\n")
