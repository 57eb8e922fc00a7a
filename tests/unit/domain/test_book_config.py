from __future__ import annotations

"""
Unit tests for the Configuration Domain.

Verifies:
1. Default configuration generation.
2. book.toml parsing for mdBook projects.
3. book.json / book.js parsing and precedence for GitBook projects.
4. Error reporting for unreadable config files.
"""

import json
import os
from pathlib import Path

import pytest

from booksummary.domain.book_models import BookFormat
from booksummary.domain.config import ConfigError, get_default_config, load_book_config


def test_get_default_config_completeness() -> None:
    defaults = get_default_config()

    assert defaults == {
        "notes_dir": ".",
        "title": "Summary",
        "format": "md",
        "sort": None,
        "output_file": "SUMMARY.md",
    }


def test_load_book_toml(tmp_path: Path) -> None:
    (tmp_path / "book.toml").write_text(
        '[book]\ntitle = "MyMDBook"\nsrc = "src"\nauthors = ["me"]\n',
        encoding="utf-8",
    )

    found = load_book_config(str(tmp_path), BookFormat.MDBOOK)

    assert found == {
        "title": "MyMDBook",
        "notes_dir": os.path.normpath(os.path.join(str(tmp_path), "src")),
    }


def test_load_book_json_takes_precedence_over_js(tmp_path: Path) -> None:
    (tmp_path / "book.json").write_text(json.dumps({"title": "My title"}), encoding="utf-8")
    (tmp_path / "book.js").write_text(
        json.dumps({"title": "Other title", "root": "book"}), encoding="utf-8"
    )

    found = load_book_config(str(tmp_path), BookFormat.GITBOOK)

    assert found["title"] == "My title"
    assert found["notes_dir"] == os.path.normpath(os.path.join(str(tmp_path), "book"))


def test_dialect_selects_config_file(tmp_path: Path) -> None:
    (tmp_path / "book.json").write_text(json.dumps({"title": "Git"}), encoding="utf-8")

    assert load_book_config(str(tmp_path), BookFormat.MDBOOK) == {}
    assert load_book_config(str(tmp_path), BookFormat.GITBOOK) == {"title": "Git"}


def test_absolute_root_is_kept(tmp_path: Path) -> None:
    target = str(tmp_path / "elsewhere")
    (tmp_path / "book.json").write_text(json.dumps({"root": target}), encoding="utf-8")

    found = load_book_config(str(tmp_path), BookFormat.GITBOOK)

    assert found["notes_dir"] == target


def test_non_string_values_are_ignored(tmp_path: Path) -> None:
    (tmp_path / "book.toml").write_text("[book]\ntitle = 3\n", encoding="utf-8")

    assert load_book_config(str(tmp_path), BookFormat.MDBOOK) == {}


def test_missing_book_section_yields_nothing(tmp_path: Path) -> None:
    (tmp_path / "book.toml").write_text('[build]\nbuild-dir = "out"\n', encoding="utf-8")

    assert load_book_config(str(tmp_path), BookFormat.MDBOOK) == {}


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / "book.toml").write_text("[book\ntitle = ", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_book_config(str(tmp_path), BookFormat.MDBOOK)


def test_invalid_json_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / "book.json").write_text("{ incomplete json ", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_book_config(str(tmp_path), BookFormat.GITBOOK)
