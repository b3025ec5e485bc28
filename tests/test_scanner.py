from __future__ import annotations

from pathlib import Path

import pytest

from sitemanifest.errors import DirectoryError
from sitemanifest.scanner import ensure_directory, list_html_files


def test_list_html_files_filters_by_extension_case_insensitively(tmp_path: Path) -> None:
    (tmp_path / "a.html").write_text("<h2>A</h2>", encoding="utf-8")
    (tmp_path / "B.HTML").write_text("<h2>B</h2>", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("skip", encoding="utf-8")
    (tmp_path / "page.htm").write_text("skip", encoding="utf-8")
    (tmp_path / "nested.html").mkdir()
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "deep.html").write_text("<h2>Deep</h2>", encoding="utf-8")

    assert sorted(list_html_files(tmp_path)) == ["B.HTML", "a.html"]


def test_ensure_directory_rejects_missing_path(tmp_path: Path) -> None:
    missing = tmp_path / "missing"

    with pytest.raises(DirectoryError, match="Directory not found") as excinfo:
        ensure_directory(missing)

    assert excinfo.value.path == missing


def test_ensure_directory_rejects_regular_file(tmp_path: Path) -> None:
    target = tmp_path / "file.html"
    target.write_text("", encoding="utf-8")

    with pytest.raises(DirectoryError, match="is not a directory"):
        ensure_directory(target)


def test_ensure_directory_accepts_directory(tmp_path: Path) -> None:
    ensure_directory(tmp_path)
