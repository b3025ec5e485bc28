"""Discover HTML fragments inside configured content directories."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import DirectoryError

logger = logging.getLogger(__name__)

HTML_SUFFIX = ".html"


def ensure_directory(path: Path) -> None:
    """Fail with :class:`DirectoryError` unless ``path`` is an existing directory."""
    if not path.exists():
        raise DirectoryError(f"Directory not found: {path}", path=path)
    if not path.is_dir():
        raise DirectoryError(f"{path} is not a directory", path=path)


def list_html_files(path: Path) -> list[str]:
    """Return names of the ``.html`` files directly inside ``path``.

    Matching ignores case. Subdirectories are neither returned nor searched.
    """
    try:
        entries = list(path.iterdir())
    except OSError as exc:
        raise DirectoryError(f"Failed to list directory {path}: {exc}", path=path) from exc

    names = [entry.name for entry in entries if entry.is_file() and entry.name.lower().endswith(HTML_SUFFIX)]
    logger.debug("Found %d HTML file(s) in %s", len(names), path)
    return names
