"""Pull labels and descriptions out of HTML fragments.

Extraction is a single regular-expression match per tag rather than a real
HTML parse: the first ``<tag ...>`` is paired with the nearest ``</tag>``
after it, so nested elements with the same name are cut short.
"""

from __future__ import annotations

import logging
import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Mapping

from .config import FileOverride
from .errors import ReadError
from .models import FileEntry

logger = logging.getLogger(__name__)

ENTITY_MAP = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&#96;": "`",
}

_ENTITY_PATTERN = re.compile("|".join(re.escape(entity) for entity in ENTITY_MAP))
_INLINE_TAG_PATTERN = re.compile(r"<[^>]+>")
_WHITESPACE_PATTERN = re.compile(r"\s+")

HEADING_TAGS = ("h2", "h1")
DESCRIPTION_TAG = "p"


@lru_cache(maxsize=None)
def _element_pattern(tag: str) -> re.Pattern[str]:
    name = re.escape(tag)
    return re.compile(rf"<{name}\b[^>]*>(.*?)</{name}\s*>", re.IGNORECASE | re.DOTALL)


def decode_entities(text: str) -> str:
    """Decode the small fixed set of entities in ``ENTITY_MAP``; others stay as written."""
    return _ENTITY_PATTERN.sub(lambda match: ENTITY_MAP[match.group(0)], text)


def extract_tag_text(html: str, tag: str) -> str:
    """Return the plain text of the first ``tag`` element in ``html``, or ``""``."""
    match = _element_pattern(tag).search(html)
    if match is None:
        return ""
    text = _INLINE_TAG_PATTERN.sub(" ", match.group(1))
    text = _WHITESPACE_PATTERN.sub(" ", text).strip()
    return decode_entities(text)


def extract_heading(html: str) -> str:
    for tag in HEADING_TAGS:
        text = extract_tag_text(html, tag)
        if text:
            return text
    return ""


def extract_description(html: str) -> str:
    return extract_tag_text(html, DESCRIPTION_TAG)


def file_identifier(file_name: str) -> str:
    """Strip the final extension from ``file_name``."""
    return os.path.splitext(file_name)[0]


def relative_file_path(directory: Path, file_name: str, root: Path) -> str:
    relative_dir = Path(os.path.relpath(directory, root))
    return (relative_dir / file_name).as_posix()


def build_file_entry(
    directory: Path,
    file_name: str,
    overrides: Mapping[str, FileOverride] | None = None,
    *,
    root: Path,
) -> FileEntry:
    """Read ``directory / file_name`` and describe it as a :class:`FileEntry`.

    Override fields that are set, including empty strings, replace the
    extracted values. Without a label override or a heading, the label is
    the file identifier.
    """
    file_path = directory / file_name
    try:
        html = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"Failed to read {file_path}: {exc}", path=file_path) from exc

    slug = file_identifier(file_name)
    override = (overrides or {}).get(slug) or FileOverride()

    if override.label is not None:
        label = override.label
    else:
        label = extract_heading(html) or slug
    if override.description is not None:
        description = override.description
    else:
        description = extract_description(html)

    logger.debug("Extracted '%s' from %s", label, file_path)
    return FileEntry(
        id=slug,
        label=label,
        description=description,
        path=relative_file_path(directory, file_name, root),
    )
