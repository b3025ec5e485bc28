"""Persistence helpers for the manifest file."""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import ManifestWriteError
from ..models import Manifest


def render_manifest(manifest: Manifest) -> str:
    """Serialize ``manifest`` as indented JSON terminated by a newline."""
    payload = manifest.model_dump(mode="json", by_alias=True)
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


def write_manifest(manifest: Manifest, destination: Path) -> Path:
    """Replace ``destination`` with the serialized manifest."""
    text = render_manifest(manifest)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
    except OSError as exc:
        raise ManifestWriteError(f"Failed to write manifest {destination}: {exc}", path=destination) from exc
    return destination
