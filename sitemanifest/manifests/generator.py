"""Assemble the collection/child/file manifest from configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Sequence

from ..config import BuildPaths, ChildConfig, CollectionConfig, ManifestConfig, load_manifest_config
from ..extract import build_file_entry
from ..models import Manifest, ManifestChild, ManifestCollection
from ..scanner import ensure_directory, list_html_files
from .writer import write_manifest

logger = logging.getLogger(__name__)


def order_files(files: Iterable[str], file_order: Sequence[str] = ()) -> list[str]:
    """Place names from ``file_order`` first, then the remaining files sorted ignoring case.

    Names in ``file_order`` that were not discovered are skipped.
    """
    remaining = set(files)
    ordered: list[str] = []
    for name in file_order:
        if name in remaining:
            ordered.append(name)
            remaining.discard(name)
        elif name not in ordered:
            logger.debug("Ordered file '%s' not found; skipping.", name)
    return ordered + sorted(remaining, key=_collation_key)


def _collation_key(name: str) -> tuple[str, str]:
    return (name.casefold(), name)


class ManifestBuilder:
    """Walk a :class:`ManifestConfig` and produce the manifest it describes."""

    def __init__(self, paths: BuildPaths) -> None:
        self.paths = paths

    def build(self, config: ManifestConfig) -> Manifest:
        return Manifest(
            preview_title=config.preview_title,
            preview_description=config.preview_description,
            collections=[self._build_collection(collection) for collection in config.collections],
        )

    def _build_collection(self, collection: CollectionConfig) -> ManifestCollection:
        return ManifestCollection(
            label=collection.label,
            children=[self._build_child(child) for child in collection.children],
        )

    def _build_child(self, child: ChildConfig) -> ManifestChild:
        directory = self._resolve_directory(child.directory)
        ensure_directory(directory)
        names = order_files(list_html_files(directory), child.file_order)
        files = [build_file_entry(directory, name, child.overrides, root=self.paths.root) for name in names]
        logger.debug("Child '%s': %d file(s) from %s", child.id, len(files), directory)
        return ManifestChild(
            id=child.id,
            label=child.label,
            description=child.description,
            files=files,
        )

    def _resolve_directory(self, directory: str) -> Path:
        return self.paths.root / directory


def build_manifest(paths: BuildPaths, config: ManifestConfig | None = None) -> Manifest:
    """Build the manifest in memory, loading configuration when not supplied."""
    if config is None:
        config = load_manifest_config(paths.config_path)
    return ManifestBuilder(paths).build(config)


def generate_manifest(paths: BuildPaths) -> tuple[Manifest, Path]:
    """Run the full pipeline and write the manifest to ``paths.output_path``."""
    manifest = build_manifest(paths)
    written = write_manifest(manifest, paths.output_path)
    logger.info(
        "Wrote manifest %s (%d collection(s), %d file(s))",
        written,
        len(manifest.collections),
        manifest.file_count,
    )
    return manifest, written
