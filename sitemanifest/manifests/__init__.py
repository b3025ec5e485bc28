"""Manifest assembly and persistence helpers."""

from .generator import ManifestBuilder, build_manifest, generate_manifest, order_files
from .writer import render_manifest, write_manifest

__all__ = [
    "ManifestBuilder",
    "build_manifest",
    "generate_manifest",
    "order_files",
    "render_manifest",
    "write_manifest",
]
