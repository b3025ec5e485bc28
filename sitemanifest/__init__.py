"""Build a JSON navigation manifest from directories of HTML fragments."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
import tomllib

from .config import BuildPaths, load_manifest_config
from .manifests import build_manifest, generate_manifest

DISTRIBUTION = "sitemanifest"
_SOURCE_PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def _detect_version() -> str:
    """Installed distribution version, else the one declared in a source checkout."""
    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        pass
    if not _SOURCE_PYPROJECT.is_file():
        return "0.0.0"
    with _SOURCE_PYPROJECT.open("rb") as handle:
        project = tomllib.load(handle).get("project", {})
    return str(project.get("version", "0.0.0"))


__version__ = _detect_version()

__all__ = ["__version__", "BuildPaths", "build_manifest", "generate_manifest", "load_manifest_config"]
