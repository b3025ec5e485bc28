"""Error types raised by the manifest build pipeline."""

from __future__ import annotations

from pathlib import Path


class ManifestBuildError(RuntimeError):
    """Base class for failures that abort a manifest build."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(ManifestBuildError):
    """Raised when the manifest configuration is missing or malformed."""


class DirectoryError(ManifestBuildError):
    """Raised when a configured content directory cannot be scanned."""


class ReadError(ManifestBuildError):
    """Raised when an HTML fragment cannot be read."""


class ManifestWriteError(ManifestBuildError):
    """Raised when the manifest output file cannot be written."""
