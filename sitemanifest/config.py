"""Manifest configuration models and loading helpers."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_RELATIVE_PATH = Path("content") / "manifest.config.json"
OUTPUT_RELATIVE_PATH = Path("content") / "manifest.json"


class _ConfigModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class FileOverride(_ConfigModel):
    """Replacement label and/or description for a single file."""

    label: str | None = Field(default=None)
    description: str | None = Field(default=None)


class ChildConfig(_ConfigModel):
    """A directory-backed grouping of HTML fragments."""

    id: str = Field(...)
    label: str = Field(...)
    description: str = Field(...)
    directory: str = Field(description="Content directory, relative to the project root.")
    file_order: list[str] = Field(
        default_factory=list,
        alias="fileOrder",
        description="File names listed first, in this order.",
    )
    overrides: dict[str, FileOverride] = Field(
        default_factory=dict,
        description="Label/description overrides keyed by file name without extension.",
    )

    @field_validator("file_order", mode="before")
    def _ensure_order(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("overrides", mode="before")
    def _ensure_overrides(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {slug: {} if entry is None else entry for slug, entry in value.items()}
        return value


class CollectionConfig(_ConfigModel):
    """Top-level manifest grouping."""

    label: str = Field(...)
    children: list[ChildConfig] = Field(...)


class ManifestConfig(_ConfigModel):
    preview_title: str = Field(alias="previewTitle")
    preview_description: str = Field(alias="previewDescription")
    collections: list[CollectionConfig] = Field(...)


@dataclass(frozen=True, slots=True)
class BuildPaths:
    """Filesystem locations used by a single manifest build."""

    root: Path
    config_path: Path
    output_path: Path

    @classmethod
    def for_project(cls, root: str | Path) -> "BuildPaths":
        """Resolve the standard content layout underneath ``root``."""
        base = Path(root).resolve()
        return cls(
            root=base,
            config_path=base / CONFIG_RELATIVE_PATH,
            output_path=base / OUTPUT_RELATIVE_PATH,
        )


def load_manifest_config(path: str | Path) -> ManifestConfig:
    """Read and validate the JSON manifest configuration at ``path``."""
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {config_path}", path=config_path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read config {config_path}: {exc}", path=config_path) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config {config_path}: {exc}", path=config_path) from exc

    try:
        config = ManifestConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Config validation failed for {config_path}: {exc}", path=config_path) from exc

    logger.debug("Loaded manifest config %s with %d collection(s)", config_path, len(config.collections))
    return config
