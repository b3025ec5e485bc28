"""Pydantic models describing the generated manifest."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FileEntry(BaseModel):
    """One discovered HTML fragment."""

    id: str = Field(description="File name without its final extension.")
    label: str = Field(...)
    description: str = Field(default="")
    path: str = Field(description="Path relative to the project root using forward slashes.")

    @field_validator("path")
    def _normalize_separators(cls, value: str) -> str:
        return value.replace("\\", "/")


class ManifestChild(BaseModel):
    id: str = Field(...)
    label: str = Field(...)
    description: str = Field(...)
    files: list[FileEntry] = Field(default_factory=list)


class ManifestCollection(BaseModel):
    label: str = Field(...)
    children: list[ManifestChild] = Field(default_factory=list)


class Manifest(BaseModel):
    """Navigable content hierarchy written for the site front-end."""

    model_config = ConfigDict(populate_by_name=True)

    preview_title: str = Field(alias="previewTitle")
    preview_description: str = Field(alias="previewDescription")
    collections: list[ManifestCollection] = Field(default_factory=list)

    @property
    def child_count(self) -> int:
        return sum(len(collection.children) for collection in self.collections)

    @property
    def file_count(self) -> int:
        return sum(len(child.files) for collection in self.collections for child in collection.children)
