"""Notice contracts - metadata descriptor, version records and catalog entries."""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _stringify_tags(tags: Any) -> Any:
    if tags is None:
        return []
    if isinstance(tags, list):
        return [str(tag) for tag in tags]
    return tags


class NoticeMetadata(BaseModel):
    """
    Contents of ``notices/<id>/metadata.json``.

    ``languages`` is the append-only version history per language, most
    recent tag first. Unknown keys are kept so that writing the descriptor
    back does not lose them.
    """

    model_config = ConfigDict(extra="allow")

    name: str | None = Field(default=None, description="Display name")
    description: str = Field(default="", description="Short description")
    main_language: str | None = Field(
        default=None, description="Canonical language for version comparisons"
    )
    languages: dict[str, list[str]] = Field(
        default_factory=dict, description="Recorded version tags per language"
    )
    versions: list[str] = Field(
        default_factory=list, description="Declared versions of the notice"
    )

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("languages", mode="before")
    @classmethod
    def stringify_language_tags(cls, v: Any) -> Any:
        # Hand-edited metadata sometimes lists 1.1 instead of "1.1", or null for none
        if v is None:
            return {}
        if isinstance(v, dict):
            return {lang: _stringify_tags(tags) for lang, tags in v.items()}
        return v

    @field_validator("versions", mode="before")
    @classmethod
    def stringify_versions(cls, v: Any) -> Any:
        return _stringify_tags(v)

    def recorded_versions(self, language: str) -> list[str]:
        return self.languages.get(language, [])


class VersionRecord(BaseModel):
    """
    One document of a notice in one language at one version.

    The mutable ``latest.md`` has ``is_latest=True``; snapshots under
    ``v<version>/notice.md`` are archived and never change. Front-matter keys
    other than ``version`` live in ``extra``.
    """

    model_config = ConfigDict(frozen=True)

    version: str = Field(description="Version tag as declared or inferred")
    is_latest: bool = Field(description="True only for the mutable latest.md")
    path: Path = Field(description="Source Markdown file")
    body: str = Field(default="", description="Markdown body without front matter")
    extra: dict[str, Any] = Field(
        default_factory=dict, description="Remaining front-matter key/values"
    )

    @property
    def tag(self) -> str:
        """Version without a leading ``v``, as used in snapshot directory names."""
        return self.version[1:] if self.version.startswith("v") else self.version


class Notice(BaseModel):
    """A legal-document family with its resolved documents per language."""

    id: str = Field(description="Directory name, unique key")
    name: str
    description: str = ""
    main_language: str = Field(description="Canonical language")
    versions: list[str] = Field(default_factory=list)
    available_languages: dict[str, list[VersionRecord]] = Field(
        default_factory=dict,
        description="Records per language, latest record first",
    )

    @property
    def languages(self) -> list[str]:
        return list(self.available_languages)

    def records_for(self, language: str) -> list[VersionRecord]:
        return self.available_languages.get(language, [])


class TranslationStatus(BaseModel):
    """How a translation's latest recorded version relates to the canonical one."""

    is_outdated: bool
    canonical_version: str
    translation_version: str
    comparison: int = Field(description="-1, 0 or 1: translation vs canonical")
