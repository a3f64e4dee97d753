"""Archive run contracts - per-item outcomes collected into one report."""

from pydantic import BaseModel, Field


class ArchiveItem(BaseModel):
    """Outcome of processing one notice or one notice/language pair."""

    notice_id: str
    language: str | None = None
    version: str | None = None
    message: str = ""

    @property
    def label(self) -> str:
        if self.language is None:
            return self.notice_id
        return f"{self.notice_id}/{self.language}"


class ArchiveReport(BaseModel):
    """
    Result of one archive run.

    Warnings and failures are collected here instead of being raised, so one
    broken notice never stops the others from being processed.
    """

    archived: list[ArchiveItem] = Field(
        default_factory=list, description="Snapshots created in this run"
    )
    already_archived: list[ArchiveItem] = Field(
        default_factory=list, description="Versions that already had a snapshot"
    )
    skipped: list[ArchiveItem] = Field(
        default_factory=list, description="Units skipped for missing data"
    )
    errors: list[ArchiveItem] = Field(
        default_factory=list, description="Read/parse/write failures"
    )

    @property
    def ok(self) -> bool:
        return not self.errors

    def merge(self, other: "ArchiveReport") -> None:
        self.archived.extend(other.archived)
        self.already_archived.extend(other.already_archived)
        self.skipped.extend(other.skipped)
        self.errors.extend(other.errors)
