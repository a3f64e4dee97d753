"""Data contracts for the Privacy Hub notices."""

from privacy_hub.contracts.archive import ArchiveItem, ArchiveReport
from privacy_hub.contracts.notice import (
    Notice,
    NoticeMetadata,
    TranslationStatus,
    VersionRecord,
)

__all__ = [
    # Notices
    "Notice",
    "NoticeMetadata",
    "VersionRecord",
    "TranslationStatus",
    # Archiving
    "ArchiveItem",
    "ArchiveReport",
]
