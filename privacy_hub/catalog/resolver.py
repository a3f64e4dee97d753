"""Read-only catalog of notices and the queries the site templates need."""

import logging
import re
from collections.abc import Sequence
from pathlib import Path

from privacy_hub.catalog.files import get_subdirectories, read_text_file
from privacy_hub.catalog.layout import (
    LATEST_FILE,
    SNAPSHOT_FILE,
    MetadataError,
    is_snapshot_dir,
    load_metadata,
)
from privacy_hub.contracts.notice import Notice, TranslationStatus, VersionRecord
from privacy_hub.versioning.frontmatter import (
    FrontMatterError,
    declared_version,
    split_document,
)
from privacy_hub.versioning.tags import compare_versions, sort_records

logger = logging.getLogger(__name__)

_URL_VERSION_PATTERN = re.compile(r"/v([\d.]+)/")


def _strip_prefix(version: str) -> str:
    version = version.strip()
    return version[1:] if version.startswith("v") else version


def read_version_record(
    file_path: Path, is_latest: bool, fallback_version: str
) -> VersionRecord | None:
    """
    Build a record from one Markdown document.

    The version comes from the front matter, else ``fallback_version``. A
    document whose front matter does not parse is still used, with the whole
    file as body; an unreadable file yields ``None``.
    """
    content = read_text_file(file_path)
    if content is None:
        return None

    try:
        metadata, body = split_document(content)
    except FrontMatterError as e:
        logger.warning(f"Ignoring front matter of {file_path}: {e}")
        metadata, body = {}, content

    return VersionRecord(
        version=declared_version(metadata) or fallback_version,
        is_latest=is_latest,
        path=file_path,
        body=body,
        extra={key: value for key, value in metadata.items() if key != "version"},
    )


def versions_for_language(language_dir: Path) -> list[VersionRecord]:
    """All records of one language directory, latest document first."""
    records: list[VersionRecord] = []

    latest = read_version_record(
        language_dir / LATEST_FILE, is_latest=True, fallback_version="latest"
    )
    if latest is not None:
        records.append(latest)

    for name in get_subdirectories(language_dir):
        if not is_snapshot_dir(name):
            continue
        snapshot = read_version_record(
            language_dir / name / SNAPSHOT_FILE, is_latest=False, fallback_version=name
        )
        if snapshot is not None:
            records.append(snapshot)

    return sort_records(records)


def scan_languages(notice_dir: Path) -> dict[str, list[VersionRecord]]:
    """Languages of a notice that have at least one readable document."""
    languages: dict[str, list[VersionRecord]] = {}
    for language in get_subdirectories(notice_dir):
        records = versions_for_language(notice_dir / language)
        if records:
            languages[language] = records
    return languages


class DocumentResolver:
    """
    Catalog of the notices tree.

    The catalog is scanned once, on first use, and then serves every page of
    a build. The resolver never writes to the tree; call :meth:`refresh`
    after the archiver has changed it.
    """

    def __init__(self, notices_dir: Path | str, default_language: str = "it"):
        """
        Args:
            notices_dir: Root of the notices tree
            default_language: Canonical language for notices whose metadata
                does not declare ``main_language``
        """
        self.notices_dir = Path(notices_dir)
        self.default_language = default_language
        self._notices: list[Notice] | None = None

    def refresh(self) -> None:
        self._notices = None

    def list_notices(self) -> list[Notice]:
        """Every notice with a valid ``metadata.json``, sorted by id."""
        if self._notices is None:
            self._notices = self._build_catalog()
        return list(self._notices)

    def _build_catalog(self) -> list[Notice]:
        if not self.notices_dir.is_dir():
            logger.warning(f"Notices directory not found: {self.notices_dir}")
            return []

        notices: list[Notice] = []
        for notice_id in get_subdirectories(self.notices_dir):
            try:
                notice = self.load_notice(notice_id)
            except (OSError, ValueError) as e:
                logger.warning(f"Could not load notice {notice_id}: {e}")
                continue
            if notice is not None:
                notices.append(notice)
        return notices

    def load_notice(self, notice_id: str) -> Notice | None:
        """Scan one notice directory; ``None`` when its metadata is missing or invalid."""
        notice_dir = self.notices_dir / notice_id

        try:
            metadata = load_metadata(notice_dir)
        except MetadataError as e:
            logger.warning(f"Skipping notice {notice_id}: {e}")
            return None

        return Notice(
            id=notice_id,
            name=metadata.name or notice_id,
            description=metadata.description,
            main_language=metadata.main_language or self.default_language,
            versions=metadata.versions,
            available_languages=scan_languages(notice_dir),
        )

    def find_notice(self, notice_id: str) -> Notice | None:
        return next((n for n in self.list_notices() if n.id == notice_id), None)

    def notices_for_language(self, language: str) -> list[Notice]:
        return [n for n in self.list_notices() if language in n.available_languages]

    def languages_for(self, notice: Notice | str) -> dict[str, list[VersionRecord]]:
        """Records per language for a notice, or an empty mapping for an unknown id."""
        if isinstance(notice, Notice):
            return dict(notice.available_languages)
        found = self.find_notice(notice)
        return dict(found.available_languages) if found else {}

    def latest_version(self, notice_id: str, language: str) -> VersionRecord | None:
        """The record a language's main page shows."""
        return self.resolve_version(self.languages_for(notice_id).get(language, []))

    @staticmethod
    def resolve_version(
        records: Sequence[VersionRecord], requested: str | None = None
    ) -> VersionRecord | None:
        """
        Pick the record for a page.

        A requested tag (``"1.2"`` or ``"v1.2"``) that matches a record wins,
        archived snapshots before the latest document. An unknown tag falls
        back to the latest document. Without a request the latest document is
        used, else the first record.
        """
        if not records:
            return None

        latest = next((r for r in records if r.is_latest), None)

        if requested:
            tag = _strip_prefix(requested)
            matches = [r for r in records if r.tag == tag]
            if matches:
                return next((r for r in matches if not r.is_latest), matches[0])
            return latest

        return latest or records[0]

    @classmethod
    def resolve_from_path(
        cls, records: Sequence[VersionRecord], url: str | None
    ) -> VersionRecord | None:
        """Resolve the version named in a page URL such as ``/notices/app/en/v1.2/``."""
        match = _URL_VERSION_PATTERN.search(url or "")
        requested = f"v{match.group(1)}" if match else None
        return cls.resolve_version(records, requested)

    def translation_status(
        self,
        notice: Notice | str,
        language: str,
        main_language: str | None = None,
    ) -> TranslationStatus | None:
        """
        Compare the most recent version recorded in metadata for ``language``
        with the canonical language's.

        Only the first recorded tag of each list is compared; intermediate
        versions are not checked. ``None`` when either list is empty or the
        metadata cannot be read.
        """
        notice_id = notice.id if isinstance(notice, Notice) else notice

        try:
            metadata = load_metadata(self.notices_dir / notice_id)
        except MetadataError as e:
            logger.warning(f"No translation status for {notice_id}: {e}")
            return None

        canonical = main_language or metadata.main_language or self.default_language
        canonical_versions = metadata.recorded_versions(canonical)
        translation_versions = metadata.recorded_versions(language)
        if not canonical_versions or not translation_versions:
            return None

        canonical_latest = canonical_versions[0]
        translation_latest = translation_versions[0]
        comparison = compare_versions(translation_latest, canonical_latest)

        return TranslationStatus(
            is_outdated=comparison < 0,
            canonical_version=canonical_latest,
            translation_version=translation_latest,
            comparison=comparison,
        )

    def all_translation_statuses(self) -> list[tuple[str, str, TranslationStatus]]:
        """
        Status of every translation recorded in metadata.

        Reads ``metadata.json`` directly, so it reflects the archive history
        rather than the documents on disk. Canonical languages and languages
        without a comparable status are left out.
        """
        statuses: list[tuple[str, str, TranslationStatus]] = []

        for notice_id in get_subdirectories(self.notices_dir):
            try:
                metadata = load_metadata(self.notices_dir / notice_id)
            except MetadataError:
                continue

            canonical = metadata.main_language or self.default_language
            for language in metadata.languages:
                if language == canonical:
                    continue
                status = self.translation_status(notice_id, language, canonical)
                if status is not None:
                    statuses.append((notice_id, language, status))

        return statuses


__all__ = [
    "DocumentResolver",
    "read_version_record",
    "versions_for_language",
    "scan_languages",
]
