"""Version archiver - snapshots each language's latest.md under its declared version."""

import logging
from pathlib import Path

from privacy_hub.catalog.files import get_subdirectories, write_json_file
from privacy_hub.catalog.layout import (
    LATEST_FILE,
    METADATA_FILE,
    MetadataError,
    load_metadata,
    load_raw_metadata,
    snapshot_path,
    validate_metadata,
)
from privacy_hub.contracts.archive import ArchiveItem, ArchiveReport
from privacy_hub.site.builder import SiteBuilder
from privacy_hub.versioning.frontmatter import (
    FrontMatterError,
    declared_version,
    split_document,
)
from privacy_hub.versioning.tags import parse_tag, sort_versions_desc

logger = logging.getLogger(__name__)


class MetadataUpdateError(Exception):
    """Raised when a notice's metadata.json cannot be read, validated or written."""


class VersionArchiver:
    """
    Archive the current content of every notice language.

    For each ``<notice>/<lang>/latest.md`` whose front-matter ``version`` has
    no ``v<version>/notice.md`` yet, the file is copied byte for byte into
    that snapshot and the tag is recorded in ``metadata.json``. Existing
    snapshots are never touched, so running the archiver again is a no-op.

    Problems with one notice or language are collected in the
    :class:`ArchiveReport`; they never stop the rest of the run.
    """

    def __init__(self, notices_dir: Path | str, builder: SiteBuilder | None = None):
        """
        Args:
            notices_dir: Root of the notices tree
            builder: Site build step run by :meth:`process_all` (optional)
        """
        self.notices_dir = Path(notices_dir)
        self.builder = builder

    def process_all(self) -> ArchiveReport:
        """
        Archive every notice, then build the static site.

        Raises:
            SiteBuildError: If the site build fails. Archiving errors do not raise.
        """
        logger.info("Processing all notices for versioning...")
        report = self.archive()
        logger.info("Version processing complete")

        if self.builder is not None:
            self.builder.build()

        return report

    def archive(self) -> ArchiveReport:
        """Archive every notice directory under ``notices_dir``."""
        report = ArchiveReport()

        if not self.notices_dir.is_dir():
            logger.warning(f"Notices directory not found: {self.notices_dir}")
            return report

        for notice_id in get_subdirectories(self.notices_dir):
            report.merge(self.archive_notice(notice_id))

        logger.info(
            f"Archived {len(report.archived)} version(s), "
            f"{len(report.already_archived)} already archived, "
            f"{len(report.skipped)} skipped, {len(report.errors)} error(s)"
        )
        return report

    def archive_notice(self, notice_id: str) -> ArchiveReport:
        """Archive every language of one notice."""
        report = ArchiveReport()
        notice_dir = self.notices_dir / notice_id

        if not (notice_dir / METADATA_FILE).is_file():
            logger.warning(f"No metadata found for {notice_id}, skipping")
            report.skipped.append(
                ArchiveItem(notice_id=notice_id, message="no metadata.json")
            )
            return report

        # A snapshot is only written when its tag can be recorded in metadata
        try:
            load_metadata(notice_dir)
        except MetadataError as e:
            logger.warning(f"Skipping {notice_id}: {e}")
            report.errors.append(ArchiveItem(notice_id=notice_id, message=str(e)))
            return report

        logger.info(f"Processing {notice_id}...")
        for language in get_subdirectories(notice_dir):
            report.merge(self.archive_language(notice_id, language))

        return report

    def archive_language(self, notice_id: str, language: str) -> ArchiveReport:
        """Snapshot ``<notice>/<language>/latest.md`` if its version is new."""
        report = ArchiveReport()
        language_dir = self.notices_dir / notice_id / language
        latest_path = language_dir / LATEST_FILE
        label = f"{notice_id}/{language}"

        if not latest_path.is_file():
            logger.warning(f"No {LATEST_FILE} found for {label}, skipping")
            report.skipped.append(
                ArchiveItem(
                    notice_id=notice_id, language=language, message=f"no {LATEST_FILE}"
                )
            )
            return report

        try:
            raw_content = latest_path.read_bytes()
            content = raw_content.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read {latest_path}: {e}")
            report.errors.append(
                ArchiveItem(notice_id=notice_id, language=language, message=str(e))
            )
            return report

        try:
            frontmatter, _ = split_document(content)
        except FrontMatterError as e:
            logger.warning(f"Cannot parse front matter of {label}: {e}")
            report.errors.append(
                ArchiveItem(notice_id=notice_id, language=language, message=str(e))
            )
            return report

        version = declared_version(frontmatter)

        if version is None:
            logger.warning(f"No version found in front matter for {label}, skipping")
            report.skipped.append(
                ArchiveItem(
                    notice_id=notice_id,
                    language=language,
                    message="no version in front matter",
                )
            )
            return report

        if parse_tag(version) is None:
            logger.error(f"Invalid version '{version}' in front matter for {label}, skipping")
            report.errors.append(
                ArchiveItem(
                    notice_id=notice_id,
                    language=language,
                    version=version,
                    message="version is not a dotted numeric tag",
                )
            )
            return report

        item = ArchiveItem(notice_id=notice_id, language=language, version=version)
        target = snapshot_path(language_dir, version)

        if target.exists():
            logger.info(f"Version {version} already exists for {label}")
            report.already_archived.append(item)
            return report

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            # "x" mode: an existing snapshot is never overwritten
            with target.open("xb") as f:
                f.write(raw_content)
        except FileExistsError:
            logger.info(f"Version {version} already exists for {label}")
            report.already_archived.append(item)
            return report
        except OSError as e:
            logger.error(f"Cannot write snapshot {target}: {e}")
            report.errors.append(item.model_copy(update={"message": str(e)}))
            return report

        logger.info(f"Archived version {version} for {label}")

        try:
            self.update_metadata_versions(notice_id, language, version)
        except MetadataUpdateError as e:
            logger.error(f"Error updating metadata for {notice_id}: {e}")
            report.errors.append(item.model_copy(update={"message": str(e)}))
            return report

        report.archived.append(item)
        return report

    def update_metadata_versions(self, notice_id: str, language: str, version: str) -> bool:
        """
        Record ``version`` in ``metadata.json`` for ``language``.

        The language's list is kept sorted most recent first. Other keys of
        the descriptor are written back unchanged.

        Returns:
            True if the file was rewritten, False if the tag was already listed

        Raises:
            MetadataUpdateError: If the descriptor cannot be read, validated or written.
        """
        notice_dir = self.notices_dir / notice_id

        try:
            raw = load_raw_metadata(notice_dir)
            metadata = validate_metadata(notice_dir, raw)
        except MetadataError as e:
            raise MetadataUpdateError(str(e)) from e

        tags = list(metadata.recorded_versions(language))
        if version in tags:
            return False

        languages = dict(metadata.languages)
        languages[language] = sort_versions_desc([*tags, version])
        raw["languages"] = languages

        try:
            write_json_file(notice_dir / METADATA_FILE, raw)
        except OSError as e:
            raise MetadataUpdateError(f"cannot write {METADATA_FILE}: {e}") from e

        logger.info(f"Updated metadata for {notice_id}/{language} with version {version}")
        return True


__all__ = ["VersionArchiver", "MetadataUpdateError"]
