"""On-disk layout of the notices tree.

    notices/<notice_id>/metadata.json
    notices/<notice_id>/<lang>/latest.md             mutable, current content
    notices/<notice_id>/<lang>/v<version>/notice.md  immutable snapshot
"""

from pathlib import Path

from pydantic import ValidationError

from privacy_hub.catalog.files import read_json_file
from privacy_hub.contracts.notice import NoticeMetadata

METADATA_FILE = "metadata.json"
LATEST_FILE = "latest.md"
SNAPSHOT_FILE = "notice.md"
SNAPSHOT_PREFIX = "v"


class MetadataError(Exception):
    """Raised when a notice's metadata.json is missing, unreadable or invalid."""


def snapshot_dir_name(version: str) -> str:
    """``"1.1"`` and ``"v1.1"`` both map to ``"v1.1"``."""
    tag = version[1:] if version.startswith(SNAPSHOT_PREFIX) else version
    return f"{SNAPSHOT_PREFIX}{tag}"


def snapshot_path(language_dir: Path, version: str) -> Path:
    return language_dir / snapshot_dir_name(version) / SNAPSHOT_FILE


def is_snapshot_dir(name: str) -> bool:
    return name.startswith(SNAPSHOT_PREFIX)


def load_raw_metadata(notice_dir: Path) -> dict:
    """
    The descriptor as a plain dict, keys in file order.

    Raises:
        MetadataError: If the file is missing, unreadable or not a JSON object.
    """
    metadata_path = notice_dir / METADATA_FILE
    if not metadata_path.is_file():
        raise MetadataError(f"{metadata_path} not found")

    try:
        data = read_json_file(metadata_path)
    except OSError as e:
        raise MetadataError(f"cannot read {metadata_path}: {e}") from e
    except ValueError as e:
        raise MetadataError(f"invalid JSON in {metadata_path}: {e}") from e

    if not isinstance(data, dict):
        raise MetadataError(f"{metadata_path} is not a JSON object")
    return data


def validate_metadata(notice_dir: Path, data: dict) -> NoticeMetadata:
    try:
        return NoticeMetadata.model_validate(data)
    except ValidationError as e:
        raise MetadataError(f"invalid metadata in {notice_dir / METADATA_FILE}: {e}") from e


def load_metadata(notice_dir: Path) -> NoticeMetadata:
    """
    Read and validate ``metadata.json`` of a notice directory.

    Raises:
        MetadataError: If the descriptor is missing, unparsable or invalid.
    """
    return validate_metadata(notice_dir, load_raw_metadata(notice_dir))


__all__ = [
    "METADATA_FILE",
    "LATEST_FILE",
    "SNAPSHOT_FILE",
    "MetadataError",
    "snapshot_dir_name",
    "snapshot_path",
    "is_snapshot_dir",
    "load_raw_metadata",
    "validate_metadata",
    "load_metadata",
]
