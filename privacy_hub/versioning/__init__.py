"""Versioning - tag ordering, front matter and the snapshot archiver."""

from privacy_hub.versioning.archiver import MetadataUpdateError, VersionArchiver
from privacy_hub.versioning.tags import compare_versions, parse_tag, sort_versions_desc

__all__ = [
    "VersionArchiver",
    "MetadataUpdateError",
    "compare_versions",
    "parse_tag",
    "sort_versions_desc",
]
