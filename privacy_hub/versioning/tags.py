"""Version tag parsing and ordering.

A tag is a dot-separated sequence of non-negative integers, optionally written
with a leading ``v`` (as in snapshot directory names). Tags compare component
by component, missing trailing components count as zero, so ``1.2 < 1.2.1 <
1.10 < 2.0`` and ``1.0 == 1``.

Strings that do not parse are unorderable: they sort below every well-formed
tag and fall back to plain string comparison among themselves.
"""

import re
from collections.abc import Iterable
from typing import TypeVar

from privacy_hub.contracts.notice import VersionRecord

_TAG_PATTERN = re.compile(r"^v?(\d+(?:\.\d+)*)$")

T = TypeVar("T", bound=VersionRecord)


def parse_tag(text: str) -> tuple[int, ...] | None:
    """Parse ``"1.2"`` / ``"v1.2"`` into ``(1, 2)``; ``None`` when malformed."""
    match = _TAG_PATTERN.match(text.strip())
    if not match:
        return None
    return tuple(int(part) for part in match.group(1).split("."))


def _normalized(parts: tuple[int, ...]) -> tuple[int, ...]:
    # Trailing zeros do not change the ordering: 1.2 == 1.2.0
    end = len(parts)
    while end > 1 and parts[end - 1] == 0:
        end -= 1
    return parts[:end]


def version_sort_key(tag: str) -> tuple[int, tuple[int, ...], str]:
    """Ascending sort key consistent with :func:`compare_versions`."""
    parts = parse_tag(tag)
    if parts is None:
        return (0, (), tag)
    return (1, _normalized(parts), "")


def compare_versions(a: str, b: str) -> int:
    """Return 1 if ``a`` is more recent than ``b``, -1 if older, 0 if equal."""
    key_a = version_sort_key(a)
    key_b = version_sort_key(b)
    if key_a > key_b:
        return 1
    if key_a < key_b:
        return -1
    return 0


def sort_versions_desc(tags: Iterable[str]) -> list[str]:
    """Most recent first; malformed tags last, in reverse lexical order."""
    return sorted(tags, key=version_sort_key, reverse=True)


def sort_records(records: Iterable[T]) -> list[T]:
    """Order a language's records: the latest document first, then by tag descending."""
    return sorted(
        records,
        key=lambda record: (record.is_latest, version_sort_key(record.tag)),
        reverse=True,
    )


__all__ = [
    "parse_tag",
    "version_sort_key",
    "compare_versions",
    "sort_versions_desc",
    "sort_records",
]
