"""YAML front matter of notice documents."""

import re
from typing import Any

import yaml

# Pattern: starts with ---, then YAML content, then --- (body may be empty)
_FRONTMATTER_PATTERN = re.compile(r"^---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|$)(.*)$", re.DOTALL)


class FrontMatterError(ValueError):
    """Raised when a document's front matter is not a valid YAML mapping."""


def _split(content: str) -> tuple[str, str] | None:
    match = _FRONTMATTER_PATTERN.match(content.lstrip("\ufeff"))
    if not match:
        return None
    return match.group(1), match.group(2)


def _raw_scalar(yaml_content: str, key: str) -> str | None:
    """Source text of a top-level scalar, before YAML typing (``1.10`` stays ``"1.10"``)."""
    node = yaml.compose(yaml_content, Loader=yaml.SafeLoader)
    if not isinstance(node, yaml.MappingNode):
        return None
    for key_node, value_node in node.value:
        if key_node.value == key and isinstance(value_node, yaml.ScalarNode):
            return value_node.value
    return None


def parse_frontmatter(content: str) -> tuple[dict[str, Any] | None, str]:
    """
    Parse YAML frontmatter from markdown content.

    Returns:
        (metadata_dict, content_without_frontmatter) or (None, original_content)
    """
    try:
        metadata, body = split_document(content)
    except FrontMatterError:
        return None, content

    if not metadata:
        return None, content
    return metadata, body


def split_document(content: str) -> tuple[dict[str, Any], str]:
    """
    Split a document into front matter and body.

    A document without front matter gives ``({}, content)``.
    An unquoted numeric ``version`` is returned as written (``1.10``, not ``1.1``).

    Raises:
        FrontMatterError: If the YAML is malformed or not a mapping.
    """
    parts = _split(content)
    if parts is None:
        return {}, content

    yaml_content, body = parts
    try:
        metadata = yaml.safe_load(yaml_content)
        if metadata is None:
            return {}, body
        if not isinstance(metadata, dict):
            raise FrontMatterError("front matter is not a mapping")
        version = metadata.get("version")
        if isinstance(version, (int, float)) and not isinstance(version, bool):
            raw = _raw_scalar(yaml_content, "version")
            metadata["version"] = raw or str(version)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"malformed front matter: {e}") from e

    return metadata, body


def declared_version(metadata: dict[str, Any]) -> str | None:
    """The ``version`` front-matter value as a non-empty string, if any."""
    value = metadata.get("version")
    if value is None:
        return None
    value = str(value).strip()
    return value or None


__all__ = ["FrontMatterError", "parse_frontmatter", "split_document", "declared_version"]
