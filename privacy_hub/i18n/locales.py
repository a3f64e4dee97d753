"""Locale string tables - one ``<lang>.json`` file per language."""

import logging
from pathlib import Path
from typing import Union

from privacy_hub.catalog.files import get_files_by_extension, read_json_file

logger = logging.getLogger(__name__)

# A string table is a tree: leaves are strings, inner nodes are mappings
LocaleNode = Union[str, dict[str, "LocaleNode"]]
LocaleTree = dict[str, LocaleNode]

LANGUAGE_NAMES: dict[str, str] = {
    "it": "Italiano",
    "en": "English",
    "fr": "Français",
    "de": "Deutsch",
    "sl": "Slovenščina",
    "es": "Español",
}


def load_locales(locales_dir: Path | str) -> dict[str, LocaleTree]:
    """Load every locale file; unreadable or non-object files are skipped."""
    locales_dir = Path(locales_dir)
    locales: dict[str, LocaleTree] = {}

    if not locales_dir.is_dir():
        logger.warning(f"Locales directory not found: {locales_dir}")
        return locales

    for file_path in get_files_by_extension(locales_dir, ".json"):
        try:
            content = read_json_file(file_path)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load locale file {file_path.name}: {e}")
            continue

        if not isinstance(content, dict):
            logger.warning(f"Could not load locale file {file_path.name}: not an object")
            continue
        locales[file_path.stem] = content

    return locales


def language_name(code: str) -> str:
    """Native display name of a language code, e.g. ``"it"`` -> ``"Italiano"``."""
    return LANGUAGE_NAMES.get(code, code.upper())


__all__ = ["LocaleNode", "LocaleTree", "LANGUAGE_NAMES", "load_locales", "language_name"]
