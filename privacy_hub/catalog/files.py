"""Filesystem helpers for the notices tree."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def read_json_file(file_path: Path) -> Any:
    """
    Read and parse a JSON file.

    Raises:
        OSError: If the file is missing or unreadable.
        ValueError: If it is not UTF-8 or not valid JSON.
    """
    return json.loads(file_path.read_text(encoding="utf-8"))


def write_json_file(file_path: Path, data: Any) -> None:
    """Write JSON with 2-space indentation and a trailing newline."""
    content = json.dumps(data, indent=2, ensure_ascii=False)
    file_path.write_text(content + "\n", encoding="utf-8")


def read_text_file(file_path: Path) -> str | None:
    """Read a UTF-8 text file, ``None`` if it is missing or unreadable."""
    if not file_path.is_file():
        return None
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Error reading text file {file_path}: {e}")
        return None


def get_subdirectories(dir_path: Path) -> list[str]:
    """Names of the direct subdirectories, sorted; empty if unreadable."""
    try:
        return sorted(item.name for item in dir_path.iterdir() if item.is_dir())
    except OSError as e:
        if dir_path.exists():
            logger.warning(f"Error reading directory {dir_path}: {e}")
        return []


def get_files_by_extension(dir_path: Path, extension: str) -> list[Path]:
    """Files directly inside ``dir_path`` ending with ``extension`` (e.g. ``.json``)."""
    try:
        return sorted(
            item
            for item in dir_path.iterdir()
            if item.is_file() and item.name.endswith(extension)
        )
    except OSError as e:
        if dir_path.exists():
            logger.warning(f"Error reading directory {dir_path}: {e}")
        return []


__all__ = [
    "read_json_file",
    "write_json_file",
    "read_text_file",
    "get_subdirectories",
    "get_files_by_extension",
]
