"""Shared fixtures: small notices trees on disk."""

import json
from pathlib import Path

import pytest


def write_doc(path: Path, version: str | None, body: str = "Body\n", **extra: str) -> Path:
    """Write a Markdown document with YAML front matter."""
    lines = ["---"]
    if version is not None:
        lines.append(f'version: "{version}"')
    for key, value in extra.items():
        lines.append(f"{key}: {value}")
    lines.append("---")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n" + body, encoding="utf-8")
    return path


def write_metadata(notice_dir: Path, **fields) -> Path:
    data = {
        "name": fields.pop("name", notice_dir.name),
        "description": fields.pop("description", ""),
        "main_language": fields.pop("main_language", "it"),
        "languages": fields.pop("languages", {}),
        "versions": fields.pop("versions", []),
        **fields,
    }
    notice_dir.mkdir(parents=True, exist_ok=True)
    path = notice_dir / "metadata.json"
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def read_metadata(notice_dir: Path) -> dict:
    return json.loads((notice_dir / "metadata.json").read_text(encoding="utf-8"))


@pytest.fixture
def notices_dir(tmp_path: Path) -> Path:
    path = tmp_path / "notices"
    path.mkdir()
    return path


@pytest.fixture
def app1(notices_dir: Path) -> Path:
    """Notice ``app1``: Italian at 1.1 (new), English at 1.0 (already archived)."""
    notice_dir = notices_dir / "app1"
    write_metadata(
        notice_dir,
        name="App One",
        description="Privacy notice for App One",
        languages={"it": ["1.0"], "en": ["1.0"]},
    )
    write_doc(notice_dir / "it" / "latest.md", "1.1", "Informativa aggiornata\n", title="Informativa")
    write_doc(notice_dir / "it" / "v1.0" / "notice.md", "1.0", "Informativa\n", title="Informativa")
    write_doc(notice_dir / "en" / "latest.md", "1.0", "Privacy notice\n", title="Notice")
    write_doc(notice_dir / "en" / "v1.0" / "notice.md", "1.0", "Privacy notice\n", title="Notice")
    return notice_dir
