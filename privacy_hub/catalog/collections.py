"""Page collections handed to the templating layer."""

from collections.abc import Iterable
from dataclasses import dataclass

from privacy_hub.catalog.layout import snapshot_dir_name
from privacy_hub.contracts.notice import Notice, VersionRecord


@dataclass
class ProjectPage:
    """Overview page of one notice, listing its languages."""

    notice: Notice
    url: str
    layout: str = "project"


@dataclass
class NoticePage:
    """One rendered document: a notice in one language at one version."""

    notice_id: str
    language: str
    record: VersionRecord
    url: str
    layout: str = "notice"

    @property
    def version(self) -> str:
        return self.record.version

    @property
    def is_latest(self) -> bool:
        return self.record.is_latest


def page_url(*segments: str, prefix: str = "/") -> str:
    """``page_url("notices", "app", prefix="/hub/")`` -> ``"/hub/notices/app/"``."""
    base = "/" + prefix.strip("/") if prefix.strip("/") else ""
    path = "/".join(segment.strip("/") for segment in segments)
    return f"{base}/{path}/"


def project_pages(notices: Iterable[Notice], prefix: str = "/") -> list[ProjectPage]:
    return [
        ProjectPage(notice=notice, url=page_url("notices", notice.id, prefix=prefix))
        for notice in notices
    ]


def notice_pages(notices: Iterable[Notice], prefix: str = "/") -> list[NoticePage]:
    """
    Every page of every notice.

    The latest document of a language is served at ``/notices/<id>/<lang>/``,
    each snapshot at ``/notices/<id>/<lang>/v<version>/``.
    """
    pages: list[NoticePage] = []
    for notice in notices:
        for language, records in notice.available_languages.items():
            for record in records:
                segments = ["notices", notice.id, language]
                if not record.is_latest:
                    segments.append(snapshot_dir_name(record.version))
                pages.append(
                    NoticePage(
                        notice_id=notice.id,
                        language=language,
                        record=record,
                        url=page_url(*segments, prefix=prefix),
                    )
                )
    return pages


__all__ = ["ProjectPage", "NoticePage", "page_url", "project_pages", "notice_pages"]
