"""Everything the rendering layer needs for one site build."""

from dataclasses import dataclass, field
from pathlib import Path

from jinja2 import Environment

from privacy_hub.catalog.collections import NoticePage, ProjectPage, notice_pages, project_pages
from privacy_hub.catalog.resolver import DocumentResolver
from privacy_hub.contracts.notice import Notice
from privacy_hub.i18n.locales import LocaleTree, load_locales
from privacy_hub.i18n.translator import Translator
from privacy_hub.settings import Settings, get_settings
from privacy_hub.site.filters import create_environment


@dataclass
class SiteContext:
    """Catalog, pages, string tables and template environment of a build."""

    resolver: DocumentResolver
    environment: Environment
    locales: dict[str, LocaleTree]
    default_language: str
    path_prefix: str
    notices: list[Notice] = field(default_factory=list)
    projects: list[ProjectPage] = field(default_factory=list)
    pages: list[NoticePage] = field(default_factory=list)

    def translator(self, language: str) -> Translator:
        return Translator.for_language(self.locales, language, fallback=self.default_language)

    def render(self, page: NoticePage, template: str = "notice.html") -> str:
        """Render one notice page with its own language's translator."""
        notice = self.resolver.find_notice(page.notice_id)
        return self.environment.get_template(template).render(
            notice=notice,
            page=page,
            lang=page.language,
            url=page.url,
            notices=self.notices,
            translator=self.translator(page.language),
            status=self.resolver.translation_status(page.notice_id, page.language),
        )


def build_context(
    settings: Settings | None = None,
    templates_dir: Path | str | None = None,
) -> SiteContext:
    """
    Scan the notices tree and load the string tables configured in settings.

    Args:
        settings: Defaults to :func:`get_settings`
        templates_dir: Overrides ``settings.templates_dir``
    """
    settings = settings or get_settings()

    resolver = DocumentResolver(settings.notices_dir, default_language=settings.main_language)
    locales = load_locales(settings.locales_dir)
    environment = create_environment(
        templates_dir or settings.templates_dir, locales, settings.main_language
    )
    notices = resolver.list_notices()

    return SiteContext(
        resolver=resolver,
        environment=environment,
        locales=locales,
        default_language=settings.main_language,
        path_prefix=settings.path_prefix,
        notices=notices,
        projects=project_pages(notices, prefix=settings.path_prefix),
        pages=notice_pages(notices, prefix=settings.path_prefix),
    )


__all__ = ["SiteContext", "build_context"]
