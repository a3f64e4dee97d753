"""Tests for the Jinja2 template filters."""

from pathlib import Path

from jinja2 import DictLoader, Environment

from privacy_hub.catalog.resolver import DocumentResolver
from privacy_hub.contracts.notice import VersionRecord
from privacy_hub.site.filters import (
    create_environment,
    find,
    find_latest_version,
    find_version,
    get_search_param,
    pluck,
    register_filters,
    to_json,
)

LOCALES = {
    "it": {"notice": {"version": "Versione {version}"}, "title": "Informative"},
    "en": {"notice": {"version": "Version {version}"}},
}


def record(version: str, is_latest: bool = False) -> VersionRecord:
    return VersionRecord(version=version, is_latest=is_latest, path=Path("doc.md"))


class TestUtilityFilters:
    """Lookups over lists of dicts or models."""

    def test_get_search_param(self):
        assert get_search_param("/notices/?search=cookie") == "cookie"
        assert get_search_param("/notices/") is None
        assert get_search_param(None) is None

    def test_find_and_pluck(self):
        items = [{"id": "a", "n": 1}, {"id": "b", "n": 2}]

        assert find(items, "id", "b") == {"id": "b", "n": 2}
        assert find(items, "id", "z") is None
        assert find("not a list", "id", "a") is None
        assert pluck(items, "n") == [1, 2]
        assert pluck(None, "n") == []

    def test_to_json_handles_models(self):
        assert to_json({"v": record("1.0")}).startswith('{"v": {"version": "1.0"')


class TestVersionFilters:
    """Version selection from the page URL."""

    def test_find_version(self):
        records = [record("2.0", is_latest=True), record("1.0")]

        assert find_version(records, "/notices/app/it/v1.0/").version == "1.0"
        assert find_version(records, "/notices/app/it/").version == "2.0"
        assert find_version([], "/notices/app/it/") is None

    def test_find_latest_version(self):
        assert find_latest_version([record("1.0"), record("2.0", is_latest=True)]) == "2.0"
        assert find_latest_version([record("1.0")]) is None
        assert find_latest_version(None) is None


class TestEnvironment:
    """Filters installed on a Jinja2 environment."""

    def test_translation_filter(self):
        env = register_filters(
            Environment(loader=DictLoader({"page.html": "{{ 'notice.version' | t(lang, version=v) }}"})),
            LOCALES,
        )
        template = env.get_template("page.html")

        assert template.render(lang="en", v="1.2") == "Version 1.2"
        assert template.render(lang="it", v="1.2") == "Versione 1.2"
        # unknown language uses the default language's strings
        assert template.render(lang="de", v="1.2") == "Versione 1.2"

    def test_notice_page_template(self, tmp_path, notices_dir, app1):
        (tmp_path / "notice.html").write_text(
            "{% set records = notice.available_languages[lang] %}"
            "{% set doc = records | findVersion(url) %}"
            "{{ lang | getLanguageName }} {{ doc.version }}"
            "{% if doc.is_latest %} ({{ 'title' | t(lang) }}){% endif %}",
            encoding="utf-8",
        )
        env = create_environment(tmp_path, LOCALES)
        notice = DocumentResolver(notices_dir).find_notice("app1")
        template = env.get_template("notice.html")

        assert template.render(notice=notice, lang="it", url="/notices/app1/it/") == "Italiano 1.1 (Informative)"
        assert template.render(notice=notice, lang="it", url="/notices/app1/it/v1.0/") == "Italiano 1.0"
