"""Jinja2 filters for the notice templates."""

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any
from urllib.parse import parse_qs, urlsplit

from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import BaseModel

from privacy_hub.catalog.resolver import DocumentResolver
from privacy_hub.contracts.notice import Notice, VersionRecord
from privacy_hub.i18n.locales import LocaleTree, language_name
from privacy_hub.i18n.translator import Translator


def _field(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def get_search_param(url: str | None) -> str | None:
    """Value of ``?search=`` in a page URL."""
    if not url:
        return None
    values = parse_qs(urlsplit(url).query).get("search")
    return values[0] if values else None


def find(items: Any, key: str, value: Any) -> Any:
    if not isinstance(items, Sequence) or isinstance(items, str):
        return None
    return next((item for item in items if _field(item, key) == value), None)


def get(obj: Any, key: str) -> Any:
    if obj is None:
        return None
    return _field(obj, key)


def pluck(items: Any, key: str) -> list[Any]:
    if not isinstance(items, Sequence) or isinstance(items, str):
        return []
    return [_field(item, key) for item in items]


def _json_default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, Path):
        return str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, default=_json_default)


def find_notice(notices: Sequence[Notice], notice_id: str) -> Notice | None:
    return next((notice for notice in notices if notice.id == notice_id), None)


def find_version(records: Sequence[VersionRecord] | None, url: str | None) -> VersionRecord | None:
    """Record for the version in the page URL, the latest one if the URL names none."""
    return DocumentResolver.resolve_from_path(records or [], url)


def find_latest_version(records: Sequence[VersionRecord] | None) -> str | None:
    latest = next((r for r in records or [] if r.is_latest), None)
    return latest.version if latest else None


def register_filters(
    env: Environment,
    locales: Mapping[str, LocaleTree],
    default_language: str = "it",
) -> Environment:
    """Install the notice filters, including ``t`` for translated strings."""
    translators: dict[str, Translator] = {}

    def translator(language: str) -> Translator:
        if language not in translators:
            translators[language] = Translator.for_language(
                locales, language, fallback=default_language
            )
        return translators[language]

    def t(key: str, language: str = default_language, **params: Any) -> str:
        return translator(language).translate(key, **params)

    env.filters.update(
        {
            "getSearchParam": get_search_param,
            "getLanguageName": language_name,
            "find": find,
            "get": get,
            "pluck": pluck,
            "json": to_json,
            "findNotice": find_notice,
            "findVersion": find_version,
            "findLatestVersion": find_latest_version,
            "t": t,
        }
    )
    env.globals["translator"] = translator
    return env


def create_environment(
    templates_dir: Path | str,
    locales: Mapping[str, LocaleTree],
    default_language: str = "it",
) -> Environment:
    """Jinja2 environment over ``templates_dir`` with the notice filters installed."""
    env = Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(["html", "xml"]),
    )
    return register_filters(env, locales, default_language)


__all__ = [
    "register_filters",
    "create_environment",
    "get_search_param",
    "find",
    "get",
    "pluck",
    "to_json",
    "find_notice",
    "find_version",
    "find_latest_version",
]
