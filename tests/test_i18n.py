"""Tests for locale loading and the translator."""

import json

import pytest

from privacy_hub.i18n import MissingTranslation, Translator, language_name, load_locales
from privacy_hub.i18n.translator import lookup_path

STRINGS = {
    "nav": {"home": "Home", "notices": "Informative"},
    "notice": {"outdated": "Traduzione ferma alla v{version} (ultima v{latest})"},
    "title": "Privacy Hub",
}


class TestLoadLocales:
    """One JSON file per language."""

    def test_loads_json_files(self, tmp_path):
        (tmp_path / "it.json").write_text(json.dumps(STRINGS), encoding="utf-8")
        (tmp_path / "en.json").write_text('{"title": "Privacy Hub"}', encoding="utf-8")
        (tmp_path / "README.md").write_text("ignored", encoding="utf-8")

        locales = load_locales(tmp_path)

        assert sorted(locales) == ["en", "it"]
        assert locales["it"]["nav"]["home"] == "Home"

    def test_invalid_files_skipped(self, tmp_path):
        (tmp_path / "it.json").write_text("{broken", encoding="utf-8")
        (tmp_path / "en.json").write_text("[1, 2]", encoding="utf-8")
        (tmp_path / "fr.json").write_text("{}", encoding="utf-8")

        assert load_locales(tmp_path) == {"fr": {}}

    def test_missing_directory(self, tmp_path):
        assert load_locales(tmp_path / "missing") == {}


class TestTranslator:
    """Explicit, single-language string lookup."""

    def test_lookup_nested_key(self):
        translator = Translator("it", STRINGS)

        assert translator.lookup("nav.notices") == "Informative"
        assert translator.lookup("nav") == STRINGS["nav"]

    def test_lookup_missing_raises(self):
        translator = Translator("it", STRINGS)

        with pytest.raises(MissingTranslation, match="nav.missing"):
            translator.lookup("nav.missing")
        with pytest.raises(MissingTranslation):
            translator.lookup("title.deeper")

    def test_translate_with_params(self):
        translator = Translator("it", STRINGS)

        text = translator.translate("notice.outdated", version="1.0", latest="2.0")

        assert text == "Traduzione ferma alla v1.0 (ultima v2.0)"

    def test_translate_returns_key_when_missing_or_subtree(self):
        translator = Translator("it", STRINGS)

        assert translator.translate("nav.about") == "nav.about"
        assert translator.translate("nav") == "nav"

    def test_for_language_fallback(self):
        locales = {"it": STRINGS, "en": {"title": "Privacy Hub EN"}}

        assert Translator.for_language(locales, "en").translate("title") == "Privacy Hub EN"
        fallback = Translator.for_language(locales, "de")
        assert fallback.language == "de"
        assert fallback.translate("nav.home") == "Home"
        assert Translator.for_language({}, "de").translate("title") == "title"

    def test_lookup_path(self):
        assert lookup_path({"a": {"b": "c"}}, ["a", "b"]) == "c"
        with pytest.raises(MissingTranslation):
            lookup_path("leaf", ["a"])


def test_language_name():
    assert language_name("it") == "Italiano"
    assert language_name("sl") == "Slovenščina"
    assert language_name("pt") == "PT"
