"""Tests for environment-driven settings."""

from privacy_hub.settings import Settings


class TestSettings:
    """Defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SITE_BUILD_COMMAND", raising=False)
        monkeypatch.delenv("NOTICES_DIR", raising=False)
        monkeypatch.delenv("MAIN_LANGUAGE", raising=False)

        settings = Settings(_env_file=None)

        assert settings.notices_dir == "notices"
        assert settings.main_language == "it"
        assert settings.site_build_command == ["npx", "@11ty/eleventy"]

    def test_build_command_as_string(self, monkeypatch):
        monkeypatch.setenv("SITE_BUILD_COMMAND", "npx @11ty/eleventy --quiet")

        assert Settings(_env_file=None).site_build_command == ["npx", "@11ty/eleventy", "--quiet"]

    def test_build_command_as_json_list(self, monkeypatch):
        monkeypatch.setenv("SITE_BUILD_COMMAND", '["make", "site"]')

        assert Settings(_env_file=None).site_build_command == ["make", "site"]

    def test_notices_dir_override(self, monkeypatch):
        monkeypatch.setenv("NOTICES_DIR", "content/notices")

        assert Settings(_env_file=None).notices_dir == "content/notices"
