import json
import shlex
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    notices_dir: str = Field(
        default="notices",
        alias="NOTICES_DIR",
        description="Root of the notice/language/version document tree",
    )
    locales_dir: str = Field(
        default="src/_data/locales",
        alias="LOCALES_DIR",
        description="Directory with one <lang>.json string table per language",
    )
    main_language: str = Field(
        default="it",
        alias="MAIN_LANGUAGE",
        description="Canonical language when metadata.json does not declare one",
    )
    templates_dir: str = Field(
        default="src/_includes",
        alias="TEMPLATES_DIR",
        description="Jinja2 templates used by the rendering layer",
    )
    path_prefix: str = Field(
        default="/privacy-hub/",
        alias="PATH_PREFIX",
        description="URL prefix the generated site is served under",
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Either a shell-like string or a JSON list: '["npx", "@11ty/eleventy"]'
    site_build_command: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["npx", "@11ty/eleventy"],
        alias="SITE_BUILD_COMMAND",
        description="External command that generates the static site",
    )

    @field_validator("site_build_command", mode="before")
    @classmethod
    def parse_build_command(cls, v: str | list[str] | None) -> list[str]:
        if v is None:
            return []
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return []
            if v.startswith("["):
                return json.loads(v)
            return shlex.split(v)
        return []


@lru_cache
def get_settings() -> Settings:
    return Settings()
