"""Translation lookup bound to one language."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from privacy_hub.i18n.locales import LocaleNode, LocaleTree


class MissingTranslation(KeyError):
    """Raised when a dotted key has no entry in a string table."""


def lookup_path(node: LocaleNode, path: list[str]) -> LocaleNode:
    """
    Walk ``path`` down a string table.

    Raises:
        MissingTranslation: At the first segment with no entry.
    """
    if not path:
        return node

    head, *rest = path
    if not isinstance(node, dict) or head not in node:
        raise MissingTranslation(head)
    return lookup_path(node[head], rest)


@dataclass(frozen=True)
class Translator:
    """
    String table of a single language.

    Rendering code receives a translator explicitly instead of reading a
    shared "current language".
    """

    language: str
    strings: LocaleTree = field(default_factory=dict)

    @classmethod
    def for_language(
        cls,
        locales: Mapping[str, LocaleTree],
        language: str,
        fallback: str = "it",
    ) -> "Translator":
        """Translator for ``language``, using the fallback table if it has none."""
        strings = locales.get(language) or locales.get(fallback) or {}
        return cls(language=language, strings=strings)

    def lookup(self, key: str) -> LocaleNode:
        """
        Resolve a dotted key such as ``"notice.version"``.

        Returns:
            The string or subtree stored under the key

        Raises:
            MissingTranslation: If any segment of the key is missing.
        """
        try:
            return lookup_path(self.strings, key.split("."))
        except MissingTranslation as e:
            raise MissingTranslation(
                f"missing translation '{key}' for '{self.language}'"
            ) from e

    def translate(self, key: str, **params: object) -> str:
        """Translated string with ``{name}`` placeholders filled; the key itself if missing."""
        try:
            value = self.lookup(key)
        except MissingTranslation:
            return key

        if not isinstance(value, str):
            return key
        for name, param in params.items():
            value = value.replace(f"{{{name}}}", str(param))
        return value


__all__ = ["Translator", "MissingTranslation", "lookup_path"]
