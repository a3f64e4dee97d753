"""Localized interface strings."""

from privacy_hub.i18n.locales import LANGUAGE_NAMES, language_name, load_locales
from privacy_hub.i18n.translator import MissingTranslation, Translator

__all__ = ["Translator", "MissingTranslation", "load_locales", "language_name", "LANGUAGE_NAMES"]
