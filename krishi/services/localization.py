"""UI string lookup with per-caller language preference."""

import logging
from typing import Dict, Mapping, Optional

from krishi.core.exceptions import LocalizationError
from krishi.services.locales import CATALOGS

logger = logging.getLogger(__name__)


class Translator:
    """
    Maps (language, key) to a display string.

    Lookup falls back to the default language and then to the key itself,
    so a missing translation never breaks rendering.
    """

    def __init__(
        self,
        catalogs: Optional[Mapping[str, Mapping[str, str]]] = None,
        default_language: str = "en",
    ) -> None:
        self.catalogs = dict(catalogs if catalogs is not None else CATALOGS)
        if default_language not in self.catalogs:
            raise LocalizationError(f"Default language {default_language!r} has no catalog")
        self.default_language = default_language

    @property
    def languages(self) -> list[str]:
        return sorted(self.catalogs)

    def supports(self, language: str) -> bool:
        return language in self.catalogs

    def translate(self, key: str, language: Optional[str] = None) -> str:
        catalog = self.catalogs.get(language or self.default_language, {})
        if key in catalog:
            return catalog[key]
        fallback = self.catalogs[self.default_language].get(key)
        if fallback is None:
            logger.debug(f"Missing translation for {key!r}")
            return key
        return fallback

    def catalog(self, language: str) -> Dict[str, str]:
        """
        Full catalog for a language, gaps filled from the default language.

        Raises:
            LocalizationError: If the language is not supported
        """
        if not self.supports(language):
            raise LocalizationError(f"Unsupported language {language!r}")
        return {**self.catalogs[self.default_language], **self.catalogs[language]}


class LanguagePreference:
    """Caller-owned current language, bound to a translator."""

    def __init__(self, translator: Translator, language: Optional[str] = None) -> None:
        self.translator = translator
        self.language = translator.default_language
        if language:
            self.set(language)

    def set(self, language: str) -> None:
        if not self.translator.supports(language):
            raise LocalizationError(f"Unsupported language {language!r}")
        self.language = language

    def t(self, key: str) -> str:
        return self.translator.translate(key, self.language)
