"""UI strings and navigation menu."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from krishi.api.deps import get_translator
from krishi.services.localization import LanguagePreference, Translator
from krishi.services.navigation import navigation_items

router = APIRouter(tags=["i18n"])


@router.get("/i18n")
async def list_languages(translator: Translator = Depends(get_translator)) -> Dict[str, Any]:
    """Supported language codes and the default one."""
    return {"languages": translator.languages, "default": translator.default_language}


@router.get("/i18n/{language}")
async def get_catalog(
    language: str, translator: Translator = Depends(get_translator)
) -> Dict[str, str]:
    """
    Full string catalog for a language.

    Raises:
        LocalizationError: Unsupported language (400)
    """
    return translator.catalog(language)


@router.get("/navigation")
async def get_navigation(
    lang: Optional[str] = Query(None, description="Language for menu titles"),
    translator: Translator = Depends(get_translator),
) -> List[Dict[str, str]]:
    """Ordered menu with titles in the requested language."""
    preference = LanguagePreference(translator, lang)
    return [{**item, "title": preference.t(item["title_key"])} for item in navigation_items()]
