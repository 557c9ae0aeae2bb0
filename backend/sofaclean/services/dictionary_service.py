"""Locale dictionaries for UI strings. Reads the packaged JSON files once per process."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

from sofaclean.config import settings

DICTIONARY_DIR = Path(__file__).resolve().parents[1] / "dictionaries"


def is_supported_locale(lang: str | None) -> bool:
    return (lang or "") in settings.SUPPORTED_LOCALES


@lru_cache(maxsize=None)
def _load(lang: str) -> Dict[str, Any]:
    with open(DICTIONARY_DIR / f"{lang}.json", encoding="utf-8") as f:
        return json.load(f)


def get_dictionary(lang: str | None) -> Dict[str, Any]:
    if not is_supported_locale(lang):
        lang = settings.DEFAULT_LOCALE
    return _load(lang)
