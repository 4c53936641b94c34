"""
src/i18n/translator.py
───────────────────────
Dashboard label lookup backed by JSON locale files.

Usage:
    from src.i18n.translator import t, set_lang

    t("kpi.availability")          # → "Disponibilidad" (es)
    t("risk.critical", "en")       # → "CRITICAL"
    set_lang("en")
    t("kpi.availability")          # → "Availability"
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

from config.settings import settings

_LOCALES_DIR = Path(__file__).parent / "locales"
SUPPORTED_LANGS = ("es", "en")
_FALLBACK_LANG = "es"
_current_lang: str = settings.DEFAULT_LANG if settings.DEFAULT_LANG in SUPPORTED_LANGS else _FALLBACK_LANG


@lru_cache(maxsize=4)
def _load_locale(lang: str) -> dict:
    path = _LOCALES_DIR / f"{lang}.json"
    if not path.exists():
        path = _LOCALES_DIR / f"{_FALLBACK_LANG}.json"
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def set_lang(lang: str) -> None:
    """Set the active language (module-level default)."""
    global _current_lang
    _current_lang = lang if lang in SUPPORTED_LANGS else _FALLBACK_LANG


def get_lang() -> str:
    return _current_lang


def t(key: str, lang: str | None = None) -> str:
    """
    Translate a dot-separated key.

    Returns the key itself when it is not found.
    """
    node: dict | str = _load_locale(lang or _current_lang)
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return key
        node = node[part]
    return node if isinstance(node, str) else key
