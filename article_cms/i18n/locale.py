"""
Locale helpers

Pure functions for the article locale model:
- the "all languages" listing sentinel
- default-locale resolution
- language metadata lookup
- URL path prefixes per locale
"""

from __future__ import annotations

from article_cms.config import settings

# ── Constants ─────────────────────────────────────────────────────────────────

# Reserved listing filter value: merge every locale instead of filtering to one
ALL_LANGUAGES = "all"

# Base language codes whose scripts read right-to-left
RTL_LOCALES: frozenset[str] = frozenset({"ar", "he", "fa", "ur"})

# Human-readable names for supported locales
LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "zh": "中文",
    "ja": "日本語",
    "ko": "한국어",
    "fr": "Français",
    "de": "Deutsch",
    "es": "Español",
    "pt": "Português",
    "ru": "Русский",
    "ar": "العربية",
}


# ── Public helpers ────────────────────────────────────────────────────────────


def is_rtl_locale(locale: str) -> bool:
    """Return True when the base language of ``locale`` is right-to-left."""
    base = locale.split("-")[0].lower()
    return base in RTL_LOCALES


def is_default_locale(locale: str | None) -> bool:
    return locale is None or locale == settings.default_locale


def resolve_locale(locale: str | None) -> str:
    """Return ``locale`` or the configured default locale when it is missing."""
    return locale or settings.default_locale


def get_language_info(locale: str) -> dict[str, str | bool]:
    """Return a metadata dict describing the given locale.

    Args:
        locale: locale code, e.g. "ar", "fr".

    Returns:
        Dict with keys: ``code`` (str), ``name`` (str), ``is_rtl`` (bool).
    """
    return {
        "code": locale,
        "name": LANGUAGE_NAMES.get(locale, locale),
        "is_rtl": is_rtl_locale(locale),
    }


def locale_path_prefix(locale: str) -> str:
    """URL prefix for a locale: empty for the default locale, ``/{locale}`` otherwise."""
    return "" if is_default_locale(locale) else f"/{locale}"
