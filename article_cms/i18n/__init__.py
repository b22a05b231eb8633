"""
i18n (Internationalization) package

Locale helpers and language metadata for the multi-language article store.
"""

from .locale import (
    ALL_LANGUAGES,
    LANGUAGE_NAMES,
    RTL_LOCALES,
    get_language_info,
    is_default_locale,
    is_rtl_locale,
    locale_path_prefix,
    resolve_locale,
)

__all__ = [
    "ALL_LANGUAGES",
    "LANGUAGE_NAMES",
    "RTL_LOCALES",
    "get_language_info",
    "is_default_locale",
    "is_rtl_locale",
    "locale_path_prefix",
    "resolve_locale",
]
