"""Localization: active language and translated UI text."""

from .locale import (
    DEFAULT_LANGUAGE,
    LANGUAGE_LABELS,
    LANGUAGES,
    DocumentAttributes,
    Language,
    LocaleContext,
    LocaleStore,
    direction_for,
    load_translations,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "LANGUAGE_LABELS",
    "LANGUAGES",
    "DocumentAttributes",
    "Language",
    "LocaleContext",
    "LocaleStore",
    "direction_for",
    "load_translations",
]
