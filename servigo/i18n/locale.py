"""
Locale resolver - active language, persisted choice and translated UI text.
"""
import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional, get_args

from ..config import get_config


logger = logging.getLogger(__name__)

Language = Literal["ar", "fr", "en"]
LANGUAGES: tuple[str, ...] = get_args(Language)
RTL_LANGUAGES = frozenset({"ar"})
DEFAULT_LANGUAGE = "fr"
STORAGE_KEY = "selectedLanguage"

LANGUAGE_LABELS = {
    "ar": "العربية",
    "fr": "Français",
    "en": "English",
}

TRANSLATIONS_DIR = Path(__file__).parent / "translations"


@lru_cache(maxsize=None)
def load_translations(language: str) -> dict[str, str]:
    """Load the translation table for a language (cached)."""
    path = TRANSLATIONS_DIR / f"{language}.json"
    with path.open(encoding="utf-8") as f:
        return json.load(f)


class LocaleStore:
    """Durable key-value store for client settings, backed by a JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


@dataclass
class DocumentAttributes:
    """Direction and language applied to the rendered document."""
    dir: str = "ltr"
    lang: str = DEFAULT_LANGUAGE


def direction_for(language: str) -> str:
    return "rtl" if language in RTL_LANGUAGES else "ltr"


class LocaleContext:
    """
    Process-wide locale state, passed explicitly to every consumer.

    On creation the persisted language is restored; a missing or unknown
    value falls back to the default language with left-to-right layout.
    """

    def __init__(
        self,
        store: Optional[LocaleStore] = None,
        default_language: Optional[str] = None,
    ):
        config = get_config()
        self.store = store or LocaleStore(config.locale_storage_path)
        default = default_language or config.locale.default_language
        self.default_language = default if default in LANGUAGES else DEFAULT_LANGUAGE
        self.document = DocumentAttributes(dir="ltr", lang=self.default_language)
        self.language: str = self.default_language

        saved = self.store.get(STORAGE_KEY)
        if saved in LANGUAGES:
            self._apply(saved)
        elif saved is not None:
            logger.warning(f"Ignoring unsupported saved language: {saved!r}")

    def _apply(self, language: str) -> None:
        self.language = language
        self.document = DocumentAttributes(dir=direction_for(language), lang=language)

    def set_language(self, language: str) -> None:
        """Switch language, persist the choice and update the document attributes."""
        if language not in LANGUAGES:
            raise ValueError(f"Unsupported language: {language!r}")
        self._apply(language)
        self.store.set(STORAGE_KEY, language)
        logger.info(f"Language set to {language}")

    def translate(self, key: str) -> str:
        """Translated text for key, or the key itself when there is none."""
        return load_translations(self.language).get(key) or key

    t = translate

    @property
    def is_rtl(self) -> bool:
        return self.language in RTL_LANGUAGES
