"""
Configuration and environment handling for ServiGO.
"""
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


class BackendConfig(BaseModel):
    """Hosted backend (PostgREST) configuration."""
    url: str = Field(default_factory=lambda: os.getenv("SUPABASE_URL", "http://localhost:54321"))
    anon_key: str = Field(default_factory=lambda: os.getenv("SUPABASE_ANON_KEY", ""))
    timeout: float = Field(default_factory=lambda: float(os.getenv("BACKEND_TIMEOUT", "10")))


class LoaderConfig(BaseModel):
    """Listing loader configuration."""
    max_workers: int = Field(
        default_factory=lambda: int(os.getenv("LISTING_ENRICH_WORKERS", "8")),
        description="Threads used for per-listing enrichment",
    )
    poll_interval: float = Field(
        default_factory=lambda: float(os.getenv("CHANGE_POLL_INTERVAL", "5")),
        description="Seconds between change feed polls",
    )


class LocaleConfig(BaseModel):
    """Locale configuration."""
    default_language: str = Field(default_factory=lambda: os.getenv("SERVIGO_DEFAULT_LANGUAGE", "fr"))
    storage_file: str = Field(default="locale.json")


class UIConfig(BaseModel):
    """UI configuration."""
    page_title: str = Field(default="ServiGO Tunisia")
    page_icon: str = Field(default="🛠️")
    theme_primary_color: str = Field(default="#2563EB")
    theme_accent_color: str = Field(default="#9333EA")
    currency: str = Field(default="TND")


class Config(BaseModel):
    """Main configuration."""
    backend: BackendConfig = Field(default_factory=BackendConfig)
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    locale: LocaleConfig = Field(default_factory=LocaleConfig)
    ui: UIConfig = Field(default_factory=UIConfig)

    # Paths
    cache_dir: Path = Field(default_factory=lambda: Path(os.getenv("SERVIGO_CACHE_DIR", ".cache")))

    log_level: str = Field(default_factory=lambda: os.getenv("SERVIGO_LOG_LEVEL", "INFO"))

    # Feature flags
    enable_change_feed: bool = Field(default=True)

    @property
    def locale_storage_path(self) -> Path:
        return self.cache_dir / self.locale.storage_file


# Singleton config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the singleton config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
