"""
Application configuration.

Every value can be overridden through environment variables or a ``.env`` file.
"""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_DATA_DIR = Path.home() / ".logophile"


class DatabaseConfig(BaseSettings):
    """Local SQLite store for saved vocabulary."""

    model_config = SettingsConfigDict(env_prefix="DB_", env_file=".env", extra="ignore")

    path: str = str(_DATA_DIR / "vocabulary.sqlite3")
    echo: bool = False

    @property
    def async_url(self) -> str:
        """URL for the aiosqlite driver."""
        if self.path == ":memory:":
            return "sqlite+aiosqlite:///:memory:"
        return f"sqlite+aiosqlite:///{self.path}"


class DictionaryConfig(BaseSettings):
    """Dictionary corpus source and search defaults."""

    model_config = SettingsConfigDict(env_prefix="DICTIONARY_", env_file=".env", extra="ignore")

    # Local path or http(s) URL of the corpus JSON
    source: str = str(_DATA_DIR / "dictionary.json")
    # Seconds to wait for a remote corpus
    timeout: float = 30.0
    search_limit: int = 20
    # Cap used when building a corpus from a Wiktionary dump
    build_word_limit: int = 30000


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_", env_file=".env", extra="ignore")

    level: str = "INFO"
    # "console" or "json"
    format: str = "console"


class AppConfig(BaseSettings):
    """General application settings."""

    model_config = SettingsConfigDict(env_prefix="APP_", env_file=".env", extra="ignore")

    name: str = "Logophile"
    debug: bool = False


class Settings:
    """Aggregates all configuration sections."""

    def __init__(self) -> None:
        self.db = DatabaseConfig()
        self.dictionary = DictionaryConfig()
        self.logging = LoggingConfig()
        self.app = AppConfig()


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings singleton."""
    return Settings()


settings = get_settings()
