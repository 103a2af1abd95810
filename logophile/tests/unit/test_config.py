"""Unit tests for settings and logging setup."""

from loguru import logger

from logophile.core.config import DatabaseConfig, DictionaryConfig, LoggingConfig, get_settings
from logophile.shared.logging import get_logger, log_card_reviewed


class TestConfig:
    """Tests for environment-driven settings."""

    def test_database_url_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("DB_PATH", str(tmp_path / "words.sqlite3"))

        config = DatabaseConfig()

        assert config.async_url == f"sqlite+aiosqlite:///{tmp_path / 'words.sqlite3'}"

    def test_in_memory_database_url(self, monkeypatch):
        monkeypatch.setenv("DB_PATH", ":memory:")

        assert DatabaseConfig().async_url == "sqlite+aiosqlite:///:memory:"

    def test_dictionary_defaults(self):
        config = DictionaryConfig()

        assert config.search_limit == 20
        assert config.timeout == 30.0

    def test_dictionary_source_from_env(self, monkeypatch):
        monkeypatch.setenv("DICTIONARY_SOURCE", "https://example.com/dictionary.json")
        monkeypatch.setenv("DICTIONARY_SEARCH_LIMIT", "5")

        config = DictionaryConfig()

        assert config.source == "https://example.com/dictionary.json"
        assert config.search_limit == 5

    def test_logging_format(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")

        assert LoggingConfig().format == "json"

    def test_settings_are_cached(self):
        assert get_settings() is get_settings()


class TestEventLogging:
    """Tests for structured event helpers."""

    def test_card_reviewed_event(self):
        records = []
        handler_id = logger.add(records.append, level="INFO", format="{message}")
        try:
            log_card_reviewed("id-1", "ephemeral", 4, 6, 2.5)
        finally:
            logger.remove(handler_id)

        record = records[0].record
        assert record["extra"]["event"] == "review.completed"
        assert record["extra"]["term"] == "ephemeral"
        assert record["extra"]["interval"] == 6

    def test_get_logger_binds_name(self):
        records = []
        handler_id = logger.add(records.append, level="DEBUG", format="{message}")
        try:
            get_logger("logophile.test").debug("hello")
        finally:
            logger.remove(handler_id)

        assert records[0].record["extra"]["name"] == "logophile.test"
