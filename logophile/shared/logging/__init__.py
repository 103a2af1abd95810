"""Logophile - Shared Logging Configuration.

Loguru-based logging module with:
- Colored console output or structured JSON lines
- Interception of standard logging from third-party libraries
- Structured event helpers
"""

from loguru import logger

from .config import (
    InterceptHandler,
    configure_third_party_loggers,
    get_logger,
    setup_logger,
)
from .event_logger import (
    log_card_reviewed,
    log_dictionary_fallback,
    log_dictionary_loaded,
    log_vocabulary_imported,
    log_word_saved,
)

__all__ = [
    # Core logging
    "logger",
    "setup_logger",
    "get_logger",
    "InterceptHandler",
    "configure_third_party_loggers",
    # Event logging
    "log_dictionary_loaded",
    "log_dictionary_fallback",
    "log_word_saved",
    "log_card_reviewed",
    "log_vocabulary_imported",
]
