"""Logophile - Logger Configuration.

Loguru-based structured logging configuration:
- Loguru for application logs (pretty format, colors, structured data)
- Intercept handler for third-party library logs (sqlalchemy, aiosqlite, httpx)
- JSON sink for machine-readable output
"""

from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING, Any

from loguru import logger

if TYPE_CHECKING:
    from logophile.core.config import Settings

# Cache for settings to avoid repeated imports
_settings_cache: Settings | None = None


def _get_settings() -> Settings:
    """Get settings lazily to avoid circular imports."""
    global _settings_cache
    if _settings_cache is None:
        from logophile.core.config import settings
        _settings_cache = settings
    return _settings_cache


class InterceptHandler(logging.Handler):
    """Handler for intercepting standard logging and redirecting to Loguru.

    SQLAlchemy, aiosqlite and httpx use the standard logging module.
    To have all logs in one Loguru format, we intercept them through this handler.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """Forward a single standard logging record to Loguru.

        Args:
            record: Log record from standard logging.
        """
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)

        frame = logging.currentframe()
        depth = 2

        if frame:
            while frame.f_code.co_filename == logging.__file__:
                if frame.f_back:
                    frame = frame.f_back
                    depth += 1
                else:
                    break

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def _create_json_sink(service_name: str) -> Any:
    """Create a JSON sink writing to stderr.

    Args:
        service_name: Name of the service for log entries

    Returns:
        Sink function for Loguru
    """
    def json_sink(message: Any) -> None:
        """Write JSON formatted log line."""
        record = message.record
        log_entry: dict[str, Any] = {
            "timestamp": record["time"].isoformat(),
            "level": record["level"].name,
            "message": record["message"],
            "module": record["extra"].get("name", record["name"]),
            "function": record["function"],
            "line": record["line"],
            "service": service_name,
        }

        for key, value in record["extra"].items():
            if key != "name":
                log_entry[key] = value

        if record.get("exception"):
            exc = record["exception"]
            log_entry["exception"] = {
                "type": exc.type.__name__ if exc.type else None,
                "value": str(exc.value) if exc.value else None,
            }

        sys.stderr.write(json.dumps(log_entry, ensure_ascii=False, default=str) + "\n")
        sys.stderr.flush()

    return json_sink


def setup_logger() -> None:
    """Configure Loguru logger.

    Sets up:
    - Console handler with colored output or a JSON sink
    - Third-party library log interception

    Logs go to stderr so that command output on stdout stays clean.
    """
    settings = _get_settings()

    logger.remove()

    is_json = settings.logging.format.lower() == "json"

    if is_json:
        logger.add(
            _create_json_sink(settings.app.name),
            level=settings.logging.level.upper(),
            backtrace=True,
            diagnose=False,
        )
    else:
        dev_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        )
        logger.add(
            sys.stderr,
            format=dev_format,
            level=settings.logging.level.upper(),
            colorize=True,
            backtrace=True,
            diagnose=settings.app.debug,
        )

    configure_third_party_loggers()

    logger.debug(
        "Logger configured",
        level=settings.logging.level,
        format="json" if is_json else "console",
    )


def configure_third_party_loggers() -> None:
    """Route third-party library logs into Loguru and quiet the chatty ones."""
    logging.root.handlers = []
    logging.root.setLevel(logging.INFO)

    loggers_to_configure = [
        "",  # root logger
        "sqlalchemy",
        "sqlalchemy.engine",
        "aiosqlite",
        "httpx",
        "httpcore",
    ]

    for logger_name in loggers_to_configure:
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers.clear()
        logging_logger.addHandler(InterceptHandler())
        logging_logger.propagate = False

        if logger_name in ["sqlalchemy", "sqlalchemy.engine", "aiosqlite"]:
            logging_logger.setLevel(logging.WARNING)
        elif logger_name in ["httpx", "httpcore"]:
            logging_logger.setLevel(logging.WARNING)
        else:
            logging_logger.setLevel(logging.INFO)

    logger.debug("Third-party loggers configured")


def get_logger(name: str):
    """Get a logger with the specified name.

    Args:
        name: Logger name (usually __name__ of the module)

    Returns:
        Configured Loguru logger with bound name
    """
    return logger.bind(name=name)
