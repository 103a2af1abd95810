"""
Shared module - cross-cutting concerns and utilities.

This module provides shared functionality used across the application:
- Logging utilities with Loguru
- Error hierarchy and exception mapping
- Repository base class, model mixins and column types
"""

from .logging import get_logger, logger, setup_logger

__all__ = [
    "logger",
    "setup_logger",
    "get_logger",
]
