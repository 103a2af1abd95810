"""Shared errors package.

Centralized error handling and exception management.
"""

from .base import AppError
from .decorators import safe
from .domain import (
    ConflictError,
    DatabaseError,
    ServiceUnavailableError,
    ValidationError,
)
from .mapping import ExceptionMapper

__all__ = [
    # Base
    "AppError",
    # Domain errors
    "ConflictError",
    "ValidationError",
    "ServiceUnavailableError",
    "DatabaseError",
    # Mapping
    "ExceptionMapper",
    # Decorators
    "safe",
]
