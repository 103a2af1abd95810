"""Standard domain error types.

Catalog of standard error types for use across the application.
"""

from .base import AppError


class ConflictError(AppError):
    """Resource conflict or duplicate."""


class ValidationError(AppError):
    """Input validation error."""


class ServiceUnavailableError(AppError):
    """External service is unavailable."""


class DatabaseError(AppError):
    """Local database operation failed."""
