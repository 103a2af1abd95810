"""Decorators for error handling.

Function wrappers for protection against technical errors.
"""

from collections.abc import Callable
from functools import wraps
from inspect import iscoroutinefunction
from typing import Never, ParamSpec, TypeVar

from .base import AppError
from .mapping import ExceptionMapper

P = ParamSpec("P")
T = TypeVar("T")


def safe(func: Callable[P, T]) -> Callable[P, T]:
    """Decorator for protection against technical errors (Repository/Service layer).

    Usage:
        @safe
        async def get_by_term(self, term: str) -> SavedWord | None:
            # Business errors (AppError) pass through
            # Technical errors (IntegrityError, etc.) -> domain errors
            ...

    The decorator:
    - Lets AppError subclasses pass through unchanged
    - Maps technical exceptions to domain exceptions via ExceptionMapper
    - Works with both sync and async functions
    """

    def _handle_exception(e: Exception, func_name: str) -> Never:
        if isinstance(e, AppError):
            raise e
        raise ExceptionMapper.map(e, func_name) from e

    if iscoroutinefunction(func):

        @wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                _handle_exception(e, func.__name__)

        return async_wrapper  # type: ignore[return-value]

    @wraps(func)
    def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            _handle_exception(e, func.__name__)

    return sync_wrapper  # type: ignore[return-value]
