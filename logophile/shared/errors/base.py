"""Base exception class for application errors.

Core exception logic with auto-generation of error codes and messages.
"""

import re
from typing import Any


class AppError(Exception):
    """Base class for all application errors.

    Features:
    - Auto-generates error code from class name (e.g., ConflictError -> CONFLICT)
    - Auto-generates default_message from docstring
    - Carries structured details for logging and CLI output
    """

    code: str = "INTERNAL_ERROR"
    default_message: str = "Internal error"

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        code: str | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = dict(details) if details else {}

        if code is not None:
            self.code = code

        super().__init__(self.message)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Auto-generate code and default_message for subclasses."""
        super().__init_subclass__(**kwargs)

        # Auto-generate error code from class name
        if "code" not in cls.__dict__:
            name = cls.__name__
            for suffix in ("Exception", "Error"):
                if name.endswith(suffix):
                    name = name[: -len(suffix)]
                    break
            cls.code = re.sub(r"(?<!^)(?=[A-Z])", "_", name).upper()

        # Auto-generate default message from docstring
        if "default_message" not in cls.__dict__ and cls.__doc__:
            cls.default_message = cls.__doc__.strip().split("\n")[0]

    def to_dict(self) -> dict[str, Any]:
        """Serialize the exception to a dictionary."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }
