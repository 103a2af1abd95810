"""SQLAlchemy model mixins for common functionality."""

import uuid
from datetime import UTC, datetime

from sqlalchemy.orm import Mapped, mapped_column

from .types import UTCDateTime
from .uuid7 import UUID7, uuid7


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class UUIDMixin:
    """Mixin providing a UUID7 primary key.

    UUID7 values are time-ordered, which keeps the primary key index compact.

    Example:
        class SavedWord(UUIDMixin, Base):
            __tablename__ = "saved_words"
            term: Mapped[str] = mapped_column(String(255))
    """

    id: Mapped[uuid.UUID] = mapped_column(
        UUID7,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )


class CreatedAtMixin:
    """Mixin providing a created_at timestamp set once on insert.

    The value is generated in Python rather than by the database so that
    ordering by creation time keeps sub-second precision.
    """

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        default=utcnow,
        nullable=False,
        index=True,
    )
