"""UUID7 implementation for time-ordered UUIDs."""

import time
import uuid
from typing import Any

from sqlalchemy import String, TypeDecorator


def uuid7() -> uuid.UUID:
    """Generate UUID7 (time-ordered UUID).

    The format follows the UUID version 7 layout:
    - 48 bits: Unix timestamp in milliseconds
    - 4 bits: Version (7)
    - 12 bits: Random
    - 2 bits: Variant (RFC 4122)
    - 62 bits: Random

    Returns:
        A new UUID7 instance.
    """
    timestamp_ms = int(time.time() * 1000)
    uuid_int = timestamp_ms << 80
    uuid_int |= 0x7000 << 64
    random_bits = uuid.uuid4().int & ((1 << 62) - 1)
    uuid_int |= random_bits
    uuid_int = (uuid_int & ~(0x3 << 62)) | (0x2 << 62)
    return uuid.UUID(int=uuid_int)


class UUID7(TypeDecorator):
    """SQLAlchemy column type storing UUIDs as canonical strings.

    SQLite has no native UUID type, so values are kept as 36-character text.

    Example:
        class SavedWord(Base):
            id: Mapped[uuid.UUID] = mapped_column(UUID7, primary_key=True, default=uuid7)
    """

    impl = String(36)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> str | None:
        """Convert a Python UUID to its string form."""
        if value is None:
            return None
        if isinstance(value, uuid.UUID):
            return str(value)
        return str(uuid.UUID(str(value)))

    def process_result_value(self, value: Any, dialect) -> uuid.UUID | None:
        """Convert a stored string back to a Python UUID."""
        if value is None:
            return None
        if isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(value)
