"""Custom SQLAlchemy column types."""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime, TypeDecorator


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime column backed by a naive UTC value.

    SQLite drops tzinfo on storage. Values are normalized to UTC before they are
    written and come back as aware UTC datetimes, so comparisons with
    ``datetime.now(UTC)`` are always valid.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> datetime | None:
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC).replace(tzinfo=None)

    def process_result_value(self, value: Any, dialect) -> datetime | None:
        if value is None:
            return None
        return value.replace(tzinfo=UTC)
