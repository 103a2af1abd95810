"""Pydantic schemas for saved words and vocabulary backups."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from logophile.modules.review.schemas import SchedulingFields


class SavedWordCreate(SchedulingFields):
    """Data for inserting a saved word.

    Only the term is normalized; definition text and examples are kept verbatim.
    """

    model_config = ConfigDict(str_strip_whitespace=False)

    term: str = Field(..., min_length=1, max_length=255)
    definition: str = Field(default="")
    examples: list[str] = Field(default_factory=list)
    synonyms: list[str] = Field(default_factory=list)
    pronunciation: str | None = None
    part_of_speech: str | None = None
    audio_url: str | None = None
    created_at: datetime | None = Field(
        default=None,
        description="Creation time; generated on insert when omitted",
    )

    @field_validator("term", mode="before")
    @classmethod
    def _normalize_term(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class SavedWordRecord(SavedWordCreate):
    """Saved word as written to and read from a vocabulary backup.

    Keys are camelCase (``easeFactor``, ``dueDate``...) and dates are ISO-8601.
    The identifier is kept in exports for reference but ignored on import.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )

    id: Any = None
    created_at: datetime

    def to_create(self) -> SavedWordCreate:
        """Drop the identifier so the store assigns a fresh one."""
        return SavedWordCreate.model_validate(self.model_dump(exclude={"id"}))


saved_word_records = TypeAdapter(list[SavedWordRecord])
