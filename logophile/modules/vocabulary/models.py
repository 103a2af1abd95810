"""
SQLAlchemy models for the saved vocabulary.

Main components:
    - SavedWord: a dictionary definition saved for review, with its
      spaced-repetition state
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, CheckConstraint, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from logophile.core.database import Base
from logophile.modules.review.sm2 import MasteryTier, mastery_tier
from logophile.shared.mixins import CreatedAtMixin, UUIDMixin
from logophile.shared.types import UTCDateTime


class SavedWord(UUIDMixin, CreatedAtMixin, Base):
    """
    A definition saved to the learner's vocabulary.

    The definition fields are a copy taken when the word was saved. They do not
    follow later changes to the dictionary corpus.

    Attributes:
        id: Unique identifier (UUID7)
        term: Lowercase term, unique across saved words
        definition: Definition text
        examples: Usage examples
        synonyms: Synonyms
        pronunciation: Phonetic spelling
        part_of_speech: Part of speech of the saved definition
        audio_url: Pronunciation audio
        ease_factor: Interval growth multiplier (>= 1.3)
        interval: Days until next review (0 until first reviewed)
        due_date: When the word is next due
        review_count: Completed reviews
        created_at: When the word was saved
    """

    __tablename__ = "saved_words"

    term: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    definition: Mapped[str] = mapped_column(Text, nullable=False, default="")
    examples: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    synonyms: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    pronunciation: Mapped[str | None] = mapped_column(String(255), nullable=True)
    part_of_speech: Mapped[str | None] = mapped_column(String(64), nullable=True)
    audio_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    ease_factor: Mapped[float] = mapped_column(Float, nullable=False, default=2.5)
    interval: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    due_date: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, index=True)
    review_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("ease_factor >= 1.3", name="ease_factor_floor"),
        CheckConstraint("interval >= 0", name="interval_non_negative"),
        CheckConstraint("review_count >= 0", name="review_count_non_negative"),
    )

    @property
    def mastery(self) -> MasteryTier:
        """Presentation tier derived from interval and review count."""
        return mastery_tier(self.interval, self.review_count)
