"""Pydantic schemas for spaced-repetition state."""

from datetime import datetime

from pydantic import Field

from logophile.shared.schemas import BaseSchema


class SchedulingFields(BaseSchema):
    """Spaced-repetition fields of a saved word.

    Also used as the update payload of a review, so the four fields are always
    written together.
    """

    ease_factor: float = Field(..., ge=1.3, description="Interval growth multiplier")
    interval: int = Field(..., ge=0, description="Days until the next review")
    due_date: datetime = Field(..., description="When the word is next due")
    review_count: int = Field(..., ge=0, description="Completed reviews")
