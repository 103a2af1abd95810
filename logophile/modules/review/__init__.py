"""Review module: SM-2 scheduling of saved words.

``ReviewService`` lives in ``logophile.modules.review.service``; it depends on
the vocabulary models, which in turn import the scheduling helpers below.
"""

from .schemas import SchedulingFields
from .sm2 import (
    INITIAL_EASE_FACTOR,
    MIN_EASE_FACTOR,
    CardState,
    InvalidReviewOutcomeError,
    MasteryTier,
    ReviewOutcome,
    ReviewResult,
    calculate_next_review,
    initial_fields,
    mastery_tier,
    parse_outcome,
    quality_from_outcome,
)

__all__ = [
    "INITIAL_EASE_FACTOR",
    "MIN_EASE_FACTOR",
    "CardState",
    "InvalidReviewOutcomeError",
    "MasteryTier",
    "ReviewOutcome",
    "ReviewResult",
    "SchedulingFields",
    "calculate_next_review",
    "initial_fields",
    "mastery_tier",
    "parse_outcome",
    "quality_from_outcome",
]
