"""
SuperMemo-2 scheduling adapted to a two-choice review.

The full SM-2 grades recall from 0 to 5. Reviews here only distinguish
"know" from "dont-know", which map to qualities 4 and 1.

Algorithm per review:
    1. quality < 3: interval resets to 1 day.
    2. otherwise: 1 day after the first review, 6 after the second,
       then round(interval * ease_factor).
    3. ease_factor += 0.1 - (5 - q) * (0.08 + (5 - q) * 0.02), floored at 1.3.
    4. due_date = now + interval days.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import Protocol

from logophile.shared.errors import ValidationError

from .schemas import SchedulingFields

INITIAL_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3
MIN_QUALITY = 0
MAX_QUALITY = 5
PASSING_QUALITY = 3
# Interval (days) from which a word counts as mastered
MASTERED_INTERVAL = 21


class InvalidReviewOutcomeError(ValidationError):
    """Unknown review outcome or quality."""


class ReviewOutcome(str, Enum):
    """Answer given for a flashcard."""

    KNOW = "know"
    DONT_KNOW = "dont-know"


class MasteryTier(str, Enum):
    """Presentation tier derived from scheduling fields."""

    NEW = "new"
    LEARNING = "learning"
    MASTERED = "mastered"


# Swipe directions of the card stack
_OUTCOME_ALIASES: dict[str, ReviewOutcome] = {
    "right": ReviewOutcome.KNOW,
    "left": ReviewOutcome.DONT_KNOW,
}

_OUTCOME_QUALITY: dict[ReviewOutcome, int] = {
    ReviewOutcome.KNOW: 4,
    ReviewOutcome.DONT_KNOW: 1,
}


class CardState(Protocol):
    ease_factor: float
    interval: int
    review_count: int


@dataclass(frozen=True, slots=True)
class ReviewResult:
    """Updated scheduling fields after one review."""

    ease_factor: float
    interval: int
    due_date: datetime


def _utcnow() -> datetime:
    return datetime.now(UTC)


def initial_fields(now: datetime | None = None) -> SchedulingFields:
    """Scheduling fields of a freshly saved word: due immediately."""
    return SchedulingFields(
        ease_factor=INITIAL_EASE_FACTOR,
        interval=0,
        due_date=now or _utcnow(),
        review_count=0,
    )


def parse_outcome(outcome: ReviewOutcome | str) -> ReviewOutcome:
    """Accept an outcome value or a swipe direction."""
    if isinstance(outcome, ReviewOutcome):
        return outcome
    normalized = str(outcome).strip().lower()
    if normalized in _OUTCOME_ALIASES:
        return _OUTCOME_ALIASES[normalized]
    try:
        return ReviewOutcome(normalized)
    except ValueError as e:
        raise InvalidReviewOutcomeError(
            f"Unknown review outcome: {outcome!r}",
            details={"allowed": [o.value for o in ReviewOutcome]},
        ) from e


def quality_from_outcome(outcome: ReviewOutcome | str) -> int:
    """Map a two-choice outcome to an SM-2 quality grade."""
    return _OUTCOME_QUALITY[parse_outcome(outcome)]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_next_review(
    quality: int,
    card: CardState,
    *,
    now: datetime | None = None,
) -> ReviewResult:
    """Compute the next ease factor, interval and due date.

    ``card.review_count`` is read but never changed; incrementing it is up to
    the caller.

    Raises:
        InvalidReviewOutcomeError: quality is outside 0-5.
    """
    if isinstance(quality, bool) or not MIN_QUALITY <= quality <= MAX_QUALITY:
        raise InvalidReviewOutcomeError(
            f"Quality must be between {MIN_QUALITY} and {MAX_QUALITY}, got {quality!r}"
        )

    ease_factor = card.ease_factor
    interval = card.interval

    if quality < PASSING_QUALITY:
        interval = 1
    elif card.review_count == 0:
        interval = 1
    elif card.review_count == 1:
        interval = 6
    else:
        interval = _round_half_up(interval * ease_factor)

    lapse = MAX_QUALITY - quality
    ease_factor += 0.1 - lapse * (0.08 + lapse * 0.02)
    ease_factor = max(MIN_EASE_FACTOR, ease_factor)

    return ReviewResult(
        ease_factor=ease_factor,
        interval=interval,
        due_date=(now or _utcnow()) + timedelta(days=interval),
    )


def mastery_tier(interval: int, review_count: int) -> MasteryTier:
    """Derive the presentation tier of a saved word."""
    if review_count == 0:
        return MasteryTier.NEW
    if interval >= MASTERED_INTERVAL:
        return MasteryTier.MASTERED
    return MasteryTier.LEARNING
