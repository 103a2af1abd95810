"""
Flashcard review service.

Applies SM-2 scheduling to saved words and answers which words are due.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from logophile.modules.vocabulary.repository import SavedWordRepository
from logophile.shared.logging import get_logger, log_card_reviewed

from .schemas import SchedulingFields
from .sm2 import ReviewOutcome, calculate_next_review, quality_from_outcome

if TYPE_CHECKING:
    from logophile.modules.vocabulary.models import SavedWord

logger = get_logger(__name__)


class ReviewService:
    """
    Spaced-repetition review of saved words.

    Example:
        async with db_manager.session() as session:
            service = ReviewService(session)
            for word in await service.due_words():
                await service.review_card(word, "know")
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = SavedWordRepository(session)

    async def due_words(self, now: datetime | None = None) -> Sequence[SavedWord]:
        """Words whose due date has passed."""
        return await self._repository.list_due(now or datetime.now(UTC))

    async def due_count(self, now: datetime | None = None) -> int:
        return await self._repository.count_due(now or datetime.now(UTC))

    async def count(self) -> int:
        """Total number of saved words."""
        return await self._repository.count()

    async def review_card(
        self,
        word: SavedWord,
        outcome: ReviewOutcome | str,
        *,
        now: datetime | None = None,
    ) -> SavedWord | None:
        """
        Record a know / dont-know answer for a word.

        Returns:
            The updated word, or None if the word has no identifier or no
            longer exists
        """
        return await self.review_card_with_quality(
            word, quality_from_outcome(outcome), now=now
        )

    async def review_card_with_quality(
        self,
        word: SavedWord,
        quality: int,
        *,
        now: datetime | None = None,
    ) -> SavedWord | None:
        """
        Record a review graded on the full 0-5 SM-2 scale.

        Ease factor, interval, due date and the incremented review count are
        written in a single update.
        """
        if word.id is None:
            return None

        result = calculate_next_review(quality, word, now=now)
        update = SchedulingFields(
            ease_factor=result.ease_factor,
            interval=result.interval,
            due_date=result.due_date,
            review_count=word.review_count + 1,
        )

        updated = await self._repository.update_by_id(word.id, update)
        if updated is None:
            logger.debug("Skipping review of missing word {}", word.id)
            return None

        log_card_reviewed(
            str(updated.id),
            updated.term,
            quality,
            updated.interval,
            updated.ease_factor,
        )
        return updated
