"""Data access for saved words."""

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from logophile.modules.review.schemas import SchedulingFields
from logophile.shared.repository import BaseRepository

from .models import SavedWord
from .schemas import SavedWordCreate


class SavedWordRepository(BaseRepository[SavedWord, SavedWordCreate, SchedulingFields]):
    """Keyed store of saved words.

    Inherits insert, update-by-id, delete-by-id and counting from
    ``BaseRepository``; adds term lookup and the due-date query.
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, SavedWord)

    async def get_by_term(self, term: str) -> SavedWord | None:
        return await self.get(term=term.strip().lower())

    async def list_due(self, now: datetime) -> Sequence[SavedWord]:
        """Words whose due date is at or before ``now``, earliest first."""
        return await self.list(
            filters={"due_date__lte": now},
            order_by=[SavedWord.due_date, SavedWord.created_at],
        )

    async def count_due(self, now: datetime) -> int:
        return await self.count(filters={"due_date__lte": now})

    async def list_terms(self) -> set[str]:
        result = await self._session.execute(select(SavedWord.term))
        return set(result.scalars().all())
