"""
Vocabulary management service.

Main components:
    - VocabularyService: save, remove and look up saved words; export and
      import vocabulary backups
    - VocabularyImportError: the backup payload could not be parsed
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from logophile.modules.dictionary.schemas import WordDefinition
from logophile.modules.review.sm2 import initial_fields
from logophile.shared.errors import ValidationError, safe
from logophile.shared.logging import get_logger, log_vocabulary_imported, log_word_saved

from .models import SavedWord
from .repository import SavedWordRepository
from .schemas import SavedWordCreate, SavedWordRecord, saved_word_records

logger = get_logger(__name__)


class VocabularyImportError(ValidationError):
    """Vocabulary backup could not be parsed."""


class VocabularyService:
    """
    Service for the learner's saved words.

    Example:
        async with db_manager.session() as session:
            service = VocabularyService(session)
            word = await service.save_word(definition)
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Args:
            session: Async SQLAlchemy session for database operations
        """
        self._session = session
        self._repository = SavedWordRepository(session)

    @safe
    async def save_word(
        self,
        definition: WordDefinition,
        *,
        now: datetime | None = None,
    ) -> SavedWord | None:
        """
        Save a copy of a dictionary definition for review.

        Args:
            definition: Flattened definition to copy
            now: Creation time, defaults to the current time

        Returns:
            The new SavedWord, or None if the term is already saved
        """
        if await self.is_word_saved(definition.term):
            logger.debug("Term '{}' already saved", definition.term)
            return None

        now = now or datetime.now(UTC)
        data = SavedWordCreate(
            term=definition.term,
            definition=definition.definition,
            examples=list(definition.examples),
            synonyms=list(definition.synonyms),
            pronunciation=definition.pronunciation,
            part_of_speech=definition.part_of_speech,
            audio_url=definition.audio_url,
            created_at=now,
            **initial_fields(now).model_dump(),
        )
        word = await self._repository.create(data)
        log_word_saved(str(word.id), word.term)
        return word

    async def remove_word(self, word_id: UUID | None) -> bool:
        """
        Delete a saved word.

        Unknown or missing identifiers are ignored.

        Returns:
            True if a word was deleted
        """
        if word_id is None:
            return False
        deleted = await self._repository.delete_by_id(word_id)
        if deleted:
            logger.info("Removed saved word {}", word_id)
        return deleted

    async def is_word_saved(self, term: str) -> bool:
        return await self._repository.exists(filters={"term": term.strip().lower()})

    async def get_word_by_term(self, term: str) -> SavedWord | None:
        return await self._repository.get_by_term(term)

    async def get_word(self, word_id: UUID) -> SavedWord | None:
        return await self._repository.get_by_id(word_id)

    async def list_words(self) -> Sequence[SavedWord]:
        """All saved words, most recently saved first."""
        return await self._repository.list()

    async def count(self) -> int:
        return await self._repository.count()

    async def export_vocabulary(self) -> str:
        """
        Serialize all saved words as a JSON array.

        Returns:
            Pretty-printed JSON with camelCase keys and ISO-8601 dates
        """
        words = await self.list_words()
        records = [SavedWordRecord.model_validate(word) for word in words]
        return saved_word_records.dump_json(records, indent=2, by_alias=True).decode()

    @safe
    async def import_vocabulary(self, payload: str | bytes) -> int:
        """
        Import a backup produced by ``export_vocabulary``.

        The payload is validated as a whole before anything is written. Words
        whose term is already saved are skipped, and every inserted word gets a
        new identifier.

        Returns:
            Number of words inserted

        Raises:
            VocabularyImportError: The payload is not a valid backup
        """
        try:
            records = saved_word_records.validate_json(payload)
        except PydanticValidationError as e:
            raise VocabularyImportError(
                "Invalid vocabulary backup",
                details={"errors": e.error_count()},
            ) from e

        known_terms = await self._repository.list_terms()
        imported = 0
        for record in records:
            if record.term in known_terms:
                continue
            await self._repository.create(record.to_create())
            known_terms.add(record.term)
            imported += 1

        log_vocabulary_imported(imported, len(records) - imported)
        return imported
