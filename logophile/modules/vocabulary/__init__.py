"""Vocabulary module: saved words, backups and lookups."""

from .models import SavedWord
from .repository import SavedWordRepository
from .schemas import SavedWordCreate, SavedWordRecord, saved_word_records
from .service import VocabularyImportError, VocabularyService

__all__ = [
    # Models
    "SavedWord",
    # Schemas
    "SavedWordCreate",
    "SavedWordRecord",
    "saved_word_records",
    # Repository
    "SavedWordRepository",
    # Service
    "VocabularyImportError",
    "VocabularyService",
]
