"""Dictionary module: corpus loading, exact and prefix search."""

from .corpus import (
    CorpusSource,
    CorpusUnavailableError,
    FileCorpusSource,
    HttpCorpusSource,
    MappingCorpusSource,
    corpus_source_from_settings,
)
from .highlight import HighlightedTerm, highlight_match
from .schemas import DefinitionSense, DictionaryEntry, WordDefinition
from .service import DictionaryService, flatten_definitions, get_dictionary_service

__all__ = [
    "CorpusSource",
    "CorpusUnavailableError",
    "DefinitionSense",
    "DictionaryEntry",
    "DictionaryService",
    "FileCorpusSource",
    "HighlightedTerm",
    "HttpCorpusSource",
    "MappingCorpusSource",
    "WordDefinition",
    "corpus_source_from_settings",
    "flatten_definitions",
    "get_dictionary_service",
    "highlight_match",
]
