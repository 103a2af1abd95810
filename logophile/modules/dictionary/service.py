"""
Dictionary search engine.

The corpus is loaded once per service instance and held in memory:
    - a term -> entry mapping for exact lookups
    - a sorted tuple of terms for prefix search by binary search

Both structures are built in a local scope and published together as one
immutable ``CorpusIndex``, so readers never see a half-built index.
"""

from __future__ import annotations

import asyncio
import time
from bisect import bisect_left
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from logophile.core.config import settings
from logophile.shared.logging import (
    get_logger,
    log_dictionary_fallback,
    log_dictionary_loaded,
)

from .corpus import (
    SAMPLE_ENTRIES,
    CorpusSource,
    CorpusUnavailableError,
    corpus_source_from_settings,
    parse_corpus,
)
from .schemas import DictionaryEntry, WordDefinition

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CorpusIndex:
    """Read-only corpus index."""

    entries: Mapping[str, DictionaryEntry]
    terms: tuple[str, ...]

    @classmethod
    def build(cls, entries: Iterable[DictionaryEntry]) -> CorpusIndex:
        by_term: dict[str, DictionaryEntry] = {}
        for entry in entries:
            by_term[entry.term] = entry
        return cls(entries=MappingProxyType(by_term), terms=tuple(sorted(by_term)))

    def __len__(self) -> int:
        return len(self.terms)

    def prefix_start(self, prefix: str) -> int:
        """Index of the first term that is >= ``prefix``."""
        return bisect_left(self.terms, prefix)


class DictionaryService:
    """In-memory dictionary with exact and prefix lookup.

    Example:
        service = DictionaryService()
        results = await service.search("beau")
        definitions = flatten_definitions(results[0])
    """

    def __init__(self, source: CorpusSource | None = None) -> None:
        """
        Args:
            source: Where to fetch the corpus from. Defaults to the configured source.
        """
        self._source = source or corpus_source_from_settings()
        self._index: CorpusIndex | None = None
        self._loading: asyncio.Task[CorpusIndex] | None = None
        self.used_fallback = False

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    @property
    def size(self) -> int:
        """Number of indexed terms (0 before loading)."""
        return len(self._index) if self._index is not None else 0

    async def load(self) -> None:
        """Load the corpus once.

        Concurrent callers await the same in-flight task. Later calls return
        immediately.
        """
        await self._ensure_index()

    async def _ensure_index(self) -> CorpusIndex:
        if self._index is not None:
            return self._index

        # No await between the check and the assignment, so every concurrent
        # caller picks up the same task.
        if self._loading is None:
            self._loading = asyncio.create_task(self._load())

        loading = self._loading
        try:
            # A cancelled caller must not cancel the load the others are awaiting
            return await asyncio.shield(loading)
        except Exception:
            if self._loading is loading:
                self._loading = None
            raise

    async def _load(self) -> CorpusIndex:
        started = time.perf_counter()
        logger.info("Loading dictionary from {}", self._source.name)

        fallback = False
        skipped = 0
        try:
            raw = await self._source.fetch()
            entries, skipped = parse_corpus(raw)
            if not entries:
                raise CorpusUnavailableError(
                    "Corpus contains no valid entries",
                    details={"source": self._source.name, "skipped": skipped},
                )
        except CorpusUnavailableError as e:
            log_dictionary_fallback(self._source.name, e.message)
            entries = list(SAMPLE_ENTRIES)
            fallback = True
        except Exception as e:
            logger.opt(exception=e).error("Unexpected error loading {}", self._source.name)
            log_dictionary_fallback(self._source.name, f"{type(e).__name__}: {e}")
            entries = list(SAMPLE_ENTRIES)
            fallback = True

        index = CorpusIndex.build(entries)
        if asyncio.current_task() is not self._loading:
            # reset() ran while this load was in flight
            logger.debug("Discarding stale dictionary load from {}", self._source.name)
            return index

        self._index = index
        self.used_fallback = fallback

        log_dictionary_loaded(
            "sample" if fallback else self._source.name,
            len(index),
            int((time.perf_counter() - started) * 1000),
            skipped=skipped,
            fallback=fallback,
        )
        return index

    async def search(self, query: str, limit: int | None = None) -> list[DictionaryEntry]:
        """Find entries matching a query exactly or by prefix.

        The exact match, if any, comes first. Prefix matches follow in
        lexicographic order. The exact match counts toward ``limit``.

        Args:
            query: Search text; surrounding whitespace and case are ignored.
            limit: Maximum number of results. Defaults to the configured limit.

        Returns:
            Matching entries, at most ``limit`` of them.
        """
        if not query.strip():
            return []

        if limit is None:
            limit = settings.dictionary.search_limit

        index = await self._ensure_index()
        if limit <= 0:
            return []

        normalized = query.strip().lower()
        results: list[DictionaryEntry] = []

        exact = index.entries.get(normalized)
        if exact is not None:
            results.append(exact)

        terms = index.terms
        for i in range(index.prefix_start(normalized), len(terms)):
            if len(results) >= limit:
                break
            term = terms[i]
            if not term.startswith(normalized):
                break
            if term == normalized:
                continue
            results.append(index.entries[term])

        return results

    async def get_word(self, term: str) -> DictionaryEntry | None:
        """Exact lookup of a single term."""
        index = await self._ensure_index()
        return index.entries.get(term.strip().lower())

    def reset(self) -> None:
        """Drop the loaded index so the next call reloads the corpus."""
        self._index = None
        self._loading = None
        self.used_fallback = False


def flatten_definitions(entry: DictionaryEntry) -> list[WordDefinition]:
    """Expand an entry into one record per part-of-speech definition."""
    return [
        WordDefinition(
            term=entry.term,
            part_of_speech=sense.part_of_speech,
            definition=sense.definition,
            examples=sense.examples,
            synonyms=sense.synonyms,
            pronunciation=entry.pronunciation,
            audio_url=entry.audio_url,
        )
        for sense in entry.definitions
    ]


@lru_cache
def get_dictionary_service() -> DictionaryService:
    """Process-wide dictionary service for the configured corpus."""
    return DictionaryService()
