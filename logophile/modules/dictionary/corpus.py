"""
Dictionary corpus sources.

A corpus is a JSON object mapping a lowercase term to its definition data.
Sources only fetch the raw mapping; parsing into entries happens in
``parse_corpus`` so that malformed entries can be skipped one by one.
"""

from __future__ import annotations

import asyncio
import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from logophile.core.config import settings
from logophile.shared.errors import ServiceUnavailableError
from logophile.shared.logging import get_logger

from .schemas import DefinitionSense, DictionaryEntry, RawCorpusEntry

logger = get_logger(__name__)


class CorpusUnavailableError(ServiceUnavailableError):
    """Dictionary corpus could not be loaded."""


class CorpusSource(ABC):
    """Somewhere a raw corpus mapping can be fetched from."""

    name: str = "corpus"

    @abstractmethod
    async def fetch(self) -> Any:
        """Fetch the decoded corpus JSON.

        Raises:
            CorpusUnavailableError: The corpus is missing or unreadable.
        """


class FileCorpusSource(CorpusSource):
    """Corpus JSON file on the local filesystem."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()
        self.name = str(self.path)

    async def fetch(self) -> Any:
        try:
            text = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
            return json.loads(text)
        except FileNotFoundError as e:
            raise CorpusUnavailableError(
                "Corpus file not found", details={"source": self.name}
            ) from e
        except (OSError, ValueError) as e:
            raise CorpusUnavailableError(
                f"Corpus file unreadable: {e}", details={"source": self.name}
            ) from e


class HttpCorpusSource(CorpusSource):
    """Corpus JSON served over HTTP."""

    def __init__(self, url: str, timeout: float | None = None) -> None:
        self.url = url
        self.name = url
        self.timeout = timeout if timeout is not None else settings.dictionary.timeout

    async def fetch(self) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.url)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise CorpusUnavailableError(
                f"Corpus request failed with status {e.response.status_code}",
                details={"source": self.name, "status": e.response.status_code},
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise CorpusUnavailableError(
                f"Corpus request failed: {e}", details={"source": self.name}
            ) from e


class MappingCorpusSource(CorpusSource):
    """Corpus already held in memory."""

    name = "memory"

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    async def fetch(self) -> Any:
        return self._data


def corpus_source_from_settings(source: str | None = None) -> CorpusSource:
    """Build a source from a path or http(s) URL, defaulting to the configured one."""
    source = source or settings.dictionary.source
    if source.startswith(("http://", "https://")):
        return HttpCorpusSource(source)
    return FileCorpusSource(source)


def parse_corpus(data: Any) -> tuple[list[DictionaryEntry], int]:
    """Convert a raw corpus mapping into entries.

    Entries that fail validation are skipped individually.

    Returns:
        Tuple of (entries, number of skipped entries).

    Raises:
        CorpusUnavailableError: The payload is not a JSON object.
    """
    if not isinstance(data, Mapping):
        raise CorpusUnavailableError(
            "Corpus is not a JSON object",
            details={"type": type(data).__name__},
        )

    entries: list[DictionaryEntry] = []
    skipped = 0
    for term, info in data.items():
        if not isinstance(term, str) or not term.strip():
            skipped += 1
            continue
        try:
            entries.append(RawCorpusEntry.model_validate(info).to_entry(term.strip()))
        except ValidationError as e:
            skipped += 1
            logger.debug("Skipping malformed corpus entry '{}': {}", term, e.error_count())

    return entries, skipped


def _sample(
    term: str,
    part_of_speech: str,
    definition: str,
    example: str,
    synonyms: tuple[str, ...],
    pronunciation: str,
) -> DictionaryEntry:
    return DictionaryEntry(
        term=term,
        definitions=(
            DefinitionSense(
                part_of_speech=part_of_speech,
                definition=definition,
                examples=(example,),
                synonyms=synonyms,
            ),
        ),
        pronunciation=pronunciation,
    )


SAMPLE_ENTRIES: tuple[DictionaryEntry, ...] = (
    _sample(
        "logophile",
        "noun",
        "A lover of words; a person who loves words",
        "As a logophile, she spent hours reading the dictionary for pleasure.",
        ("word lover", "philologist", "linguaphile"),
        "/ˈlɒɡəfʌɪl/",
    ),
    _sample(
        "ephemeral",
        "adjective",
        "Lasting for a very short time",
        "The ephemeral beauty of cherry blossoms makes them even more precious.",
        ("fleeting", "transient", "momentary", "brief"),
        "/ɪˈfem(ə)rəl/",
    ),
    _sample(
        "serendipity",
        "noun",
        "The occurrence of events by chance in a happy or beneficial way",
        "Finding that rare book was pure serendipity.",
        ("chance", "fortune", "luck", "providence"),
        "/ˌserənˈdipədē/",
    ),
    _sample(
        "eloquent",
        "adjective",
        "Fluent or persuasive in speaking or writing",
        "She gave an eloquent speech that moved the audience to tears.",
        ("articulate", "expressive", "fluent", "persuasive"),
        "/ˈeləkwənt/",
    ),
    _sample(
        "ubiquitous",
        "adjective",
        "Present, appearing, or found everywhere",
        "Smartphones have become ubiquitous in modern society.",
        ("omnipresent", "ever-present", "pervasive", "universal"),
        "/yo͞oˈbikwədəs/",
    ),
    _sample(
        "beautiful",
        "adjective",
        "Pleasing the senses or mind aesthetically",
        "What a beautiful sunset!",
        ("attractive", "pretty", "handsome", "lovely"),
        "/ˈbjuːtɪf(ə)l/",
    ),
)
