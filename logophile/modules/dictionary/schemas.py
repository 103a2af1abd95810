"""Pydantic schemas for dictionary entries and the raw corpus format."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from logophile.shared.schemas import FrozenSchema

MAX_EXAMPLES = 3
MAX_SYNONYMS = 10


class DefinitionSense(FrozenSchema):
    """One part-of-speech definition of a dictionary term."""

    part_of_speech: str = Field(..., description="Part of speech, e.g. 'noun'")
    definition: str = Field(..., description="Definition text")
    examples: tuple[str, ...] = Field(default=(), max_length=MAX_EXAMPLES)
    synonyms: tuple[str, ...] = Field(default=(), max_length=MAX_SYNONYMS)


class DictionaryEntry(FrozenSchema):
    """Immutable corpus entry keyed by its lowercase term."""

    term: str = Field(..., description="Lowercase term, unique within the corpus")
    definitions: tuple[DefinitionSense, ...] = Field(default=())
    pronunciation: str | None = Field(default=None, description="Phonetic spelling")
    audio_url: str | None = Field(default=None)


class WordDefinition(FrozenSchema):
    """A single flattened definition, ready to be shown or saved.

    Carries the shared pronunciation and audio of the entry it came from.
    """

    term: str
    part_of_speech: str
    definition: str
    examples: tuple[str, ...] = ()
    synonyms: tuple[str, ...] = ()
    pronunciation: str | None = None
    audio_url: str | None = None


class RawDefinition(BaseModel):
    """Definition as stored in the corpus JSON file."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    pos: str | None = None
    definition: str | None = Field(default=None, alias="def")
    examples: list[str] | None = None
    synonyms: list[str] | None = None


class RawCorpusEntry(BaseModel):
    """Entry as stored in the corpus JSON file.

    Example:
        {"definitions": [{"pos": "noun", "def": "A lover of words"}],
         "pronunciation": "/ˈlɒɡəfʌɪl/", "audio": null}
    """

    model_config = ConfigDict(extra="ignore")

    definitions: list[RawDefinition] | None = None
    pronunciation: str | None = None
    audio: str | None = None

    def to_entry(self, term: str) -> DictionaryEntry:
        """Convert to an immutable entry, applying defaults and size caps."""
        return DictionaryEntry(
            term=term.lower(),
            definitions=tuple(
                DefinitionSense(
                    part_of_speech=d.pos or "unknown",
                    definition=d.definition or "",
                    examples=tuple((d.examples or [])[:MAX_EXAMPLES]),
                    synonyms=tuple((d.synonyms or [])[:MAX_SYNONYMS]),
                )
                for d in self.definitions or []
            ),
            pronunciation=self.pronunciation,
            audio_url=self.audio,
        )
