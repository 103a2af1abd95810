"""Integration tests for VocabularyService against an in-memory SQLite database."""

import json
from datetime import UTC, datetime, timedelta

import pytest

from logophile.modules.dictionary import WordDefinition, flatten_definitions
from logophile.modules.vocabulary import VocabularyImportError, VocabularyService
from logophile.shared.errors import ValidationError
from logophile.shared.uuid7 import uuid7

from ..factories import SavedWordFactory
from ..fixtures.sample_data import SAMPLE_BACKUP_RECORD


@pytest.fixture
def service(db_session) -> VocabularyService:
    return VocabularyService(db_session)


@pytest.fixture
def definition() -> WordDefinition:
    return WordDefinition(
        term="ephemeral",
        part_of_speech="adjective",
        definition="Lasting for a very short time",
        examples=("Fame is ephemeral.",),
        synonyms=("fleeting", "transient"),
        pronunciation="/ɪˈfem(ə)rəl/",
    )


# ==================== save_word Tests ====================


@pytest.mark.asyncio
async def test_save_word_copies_definition(service, definition, now):
    word = await service.save_word(definition, now=now)

    assert word is not None
    assert word.id is not None
    assert word.term == "ephemeral"
    assert word.definition == "Lasting for a very short time"
    assert word.examples == ["Fame is ephemeral."]
    assert word.synonyms == ["fleeting", "transient"]
    assert word.part_of_speech == "adjective"
    assert word.pronunciation == "/ɪˈfem(ə)rəl/"


@pytest.mark.asyncio
async def test_save_word_initial_scheduling(service, definition, now):
    word = await service.save_word(definition, now=now)

    assert word.ease_factor == 2.5
    assert word.interval == 0
    assert word.review_count == 0
    assert word.due_date == now
    assert word.created_at == now


@pytest.mark.asyncio
async def test_save_word_twice_is_rejected(service, definition):
    first = await service.save_word(definition)
    second = await service.save_word(definition.model_copy(update={"term": "EPHEMERAL"}))

    assert first is not None
    assert second is None
    assert await service.count() == 1


@pytest.mark.asyncio
async def test_saved_copy_is_independent_of_dictionary(service, dictionary_service):
    entry = await dictionary_service.get_word("beautiful")
    definition = flatten_definitions(entry)[0]

    word = await service.save_word(definition)
    dictionary_service.reset()

    assert word.definition == "Pleasing the senses or mind aesthetically"
    assert word.audio_url == "https://example.com/audio/beautiful.mp3"


# ==================== Lookup Tests ====================


@pytest.mark.asyncio
async def test_is_word_saved_ignores_case(service, definition):
    await service.save_word(definition)

    assert await service.is_word_saved("Ephemeral ")
    assert not await service.is_word_saved("eternal")


@pytest.mark.asyncio
async def test_get_word_by_term(service, db_session):
    saved = await SavedWordFactory.create_async(db_session, term="logophile")

    assert await service.get_word_by_term("LOGOPHILE") is saved
    assert await service.get_word_by_term("missing") is None


@pytest.mark.asyncio
async def test_list_words_newest_first(service, db_session):
    base = datetime(2026, 1, 1, tzinfo=UTC)
    for offset, term in enumerate(["first", "second", "third"]):
        await SavedWordFactory.create_async(
            db_session, term=term, created_at=base + timedelta(hours=offset)
        )

    words = await service.list_words()

    assert [w.term for w in words] == ["third", "second", "first"]


# ==================== remove_word Tests ====================


@pytest.mark.asyncio
async def test_remove_word(service, db_session):
    word = await SavedWordFactory.create_async(db_session)

    assert await service.remove_word(word.id) is True
    assert await service.get_word(word.id) is None
    assert await service.count() == 0


@pytest.mark.asyncio
async def test_remove_unknown_word_is_noop(service, db_session):
    await SavedWordFactory.create_async(db_session)
    assert await service.remove_word(None) is False
    assert await service.remove_word(uuid7()) is False
    assert await service.count() == 1


# ==================== Export / Import Tests ====================


@pytest.mark.asyncio
async def test_export_uses_camel_case_and_iso_dates(service, definition, now):
    word = await service.save_word(definition, now=now)

    records = json.loads(await service.export_vocabulary())

    assert len(records) == 1
    record = records[0]
    assert record["id"] == str(word.id)
    assert record["term"] == "ephemeral"
    assert record["easeFactor"] == 2.5
    assert record["reviewCount"] == 0
    assert record["partOfSpeech"] == "adjective"
    assert datetime.fromisoformat(record["dueDate"]) == now
    assert datetime.fromisoformat(record["createdAt"]) == now


@pytest.mark.asyncio
async def test_export_empty_vocabulary(service):
    assert json.loads(await service.export_vocabulary()) == []


@pytest.mark.asyncio
async def test_export_import_round_trip(session_factory):
    async with session_factory() as session:
        source = VocabularyService(session)
        for term in ("alpha", "beta"):
            await SavedWordFactory.create_async(session, term=term, interval=6, review_count=2)
        payload = await source.export_vocabulary()
        exported = {w.term: w for w in await source.list_words()}

        for word in exported.values():
            await source.remove_word(word.id)

        imported = await source.import_vocabulary(payload)
        restored = {w.term: w for w in await source.list_words()}
        reimported = await source.import_vocabulary(payload)

    assert imported == 2
    assert reimported == 0
    assert set(restored) == {"alpha", "beta"}
    for term, word in restored.items():
        assert word.id != exported[term].id
        assert word.interval == 6
        assert word.review_count == 2
        assert word.due_date == exported[term].due_date
        assert word.created_at == exported[term].created_at


@pytest.mark.asyncio
async def test_import_skips_existing_terms(service, db_session):
    await SavedWordFactory.create_async(db_session, term="alpha")
    payload = await service.export_vocabulary()

    assert await service.import_vocabulary(payload) == 0
    assert await service.count() == 1


@pytest.mark.asyncio
async def test_import_skips_duplicates_within_payload(service):
    payload = json.dumps([SAMPLE_BACKUP_RECORD, SAMPLE_BACKUP_RECORD])

    assert await service.import_vocabulary(payload) == 1

    word = await service.get_word_by_term("serendipity")
    assert word.term == "serendipity"
    assert word.part_of_speech == "noun"
    assert word.ease_factor == pytest.approx(2.36)
    assert word.due_date == datetime(2026, 1, 10, 9, 0, tzinfo=UTC)
    assert str(word.id) != SAMPLE_BACKUP_RECORD["id"]


@pytest.mark.asyncio
async def test_import_keeps_text_whitespace_and_normalizes_term(service):
    record = {
        **SAMPLE_BACKUP_RECORD,
        "term": "  Serendipity ",
        "definition": "  Finding something good   by chance",
        "examples": ["    indented quotation", "trailing "],
        "synonyms": [" luck"],
    }

    assert await service.import_vocabulary(json.dumps([record])) == 1

    word = await service.get_word_by_term("serendipity")
    assert word.term == "serendipity"
    assert word.definition == "  Finding something good   by chance"
    assert word.examples == ["    indented quotation", "trailing "]
    assert word.synonyms == [" luck"]

    exported = json.loads(await service.export_vocabulary())
    assert exported[0]["definition"] == record["definition"]
    assert exported[0]["examples"] == record["examples"]

@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        "not json",
        '{"term": "object, not array"}',
        json.dumps([{**SAMPLE_BACKUP_RECORD, "term": "ok"}, {"term": "missing fields"}]),
        json.dumps([{**SAMPLE_BACKUP_RECORD, "easeFactor": 1.0}]),
    ],
)
async def test_malformed_import_inserts_nothing(service, payload):
    with pytest.raises(VocabularyImportError) as exc_info:
        await service.import_vocabulary(payload)

    assert isinstance(exc_info.value, ValidationError)
    assert await service.count() == 0
