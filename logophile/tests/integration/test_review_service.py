"""Integration tests for ReviewService against an in-memory SQLite database."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from logophile.modules.review.service import ReviewService
from logophile.modules.review.sm2 import InvalidReviewOutcomeError, MasteryTier
from logophile.modules.vocabulary import VocabularyService

from ..factories import SavedWordFactory


@pytest.fixture
def service(db_session) -> ReviewService:
    return ReviewService(db_session)


# ==================== Due Words Tests ====================


@pytest.mark.asyncio
async def test_due_words(service, db_session, now):
    await SavedWordFactory.create_async(db_session, term="yesterday", due_date=now - timedelta(days=1))
    await SavedWordFactory.create_async(db_session, term="today", due_date=now)
    await SavedWordFactory.create_async(db_session, term="tomorrow", due_date=now + timedelta(days=1))

    due = await service.due_words(now)

    assert [w.term for w in due] == ["yesterday", "today"]
    assert await service.due_count(now) == 2
    assert await service.count() == 3


@pytest.mark.asyncio
async def test_due_words_default_to_current_time(service, db_session):
    await SavedWordFactory.create_async(db_session, term="overdue", overdue=True)
    await SavedWordFactory.create_async(db_session, term="upcoming", upcoming=True)

    assert [w.term for w in await service.due_words()] == ["overdue"]
    assert await service.due_count() == 1


@pytest.mark.asyncio
async def test_due_comparison_respects_timezones(service, db_session):
    plus_five = timezone(timedelta(hours=5))
    noon_utc = datetime(2026, 3, 15, 17, 0, tzinfo=plus_five)
    await SavedWordFactory.create_async(db_session, term="noon", due_date=noon_utc)

    assert await service.due_count(datetime(2026, 3, 15, 11, 59, tzinfo=UTC)) == 0
    assert await service.due_count(datetime(2026, 3, 15, 12, 0, tzinfo=UTC)) == 1


@pytest.mark.asyncio
async def test_empty_store(service):
    assert await service.due_words() == []
    assert await service.count() == 0


# ==================== Review Tests ====================


@pytest.mark.asyncio
async def test_review_know_persists_schedule(service, db_session, now):
    word = await SavedWordFactory.create_async(db_session)

    updated = await service.review_card(word, "know", now=now)

    assert updated is not None
    assert updated.interval == 1
    assert updated.ease_factor == pytest.approx(2.5)
    assert updated.review_count == 1
    assert updated.due_date == now + timedelta(days=1)
    assert updated.mastery is MasteryTier.LEARNING

    word_id = word.id
    await db_session.commit()
    db_session.expire_all()
    reloaded = await VocabularyService(db_session).get_word(word_id)
    assert reloaded.review_count == 1
    assert reloaded.due_date == now + timedelta(days=1)


@pytest.mark.asyncio
async def test_review_dont_know(service, db_session, now):
    word = await SavedWordFactory.create_async(db_session, interval=15, review_count=3)

    updated = await service.review_card(word, "dont-know", now=now)

    assert updated.interval == 1
    assert updated.ease_factor == pytest.approx(1.96)
    assert updated.review_count == 4
    assert updated.due_date == now + timedelta(days=1)


@pytest.mark.asyncio
async def test_review_sequence_grows_interval(service, db_session, now):
    word = await SavedWordFactory.create_async(db_session)

    intervals = []
    for _ in range(4):
        word = await service.review_card(word, "right", now=now)
        intervals.append(word.interval)

    assert intervals == [1, 6, 15, 38]
    assert word.review_count == 4
    assert word.mastery is MasteryTier.MASTERED


@pytest.mark.asyncio
async def test_review_removes_word_from_due_list(service, db_session, now):
    word = await SavedWordFactory.create_async(db_session, due_date=now)

    await service.review_card(word, "know", now=now)

    assert await service.due_words(now) == []
    assert await service.due_count(now + timedelta(days=1)) == 1


@pytest.mark.asyncio
async def test_review_with_quality(service, db_session, now):
    word = await SavedWordFactory.create_async(db_session, interval=6, review_count=2)

    updated = await service.review_card_with_quality(word, 5, now=now)

    assert updated.interval == 15
    assert updated.ease_factor == pytest.approx(2.6)


@pytest.mark.asyncio
async def test_review_unsaved_word_is_noop(service, db_session):
    word = SavedWordFactory.build()

    assert await service.review_card(word, "know") is None
    assert await service.count() == 0


@pytest.mark.asyncio
async def test_review_deleted_word_is_noop(service, db_session):
    word = await SavedWordFactory.create_async(db_session)
    await VocabularyService(db_session).remove_word(word.id)

    assert await service.review_card(word, "know") is None
    assert await service.count() == 0


@pytest.mark.asyncio
async def test_invalid_outcome_leaves_word_unchanged(service, db_session):
    word = await SavedWordFactory.create_async(db_session)

    with pytest.raises(InvalidReviewOutcomeError):
        await service.review_card(word, "skip")

    assert word.review_count == 0
    assert word.interval == 0
