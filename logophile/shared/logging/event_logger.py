"""Logophile - Event Logger.

Structured event logging for dictionary and review events.
"""

from loguru import logger


def log_dictionary_loaded(
    source: str,
    words: int,
    duration_ms: int,
    *,
    skipped: int = 0,
    fallback: bool = False,
) -> None:
    """Log a completed corpus load.

    Args:
        source: Where the corpus came from (path, URL or "sample")
        words: Number of indexed terms
        duration_ms: Load duration in milliseconds
        skipped: Number of malformed entries dropped
        fallback: Whether the built-in sample corpus was used
    """
    logger.info(
        "Dictionary loaded: {} words",
        words,
        event="dictionary.loaded",
        source=source,
        words=words,
        duration_ms=duration_ms,
        skipped=skipped,
        fallback=fallback,
    )


def log_dictionary_fallback(source: str, reason: str) -> None:
    """Log that the corpus source failed and the sample corpus is used instead."""
    logger.warning(
        "Dictionary source unavailable, using sample data: {}",
        reason,
        event="dictionary.fallback",
        source=source,
        reason=reason,
    )


def log_word_saved(word_id: str, term: str) -> None:
    """Log a definition saved to the vocabulary."""
    logger.info(
        "Saved word '{}'",
        term,
        event="vocabulary.saved",
        word_id=word_id,
        term=term,
    )


def log_card_reviewed(
    word_id: str,
    term: str,
    quality: int,
    interval: int,
    ease_factor: float,
) -> None:
    """Log a completed flashcard review.

    Args:
        word_id: Saved word identifier
        term: Reviewed term
        quality: SM-2 quality grade (0-5)
        interval: New interval in days
        ease_factor: New ease factor
    """
    logger.info(
        "Reviewed '{}': next in {} day(s)",
        term,
        interval,
        event="review.completed",
        word_id=word_id,
        term=term,
        quality=quality,
        interval=interval,
        ease_factor=round(ease_factor, 3),
    )


def log_vocabulary_imported(imported: int, skipped: int) -> None:
    """Log the result of a vocabulary backup import."""
    logger.info(
        "Imported {} new word(s), skipped {} existing",
        imported,
        skipped,
        event="vocabulary.imported",
        imported=imported,
        skipped=skipped,
    )
