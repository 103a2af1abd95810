"""Command-line entry point."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path

from logophile import __version__
from logophile.core.config import settings
from logophile.core.database import close_db, db_manager, init_db
from logophile.modules.dictionary import (
    DictionaryService,
    corpus_source_from_settings,
    flatten_definitions,
    get_dictionary_service,
    highlight_match,
)
from logophile.modules.dictionary.builder import build_corpus, read_jsonl, write_corpus
from logophile.modules.review.service import ReviewService
from logophile.modules.review.sm2 import MasteryTier, ReviewOutcome
from logophile.modules.vocabulary import VocabularyImportError, VocabularyService
from logophile.shared.errors import AppError
from logophile.shared.logging import get_logger, setup_logger

logger = get_logger(__name__)

Command = Callable[[argparse.Namespace], Awaitable[int]]


def _dictionary(args: argparse.Namespace) -> DictionaryService:
    if args.source is None:
        return get_dictionary_service()
    return DictionaryService(corpus_source_from_settings(args.source))


def _highlighted(term: str, query: str) -> str:
    parts = highlight_match(term, query)
    if parts is None:
        return term
    return f"{parts.before}[{parts.match}]{parts.after}"


async def cmd_search(args: argparse.Namespace) -> int:
    service = _dictionary(args)
    results = await service.search(args.query, limit=args.limit)
    if service.used_fallback:
        print("(dictionary unavailable, searching the sample words)", file=sys.stderr)
    if not results:
        print(f"No words found for '{args.query}'")
        return 1

    for entry in results:
        summary = entry.definitions[0].definition if entry.definitions else ""
        print(f"{_highlighted(entry.term, args.query):<24} {summary}")
    return 0


async def cmd_define(args: argparse.Namespace) -> int:
    entry = await _dictionary(args).get_word(args.term)
    if entry is None:
        print(f"'{args.term}' is not in the dictionary")
        return 1

    header = entry.term
    if entry.pronunciation:
        header += f"  {entry.pronunciation}"
    print(header)
    for number, definition in enumerate(flatten_definitions(entry), start=1):
        print(f"  {number}. ({definition.part_of_speech}) {definition.definition}")
        for example in definition.examples:
            print(f'       "{example}"')
        if definition.synonyms:
            print(f"       synonyms: {', '.join(definition.synonyms)}")
    return 0


async def cmd_save(args: argparse.Namespace) -> int:
    entry = await _dictionary(args).get_word(args.term)
    if entry is None:
        print(f"'{args.term}' is not in the dictionary")
        return 1

    definitions = flatten_definitions(entry)
    if not 1 <= args.sense <= len(definitions):
        print(f"'{entry.term}' has {len(definitions)} definition(s)")
        return 1

    async with db_manager.session() as session:
        word = await VocabularyService(session).save_word(definitions[args.sense - 1])

    if word is None:
        print(f"'{entry.term}' is already saved")
        return 0
    print(f"Saved '{word.term}'")
    return 0


async def cmd_words(args: argparse.Namespace) -> int:  # noqa: ARG001
    async with db_manager.session() as session:
        words = await VocabularyService(session).list_words()

    if not words:
        print("No saved words yet")
        return 0
    for word in words:
        print(
            f"{word.term:<24} {word.mastery.value:<9} "
            f"due {word.due_date:%Y-%m-%d}  {word.definition}"
        )
    return 0


async def cmd_remove(args: argparse.Namespace) -> int:
    async with db_manager.session() as session:
        service = VocabularyService(session)
        word = await service.get_word_by_term(args.term)
        removed = await service.remove_word(word.id if word else None)

    if not removed:
        print(f"'{args.term}' is not saved")
        return 1
    print(f"Removed '{args.term}'")
    return 0


async def cmd_due(args: argparse.Namespace) -> int:  # noqa: ARG001
    async with db_manager.session() as session:
        words = await ReviewService(session).due_words()

    if not words:
        print("Nothing to review")
        return 0
    for word in words:
        print(f"{word.term:<24} {word.definition}")
    return 0


def _ask(prompt: str) -> str | None:
    """Read an answer from stdin; None on end of input."""
    try:
        return input(prompt).strip().lower()
    except EOFError:
        return None


async def cmd_review(args: argparse.Namespace) -> int:
    async with db_manager.session() as session:
        service = ReviewService(session)

        if args.term:
            word = await VocabularyService(session).get_word_by_term(args.term)
            if word is None:
                print(f"'{args.term}' is not saved")
                return 1
            updated = await service.review_card(word, args.outcome or ReviewOutcome.KNOW)
            if updated is not None:
                print(f"'{updated.term}' next due in {updated.interval} day(s)")
            return 0

        words = await service.due_words()
        if not words:
            print("Nothing to review")
            return 0

        reviewed = 0
        for word in words[: args.limit] if args.limit else words:
            print(f"\n{word.term}")
            if _ask("  press Enter to reveal ") is None:
                break
            print(f"  ({word.part_of_speech or 'unknown'}) {word.definition}")
            answer = _ask("  did you know it? [y/n/q] ")
            if answer is None or answer == "q":
                break
            outcome = ReviewOutcome.KNOW if answer.startswith("y") else ReviewOutcome.DONT_KNOW
            updated = await service.review_card(word, outcome)
            if updated is not None:
                reviewed += 1
                print(f"  next review in {updated.interval} day(s)")

    print(f"\nReviewed {reviewed} word(s)")
    return 0


async def cmd_export(args: argparse.Namespace) -> int:
    async with db_manager.session() as session:
        payload = await VocabularyService(session).export_vocabulary()

    if args.output:
        Path(args.output).expanduser().write_text(payload, encoding="utf-8")
        print(f"Exported vocabulary to {args.output}")
    else:
        print(payload)
    return 0


async def cmd_import(args: argparse.Namespace) -> int:
    path = Path(args.file).expanduser()
    try:
        payload = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise VocabularyImportError(
            f"Cannot read backup file {path}: {e}", details={"path": str(path)}
        ) from e
    async with db_manager.session() as session:
        imported = await VocabularyService(session).import_vocabulary(payload)
    print(f"Imported {imported} word(s)")
    return 0


async def cmd_build_corpus(args: argparse.Namespace) -> int:
    limit = args.limit if args.limit is not None else settings.dictionary.build_word_limit
    report = await asyncio.to_thread(
        build_corpus, read_jsonl(args.dump), word_limit=limit or None
    )
    output = args.output or settings.dictionary.source
    size = await asyncio.to_thread(write_corpus, report.corpus, output)

    print(
        f"Processed {report.lines_processed} lines, "
        f"included {report.words_included} words, "
        f"skipped {report.lines_skipped} malformed lines"
    )
    print(f"Wrote {output} ({size / 1024 / 1024:.1f} MB)")
    return 0


async def cmd_stats(args: argparse.Namespace) -> int:  # noqa: ARG001
    async with db_manager.session() as session:
        review = ReviewService(session)
        total = await review.count()
        due = await review.due_count()
        words = await VocabularyService(session).list_words()

    tiers = dict.fromkeys(MasteryTier, 0)
    for word in words:
        tiers[word.mastery] += 1

    print(f"Saved words: {total}")
    print(f"Due now:     {due}")
    for tier, count in tiers.items():
        print(f"  {tier.value:<9} {count}")
    return 0


COMMANDS: dict[str, Command] = {
    "search": cmd_search,
    "define": cmd_define,
    "save": cmd_save,
    "words": cmd_words,
    "remove": cmd_remove,
    "due": cmd_due,
    "review": cmd_review,
    "export": cmd_export,
    "import": cmd_import,
    "build-corpus": cmd_build_corpus,
    "stats": cmd_stats,
}

# Commands that never touch the vocabulary database
_NO_DATABASE = {"search", "define", "build-corpus"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logophile",
        description="Look up words, save them and review them with spaced repetition.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--source",
        default=None,
        help="Dictionary corpus path or URL (default: DICTIONARY_SOURCE)",
    )
    parser.add_argument("--db", default=None, help="SQLAlchemy URL of the vocabulary database")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("search", help="Search the dictionary by prefix")
    p.add_argument("query")
    p.add_argument("-n", "--limit", type=int, default=None, help="Maximum results")

    p = sub.add_parser("define", help="Show every definition of a word")
    p.add_argument("term")

    p = sub.add_parser("save", help="Save a definition to your vocabulary")
    p.add_argument("term")
    p.add_argument("--sense", type=int, default=1, help="Which definition to save (1-based)")

    sub.add_parser("words", help="List saved words, newest first")

    p = sub.add_parser("remove", help="Remove a saved word")
    p.add_argument("term")

    sub.add_parser("due", help="List words due for review")

    p = sub.add_parser("review", help="Review due words, or grade a single word")
    p.add_argument("term", nargs="?", help="Grade this word instead of reviewing interactively")
    p.add_argument(
        "outcome",
        nargs="?",
        choices=[o.value for o in ReviewOutcome] + ["right", "left"],
        help="Answer for TERM (default: know)",
    )
    p.add_argument("-n", "--limit", type=int, default=None, help="Stop after this many words")

    p = sub.add_parser("export", help="Export saved words as JSON")
    p.add_argument("-o", "--output", default=None, help="Write to a file instead of stdout")

    p = sub.add_parser("import", help="Import saved words from a JSON backup")
    p.add_argument("file")

    p = sub.add_parser("build-corpus", help="Build the dictionary from a Wiktionary JSONL dump")
    p.add_argument("dump", help="Path to the .jsonl or .jsonl.gz dump")
    p.add_argument("-o", "--output", default=None, help="Corpus path (default: DICTIONARY_SOURCE)")
    p.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of words, 0 for no limit (default: DICTIONARY_BUILD_WORD_LIMIT)",
    )

    sub.add_parser("stats", help="Show vocabulary statistics")

    return parser


async def run(args: argparse.Namespace) -> int:
    """Run one command with the database open when it needs one."""
    handler = COMMANDS[args.command]
    if args.command in _NO_DATABASE:
        return await handler(args)

    await init_db(args.db)
    try:
        return await handler(args)
    finally:
        await close_db()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger()

    try:
        return asyncio.run(run(args))
    except AppError as e:
        logger.debug("Command {} failed: {}", args.command, e.to_dict())
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
