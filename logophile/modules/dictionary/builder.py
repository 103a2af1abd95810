"""Build a corpus file from a Wiktionary (Kaikki) JSONL dump.

Each line of the dump is one JSON record for a word in a given language and
part of speech. Relevant fields:
- word: headword
- lang_code: language code ("en")
- pos: part of speech (abbreviated, e.g. "adj")
- senses[].glosses: definitions; the first gloss is used
- senses[].examples[].text: usage examples
- synonyms[].word / senses[].synonyms[].word: synonyms
- sounds[].ipa: pronunciations

Downloading the dump is left to the user; this module only transforms it.
"""

from __future__ import annotations

import gzip
import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from logophile.shared.logging import get_logger

from .schemas import MAX_EXAMPLES, MAX_SYNONYMS

logger = get_logger(__name__)

PROGRESS_EVERY = 50_000

POS_NAMES: dict[str, str] = {
    "noun": "noun",
    "verb": "verb",
    "adj": "adjective",
    "adv": "adverb",
    "prep": "preposition",
    "conj": "conjunction",
    "pron": "pronoun",
    "det": "determiner",
    "intj": "interjection",
    "num": "numeral",
    "particle": "particle",
    "affix": "affix",
    "suffix": "suffix",
    "prefix": "prefix",
    "phrase": "phrase",
    "proverb": "proverb",
    "idiom": "idiom",
    "abbrev": "abbreviation",
    "symbol": "symbol",
    "letter": "letter",
    "name": "proper noun",
    "proper noun": "proper noun",
    "contraction": "contraction",
}


@dataclass
class BuildReport:
    """Result of a corpus build.

    Attributes:
        corpus: term -> raw corpus entry, ready to be written as JSON.
        lines_processed: Number of input lines read.
        words_included: Number of terms in the corpus.
        lines_skipped: Malformed lines that could not be decoded.
    """

    corpus: dict[str, dict[str, Any]] = field(default_factory=dict)
    lines_processed: int = 0
    words_included: int = 0
    lines_skipped: int = 0


def normalize_pos(pos: str | None) -> str:
    """Expand an abbreviated part of speech."""
    if not pos:
        return "unknown"
    return POS_NAMES.get(pos.lower(), pos)


def _collect_synonyms(record: dict[str, Any]) -> list[str]:
    found: dict[str, None] = {}
    sources = [record.get("synonyms") or []]
    sources.extend(sense.get("synonyms") or [] for sense in record.get("senses") or [])
    for synonyms in sources:
        for synonym in synonyms:
            word = synonym.get("word") if isinstance(synonym, dict) else None
            if word:
                found.setdefault(word.lower(), None)
    return list(found)


def transform_record(record: dict[str, Any]) -> dict[str, Any] | None:
    """Turn one dump record into a corpus entry, or None if it has no definitions."""
    pos = normalize_pos(record.get("pos"))
    definitions = []
    for sense in record.get("senses") or []:
        glosses = sense.get("glosses")
        if not glosses:
            continue
        examples = [ex.get("text") for ex in sense.get("examples") or [] if ex.get("text")]
        definitions.append(
            {
                "pos": pos,
                "def": glosses[0],
                "examples": examples[:MAX_EXAMPLES],
                "synonyms": [],
            }
        )

    if not definitions:
        return None

    synonyms = _collect_synonyms(record)
    if synonyms:
        definitions[0]["synonyms"] = synonyms[:MAX_SYNONYMS]

    entry: dict[str, Any] = {"definitions": definitions}
    for sound in record.get("sounds") or []:
        if sound.get("ipa"):
            entry["pronunciation"] = sound["ipa"]
            break

    return entry


def build_corpus(lines: Iterable[str], *, word_limit: int | None = None) -> BuildReport:
    """Build a corpus from dump lines.

    Only English records with a headword are kept, and the first record seen for
    a word wins. Lines that are not valid JSON objects are skipped.

    Args:
        lines: JSONL lines of the dump.
        word_limit: Stop after this many words (None for no limit).
    """
    report = BuildReport()

    for line in lines:
        report.lines_processed += 1
        if report.lines_processed % PROGRESS_EVERY == 0:
            logger.info(
                "Processed {} lines, included {} words",
                report.lines_processed,
                report.words_included,
            )

        if not line.strip():
            continue

        try:
            record = json.loads(line)
            if not isinstance(record, dict):
                raise ValueError("record is not an object")
            if record.get("lang_code") != "en" or not record.get("word"):
                continue

            word = str(record["word"]).lower()
            if word in report.corpus:
                continue

            entry = transform_record(record)
        except (ValueError, TypeError, AttributeError) as e:
            report.lines_skipped += 1
            logger.debug("Skipping malformed line {}: {}", report.lines_processed, e)
            continue

        if entry is None:
            continue

        report.corpus[word] = entry
        report.words_included += 1

        if word_limit is not None and report.words_included >= word_limit:
            logger.info("Reached word limit of {}", word_limit)
            break

    return report


def read_jsonl(path: str | Path) -> Iterator[str]:
    """Yield lines of a JSONL file, decompressing ``.gz`` files on the fly.

    Undecodable bytes are replaced so one bad line is skipped by the parser
    instead of aborting the build.
    """
    path = Path(path)
    opener = gzip.open if path.suffix == ".gz" else open
    with opener(path, "rt", encoding="utf-8", errors="replace") as f:
        yield from f


def write_corpus(corpus: dict[str, dict[str, Any]], path: str | Path) -> int:
    """Write a corpus mapping as compact JSON.

    Returns:
        Size of the written file in bytes.
    """
    path = Path(path).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(corpus, ensure_ascii=False), encoding="utf-8")
    return path.stat().st_size
