"""Sample test data for Logophile tests.

Usage:
    from logophile.tests.fixtures.sample_data import SAMPLE_CORPUS, KAIKKI_LINES

    service = DictionaryService(MappingCorpusSource(SAMPLE_CORPUS))
"""

import json
from typing import Any

# ==================== Corpus Data ====================


SAMPLE_CORPUS: dict[str, Any] = {
    "beau": {
        "definitions": [{"pos": "noun", "def": "A boyfriend or male admirer"}],
        "pronunciation": "/bəʊ/",
    },
    "beautiful": {
        "definitions": [
            {
                "pos": "adjective",
                "def": "Pleasing the senses or mind aesthetically",
                "examples": ["A beautiful sunset", "Beautiful music", "A beautiful mind", "Extra"],
                "synonyms": ["attractive", "lovely", "gorgeous"],
            },
            {"pos": "noun", "def": "Beautiful people or things"},
        ],
        "pronunciation": "/ˈbjuːtɪf(ə)l/",
        "audio": "https://example.com/audio/beautiful.mp3",
    },
    "beauty": {
        "definitions": [{"pos": "noun", "def": "A combination of qualities that pleases"}],
    },
    "beast": {
        "definitions": [{"pos": "noun", "def": "An animal, especially a large or dangerous one"}],
    },
    "ephemeral": {
        "definitions": [{"def": "Lasting for a very short time"}],
    },
}


# ==================== Wiktionary Dump Data ====================


def _line(record: dict[str, Any]) -> str:
    return json.dumps(record, ensure_ascii=False)


KAIKKI_LINES: list[str] = [
    _line(
        {
            "word": "Happy",
            "lang_code": "en",
            "pos": "adj",
            "senses": [
                {
                    "glosses": ["Feeling pleasure", "Contented"],
                    "examples": [{"text": "a happy child"}, {"text": ""}, {"ref": "no text"}],
                    "synonyms": [{"word": "Glad"}],
                },
                {"glosses": ["Fortunate"]},
                {"tags": ["no-gloss"]},
            ],
            "synonyms": [{"word": "joyful"}, {"word": "glad"}],
            "sounds": [{"audio": "happy.ogg"}, {"ipa": "/ˈhæpi/"}, {"ipa": "/ˈhapi/"}],
        }
    ),
    _line({"word": "glücklich", "lang_code": "de", "pos": "adj", "senses": [{"glosses": ["happy"]}]}),
    _line({"word": "happy", "lang_code": "en", "pos": "noun", "senses": [{"glosses": ["Later duplicate"]}]}),
    "{not valid json",
    "",
    _line({"word": "run", "lang_code": "en", "pos": "verb", "senses": [{"glosses": ["To move quickly"]}]}),
    _line({"word": "empty", "lang_code": "en", "pos": "adj", "senses": []}),
    _line(["not", "an", "object"]),
    _line({"word": "Paris", "lang_code": "en", "pos": "name", "senses": [{"glosses": ["Capital of France"]}]}),
]


# ==================== Vocabulary Data ====================


SAMPLE_BACKUP_RECORD: dict[str, Any] = {
    "id": "0190a1b2-c3d4-7e5f-8a9b-0c1d2e3f4a5b",
    "term": "Serendipity",
    "definition": "The occurrence of events by chance in a happy way",
    "examples": ["Finding that book was pure serendipity."],
    "synonyms": ["chance", "luck"],
    "pronunciation": "/ˌserənˈdipədē/",
    "partOfSpeech": "noun",
    "audioUrl": None,
    "easeFactor": 2.36,
    "interval": 6,
    "dueDate": "2026-01-10T09:00:00Z",
    "reviewCount": 2,
    "createdAt": "2026-01-01T09:00:00Z",
}
