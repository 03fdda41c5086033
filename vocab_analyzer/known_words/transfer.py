"""
Known-word import and export.

Export produces a JSON array the user can save and move between machines.
Import accepts the same format and merges it into the existing set (union,
never replace).
"""

import json
from datetime import datetime

from vocab_analyzer.known_words.known_word_set import KnownWordSet
from vocab_analyzer.logging_config import info
from vocab_analyzer.vocabulary.word_lists import canonical_word

EXPORT_FILENAME_PREFIX = "knownWords"


class WordListImportError(ValueError):
    """Raised when an imported word list is not a JSON array."""


def export_known_words(words) -> str:
    """Serialize known words as a pretty-printed JSON array."""
    return json.dumps(list(words), ensure_ascii=False, indent=2)


def suggest_export_filename(now: datetime | None = None) -> str:
    """
    Build a timestamped export filename.

    Example:
        >>> suggest_export_filename(datetime(2024, 3, 5, 9, 7, 2))
        'knownWords-20240305-090702.json'
    """
    now = now or datetime.now()
    return f"{EXPORT_FILENAME_PREFIX}-{now.strftime('%Y%m%d-%H%M%S')}.json"


def parse_word_list(json_text: str) -> list[str]:
    """
    Parse an imported word list.

    Every element is coerced to a string and case-normalized, so
    [1, "cat", null] becomes ["1", "CAT", "NULL"]. A leading byte-order
    mark is ignored.

    Raises:
        WordListImportError: If the text is not valid JSON or not an array
    """
    try:
        data = json.loads(json_text.lstrip("\ufeff"))
    except json.JSONDecodeError as e:
        raise WordListImportError(f"Not valid JSON: {e.msg} (line {e.lineno})") from e
    except RecursionError as e:
        raise WordListImportError("Word list is nested too deeply") from e

    if not isinstance(data, list):
        raise WordListImportError(
            f"Imported file does not contain an array of words (found {type(data).__name__})"
        )

    words = [canonical_word(item) for item in data]
    return [word for word in words if word]


def import_known_words(known: KnownWordSet, json_text: str) -> int:
    """
    Merge an imported JSON word list into the known-word set.

    The set is left untouched when parsing fails.

    Returns:
        Number of newly known words

    Raises:
        WordListImportError: If the text is not a JSON array
    """
    words = parse_word_list(json_text)
    added = known.merge(words)
    info(f"[KNOWN] Imported {len(words)} words, {added} new")
    return added
