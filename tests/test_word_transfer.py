"""
Tests for known-word import and export.
"""

import json
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vocab_analyzer.known_words import (  # noqa: E402
    InMemoryKnownWordStore,
    KnownWordSet,
    WordListImportError,
    export_known_words,
    import_known_words,
    parse_word_list,
    suggest_export_filename,
)


@pytest.fixture
def known():
    known_words = KnownWordSet(InMemoryKnownWordStore(["THE", "CAT"]))
    known_words.load()
    return known_words


def test_export_is_json_array(known):
    exported = export_known_words(known)
    assert json.loads(exported) == ["THE", "CAT"]


def test_export_then_import_into_empty_set(known):
    target = KnownWordSet(InMemoryKnownWordStore([]))
    target.load()

    added = import_known_words(target, export_known_words(known))

    assert added == 2
    assert set(target) == set(known)


def test_import_merges_instead_of_replacing(known):
    added = import_known_words(known, '["dog", "cat"]')

    assert added == 1
    assert known.words == ["THE", "CAT", "DOG"]


def test_import_coerces_elements(known):
    import_known_words(known, '[1, "give  up", true]')
    assert "1" in known
    assert "GIVE UP" in known
    assert "TRUE" in known


def test_import_rejects_non_array(known):
    with pytest.raises(WordListImportError):
        import_known_words(known, '{"words": ["dog"]}')
    assert known.words == ["THE", "CAT"]


def test_import_rejects_invalid_json(known):
    with pytest.raises(WordListImportError):
        import_known_words(known, "not json at all")
    assert known.store.save_count == 0


def test_parse_drops_blank_entries():
    assert parse_word_list('["cat", "", "  "]') == ["CAT"]


def test_suggested_filename_is_timestamped():
    name = suggest_export_filename(datetime(2024, 3, 5, 9, 7, 2))
    assert name == "knownWords-20240305-090702.json"


def test_import_ignores_byte_order_mark(known):
    added = import_known_words(known, '\ufeff["dog", "bird"]')

    assert added == 2
    assert "DOG" in known


def test_import_bom_file_from_disk(known, tmp_path):
    from vocab_analyzer.extraction import read_text_file

    path = tmp_path / "knownWords.json"
    path.write_bytes(b'\xef\xbb\xbf["cat", "dog"]')

    added = import_known_words(known, read_text_file(path))

    assert added == 1
    assert known.words == ["THE", "CAT", "DOG"]


def test_import_rejects_deeply_nested_array(known):
    nested = "[" * 100000 + "]" * 100000

    with pytest.raises(WordListImportError):
        import_known_words(known, nested)
    assert known.words == ["THE", "CAT"]


def test_parse_uses_json_spellings_for_scalars():
    assert parse_word_list('[null, true, false, 1.0, 2.5, 3]') == [
        "NULL", "TRUE", "FALSE", "1", "2.5", "3",
    ]
