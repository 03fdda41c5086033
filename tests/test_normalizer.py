"""
Tests for text normalization and phrase dictionaries.

Tests cover:
- Character stripping and upper-casing
- Whole-word phrase collapsing and dictionary-order precedence
- Idempotence
- PhraseDictionary canonicalization and file loading
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vocab_analyzer.vocabulary.normalizer import (  # noqa: E402
    PhraseDictionary,
    expand_phrase_token,
    load_phrase_dictionary,
    normalize,
)


class TestCharacterCleanup:
    """Non-letters become spaces and everything is upper-cased."""

    def test_punctuation_becomes_spaces(self):
        assert normalize("Hello, World!") == "HELLO  WORLD "

    def test_apostrophes_are_kept(self):
        assert normalize("don't") == "DON'T"

    def test_digits_and_symbols_removed(self):
        assert normalize("abc123def") == "ABC   DEF"

    def test_subtitle_markup_is_stripped(self):
        srt = "1\n00:00:01,000 --> 00:00:02,000\n<i>Hello</i> there"
        result = normalize(srt)
        assert result.split() == ["I", "HELLO", "I", "THERE"]

    def test_non_ascii_letters_removed(self):
        assert normalize("café") == "CAF "

    def test_underscore_is_not_a_word_character(self):
        assert normalize("foo_bar") == "FOO BAR"

    def test_empty_input(self):
        assert normalize("") == ""
        assert normalize("", ["GIVE UP"]) == ""


class TestPhraseCollapsing:
    """Phrases become single underscore-joined tokens."""

    def test_phrase_is_collapsed(self):
        assert normalize("She will give up soon", ["give up"]) == "SHE WILL GIVE_UP SOON"

    def test_every_occurrence_collapsed(self):
        result = normalize("Give up. GIVE UP! give up?", ["GIVE UP"])
        assert result.split() == ["GIVE_UP", "GIVE_UP", "GIVE_UP"]

    def test_match_requires_word_boundaries(self):
        assert normalize("forgive upstairs", ["GIVE UP"]) == "FORGIVE UPSTAIRS"

    def test_match_requires_single_space(self):
        # Punctuation between the words leaves two spaces, so no match
        assert normalize("give, up", ["GIVE UP"]) == "GIVE  UP"

    def test_phrase_with_apostrophe(self):
        assert normalize("what's up", ["WHAT'S UP"]) == "WHAT'S_UP"

    def test_first_dictionary_entry_wins_on_overlap(self):
        assert normalize("give up on", ["GIVE UP", "UP ON"]) == "GIVE_UP ON"
        assert normalize("give up on", ["UP ON", "GIVE UP"]) == "GIVE UP_ON"

    def test_three_word_phrase(self):
        result = normalize("I look forward to it", ["LOOK FORWARD TO"])
        assert result == "I LOOK_FORWARD_TO IT"

    def test_expand_phrase_token(self):
        assert expand_phrase_token("LOOK_FORWARD_TO") == "LOOK FORWARD TO"
        assert expand_phrase_token("CAT") == "CAT"


class TestIdempotence:
    """normalize(normalize(x)) == normalize(x)."""

    @pytest.mark.parametrize("text", [
        "The cat gave up. The cat gave up again.",
        "Don't  give,up -- give up on it!",
        "1\n00:00:01,000 --> 00:00:04,000\nLook forward to it_now",
        "",
        "   ",
    ])
    def test_normalize_is_idempotent(self, text):
        phrases = PhraseDictionary(["GIVE UP", "GAVE UP", "UP ON", "LOOK FORWARD TO"])
        once = normalize(text, phrases)
        assert normalize(once, phrases) == once


class TestPhraseDictionary:
    """PhraseDictionary construction and loading."""

    def test_canonicalizes_and_deduplicates(self):
        phrases = PhraseDictionary(["give  up", "GIVE UP", "", "  look after "])
        assert phrases.phrases == ("GIVE UP", "LOOK AFTER")
        assert len(phrases) == 2
        assert "give up" in phrases

    def test_preserves_order(self):
        phrases = PhraseDictionary(["b c", "a b"])
        assert list(phrases) == ["B C", "A B"]

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "phrases.txt"
        path.write_text("# comment\ngive up\n\nlook after\ngive up\n", encoding="utf-8")

        phrases = load_phrase_dictionary(path)

        assert phrases.phrases == ("GIVE UP", "LOOK AFTER")

    def test_missing_file_gives_empty_dictionary(self, tmp_path):
        phrases = load_phrase_dictionary(tmp_path / "missing.txt")
        assert len(phrases) == 0
        assert normalize("give up", phrases) == "GIVE UP"

    def test_bundled_dictionary_loads(self):
        from vocab_analyzer.config import PHRASAL_VERBS_PATH

        phrases = load_phrase_dictionary(PHRASAL_VERBS_PATH)
        assert "GIVE UP" in phrases
        assert "GAVE UP" in phrases
