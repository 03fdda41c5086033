"""
Tests for frequency counting and vocabulary ranking.

Tests cover:
- Whitespace tokenization and the minimum-length filter
- Exact counting
- Descending order, phrase expansion, known-word filtering, top-N limit
- Purity (inputs are never modified)
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vocab_analyzer.known_words import InMemoryKnownWordStore, KnownWordSet  # noqa: E402
from vocab_analyzer.vocabulary import (  # noqa: E402
    WordFrequencyEntry,
    count_frequencies,
    rank,
    tokenize,
)


class TestCountFrequencies:
    """Tests for count_frequencies()."""

    def test_counts_tokens_and_drops_single_letters(self):
        freqs = count_frequencies("THE CAT THE  A I GIVE_UP\nTHE")
        assert freqs == {"THE": 3, "CAT": 1, "GIVE_UP": 1}

    def test_custom_minimum_length(self):
        freqs = count_frequencies("THE CAT GIVE_UP", min_length=4)
        assert freqs == {"GIVE_UP": 1}

    def test_empty_text(self):
        assert count_frequencies("") == {}
        assert count_frequencies("   \n\t ") == {}

    def test_tokenize_splits_on_whitespace_runs(self):
        assert tokenize("ONE\t\tTWO \n THREE") == ["ONE", "TWO", "THREE"]


class TestRank:
    """Tests for rank()."""

    def test_sorted_by_count_descending(self):
        ranked = rank({"LOW": 1, "HIGH": 5, "MID": 3}, known=set())
        assert [e.word for e in ranked] == ["HIGH", "MID", "LOW"]
        assert [e.count for e in ranked] == [5, 3, 1]

    def test_equal_counts_keep_source_order(self):
        ranked = rank({"BETA": 2, "ALPHA": 2}, known=set())
        assert [e.word for e in ranked] == ["BETA", "ALPHA"]

    def test_phrase_tokens_expanded(self):
        ranked = rank({"GIVE_UP": 2}, known=set())
        assert ranked == [WordFrequencyEntry(word="GIVE UP", count=2)]

    def test_known_words_filtered(self):
        ranked = rank({"THE": 9, "CAT": 2, "GIVE_UP": 1}, known={"THE", "GIVE UP"})
        assert [e.word for e in ranked] == ["CAT"]

    def test_no_known_word_survives(self):
        freqs = {"THE": 4, "CAT": 3, "SAT": 2, "MAT": 1}
        known = {"CAT", "MAT"}
        ranked = rank(freqs, known)
        assert all(entry.word not in known for entry in ranked)

    def test_filtering_with_known_word_set(self):
        known = KnownWordSet(InMemoryKnownWordStore(["the"]))
        known.load()
        ranked = rank({"THE": 3, "CAT": 1}, known)
        assert [e.word for e in ranked] == ["CAT"]

    def test_limit_applied_after_filtering(self):
        freqs = {"THE": 5, "CAT": 4, "SAT": 3, "MAT": 2}
        ranked = rank(freqs, known={"THE"}, limit=2)
        assert [e.word for e in ranked] == ["CAT", "SAT"]

    def test_zero_limit(self):
        assert rank({"CAT": 1}, known=set(), limit=0) == []

    def test_inputs_not_modified(self):
        freqs = {"THE": 2, "CAT": 1}
        known = {"THE"}
        rank(freqs, known, limit=1)
        assert freqs == {"THE": 2, "CAT": 1}
        assert known == {"THE"}

    def test_entry_as_dict(self):
        assert WordFrequencyEntry("CAT", 2).as_dict() == {"word": "CAT", "count": 2}
