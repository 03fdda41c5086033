"""
Known-Word Set

The single source of truth for words the user has already mastered.
Every contents-changing operation is written through to the injected
KnownWordStore. Words are case-normalized to upper case, so membership
checks are case-insensitive for callers.

Example:
    known = KnownWordSet(JsonFileKnownWordStore(KNOWN_WORDS_FILE), defaults)
    known.load()
    known.add("serendipity")
    "SERENDIPITY" in known  # True
"""

from collections.abc import Iterable

from vocab_analyzer.known_words.store import KnownWordStore, KnownWordStoreError
from vocab_analyzer.logging_config import debug_log, warning
from vocab_analyzer.vocabulary.word_lists import canonical_word


class KnownWordSet:
    """
    Insertion-ordered set of upper-case known words with write-through persistence.

    Attributes:
        store: Persistence collaborator
        defaults: Words seeded on first ever load
    """

    def __init__(self, store: KnownWordStore, defaults: Iterable[str] = ()):
        self.store = store
        self.defaults = [canonical_word(word) for word in defaults]
        # dict keys give set semantics with stable display order
        self._words: dict[str, None] = {}

    def __contains__(self, word) -> bool:
        return canonical_word(word) in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self):
        return iter(list(self._words))

    def __repr__(self) -> str:
        return f"KnownWordSet({len(self._words)} words)"

    @property
    def words(self) -> list[str]:
        """Copy of the known words in insertion order."""
        return list(self._words)

    def load(self) -> None:
        """
        Restore the set from the store.

        - No persisted state: seed the bundled defaults and save immediately
        - Malformed persisted state: start empty and log a warning
        - Otherwise: restore the persisted words
        """
        try:
            stored = self.store.load()
        except KnownWordStoreError as e:
            warning(f"[KNOWN] Ignoring malformed known-word state: {e}")
            self._words = {}
            return

        if stored is None:
            self._words = dict.fromkeys(word for word in self.defaults if word)
            debug_log(f"[KNOWN] First run, seeded {len(self._words)} default words")
            self._save()
            return

        self._words = dict.fromkeys(w for w in (canonical_word(word) for word in stored) if w)
        debug_log(f"[KNOWN] Restored {len(self._words)} known words")

    def add(self, word: str) -> bool:
        """
        Mark a word as known.

        Returns:
            True if the word was added, False if it was already known or blank
        """
        canonical = canonical_word(word)
        if not canonical or canonical in self._words:
            return False
        self._words[canonical] = None
        self._save()
        return True

    def remove(self, word: str) -> bool:
        """
        Forget a known word.

        Returns:
            True if the word was removed, False if it was not known
        """
        canonical = canonical_word(word)
        if canonical not in self._words:
            return False
        del self._words[canonical]
        self._save()
        return True

    def merge(self, words: Iterable) -> int:
        """
        Union words into the set. Each value is coerced to str and case-normalized.

        Returns:
            Number of words that were not already known
        """
        added = 0
        for word in words:
            canonical = canonical_word(word)
            if canonical and canonical not in self._words:
                self._words[canonical] = None
                added += 1
        if added:
            self._save()
        debug_log(f"[KNOWN] Merged {added} new words ({len(self._words)} total)")
        return added

    def clear(self) -> None:
        """Forget every known word."""
        self._words.clear()
        self._save()

    def _save(self):
        self.store.save(list(self._words))
