"""
Vocabulary Extractor Orchestrator

Runs the text-to-vocabulary pipeline:
1. Normalization (punctuation stripping, case folding, phrase collapsing)
2. Tokenization and frequency counting
3. Ranking with known-word filtering

The last frequency map is kept so the ranked list can be recomputed
whenever the known-word set changes, without re-reading the document.
"""

from vocab_analyzer.config import MIN_TOKEN_LENGTH, VOCABULARY_DISPLAY_LIMIT
from vocab_analyzer.logging_config import Timer, debug_log
from vocab_analyzer.vocabulary.frequency import count_frequencies
from vocab_analyzer.vocabulary.normalizer import PhraseDictionary, normalize
from vocab_analyzer.vocabulary.ranker import WordFrequencyEntry, rank


class VocabularyExtractor:
    """
    Extracts ranked vocabulary from document text.

    Attributes:
        phrases: Phrase dictionary used during normalization
        known_words: Known-word set (anything supporting `in` and `add`)
        display_limit: Optional top-N cut applied after filtering
        frequencies: Token counts of the last extracted document
        entries: Last ranked result

    Example:
        >>> extractor = VocabularyExtractor(PhraseDictionary(["give up"]), known)
        >>> for entry in extractor.extract(subtitle_text):
        ...     print(entry.word, entry.count)
    """

    def __init__(
        self,
        phrases: PhraseDictionary | None = None,
        known_words=None,
        display_limit: int | None = VOCABULARY_DISPLAY_LIMIT,
        min_token_length: int = MIN_TOKEN_LENGTH,
    ):
        self.phrases = phrases if phrases is not None else PhraseDictionary()
        self.known_words = known_words if known_words is not None else set()
        self.display_limit = display_limit
        self.min_token_length = min_token_length
        self.frequencies: dict[str, int] = {}
        self.entries: list[WordFrequencyEntry] = []

    def extract(self, text: str) -> list[WordFrequencyEntry]:
        """
        Replace the current document with `text` and rank its vocabulary.

        Args:
            text: Raw decoded document text

        Returns:
            Ranked entries, most frequent first, known words excluded
        """
        with Timer("VocabularyExtraction"):
            normalized = normalize(text, self.phrases)
            self.frequencies = count_frequencies(normalized, self.min_token_length)

        debug_log(f"[VOCAB] Counted {len(self.frequencies)} distinct tokens "
                  f"from {len(text)} chars")
        return self.rerank()

    def rerank(self) -> list[WordFrequencyEntry]:
        """Rank the stored frequencies against the current known-word set."""
        self.entries = rank(self.frequencies, self.known_words, self.display_limit)
        return self.entries

    def mark_known(self, word: str) -> list[WordFrequencyEntry]:
        """Add a word to the known-word set and return the re-ranked list."""
        self.known_words.add(word)
        return self.rerank()

    def clear(self):
        """Forget the current document."""
        self.frequencies = {}
        self.entries = []
