"""
Vocabulary Ranker

Orders counted tokens by frequency and removes words the user already knows.
"""

from collections.abc import Container, Mapping
from dataclasses import dataclass

from vocab_analyzer.vocabulary.normalizer import expand_phrase_token


@dataclass(frozen=True)
class WordFrequencyEntry:
    """
    One ranked vocabulary word.

    Attributes:
        word: Display form (phrase tokens expanded back to spaces)
        count: Occurrences in the source document (>= 1)
    """
    word: str
    count: int

    def as_dict(self) -> dict:
        return {"word": self.word, "count": self.count}


def rank(
    freqs: Mapping[str, int],
    known: Container[str],
    limit: int | None = None,
) -> list[WordFrequencyEntry]:
    """
    Rank counted tokens, most frequent first, excluding known words.

    Equal counts keep the order of the source mapping (Python's sort is
    stable), but callers should not depend on a particular tie-break.

    Args:
        freqs: Token -> count mapping from count_frequencies()
        known: Known-word container; checked with the upper-cased display word
        limit: Keep at most this many entries after sorting and filtering

    Returns:
        List of WordFrequencyEntry. Neither freqs nor known is modified.
    """
    entries = [
        WordFrequencyEntry(word=expand_phrase_token(token), count=count)
        for token, count in freqs.items()
    ]
    entries.sort(key=lambda entry: entry.count, reverse=True)

    ranked = [entry for entry in entries if entry.word.upper() not in known]

    if limit is not None:
        ranked = ranked[:max(limit, 0)]

    return ranked
