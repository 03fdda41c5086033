"""
Text Normalizer

First stage of the vocabulary pipeline. Reduces arbitrary document text
(subtitles, plain text, markdown) to upper-case ASCII words and collapses
known multi-word phrases into single underscore-joined tokens so they
survive whitespace tokenization as one vocabulary unit.

Example:
    >>> phrases = PhraseDictionary(["give up"])
    >>> normalize("Don't give up, Sam!", phrases)
    "DON'T GIVE_UP  SAM "
"""

import re
from collections.abc import Iterable
from pathlib import Path

from vocab_analyzer.logging_config import debug_log, warning
from vocab_analyzer.vocabulary.word_lists import canonical_word, load_word_list

# Anything that is not an ASCII letter, whitespace or apostrophe.
# Underscore is included so a raw "_" can never fake a phrase token.
_NON_WORD_CHARS = re.compile(r"[^a-zA-Z\s']")

PHRASE_JOINER = "_"


class PhraseDictionary:
    """
    Ordered, immutable collection of multi-word phrases.

    Order matters: when two phrases overlap in the text, the one listed
    first is replaced first and wins.

    Attributes:
        phrases: Canonical (upper-case, single-spaced) phrases in order
    """

    def __init__(self, phrases: Iterable[str] = ()):
        ordered: dict[str, None] = {}
        for phrase in phrases:
            canonical = canonical_word(phrase)
            if canonical:
                ordered.setdefault(canonical, None)
        self.phrases: tuple[str, ...] = tuple(ordered)
        self._patterns = tuple(
            (re.compile(rf"\b{re.escape(phrase)}\b"), phrase.replace(" ", PHRASE_JOINER))
            for phrase in self.phrases
        )

    def __iter__(self):
        return iter(self.phrases)

    def __len__(self) -> int:
        return len(self.phrases)

    def __contains__(self, phrase) -> bool:
        return canonical_word(phrase) in self.phrases

    def __repr__(self) -> str:
        return f"PhraseDictionary({len(self.phrases)} phrases)"

    def collapse(self, text: str) -> str:
        """Replace each whole-word phrase occurrence with its joined token, in dictionary order."""
        for pattern, token in self._patterns:
            text = pattern.sub(token, text)
        return text


def load_phrase_dictionary(file_path: str | Path) -> PhraseDictionary:
    """
    Load a phrase dictionary from a word list file.

    A missing file yields an empty dictionary; extraction still works,
    phrases are simply counted word by word.
    """
    phrases = load_word_list(file_path)
    if not phrases:
        warning(f"[VOCAB] No phrases loaded from {file_path}; phrasal verbs will not be collapsed")
    return PhraseDictionary(phrases)


def normalize(raw_text: str, phrases: PhraseDictionary | Iterable[str] | None = None) -> str:
    """
    Normalize raw document text for tokenization.

    Steps:
    1. Replace every character that is not an ASCII letter, whitespace or
       apostrophe with a single space
    2. Upper-case the whole text
    3. Collapse phrases (words separated by single spaces) into tokens
       joined with underscores

    Applying normalize twice gives the same result as applying it once.

    Args:
        raw_text: Arbitrary decoded document text
        phrases: Phrase dictionary (or any iterable of phrases)

    Returns:
        Normalized text; empty input yields an empty string
    """
    if not raw_text:
        return ""

    if phrases is not None and not isinstance(phrases, PhraseDictionary):
        phrases = PhraseDictionary(phrases)

    cleaned = _NON_WORD_CHARS.sub(" ", raw_text).upper()

    if phrases:
        cleaned = phrases.collapse(cleaned)
        debug_log(f"[VOCAB] Normalized {len(raw_text)} chars against {len(phrases)} phrases")

    return cleaned


def expand_phrase_token(token: str) -> str:
    """Turn an underscore-joined phrase token back into its display form."""
    return token.replace(PHRASE_JOINER, " ")
