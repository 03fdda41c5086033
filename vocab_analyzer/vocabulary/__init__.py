"""
Vocabulary Extraction Package

Turns document text into a frequency-ranked list of words the user does
not know yet.

Main Components:
- normalize / PhraseDictionary: Cleanup and phrasal-verb collapsing
- count_frequencies: Whitespace tokenization and exact counting
- rank / WordFrequencyEntry: Frequency ordering with known-word filtering
- VocabularyExtractor: Orchestrates the pipeline and supports re-ranking

Usage:
    from vocab_analyzer.vocabulary import VocabularyExtractor, load_phrase_dictionary

    extractor = VocabularyExtractor(load_phrase_dictionary(PHRASAL_VERBS_PATH), known)
    entries = extractor.extract(document_text)
"""

from .frequency import count_frequencies, tokenize
from .normalizer import PhraseDictionary, expand_phrase_token, load_phrase_dictionary, normalize
from .ranker import WordFrequencyEntry, rank
from .vocabulary_extractor import VocabularyExtractor
from .word_lists import canonical_word, load_word_list

__all__ = [
    'VocabularyExtractor',
    'PhraseDictionary',
    'WordFrequencyEntry',
    'normalize',
    'load_phrase_dictionary',
    'expand_phrase_token',
    'count_frequencies',
    'tokenize',
    'rank',
    'canonical_word',
    'load_word_list',
]
