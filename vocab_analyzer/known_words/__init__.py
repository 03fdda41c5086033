"""
Known-Word Management Package

Main Components:
- KnownWordSet: The user's mastered words, filtered out of every ranking
- KnownWordStore: Persistence interface (JSON file or in-memory)
- transfer: JSON import/export of the known-word list

Usage:
    from vocab_analyzer.known_words import KnownWordSet, JsonFileKnownWordStore

    known = KnownWordSet(JsonFileKnownWordStore(path), defaults=default_words)
    known.load()
    known.add("ubiquitous")
"""

from .known_word_set import KnownWordSet
from .store import (
    InMemoryKnownWordStore,
    JsonFileKnownWordStore,
    KnownWordStore,
    KnownWordStoreError,
)
from .transfer import (
    WordListImportError,
    export_known_words,
    import_known_words,
    parse_word_list,
    suggest_export_filename,
)

__all__ = [
    'KnownWordSet',
    'KnownWordStore',
    'KnownWordStoreError',
    'JsonFileKnownWordStore',
    'InMemoryKnownWordStore',
    'WordListImportError',
    'export_known_words',
    'import_known_words',
    'parse_word_list',
    'suggest_export_filename',
]
