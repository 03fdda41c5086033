"""
Known-Word Persistence

Stores the user's known-word list between sessions. The KnownWordSet only
talks to the KnownWordStore interface, so the JSON file store used by the
application can be swapped for the in-memory store in tests.

File format: a JSON array of strings, e.g. ["THE", "CAT", "GIVE UP"]
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path

from vocab_analyzer.logging_config import debug_log, error


class KnownWordStoreError(Exception):
    """Raised when persisted known-word state exists but cannot be decoded."""


class KnownWordStore(ABC):
    """
    Abstract persistence collaborator for the known-word set.

    Implementations must return None from load() when no state has ever
    been saved, which tells the caller to seed the defaults.
    """

    @abstractmethod
    def load(self) -> list[str] | None:
        """
        Return the persisted words, or None if nothing was ever saved.

        Raises:
            KnownWordStoreError: If stored state exists but is malformed
        """

    @abstractmethod
    def save(self, words: list[str]) -> None:
        """Persist the full word list (last write wins)."""


class JsonFileKnownWordStore(KnownWordStore):
    """
    Known words stored as a JSON array in a UTF-8 file.

    Writes go to a temporary sibling file first and are moved into place
    with os.replace, so a crash mid-write leaves the previous file intact.

    Example:
        store = JsonFileKnownWordStore(KNOWN_WORDS_FILE)
        words = store.load()  # None on first run
        store.save(["THE", "CAT"])
    """

    def __init__(self, path: Path):
        """
        Args:
            path: Location of the JSON file (parent directory is created on save)
        """
        self.path = Path(path)

    def load(self) -> list[str] | None:
        if not self.path.exists():
            debug_log(f"[KNOWN] No known-word file at {self.path}")
            return None

        try:
            with open(self.path, encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise KnownWordStoreError(f"Could not read {self.path}: {e}") from e

        if not isinstance(data, list):
            raise KnownWordStoreError(
                f"Expected a JSON array in {self.path}, got {type(data).__name__}"
            )

        debug_log(f"[KNOWN] Loaded {len(data)} known words from {self.path}")
        return [str(word) for word in data]

    def save(self, words: list[str]) -> None:
        tmp_path = self.path.with_suffix(".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(list(words), f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
            debug_log(f"[KNOWN] Saved {len(words)} known words to {self.path}")
        except OSError as e:
            # Persistence is best effort; the in-memory set stays authoritative
            error(f"[KNOWN] Could not save known words to {self.path}: {e}")
            tmp_path.unlink(missing_ok=True)


class InMemoryKnownWordStore(KnownWordStore):
    """
    Store that keeps the last saved list in memory.

    Attributes:
        saved: Last saved list, or None if never saved
        save_count: Number of save() calls
    """

    def __init__(self, initial: list[str] | None = None):
        self.saved: list[str] | None = list(initial) if initial is not None else None
        self.save_count = 0

    def load(self) -> list[str] | None:
        return list(self.saved) if self.saved is not None else None

    def save(self, words: list[str]) -> None:
        self.saved = list(words)
        self.save_count += 1
