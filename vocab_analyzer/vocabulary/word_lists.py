"""
Bundled word list loading.

Word lists are plain UTF-8 text files with one entry per line. Blank lines
and lines starting with '#' are ignored. Entries are upper-cased and inner
whitespace is collapsed to single spaces so multi-word phrases match the
normalizer's output.
"""

from pathlib import Path

from vocab_analyzer.logging_config import debug_log


def _as_text(value) -> str:
    """Spell JSON scalars the way they appear in a word list file."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def canonical_word(word) -> str:
    """
    Case-normalize a word or phrase the way every component compares them.

    Non-string values keep their JSON spelling: None becomes "NULL",
    True becomes "TRUE" and 1.0 becomes "1".
    """
    return " ".join(_as_text(word).split()).upper()


def load_word_list(file_path: str | Path | None) -> list[str]:
    """
    Load an ordered, de-duplicated list of entries from a word list file.

    Args:
        file_path: Path to the word list. None yields an empty list.

    Returns:
        Entries in file order, first occurrence kept.
    """
    if file_path is None:
        return []

    file_path = Path(file_path)

    if not file_path.exists():
        debug_log(f"[VOCAB] Word list not found: {file_path}")
        return []

    entries: dict[str, None] = {}
    with open(file_path, encoding='utf-8') as f:
        for line in f:
            stripped = line.strip()
            if not stripped or stripped.startswith('#'):
                continue
            entries.setdefault(canonical_word(stripped), None)

    debug_log(f"[VOCAB] Loaded {len(entries)} entries from {file_path}")
    return list(entries)
