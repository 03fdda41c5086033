"""
Document Text Reader

Reads subtitle, plain-text and markdown files (and JSON word lists) as
decoded text. File extensions are informational only; any readable text
file is accepted and the pipeline decides what to do with its content.
"""

from pathlib import Path

from vocab_analyzer.config import LARGE_FILE_WARNING_MB, MAX_FILE_SIZE_MB
from vocab_analyzer.logging_config import Timer, debug_log, warning


class TextReadError(Exception):
    """Raised when a file cannot be read; nothing downstream should run."""


def read_text_file(file_path: str | Path) -> str:
    """
    Read a whole file as UTF-8 text. A leading byte-order mark is dropped.

    Undecodable bytes are dropped rather than failing the import; they
    would be stripped by normalization anyway.

    Args:
        file_path: Path to the document

    Returns:
        Decoded file content

    Raises:
        TextReadError: If the file is missing, too large or unreadable
    """
    file_path = Path(file_path)

    try:
        size_mb = file_path.stat().st_size / (1024 * 1024)
    except OSError as e:
        raise TextReadError(f"Cannot access {file_path.name}: {e}") from e

    if size_mb > MAX_FILE_SIZE_MB:
        raise TextReadError(
            f"{file_path.name} is {size_mb:.1f}MB; the limit is {MAX_FILE_SIZE_MB}MB"
        )
    if size_mb > LARGE_FILE_WARNING_MB:
        warning(f"[READER] Large file detected ({size_mb:.1f}MB). Processing may take longer.")

    try:
        with Timer(f"Reading {file_path.name}", auto_log=False) as timer:
            with open(file_path, 'r', encoding='utf-8-sig', errors='ignore') as f:
                text = f.read()
    except OSError as e:
        raise TextReadError(f"Failed to read {file_path.name}: {e}") from e

    debug_log(f"[READER] Read {len(text)} characters from {file_path.name} "
              f"in {timer.get_duration_ms():.0f} ms")
    return text
