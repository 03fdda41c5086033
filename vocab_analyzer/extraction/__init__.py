"""
Extraction Package

Reads source files (subtitles, text, markdown, JSON word lists) into
decoded text for the vocabulary pipeline and the known-word importer.
"""

from vocab_analyzer.extraction.text_reader import TextReadError, read_text_file

__all__ = ['TextReadError', 'read_text_file']
