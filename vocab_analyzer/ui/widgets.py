"""
Vocabulary Analyzer - Custom UI Widgets

Reusable CustomTkinter components for the main window:
- WordChipGrid: Scrollable grid of clickable word buttons (ranked words, known words)
"""
from collections.abc import Callable, Sequence

import customtkinter as ctk

from vocab_analyzer.vocabulary import WordFrequencyEntry


class WordChipGrid(ctk.CTkScrollableFrame):
    """
    Scrollable grid of word "chips".

    Clicking a chip calls on_click(word). Ranked entries show their count
    next to the word; known words are shown on their own.
    """

    def __init__(self, master, on_click: Callable[[str], None], columns: int = 4, **kwargs):
        super().__init__(master, **kwargs)
        self.on_click = on_click
        self.columns = columns
        self._chips: list[ctk.CTkButton] = []

        for col in range(columns):
            self.grid_columnconfigure(col, weight=1)

    def show_entries(self, entries: Sequence[WordFrequencyEntry]):
        """Display ranked words with their counts."""
        self._render([(entry.word, f"{entry.word}  {entry.count}") for entry in entries])

    def show_words(self, words: Sequence[str]):
        """Display plain words."""
        self._render([(word, word) for word in words])

    def _render(self, items: list[tuple[str, str]]):
        for chip in self._chips:
            chip.destroy()
        self._chips.clear()

        for i, (word, label) in enumerate(items):
            chip = ctk.CTkButton(
                self,
                text=label,
                height=28,
                fg_color=("#d9c7f0", "#4b2a7a"),
                hover_color=("#c4a8ea", "#5d3596"),
                text_color=("#3b1a66", "#f0e6ff"),
                command=lambda w=word: self.on_click(w)
            )
            chip.grid(row=i // self.columns, column=i % self.columns, sticky="ew", padx=3, pady=3)
            self._chips.append(chip)
