"""
Window Layout Mixin for MainWindow

Provides UI layout creation methods for the MainWindow class, keeping
widget construction separate from the business logic in main_window.py.

Usage:
    class MainWindow(WindowLayoutMixin, ctk.CTk):
        def __init__(self):
            super().__init__()
            self._create_header()
            self._create_rehearsal_panel()
            self._create_main_panels()
            self._create_status_bar()
"""

import customtkinter as ctk

from vocab_analyzer.config import APP_NAME


class WindowLayoutMixin:
    """
    Mixin providing layout creation methods for MainWindow.

    This mixin expects the following attributes to be defined:
    - self (ctk.CTk window instance)
    - self.known_words, self.preferences
    - self._import_text, self._import_word_list, self._export_word_list,
      self._clear_known_words (button callbacks)
    - self._mark_known, self._forget_known (chip callbacks)

    And creates these widget references:
    - self.header_frame, self.title_label, self.import_text_btn
    - self.rehearsal_panel
    - self.main_frame, self.vocab_header, self.vocab_grid
    - self.known_header, self.known_grid
    - self.import_words_btn, self.export_words_btn, self.clear_known_btn
    - self.status_frame, self.status_label
    """

    def _create_header(self):
        """Create header row with the title and text import button."""
        self.header_frame = ctk.CTkFrame(self, height=50, corner_radius=0)
        self.header_frame.pack(fill="x", padx=0, pady=0)
        self.header_frame.pack_propagate(False)

        self.title_label = ctk.CTkLabel(
            self.header_frame,
            text="Vocabulary Analyzer",
            font=ctk.CTkFont(size=20, weight="bold")
        )
        self.title_label.pack(side="left", padx=15, pady=10)

        self.import_text_btn = ctk.CTkButton(
            self.header_frame,
            text="Import Text…",
            width=120,
            command=self._import_text
        )
        self.import_text_btn.pack(side="right", padx=15, pady=10)

    def _create_rehearsal_panel(self):
        """Create the rehearsal drill above the word lists."""
        from vocab_analyzer.ui.rehearsal_panel import RehearsalPanel

        self.rehearsal_panel = RehearsalPanel(
            self,
            word_source=lambda: self.known_words.words,
            preferences=self.preferences,
        )
        self.rehearsal_panel.pack(fill="x", padx=10, pady=(10, 0))

    def _create_main_panels(self):
        """Create the two-panel word area: ranked words left, known words right."""
        from vocab_analyzer.ui.widgets import WordChipGrid

        self.main_frame = ctk.CTkFrame(self, fg_color="transparent")
        self.main_frame.pack(fill="both", expand=True, padx=10, pady=10)

        self.main_frame.grid_columnconfigure(0, weight=3)
        self.main_frame.grid_columnconfigure(1, weight=2)
        self.main_frame.grid_rowconfigure(2, weight=1)

        # Left: ranked vocabulary
        self.vocab_header = ctk.CTkLabel(
            self.main_frame,
            text="WORDS",
            font=ctk.CTkFont(size=14, weight="bold")
        )
        self.vocab_header.grid(row=0, column=0, sticky="w", padx=10, pady=(5, 0))

        ctk.CTkLabel(
            self.main_frame,
            text="Click a word to mark it as known",
            font=ctk.CTkFont(size=11),
            text_color=("gray40", "gray60")
        ).grid(row=1, column=0, sticky="w", padx=10)

        self.vocab_grid = WordChipGrid(self.main_frame, on_click=self._mark_known, columns=4)
        self.vocab_grid.grid(row=2, column=0, sticky="nsew", padx=(0, 5), pady=5)

        # Right: known words
        self.known_header = ctk.CTkLabel(
            self.main_frame,
            text="KNOWN WORDS",
            font=ctk.CTkFont(size=14, weight="bold")
        )
        self.known_header.grid(row=0, column=1, sticky="w", padx=10, pady=(5, 0))

        ctk.CTkLabel(
            self.main_frame,
            text="Click a word to forget it",
            font=ctk.CTkFont(size=11),
            text_color=("gray40", "gray60")
        ).grid(row=1, column=1, sticky="w", padx=10)

        self.known_grid = WordChipGrid(self.main_frame, on_click=self._forget_known, columns=3)
        self.known_grid.grid(row=2, column=1, sticky="nsew", padx=(5, 0), pady=5)

        known_btn_frame = ctk.CTkFrame(self.main_frame, fg_color="transparent")
        known_btn_frame.grid(row=3, column=1, sticky="ew", padx=5, pady=5)

        self.import_words_btn = ctk.CTkButton(
            known_btn_frame,
            text="Import Words…",
            width=110,
            command=self._import_word_list
        )
        self.import_words_btn.pack(side="left", padx=(0, 5))

        self.export_words_btn = ctk.CTkButton(
            known_btn_frame,
            text="Export…",
            width=80,
            fg_color="#16a34a",
            hover_color="#15803d",
            command=self._export_word_list
        )
        self.export_words_btn.pack(side="left", padx=(0, 5))

        self.clear_known_btn = ctk.CTkButton(
            known_btn_frame,
            text="Forget them ALL!",
            width=120,
            fg_color="#dc2626",
            hover_color="#b91c1c",
            command=self._clear_known_words
        )
        self.clear_known_btn.pack(side="left")

    def _create_status_bar(self):
        """Create the status bar at the bottom of the window."""
        self.status_frame = ctk.CTkFrame(self, height=28, corner_radius=0)
        self.status_frame.pack(fill="x", side="bottom")

        self.status_label = ctk.CTkLabel(
            self.status_frame,
            text=f"{APP_NAME} ready",
            font=ctk.CTkFont(size=11),
            anchor="w"
        )
        self.status_label.pack(side="left", padx=10, pady=3)
