"""
Vocabulary Analyzer - Main Window (CustomTkinter)

Main application window with:
- Header: Title + "Import Text" button
- Rehearsal panel: Timed drill over the known words
- Two-panel word area: Left (ranked words), Right (known words + import/export)
- Status bar

Architecture:
    MainWindow inherits from:
    - WindowLayoutMixin: UI creation methods (_create_header, _create_main_panels, etc.)
    - ctk.CTk: CustomTkinter main window base class

    Layout code is in: vocab_analyzer/ui/window_layout.py
    Business logic is in: This file (main_window.py)
"""

from pathlib import Path
from queue import Empty, Queue
from tkinter import filedialog, messagebox

import customtkinter as ctk

from vocab_analyzer.config import (
    DEBUG_MODE,
    DEFAULT_KNOWN_WORDS_PATH,
    KNOWN_WORDS_FILE,
    PHRASAL_VERBS_PATH,
    QUEUE_POLL_MS,
    TEXT_FILE_EXTENSIONS,
    USER_PREFERENCES_FILE,
    WORD_LIST_EXTENSIONS,
)
from vocab_analyzer.known_words import (
    JsonFileKnownWordStore,
    KnownWordSet,
    WordListImportError,
    export_known_words,
    import_known_words,
    suggest_export_filename,
)
from vocab_analyzer.logging_config import debug_log, error
from vocab_analyzer.ui.window_layout import WindowLayoutMixin
from vocab_analyzer.ui.workers import (
    ERROR,
    TEXT_LOADED,
    WORD_LIST_LOADED,
    FileReadWorker,
)
from vocab_analyzer.user_preferences import UserPreferencesManager
from vocab_analyzer.vocabulary import VocabularyExtractor, load_phrase_dictionary, load_word_list


class MainWindow(WindowLayoutMixin, ctk.CTk):
    """
    Main application window for Vocabulary Analyzer.

    Owns the application session state: the known-word set, the vocabulary
    extractor holding the current document's frequencies, and the worker
    queue. Every state change happens on the Tk thread.
    """

    def __init__(self):
        super().__init__()

        self.title("Vocabulary Analyzer")
        self.geometry("1100x800")
        self.minsize(800, 600)

        # Managers
        self.preferences = UserPreferencesManager(USER_PREFERENCES_FILE)
        self.known_words = KnownWordSet(
            JsonFileKnownWordStore(KNOWN_WORDS_FILE),
            defaults=load_word_list(DEFAULT_KNOWN_WORDS_PATH),
        )
        self.known_words.load()
        self.extractor = VocabularyExtractor(
            phrases=load_phrase_dictionary(PHRASAL_VERBS_PATH),
            known_words=self.known_words,
        )

        # Workers and queue
        self._read_worker: FileReadWorker | None = None
        self._ui_queue: Queue = Queue()
        self._queue_poll_id: str | None = None

        # Build UI
        self._create_header()
        self._create_status_bar()
        self._create_rehearsal_panel()
        self._create_main_panels()

        self._refresh_word_lists()
        self.protocol("WM_DELETE_WINDOW", self._on_close)

        if DEBUG_MODE:
            debug_log(f"[MainWindow] Initialized with {len(self.known_words)} known words")

    # =========================================================================
    # Text Import
    # =========================================================================

    def _import_text(self):
        """Pick a document and extract its vocabulary."""
        patterns = " ".join(f"*{ext}" for ext in TEXT_FILE_EXTENSIONS)
        file_path = filedialog.askopenfilename(
            title="Select a Document",
            filetypes=[("Text documents", patterns), ("All files", "*.*")]
        )
        if not file_path:
            return
        self._start_read(file_path, TEXT_LOADED)

    def _on_text_loaded(self, file_path: Path, text: str):
        entries = self.extractor.extract(text)
        self._refresh_word_lists()
        self.set_status(f"{file_path.name}: {len(entries)} new words")

    # =========================================================================
    # Known Words
    # =========================================================================

    def _mark_known(self, word: str):
        """Chip click in the ranked list."""
        self.extractor.mark_known(word)
        self._refresh_word_lists()
        self.set_status(f"Marked '{word}' as known")

    def _forget_known(self, word: str):
        """Chip click in the known list."""
        if self.known_words.remove(word):
            self.extractor.rerank()
            self._refresh_word_lists()
            self.set_status(f"Forgot '{word}'")

    def _clear_known_words(self):
        if not messagebox.askyesno("Forget All", "Forget every known word?"):
            return
        self.known_words.clear()
        self.extractor.rerank()
        self._refresh_word_lists()
        self.set_status("Known words cleared")

    def _import_word_list(self):
        patterns = " ".join(f"*{ext}" for ext in WORD_LIST_EXTENSIONS)
        file_path = filedialog.askopenfilename(
            title="Import Known Words",
            filetypes=[("Word lists", patterns), ("All files", "*.*")]
        )
        if not file_path:
            return
        self._start_read(file_path, WORD_LIST_LOADED)

    def _on_word_list_loaded(self, file_path: Path, text: str):
        try:
            added = import_known_words(self.known_words, text)
        except WordListImportError as e:
            error(f"[MainWindow] Rejected word list {file_path.name}: {e}")
            messagebox.showerror("Import Failed", f"{file_path.name} was not imported.\n\n{e}")
            return

        self.extractor.rerank()
        self._refresh_word_lists()
        self.set_status(f"Imported {added} new known words from {file_path.name}")

    def _export_word_list(self):
        file_path = filedialog.asksaveasfilename(
            title="Export Known Words",
            initialfile=suggest_export_filename(),
            defaultextension=".json",
            filetypes=[("JSON", "*.json")]
        )
        if not file_path:
            return

        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(export_known_words(self.known_words.words))
        except OSError as e:
            error(f"[MainWindow] Export failed: {e}")
            messagebox.showerror("Export Failed", str(e))
            return

        self.set_status(f"Exported {len(self.known_words)} words to {Path(file_path).name}")

    # =========================================================================
    # Worker Queue
    # =========================================================================

    def _start_read(self, file_path: str, message_type: str):
        if self._read_worker and self._read_worker.is_alive():
            self._read_worker.stop()

        self._read_worker = FileReadWorker(file_path, self._ui_queue, message_type)
        self._read_worker.start()
        self.set_status(f"Reading {Path(file_path).name}...")

        if self._queue_poll_id is None:
            self._queue_poll_id = self.after(QUEUE_POLL_MS, self._poll_queue)

    def _poll_queue(self):
        """Drain worker messages on the Tk thread."""
        self._queue_poll_id = None
        try:
            while True:
                message_type, data = self._ui_queue.get_nowait()
                if message_type == TEXT_LOADED:
                    self._on_text_loaded(*data)
                elif message_type == WORD_LIST_LOADED:
                    self._on_word_list_loaded(*data)
                elif message_type == ERROR:
                    messagebox.showerror("Unreadable File", data)
                    self.set_status("File could not be read")
        except Empty:
            pass

        worker_running = self._read_worker is not None and self._read_worker.is_alive()
        if worker_running or not self._ui_queue.empty():
            self._queue_poll_id = self.after(QUEUE_POLL_MS, self._poll_queue)

    # =========================================================================
    # Display
    # =========================================================================

    def _refresh_word_lists(self):
        entries = self.extractor.entries
        self.vocab_header.configure(text=f"WORDS: {len(entries)}")
        self.vocab_grid.show_entries(entries)

        self.known_header.configure(text=f"KNOWN WORDS: {len(self.known_words)}")
        self.known_grid.show_words(self.known_words.words)
        self.rehearsal_panel.refresh_words()

    def set_status(self, message: str):
        self.status_label.configure(text=message)

    def _on_close(self):
        self.rehearsal_panel.shutdown()
        if self._queue_poll_id is not None:
            self.after_cancel(self._queue_poll_id)
        if self._read_worker:
            self._read_worker.stop()
        self.destroy()
