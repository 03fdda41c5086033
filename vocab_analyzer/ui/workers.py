"""
Background Workers Module

File reads run off the Tk thread so a large subtitle file never freezes
the window. Workers only read; every state change happens on the Tk
thread when the main window drains the queue.

Signals sent to ui_queue:
- ('text_loaded', (file_path, text)) - Document ready for extraction
- ('word_list_loaded', (file_path, text)) - JSON word list ready for import
- ('error', str) - File could not be read
"""

import threading
from pathlib import Path
from queue import Queue

from vocab_analyzer.extraction import TextReadError, read_text_file
from vocab_analyzer.logging_config import debug_log

TEXT_LOADED = 'text_loaded'
WORD_LIST_LOADED = 'word_list_loaded'
ERROR = 'error'


class FileReadWorker(threading.Thread):
    """
    Background worker that reads one file and posts its content.

    Attributes:
        file_path: File to read
        ui_queue: Queue for communication with the main UI thread
        message_type: Signal name used for a successful read
    """

    def __init__(self, file_path: str | Path, ui_queue: Queue, message_type: str = TEXT_LOADED):
        super().__init__(daemon=True)
        self.file_path = Path(file_path)
        self.ui_queue = ui_queue
        self.message_type = message_type
        self._stop_event = threading.Event()  # Event for graceful stopping

    def stop(self):
        """Signals the worker to discard its result."""
        self._stop_event.set()

    def run(self):
        """Read the file in the background thread."""
        try:
            text = read_text_file(self.file_path)
        except TextReadError as e:
            debug_log(f"[READ WORKER] {e}")
            self.ui_queue.put((ERROR, str(e)))
            return

        if self._stop_event.is_set():
            debug_log(f"[READ WORKER] Cancelled, discarding {self.file_path.name}")
            return

        self.ui_queue.put((self.message_type, (self.file_path, text)))
        debug_log(f"[READ WORKER] Finished reading {self.file_path.name}")
