"""
Tk Tick Source

Drives the rehearsal scheduler from the Tk event loop. Each tick re-arms
itself with widget.after(), so exactly one callback is pending at a time
and cancelling that single after() id is enough to stop ticking.
"""

from collections.abc import Callable

from vocab_analyzer.config import TICK_PERIOD_MS
from vocab_analyzer.logging_config import debug_log
from vocab_analyzer.rehearsal.tick_source import TickSource


class TkTickSource(TickSource):
    """
    Periodic callback backed by a Tk widget's after()/after_cancel().

    Attributes:
        widget: Any Tk or CustomTkinter widget
        period_ms: Milliseconds between callbacks
        _after_id: ID of the scheduled after() callback for cancellation
    """

    def __init__(self, widget, period_ms: int = TICK_PERIOD_MS):
        self.widget = widget
        self.period_ms = period_ms
        self._callback: Callable[[], None] | None = None
        self._after_id: str | None = None

    @property
    def active(self) -> bool:
        return self._after_id is not None

    def start(self, callback: Callable[[], None]) -> None:
        self.cancel()
        self._callback = callback
        self._after_id = self.widget.after(self.period_ms, self._fire)
        debug_log(f"[TIMER] Ticking every {self.period_ms} ms")

    def cancel(self) -> None:
        if self._after_id is not None:
            self.widget.after_cancel(self._after_id)
            self._after_id = None
            debug_log("[TIMER] Tick cancelled")
        self._callback = None

    def _fire(self):
        """Run the callback, then schedule the next tick unless it cancelled us."""
        callback = self._callback
        if callback is None:
            return

        # Re-arm before running so a cancel() inside the callback clears the new id
        self._after_id = self.widget.after(self.period_ms, self._fire)
        callback()
