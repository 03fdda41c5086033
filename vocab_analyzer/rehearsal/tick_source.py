"""
Tick source interface for the rehearsal scheduler.

A tick source calls a callback once per period until cancelled. The
scheduler never sleeps or spawns threads itself; the GUI supplies a tick
source backed by the Tk event loop (see vocab_analyzer.ui.tk_tick_source).
"""

from abc import ABC, abstractmethod
from collections.abc import Callable


class TickSource(ABC):
    """
    Periodic callback driver.

    Contract:
    - start(callback) replaces any previous schedule
    - cancel() guarantees no further callback fires and is safe to call
      when nothing is scheduled
    """

    @abstractmethod
    def start(self, callback: Callable[[], None]) -> None:
        """Begin calling `callback` once per period."""

    @abstractmethod
    def cancel(self) -> None:
        """Stop calling the callback."""

    @property
    @abstractmethod
    def active(self) -> bool:
        """True while a callback is scheduled."""
