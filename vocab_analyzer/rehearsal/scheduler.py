"""
Rehearsal Scheduler

Owns the single active RehearsalSession and the tick source that drives it.
All state changes go through the pure transitions in session.py; the
scheduler only wires them to the timer and notifies the UI.

Example:
    scheduler = RehearsalScheduler(TkTickSource(widget), word_source=known.words.copy,
                                   on_change=panel.render)
    scheduler.start(60, 5, known.words)
    ...
    scheduler.pause()
    scheduler.resume()
    scheduler.stop()
"""

import random
from collections.abc import Callable, Sequence

from vocab_analyzer.logging_config import debug_log, info
from vocab_analyzer.rehearsal.session import (
    IDLE_SESSION,
    RehearsalSession,
    SessionState,
    pause_session,
    resume_session,
    start_session,
    step,
    stop_session,
)
from vocab_analyzer.rehearsal.tick_source import TickSource


class RehearsalScheduler:
    """
    Drives a rehearsal session with a one-second tick source.

    Attributes:
        tick_source: Periodic driver (Tk after() in the app, manual in tests)
        word_source: Optional callable returning the current word set; read
                     on reshuffles so words learned mid-session are picked up
        rng: Random generator used for shuffles
        on_change: Optional callback receiving the session after each transition
        session: Current session snapshot
    """

    def __init__(
        self,
        tick_source: TickSource,
        word_source: Callable[[], Sequence[str]] | None = None,
        rng: random.Random | None = None,
        on_change: Callable[[RehearsalSession], None] | None = None,
    ):
        self.tick_source = tick_source
        self.word_source = word_source
        self.rng = rng or random.Random()
        self.on_change = on_change
        self.session: RehearsalSession = IDLE_SESSION
        self._start_words: tuple[str, ...] = ()

    @property
    def state(self) -> SessionState:
        return self.session.state

    @property
    def current_word(self) -> str | None:
        return self.session.current_word

    @property
    def is_active(self) -> bool:
        return self.session.is_active

    def start(self, duration_seconds: int, interval_seconds: int, words: Sequence[str]) -> bool:
        """
        Start a new session, stopping any session already in progress.

        A rejected configuration leaves the current session untouched.

        Args:
            duration_seconds: Countdown length; must be positive
            interval_seconds: Seconds per word; must be >= 1
            words: Word set to rehearse; must not be empty

        Returns:
            True if a session started, False if the configuration was rejected

        Raises:
            ValueError: If interval_seconds is less than 1
        """
        session = start_session(duration_seconds, interval_seconds, words, self.rng)
        if session is None:
            debug_log(f"[REHEARSAL] Start refused: duration={duration_seconds}s, "
                      f"{len(words)} words")
            return False

        if self.is_active:
            self.stop()

        self._start_words = tuple(words)
        self._set_session(session)
        self.tick_source.start(self.tick)
        info(f"[REHEARSAL] Session started: {duration_seconds}s, "
             f"interval {interval_seconds}s, {len(words)} words")
        return True

    def tick(self):
        """Advance the session by one second. Called by the tick source."""
        if self.session.state is not SessionState.RUNNING:
            return

        next_session = step(self.session, self._current_words(), self.rng)
        if next_session.state is not SessionState.RUNNING:
            self.tick_source.cancel()
            info("[REHEARSAL] Session finished")
        self._set_session(next_session)

    def pause(self) -> bool:
        """Suspend ticking. Only valid while running."""
        if self.session.state is not SessionState.RUNNING:
            return False
        self.tick_source.cancel()
        self._set_session(pause_session(self.session))
        debug_log(f"[REHEARSAL] Paused at {self.session.elapsed_seconds}s elapsed")
        return True

    def resume(self) -> bool:
        """Continue ticking with the same counters. Only valid while paused."""
        if self.session.state is not SessionState.PAUSED:
            return False
        self._set_session(resume_session(self.session))
        self.tick_source.start(self.tick)
        debug_log(f"[REHEARSAL] Resumed at {self.session.elapsed_seconds}s elapsed")
        return True

    def stop(self) -> bool:
        """End the session. Valid while running or paused."""
        # Cancel unconditionally; the tick source tolerates a redundant cancel
        self.tick_source.cancel()
        if not self.session.is_active:
            return False
        self._set_session(stop_session(self.session))
        self._start_words = ()
        info("[REHEARSAL] Session stopped")
        return True

    def _current_words(self) -> Sequence[str]:
        if self.word_source is not None:
            return tuple(self.word_source())
        return self._start_words

    def _set_session(self, session: RehearsalSession):
        self.session = session
        if self.on_change:
            self.on_change(session)
