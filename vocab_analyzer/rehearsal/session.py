"""
Rehearsal Session State Machine

A rehearsal session counts down a configured duration one second per tick
and shows one word of a shuffled word list at a time, advancing every
`interval_seconds`. When the shuffled order runs out the word set is
reshuffled and the cycle restarts.

State diagram:

    IDLE --start--> RUNNING --pause--> PAUSED
      ^               |  ^               |
      |               |  +----resume-----+
      +---stop/expiry-+------stop--------+

RehearsalSession is an immutable value object. Every transition is a pure
function that takes a session and returns the next one; the only input
besides the session is the random generator used for shuffling, so a
seeded random.Random makes every transition reproducible.
"""

import random
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum


class SessionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


@dataclass(frozen=True)
class RehearsalSession:
    """
    Snapshot of a rehearsal session.

    Attributes:
        total_seconds: Requested duration, kept for progress display
        interval_seconds: Seconds each word stays visible (>= 1)
        shuffled_order: Current permutation of the word set
        current_index: Position of the visible word in shuffled_order
        elapsed_seconds: Ticks counted while running (pauses excluded)
        remaining_seconds: Countdown value
        advance_count: Number of times the visible word has moved on
        state: IDLE, RUNNING or PAUSED
    """
    total_seconds: int = 0
    interval_seconds: int = 1
    shuffled_order: tuple[str, ...] = ()
    current_index: int = 0
    elapsed_seconds: int = 0
    remaining_seconds: int = 0
    advance_count: int = 0
    state: SessionState = SessionState.IDLE

    @property
    def current_word(self) -> str | None:
        """Visible word, or None when idle."""
        if self.state is SessionState.IDLE or not self.shuffled_order:
            return None
        return self.shuffled_order[self.current_index]

    @property
    def is_active(self) -> bool:
        return self.state is not SessionState.IDLE

    @property
    def progress(self) -> float:
        """Fraction of the requested duration still remaining (1.0 at start)."""
        if self.total_seconds <= 0:
            return 0.0
        return self.remaining_seconds / self.total_seconds

    @property
    def clock_text(self) -> str:
        return format_clock(self.remaining_seconds)


IDLE_SESSION = RehearsalSession()


def shuffle_words(words: Sequence[str], rng: random.Random | None = None) -> tuple[str, ...]:
    """
    Return a uniformly random permutation of `words` (Fisher-Yates).

    The input is not modified.
    """
    rng = rng or random.Random()
    shuffled = list(words)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return tuple(shuffled)


def start_session(
    duration_seconds: int,
    interval_seconds: int,
    words: Sequence[str],
    rng: random.Random | None = None,
) -> RehearsalSession | None:
    """
    Create a running session.

    Returns:
        The new RUNNING session, or None when the configuration cannot
        start (non-positive duration or no words)

    Raises:
        ValueError: If interval_seconds is less than 1
    """
    if interval_seconds < 1:
        raise ValueError(f"interval_seconds must be >= 1, got {interval_seconds}")
    if duration_seconds <= 0 or not words:
        return None

    return RehearsalSession(
        total_seconds=duration_seconds,
        interval_seconds=interval_seconds,
        shuffled_order=shuffle_words(words, rng),
        current_index=0,
        elapsed_seconds=0,
        remaining_seconds=duration_seconds,
        state=SessionState.RUNNING,
    )


def step(
    session: RehearsalSession,
    words: Sequence[str],
    rng: random.Random | None = None,
) -> RehearsalSession:
    """
    Apply one one-second tick.

    Only a RUNNING session changes. The countdown drops by one and the
    elapsed counter rises by one; on every multiple of the interval the
    next shuffled word becomes visible, reshuffling `words` when the order
    is exhausted. A session whose countdown reaches zero returns to IDLE
    on the same tick.

    Args:
        session: Current snapshot
        words: Current word set, read only when a reshuffle is needed
        rng: Random generator for reshuffles

    Returns:
        The next snapshot
    """
    if session.state is not SessionState.RUNNING:
        return session

    if session.remaining_seconds <= 0:
        return stop_session(replace(session, remaining_seconds=0))

    remaining = session.remaining_seconds - 1
    elapsed = session.elapsed_seconds + 1
    order = session.shuffled_order
    index = session.current_index
    advances = session.advance_count

    if elapsed % session.interval_seconds == 0 and order:
        index += 1
        advances += 1
        if index >= len(order):
            # An emptied word set keeps cycling through the previous words
            order = shuffle_words(words if words else order, rng)
            index = 0

    advanced = replace(
        session,
        shuffled_order=order,
        current_index=index,
        elapsed_seconds=elapsed,
        remaining_seconds=remaining,
        advance_count=advances,
    )
    if remaining == 0:
        return stop_session(advanced)
    return advanced


def pause_session(session: RehearsalSession) -> RehearsalSession:
    """Suspend a running session; counters and visible word are kept."""
    if session.state is not SessionState.RUNNING:
        return session
    return replace(session, state=SessionState.PAUSED)


def resume_session(session: RehearsalSession) -> RehearsalSession:
    """Continue a paused session from exactly where it stopped."""
    if session.state is not SessionState.PAUSED:
        return session
    return replace(session, state=SessionState.RUNNING)


def stop_session(session: RehearsalSession) -> RehearsalSession:
    """End the session; the shuffled order and visible word are discarded."""
    if session.state is SessionState.IDLE:
        return session
    return replace(
        session,
        shuffled_order=(),
        current_index=0,
        state=SessionState.IDLE,
    )


def duration_from_parts(hours: int = 0, minutes: int = 0, seconds: int = 0) -> int:
    """
    Total seconds from clock inputs.

    Hours are floored at 0; minutes and seconds are clamped to 0-59.
    """
    hours = max(0, int(hours))
    minutes = max(0, min(59, int(minutes)))
    seconds = max(0, min(59, int(seconds)))
    return hours * 3600 + minutes * 60 + seconds


def split_duration(total_seconds: int) -> tuple[int, int, int]:
    """Split seconds into (hours, minutes, seconds)."""
    total_seconds = max(0, int(total_seconds))
    return total_seconds // 3600, (total_seconds % 3600) // 60, total_seconds % 60


def format_clock(total_seconds: int) -> str:
    """
    Format seconds as a zero-padded HH:MM:SS countdown.

    Examples:
        >>> format_clock(75)
        '00:01:15'
        >>> format_clock(3725)
        '01:02:05'
    """
    hours, minutes, seconds = split_duration(total_seconds)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
