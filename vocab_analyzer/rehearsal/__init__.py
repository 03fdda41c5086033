"""
Rehearsal Package

Timed drill over the known-word set: words appear one at a time in a
shuffled order, advancing at a fixed interval until the countdown ends.

Main Components:
- RehearsalSession: Immutable session snapshot plus pure transitions
- RehearsalScheduler: Owns the active session and its tick source
- TickSource: Periodic callback interface (Tk implementation lives in ui/)
"""

from .scheduler import RehearsalScheduler
from .session import (
    IDLE_SESSION,
    RehearsalSession,
    SessionState,
    duration_from_parts,
    format_clock,
    pause_session,
    resume_session,
    shuffle_words,
    split_duration,
    start_session,
    step,
    stop_session,
)
from .tick_source import TickSource

__all__ = [
    'RehearsalScheduler',
    'RehearsalSession',
    'SessionState',
    'IDLE_SESSION',
    'TickSource',
    'start_session',
    'step',
    'pause_session',
    'resume_session',
    'stop_session',
    'shuffle_words',
    'duration_from_parts',
    'split_duration',
    'format_clock',
]
