"""
Rehearsal Panel

Idle view: duration (HH:MM:SS) and word interval inputs plus a Start button.
Active view: countdown clock, progress bar, the current word in large type,
Pause/Resume and End Session buttons.

The panel renders RehearsalSession snapshots; it never keeps its own copy
of the countdown or the shuffled order.
"""

from collections.abc import Callable, Sequence

import customtkinter as ctk

from vocab_analyzer.logging_config import debug_log
from vocab_analyzer.rehearsal import (
    RehearsalScheduler,
    RehearsalSession,
    SessionState,
    duration_from_parts,
    format_clock,
)
from vocab_analyzer.ui.tk_tick_source import TkTickSource
from vocab_analyzer.user_preferences import UserPreferencesManager


class RehearsalPanel(ctk.CTkFrame):
    """
    Timed word drill over the known-word set.

    Args:
        master: Parent widget
        word_source: Callable returning the current known words
        preferences: Stores the last used duration and interval
    """

    def __init__(
        self,
        master,
        word_source: Callable[[], Sequence[str]],
        preferences: UserPreferencesManager,
        **kwargs
    ):
        super().__init__(master, **kwargs)
        self.word_source = word_source
        self.preferences = preferences

        self.scheduler = RehearsalScheduler(
            TkTickSource(self),
            word_source=word_source,
            on_change=self._render,
        )

        self._create_idle_view()
        self._create_active_view()
        self._render(self.scheduler.session)

    # =========================================================================
    # Layout
    # =========================================================================

    def _create_idle_view(self):
        self.idle_frame = ctk.CTkFrame(self, fg_color="transparent")

        intro = ctk.CTkLabel(
            self.idle_frame,
            text="Words appear one at a time. Read each one aloud before it changes.",
            font=ctk.CTkFont(size=13),
            text_color=("gray40", "gray60")
        )
        intro.pack(pady=(10, 8))

        inputs = ctk.CTkFrame(self.idle_frame, fg_color="transparent")
        inputs.pack(pady=5)

        hours, minutes, seconds = self.preferences.get_rehearsal_duration()
        self.hours_var = ctk.StringVar(value=str(hours))
        self.minutes_var = ctk.StringVar(value=str(minutes))
        self.seconds_var = ctk.StringVar(value=str(seconds))
        self.interval_var = ctk.StringVar(value=str(self.preferences.get_interval_seconds()))

        ctk.CTkLabel(inputs, text="Duration").grid(row=0, column=0, columnspan=5, pady=(0, 4))
        for col, (var, unit) in enumerate(
            [(self.hours_var, "Hr"), (self.minutes_var, "Min"), (self.seconds_var, "Sec")]
        ):
            entry = ctk.CTkEntry(inputs, textvariable=var, width=50, justify="center")
            entry.grid(row=1, column=col * 2, padx=2)
            ctk.CTkLabel(inputs, text=unit, font=ctk.CTkFont(size=10)).grid(row=2, column=col * 2)
            if col < 2:
                ctk.CTkLabel(inputs, text=":").grid(row=1, column=col * 2 + 1)

        ctk.CTkLabel(inputs, text="Word interval (s)").grid(row=0, column=6, padx=(25, 0), pady=(0, 4))
        interval_entry = ctk.CTkEntry(inputs, textvariable=self.interval_var, width=60, justify="center")
        interval_entry.grid(row=1, column=6, padx=(25, 0))

        self.start_btn = ctk.CTkButton(
            self.idle_frame,
            text="Start Session",
            width=200,
            command=self._start
        )
        self.start_btn.pack(pady=(12, 10))

    def _create_active_view(self):
        self.active_frame = ctk.CTkFrame(self, fg_color="transparent")

        self.progress_bar = ctk.CTkProgressBar(self.active_frame)
        self.progress_bar.pack(fill="x", padx=10, pady=(8, 4))

        self.clock_label = ctk.CTkLabel(
            self.active_frame,
            text="00:00:00",
            font=ctk.CTkFont(family="Courier", size=22, weight="bold")
        )
        self.clock_label.pack(anchor="e", padx=10)

        self.word_label = ctk.CTkLabel(
            self.active_frame,
            text="",
            font=ctk.CTkFont(size=56, weight="bold")
        )
        self.word_label.pack(expand=True, pady=20)

        controls = ctk.CTkFrame(self.active_frame, fg_color="transparent")
        controls.pack(pady=(0, 10))

        self.pause_btn = ctk.CTkButton(controls, text="Pause", width=120, command=self._toggle_pause)
        self.pause_btn.pack(side="left", padx=6)

        self.stop_btn = ctk.CTkButton(
            controls,
            text="End Session",
            width=120,
            fg_color="#e11d48",
            hover_color="#be123c",
            command=self.scheduler.stop
        )
        self.stop_btn.pack(side="left", padx=6)

    # =========================================================================
    # Actions
    # =========================================================================

    def _read_int(self, var: ctk.StringVar, minimum: int = 0) -> int:
        try:
            return max(minimum, int(var.get()))
        except ValueError:
            return minimum

    def _start(self):
        hours = self._read_int(self.hours_var)
        minutes = min(59, self._read_int(self.minutes_var))
        seconds = min(59, self._read_int(self.seconds_var))
        interval = self._read_int(self.interval_var, minimum=1)

        # Show the clamped values back to the user
        self.hours_var.set(str(hours))
        self.minutes_var.set(str(minutes))
        self.seconds_var.set(str(seconds))
        self.interval_var.set(str(interval))

        self.preferences.set_rehearsal_duration(hours, minutes, seconds)
        self.preferences.set_interval_seconds(interval)

        duration = duration_from_parts(hours, minutes, seconds)
        if not self.scheduler.start(duration, interval, list(self.word_source())):
            debug_log("[REHEARSAL] Nothing to rehearse with the current settings")

    def _toggle_pause(self):
        if self.scheduler.state is SessionState.PAUSED:
            self.scheduler.resume()
        else:
            self.scheduler.pause()

    def refresh_words(self):
        """Enable or disable Start depending on whether any words are known."""
        if self.scheduler.is_active:
            return
        has_words = bool(self.word_source())
        self.start_btn.configure(
            state="normal" if has_words else "disabled",
            text="Start Session" if has_words else "Add Words First"
        )

    def shutdown(self):
        """Stop any running session (window closing)."""
        self.scheduler.stop()

    # =========================================================================
    # Rendering
    # =========================================================================

    def _render(self, session: RehearsalSession):
        if not session.is_active:
            self.active_frame.pack_forget()
            self.idle_frame.pack(fill="both", expand=True)
            self.refresh_words()
            return

        self.idle_frame.pack_forget()
        self.active_frame.pack(fill="both", expand=True)

        self.progress_bar.set(session.progress)
        self.clock_label.configure(text=format_clock(session.remaining_seconds))
        self.word_label.configure(text=(session.current_word or "").upper())
        self.pause_btn.configure(text="Resume" if session.state is SessionState.PAUSED else "Pause")
