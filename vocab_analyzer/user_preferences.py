"""
User Preferences Manager for Vocabulary Analyzer
Remembers the rehearsal configuration between runs.
"""

import json
from pathlib import Path
from typing import Any

from vocab_analyzer.config import (
    REHEARSAL_DEFAULT_HOURS,
    REHEARSAL_DEFAULT_INTERVAL,
    REHEARSAL_DEFAULT_MINUTES,
    REHEARSAL_DEFAULT_SECONDS,
)
from vocab_analyzer.logging_config import debug_log


class UserPreferencesManager:
    """
    Manages user preferences stored in user_preferences.json.

    Handles the last used rehearsal duration and word interval with
    graceful fallbacks to the configured defaults.
    """

    def __init__(self, preferences_file: Path):
        """
        Initialize the preferences manager.

        Args:
            preferences_file: Path to user_preferences.json
        """
        self.preferences_file = Path(preferences_file)
        self._preferences = self._load_preferences()

    def _default_structure(self) -> dict[str, Any]:
        return {
            "rehearsal": {
                "hours": REHEARSAL_DEFAULT_HOURS,
                "minutes": REHEARSAL_DEFAULT_MINUTES,
                "seconds": REHEARSAL_DEFAULT_SECONDS,
                "interval_seconds": REHEARSAL_DEFAULT_INTERVAL,
            }
        }

    def _load_preferences(self) -> dict[str, Any]:
        """
        Load preferences from JSON file.

        Returns:
            dict: User preferences, or default structure if file not found
        """
        default_structure = self._default_structure()

        try:
            if self.preferences_file.exists():
                with open(self.preferences_file, encoding='utf-8') as f:
                    prefs = json.load(f)
                if not isinstance(prefs, dict):
                    return default_structure
                # Ensure structure exists
                if not isinstance(prefs.get("rehearsal"), dict):
                    prefs["rehearsal"] = default_structure["rehearsal"]
                return prefs
            else:
                return default_structure

        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            # If file is corrupted, return defaults
            debug_log(f"[PREFS] Ignoring unreadable preferences file: {e}")
            return default_structure

    def _save_preferences(self) -> None:
        """Save preferences to JSON file."""
        try:
            self.preferences_file.parent.mkdir(parents=True, exist_ok=True)

            with open(self.preferences_file, 'w', encoding='utf-8') as f:
                json.dump(self._preferences, f, indent=2)

        except OSError as e:
            # Log error but don't crash
            debug_log(f"[PREFS] Could not save user preferences: {e}")

    def get_rehearsal_duration(self) -> tuple[int, int, int]:
        """
        Get the last used rehearsal duration.

        Returns:
            (hours, minutes, seconds)
        """
        defaults = self._default_structure()["rehearsal"]
        rehearsal = self._preferences.get("rehearsal", {})
        return tuple(
            self._as_int(rehearsal.get(key), defaults[key])
            for key in ("hours", "minutes", "seconds")
        )

    def set_rehearsal_duration(self, hours: int, minutes: int, seconds: int) -> None:
        """
        Remember the rehearsal duration.

        Raises:
            ValueError: If any part is negative or minutes/seconds exceed 59
        """
        if hours < 0 or not 0 <= minutes <= 59 or not 0 <= seconds <= 59:
            raise ValueError(
                f"Invalid duration {hours}:{minutes}:{seconds} "
                "(hours >= 0, minutes and seconds 0-59)"
            )

        rehearsal = self._preferences.setdefault("rehearsal", {})
        rehearsal.update({"hours": hours, "minutes": minutes, "seconds": seconds})
        self._save_preferences()

    def get_interval_seconds(self) -> int:
        """Get the seconds each word stays visible. Defaults to the configured interval."""
        value = self._as_int(
            self._preferences.get("rehearsal", {}).get("interval_seconds"),
            REHEARSAL_DEFAULT_INTERVAL,
        )
        return max(1, value)

    def set_interval_seconds(self, interval_seconds: int) -> None:
        """
        Remember the word interval.

        Raises:
            ValueError: If interval_seconds is less than 1
        """
        if interval_seconds < 1:
            raise ValueError(f"Interval must be at least 1 second, got {interval_seconds}")

        self._preferences.setdefault("rehearsal", {})["interval_seconds"] = interval_seconds
        self._save_preferences()

    @staticmethod
    def _as_int(value, default: int) -> int:
        try:
            return max(0, int(value))
        except (TypeError, ValueError):
            return default
