"""
Tests for UserPreferencesManager.

Tests cover:
- Defaults when no file exists
- Persisting rehearsal duration and interval
- Validation of invalid values
- Recovery from corrupt files
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vocab_analyzer.config import (  # noqa: E402
    REHEARSAL_DEFAULT_HOURS,
    REHEARSAL_DEFAULT_INTERVAL,
    REHEARSAL_DEFAULT_MINUTES,
    REHEARSAL_DEFAULT_SECONDS,
)
from vocab_analyzer.user_preferences import UserPreferencesManager  # noqa: E402


@pytest.fixture
def prefs_file(tmp_path):
    return tmp_path / "config" / "user_preferences.json"


class TestDefaults:
    """Behavior without a preferences file."""

    def test_default_duration(self, prefs_file):
        manager = UserPreferencesManager(prefs_file)
        assert manager.get_rehearsal_duration() == (
            REHEARSAL_DEFAULT_HOURS,
            REHEARSAL_DEFAULT_MINUTES,
            REHEARSAL_DEFAULT_SECONDS,
        )

    def test_default_interval(self, prefs_file):
        manager = UserPreferencesManager(prefs_file)
        assert manager.get_interval_seconds() == max(1, REHEARSAL_DEFAULT_INTERVAL)

    def test_corrupt_file_uses_defaults(self, prefs_file):
        prefs_file.parent.mkdir(parents=True)
        prefs_file.write_text("{broken", encoding="utf-8")

        manager = UserPreferencesManager(prefs_file)

        assert manager.get_interval_seconds() == max(1, REHEARSAL_DEFAULT_INTERVAL)

    def test_undecodable_file_uses_defaults(self, prefs_file):
        prefs_file.parent.mkdir(parents=True)
        prefs_file.write_bytes(b'{"rehearsal": "\xff\xfe"}')

        manager = UserPreferencesManager(prefs_file)

        assert manager.get_rehearsal_duration() == (
            REHEARSAL_DEFAULT_HOURS,
            REHEARSAL_DEFAULT_MINUTES,
            REHEARSAL_DEFAULT_SECONDS,
        )
        assert manager.get_interval_seconds() == max(1, REHEARSAL_DEFAULT_INTERVAL)

    def test_non_dict_file_uses_defaults(self, prefs_file):
        prefs_file.parent.mkdir(parents=True)
        prefs_file.write_text("[1, 2, 3]", encoding="utf-8")

        manager = UserPreferencesManager(prefs_file)

        assert manager.get_rehearsal_duration() == (
            REHEARSAL_DEFAULT_HOURS,
            REHEARSAL_DEFAULT_MINUTES,
            REHEARSAL_DEFAULT_SECONDS,
        )


class TestPersistence:
    """Saved values survive a new manager instance."""

    def test_duration_round_trip(self, prefs_file):
        UserPreferencesManager(prefs_file).set_rehearsal_duration(1, 30, 15)

        assert UserPreferencesManager(prefs_file).get_rehearsal_duration() == (1, 30, 15)

    def test_interval_round_trip(self, prefs_file):
        UserPreferencesManager(prefs_file).set_interval_seconds(8)

        assert UserPreferencesManager(prefs_file).get_interval_seconds() == 8

    def test_file_contents(self, prefs_file):
        manager = UserPreferencesManager(prefs_file)
        manager.set_rehearsal_duration(0, 2, 0)
        manager.set_interval_seconds(3)

        data = json.loads(prefs_file.read_text(encoding="utf-8"))

        assert data["rehearsal"] == {
            "hours": 0, "minutes": 2, "seconds": 0, "interval_seconds": 3,
        }

    def test_garbage_values_fall_back(self, prefs_file):
        prefs_file.parent.mkdir(parents=True)
        prefs_file.write_text(
            json.dumps({"rehearsal": {"hours": "x", "minutes": 4, "interval_seconds": 0}}),
            encoding="utf-8",
        )

        manager = UserPreferencesManager(prefs_file)

        assert manager.get_rehearsal_duration() == (
            REHEARSAL_DEFAULT_HOURS, 4, REHEARSAL_DEFAULT_SECONDS,
        )
        assert manager.get_interval_seconds() == 1


class TestValidation:
    """Invalid values are rejected."""

    @pytest.mark.parametrize("hours,minutes,seconds", [
        (-1, 0, 0),
        (0, 60, 0),
        (0, 0, 60),
        (0, -1, 0),
    ])
    def test_invalid_duration(self, prefs_file, hours, minutes, seconds):
        manager = UserPreferencesManager(prefs_file)
        with pytest.raises(ValueError):
            manager.set_rehearsal_duration(hours, minutes, seconds)

    def test_invalid_interval(self, prefs_file):
        manager = UserPreferencesManager(prefs_file)
        with pytest.raises(ValueError):
            manager.set_interval_seconds(0)
        assert not prefs_file.exists()
