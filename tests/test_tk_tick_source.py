"""
Tests for TkTickSource using a mocked Tk widget.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from vocab_analyzer.ui.tk_tick_source import TkTickSource  # noqa: E402


def make_widget():
    """Widget whose after() hands out increasing ids."""
    widget = MagicMock()
    widget.after.side_effect = [f"after#{i}" for i in range(100)]
    return widget


class TestTkTickSource:
    """Tests for scheduling and cancellation."""

    def test_start_schedules_one_callback(self):
        widget = make_widget()
        source = TkTickSource(widget, period_ms=1000)

        source.start(MagicMock())

        widget.after.assert_called_once_with(1000, source._fire)
        assert source.active

    def test_fire_rearms_then_runs_callback(self):
        widget = make_widget()
        callback = MagicMock()
        source = TkTickSource(widget)
        source.start(callback)

        source._fire()

        callback.assert_called_once_with()
        assert widget.after.call_count == 2
        assert source._after_id == "after#1"

    def test_cancel_cancels_pending_id(self):
        widget = make_widget()
        source = TkTickSource(widget)
        source.start(MagicMock())

        source.cancel()

        widget.after_cancel.assert_called_once_with("after#0")
        assert not source.active

    def test_cancel_without_schedule_is_safe(self):
        widget = make_widget()
        source = TkTickSource(widget)

        source.cancel()
        source.cancel()

        widget.after_cancel.assert_not_called()

    def test_cancel_inside_callback_stops_ticking(self):
        widget = make_widget()
        source = TkTickSource(widget)
        source.start(source.cancel)

        source._fire()

        widget.after_cancel.assert_called_once_with("after#1")
        assert not source.active

    def test_late_fire_after_cancel_does_nothing(self):
        widget = make_widget()
        callback = MagicMock()
        source = TkTickSource(widget)
        source.start(callback)
        source.cancel()

        source._fire()

        callback.assert_not_called()
        assert widget.after.call_count == 1

    def test_restart_replaces_previous_schedule(self):
        widget = make_widget()
        source = TkTickSource(widget)
        first, second = MagicMock(), MagicMock()
        source.start(first)

        source.start(second)
        source._fire()

        widget.after_cancel.assert_called_once_with("after#0")
        first.assert_not_called()
        second.assert_called_once_with()
