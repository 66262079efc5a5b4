"""Unit tests for the pattern trigger strategy."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from cronpattern import InvalidPatternError, PatternTrigger, TriggerStrategy
from cronpattern.utils.time import utc_now


class TestPatternTrigger:
    """Unit tests for PatternTrigger."""

    def test_is_trigger_strategy(self):
        """PatternTrigger implements the strategy interface."""
        assert isinstance(PatternTrigger(), TriggerStrategy)

    def test_calculate_next_run_time_daily(self):
        """Test pattern trigger for daily execution."""
        trigger = PatternTrigger()
        current_time = utc_now()

        next_run = trigger.calculate_next_run_time(
            trigger_args={"pattern": "0 0 9 * * *"}, timezone="UTC", current_time=current_time
        )

        assert next_run is not None
        assert next_run > current_time
        assert next_run.hour == 9
        assert next_run.minute == 0
        assert next_run.second == 0

    def test_calculate_next_run_time_with_timezone(self):
        """Test pattern trigger respects timezone and returns UTC."""
        trigger = PatternTrigger()
        current_time = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)

        next_run = trigger.calculate_next_run_time(
            trigger_args={"pattern": "0 30 14 * * *"},
            timezone="America/New_York",
            current_time=current_time,
        )

        assert next_run == datetime(2025, 6, 15, 18, 30, tzinfo=timezone.utc)
        assert next_run.utcoffset().total_seconds() == 0
        ny_time = next_run.astimezone(ZoneInfo("America/New_York"))
        assert ny_time.hour == 14
        assert ny_time.minute == 30

    def test_calculate_next_run_time_without_current_time(self):
        """Defaults to now in the job's timezone."""
        before = utc_now()
        next_run = PatternTrigger().calculate_next_run_time({"pattern": "* * * * * *"}, "Asia/Seoul")
        assert next_run is not None
        assert next_run > before.replace(microsecond=0)

    def test_never_firing_pattern_returns_none(self):
        """Patterns that never fire have no next run time."""
        next_run = PatternTrigger().calculate_next_run_time(
            {"pattern": "0 0 0 31 apr *"},
            "UTC",
            datetime(2025, 1, 1, tzinfo=timezone.utc),
        )
        assert next_run is None

    def test_missing_pattern(self):
        """trigger_args must contain a pattern."""
        with pytest.raises(ValueError, match="pattern"):
            PatternTrigger().calculate_next_run_time({}, "UTC")

    def test_invalid_pattern(self):
        """Invalid patterns propagate InvalidPatternError."""
        with pytest.raises(InvalidPatternError):
            PatternTrigger().calculate_next_run_time({"pattern": "0 0 25 * * *"}, "UTC")

    def test_should_fire(self):
        """should_fire evaluates the pattern at the given tick."""
        trigger = PatternTrigger()
        args = {"pattern": "0 0 9 * * mon-fri"}
        # 2025-06-16 is a Monday; 09:00 in Seoul is 00:00 UTC
        assert trigger.should_fire(args, "Asia/Seoul", datetime(2025, 6, 16, 0, 0, tzinfo=timezone.utc))
        assert not trigger.should_fire(args, "UTC", datetime(2025, 6, 16, 0, 0, tzinfo=timezone.utc))

    def test_compiled_patterns_are_shared(self):
        """The same text compiles once."""
        trigger = PatternTrigger()
        first = trigger.get_pattern({"pattern": "0 0 9 * * *"})
        second = trigger.get_pattern({"pattern": "0 0 9 * * *"})
        assert first is second
