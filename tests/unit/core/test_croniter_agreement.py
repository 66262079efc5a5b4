"""Cross-check classic five-field patterns against croniter."""

from datetime import datetime, timedelta

import pytest

from cronpattern import SchedulingPattern

croniter = pytest.importorskip("croniter").croniter

# Only one of day-of-month/day-of-week is restricted: croniter ORs the two
# day fields when both are, while scheduling patterns AND them.
CLASSIC_EXPRESSIONS = [
    "*/15 9-17 * * mon-fri",
    "0 0 1 * *",
    "30 4 * * 0",
    "5 0 * 8 *",
    "0 22 * * 1-5",
    "23 0-20/2 * * *",
    "0 12 * jan-mar *",
    "0,30 * 15 * *",
    "45 23 * * sat,sun",
]


def sample_minutes():
    # 2025-01-27 is a Monday; 13-minute steps drift through every minute of the hour
    start = datetime(2025, 1, 27, 0, 0)
    for offset in range(0, 10 * 24 * 60, 13):
        yield start + timedelta(minutes=offset)


class TestCroniterAgreement:
    """Classic expressions agree with croniter on sampled minutes."""

    @pytest.mark.parametrize("expression", CLASSIC_EXPRESSIONS)
    def test_sampled_minutes(self, expression):
        """Both libraries accept and reject the same minutes."""
        pattern = SchedulingPattern(expression)
        for moment in sample_minutes():
            assert pattern.match(moment) == croniter.match(expression, moment), moment

    @pytest.mark.parametrize("expression", CLASSIC_EXPRESSIONS)
    def test_fire_times(self, expression):
        """Instants produced by croniter always match."""
        pattern = SchedulingPattern(expression)
        iterator = croniter(expression, datetime(2025, 1, 27, 0, 0))
        for _ in range(20):
            assert pattern.match(iterator.get_next(datetime))
