"""Scheduling pattern trigger strategy."""

from datetime import datetime
from functools import lru_cache
from typing import Any
from zoneinfo import ZoneInfo

from cronpattern.core.common.exceptions import PredictionError
from cronpattern.core.pattern import SchedulingPattern
from cronpattern.core.predictor import Predictor
from cronpattern.core.triggers.base import TriggerStrategy
from cronpattern.utils.logging import get_logger
from cronpattern.utils.time import get_timezone

PATTERN_ARG = "pattern"

logger = get_logger("trigger")


@lru_cache(maxsize=256)
def _compiled(text: str) -> SchedulingPattern:
    # Compiled patterns are immutable, so sharing them between jobs is safe
    return SchedulingPattern(text)


class PatternTrigger(TriggerStrategy):
    """Trigger for scheduling-pattern based execution."""

    def get_pattern(self, trigger_args: dict[str, Any]) -> SchedulingPattern:
        """
        Compile the pattern stored in trigger arguments.

        Raises:
            ValueError: If "pattern" is missing
            InvalidPatternError: If the pattern does not compile
        """
        text = trigger_args.get(PATTERN_ARG)
        if not text:
            raise ValueError(f"Pattern trigger requires a '{PATTERN_ARG}' argument")
        return _compiled(text)

    def calculate_next_run_time(
        self,
        trigger_args: dict[str, Any],
        timezone: str,
        current_time: datetime | None = None,
    ) -> datetime | None:
        """
        Calculate next run time for pattern trigger.

        Args:
            trigger_args: Must contain "pattern"
            timezone: IANA timezone string the pattern is evaluated in
            current_time: Current time (timezone-aware)

        Returns:
            Next run time in UTC, or None if the pattern never fires again
            within the predictor's search horizon
        """
        pattern = self.get_pattern(trigger_args)
        tz = get_timezone(timezone)
        current = current_time if current_time else datetime.now(tz)

        try:
            next_time = Predictor(pattern, current, tz).next_matching_date()
        except PredictionError as e:
            logger.warning("No next run time for pattern", pattern=str(pattern), reason=str(e))
            return None

        # Convert to UTC
        return next_time.astimezone(ZoneInfo("UTC"))

    def should_fire(
        self,
        trigger_args: dict[str, Any],
        timezone: str,
        current_time: datetime,
    ) -> bool:
        """
        Check whether the job fires at ``current_time``.

        Polling schedulers ticking once per second call this on every tick
        instead of tracking a next run time.
        """
        return self.get_pattern(trigger_args).match(current_time, get_timezone(timezone))
