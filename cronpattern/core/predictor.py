"""
Next-fire-time prediction for scheduling patterns.

The predictor walks forward from a start instant and returns the first instant
at which the pattern matches. Whole days, hours and minutes are skipped when
no alternative can match them, so the walk is bounded by a few hundred checks
per candidate day.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, time, timedelta, timezone as dt_timezone, tzinfo

from cronpattern.core.common.exceptions import PredictionError
from cronpattern.core.pattern import SchedulingPattern
from cronpattern.utils.logging import get_logger
from cronpattern.utils.time import decompose, from_epoch_millis, resolve_timezone

MIN_SEARCH_YEARS = 1
MAX_SEARCH_YEARS = 100
DEFAULT_SEARCH_YEARS = 5

ONE_SECOND = timedelta(seconds=1)
DAYS_PER_SEARCH_YEAR = 366

logger = get_logger("predictor")


class Predictor:
    """
    Iterates the instants at which a pattern fires.

    Args:
        pattern: Compiled pattern or pattern text
        start: Instant to search after (exclusive). Epoch milliseconds, an aware
            datetime, or a naive datetime read in ``timezone``. Defaults to now.
        timezone: IANA name or tzinfo in which the pattern is evaluated
        max_search_years: How far past the current position to search before
            giving up

    Raises:
        InvalidPatternError: If ``pattern`` is text and does not compile
        ValueError: If ``max_search_years`` is out of bounds or the timezone is unknown

    Example:
        >>> predictor = Predictor("0 0 9 * * mon-fri", datetime(2025, 6, 14), "UTC")
        >>> predictor.next_matching_date()
        datetime.datetime(2025, 6, 16, 9, 0, tzinfo=zoneinfo.ZoneInfo(key='UTC'))
    """

    def __init__(
        self,
        pattern: SchedulingPattern | str,
        start: datetime | int | float | None = None,
        timezone: str | tzinfo | None = "UTC",
        max_search_years: int = DEFAULT_SEARCH_YEARS,
    ) -> None:
        if max_search_years < MIN_SEARCH_YEARS:
            raise ValueError(
                f"max_search_years must be >= {MIN_SEARCH_YEARS}, got {max_search_years}"
            )
        if max_search_years > MAX_SEARCH_YEARS:
            raise ValueError(
                f"max_search_years should not exceed {MAX_SEARCH_YEARS}, got {max_search_years}"
            )

        self.pattern = pattern if isinstance(pattern, SchedulingPattern) else SchedulingPattern(pattern)
        self.timezone = resolve_timezone(timezone)
        self.max_search_years = max_search_years
        self._current = self._to_utc(start)
        self._logger = logger.with_context(pattern=str(self.pattern))

    def _to_utc(self, start: datetime | int | float | None) -> datetime:
        if start is None:
            return datetime.now(dt_timezone.utc)
        if isinstance(start, datetime):
            if start.tzinfo is None:
                start = start.replace(tzinfo=self.timezone)
            return start.astimezone(dt_timezone.utc)
        return from_epoch_millis(start)

    def next_matching_date(self) -> datetime:
        """
        Find the next instant, strictly after the current position, matching the pattern.

        Each call advances the current position to the returned instant.

        Returns:
            Timezone-aware datetime in the predictor's timezone

        Raises:
            PredictionError: If nothing matches within ``max_search_years``
        """
        found = self._search(self._current)
        if found is None:
            raise PredictionError(
                f'Pattern "{self.pattern}" does not match within {self.max_search_years} '
                f"years after {self._current.isoformat()}"
            )
        self._current = found
        return found.astimezone(self.timezone)

    def next_matching_time(self) -> int:
        """Same as ``next_matching_date`` but in epoch milliseconds."""
        return int(self.next_matching_date().timestamp() * 1000)

    def __iter__(self) -> Iterator[datetime]:
        while True:
            try:
                yield self.next_matching_date()
            except PredictionError as e:
                self._logger.debug("Prediction exhausted", reason=str(e))
                return

    def _search(self, after: datetime) -> datetime | None:
        alternatives = self.pattern.alternatives
        candidate = after.replace(microsecond=0) + ONE_SECOND
        deadline = after + timedelta(days=DAYS_PER_SEARCH_YEAR * self.max_search_years)

        while candidate <= deadline:
            local = candidate.astimezone(self.timezone)
            fields = decompose(local)

            day_matches = [alt for alt in alternatives if alt.matches_date(fields)]
            if not day_matches:
                candidate = max(self._next_midnight(local), candidate + ONE_SECOND)
                continue

            hour_matches = [alt for alt in day_matches if alt.hour.match(fields.hour)]
            if not hour_matches:
                candidate += timedelta(seconds=3600 - fields.minute * 60 - fields.second)
                continue

            minute_matches = [alt for alt in hour_matches if alt.minute.match(fields.minute)]
            if not minute_matches:
                candidate += timedelta(seconds=60 - fields.second)
                continue

            if any(alt.second.match(fields.second) for alt in minute_matches):
                return candidate
            candidate += ONE_SECOND

        return None

    def _next_midnight(self, local: datetime) -> datetime:
        following = datetime.combine(local.date() + timedelta(days=1), time(0), tzinfo=self.timezone)
        return following.astimezone(dt_timezone.utc)


def next_match(
    pattern: SchedulingPattern | str,
    start: datetime | int | float | None = None,
    timezone: str | tzinfo | None = "UTC",
) -> datetime:
    """Return the first instant after ``start`` at which ``pattern`` fires."""
    return Predictor(pattern, start, timezone).next_matching_date()
