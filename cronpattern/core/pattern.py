"""
Scheduling pattern: compiled form of a crontab-like expression.

A pattern is one or more alternatives separated by ``|``. Each alternative has
six fields separated by spaces or tabs, seconds first::

    second minute hour day-of-month month day-of-week

An alternative with five fields is read as the classic crontab form (no
seconds field) and fires at second 0. A pattern matches an instant when any
of its alternatives matches it, and an alternative matches when all six of its
fields do.

Example:
    >>> pattern = SchedulingPattern("0 */15 9-17 * * mon-fri|0 0 12 L * *")
    >>> pattern.match(datetime(2025, 6, 16, 9, 45))
    True
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, tzinfo

from cronpattern.core.common.exceptions import InvalidPatternError
from cronpattern.core.common.types import FIELD_ORDER, FieldKind, PatternErrorKind
from cronpattern.core.fields.compiler import compile_field
from cronpattern.core.matchers import (
    DayOfMonthSet,
    DayOfWeekSet,
    FieldMatcher,
    build_matcher,
)
from cronpattern.utils.logging import get_logger
from cronpattern.utils.time import CalendarFields, decompose, to_local_datetime

ALTERNATIVE_SEPARATOR = "|"
CLASSIC_FIELD_COUNT = 5
FIELD_COUNT = len(FIELD_ORDER)
CLASSIC_SECOND = "0"
FIELD_SEPARATOR = re.compile(r"[ \t]+")

logger = get_logger("pattern")


@dataclass(frozen=True)
class Alternative:
    """One six-field sub-pattern."""

    second: FieldMatcher
    minute: FieldMatcher
    hour: FieldMatcher
    day_of_month: FieldMatcher
    month: FieldMatcher
    day_of_week: FieldMatcher

    def matches(self, fields: CalendarFields) -> bool:
        return (
            self.second.match(fields.second)
            and self.minute.match(fields.minute)
            and self.hour.match(fields.hour)
            and self.matches_date(fields)
        )

    def matches_date(self, fields: CalendarFields) -> bool:
        """Check only the day-of-month, month and day-of-week fields."""
        return (
            self.month.match(fields.month)
            and self._match_day_of_month(fields)
            and self._match_day_of_week(fields)
        )

    def _match_day_of_month(self, fields: CalendarFields) -> bool:
        if isinstance(self.day_of_month, DayOfMonthSet):
            return self.day_of_month.match(
                fields.day, fields.month, fields.leap_year, fields.day_of_week
            )
        return self.day_of_month.match(fields.day)

    def _match_day_of_week(self, fields: CalendarFields) -> bool:
        if isinstance(self.day_of_week, DayOfWeekSet):
            return self.day_of_week.match(fields.day_of_week, fields.day, fields.last_day)
        return self.day_of_week.match(fields.day_of_week)


class SchedulingPattern:
    """
    Compiled scheduling pattern.

    Construction either succeeds completely or raises ``InvalidPatternError``;
    a constructed pattern is immutable and safe to share between threads.

    Args:
        pattern: Pattern text, e.g. "0 0 12 * jan-mar mon-fri|0 30 8 L * *"

    Raises:
        InvalidPatternError: If any alternative or field is invalid
    """

    __slots__ = ("_source", "_alternatives")

    def __init__(self, pattern: str) -> None:
        alternatives = _compile_pattern(pattern)
        object.__setattr__(self, "_source", pattern)
        object.__setattr__(self, "_alternatives", alternatives)
        if logger.is_enabled_for(logging.DEBUG):
            logger.debug(
                "Compiled scheduling pattern", pattern=pattern, alternatives=len(alternatives)
            )

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def alternatives(self) -> tuple[Alternative, ...]:
        return self._alternatives

    def match(self, instant: datetime | int | float, timezone: str | tzinfo | None = None) -> bool:
        """
        Check whether the pattern fires at an instant.

        Args:
            instant: Epoch milliseconds or datetime
            timezone: IANA name or tzinfo the instant is read in. Defaults to
                the system local zone for epoch milliseconds; aware datetimes
                are read in their own zone and naive ones as they are.

        Returns:
            True if any alternative matches

        Raises:
            ValueError: If the timezone is unknown, or epoch milliseconds fall
                outside years 1-9999
        """
        fields = decompose(to_local_datetime(instant, timezone))
        return any(alternative.matches(fields) for alternative in self._alternatives)

    def __str__(self) -> str:
        return self._source

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchedulingPattern):
            return NotImplemented
        return self._source == other._source

    def __hash__(self) -> int:
        return hash(self._source)


def _compile_pattern(pattern: str) -> tuple[Alternative, ...]:
    if not isinstance(pattern, str) or not pattern.strip():
        raise InvalidPatternError(
            PatternErrorKind.MALFORMED_EXPRESSION, "pattern is empty", sub_pattern=str(pattern)
        )
    return tuple(
        _compile_alternative(sub_pattern) for sub_pattern in pattern.split(ALTERNATIVE_SEPARATOR)
    )


def _compile_alternative(sub_pattern: str) -> Alternative:
    stripped = sub_pattern.strip(" \t")
    fields = FIELD_SEPARATOR.split(stripped) if stripped else []

    if len(fields) == CLASSIC_FIELD_COUNT:
        fields.insert(0, CLASSIC_SECOND)
    elif len(fields) != FIELD_COUNT:
        raise InvalidPatternError(
            PatternErrorKind.MALFORMED_EXPRESSION,
            f"expected {FIELD_COUNT} fields (or {CLASSIC_FIELD_COUNT} without seconds), "
            f"got {len(fields)}",
            sub_pattern=sub_pattern,
        )

    matchers: dict[str, FieldMatcher] = {}
    for kind, text in zip(FIELD_ORDER, fields):
        matchers[kind.value] = _compile_matcher(text, kind, sub_pattern)
    return Alternative(**matchers)


def _compile_matcher(text: str, kind: FieldKind, sub_pattern: str) -> FieldMatcher:
    try:
        compiled = compile_field(text, kind)
    except InvalidPatternError as e:
        raise e.with_context(sub_pattern=sub_pattern) from e
    return build_matcher(compiled)


# ---------------------------------------------------------------------------
# Functional interface
# ---------------------------------------------------------------------------


def construct(text: str) -> SchedulingPattern:
    """Compile ``text``; raises ``InvalidPatternError`` on failure."""
    return SchedulingPattern(text)


def validate(text: str) -> bool:
    """
    Check whether ``text`` is a valid scheduling pattern.

    Agrees exactly with ``construct``: returns True iff construction succeeds.
    """
    try:
        SchedulingPattern(text)
    except InvalidPatternError as e:
        logger.debug("Rejected scheduling pattern", pattern=text, kind=e.kind.value)
        return False
    return True


def match(
    pattern: SchedulingPattern,
    instant: datetime | int | float,
    timezone: str | tzinfo | None = None,
) -> bool:
    """Check whether ``pattern`` fires at ``instant`` (see ``SchedulingPattern.match``)."""
    return pattern.match(instant, timezone)
