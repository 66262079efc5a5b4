"""
Field matchers.

A compiled field is wrapped into one of a closed family of matchers:

- ``AlwaysMatch``: "*" or "?", accepts every value
- ``ValueSet``: plain set membership (seconds, minutes, hours, months and
  day-of-week fields without position modifiers)
- ``DayOfMonthSet``: membership plus last-day-of-month and nearest-weekday
  markers, resolved against the month length of the tested date
- ``DayOfWeekSet``: membership plus nth-weekday and last-weekday markers,
  resolved against the tested day of month
"""

from __future__ import annotations

from dataclasses import dataclass

from cronpattern.core.common.types import FieldKind
from cronpattern.core.fields.domain import (
    CompiledField,
    LastDayOfMonth,
    LastWeekdayOfMonth,
    NearestWeekday,
    NthWeekday,
    last_day_of,
    nearest_weekday,
)


@dataclass(frozen=True)
class AlwaysMatch:
    """Matcher accepting every value."""

    def match(self, value: int, *context: object) -> bool:
        return True


@dataclass(frozen=True)
class ValueSet:
    """Matcher accepting the values of a finite set."""

    values: frozenset[int]

    def match(self, value: int) -> bool:
        return value in self.values


@dataclass(frozen=True)
class DayOfMonthSet:
    """Day-of-month matcher aware of month lengths and leap years."""

    values: frozenset[int]
    last_days: tuple[LastDayOfMonth, ...] = ()
    nearest_weekdays: tuple[NearestWeekday, ...] = ()

    def match(
        self,
        day: int,
        month: int,
        leap_year: bool,
        day_of_week: int | None = None,
    ) -> bool:
        """
        Check a day against the set.

        Args:
            day: Day of month (1-31)
            month: Month (1-12)
            leap_year: Whether the year of the date is a leap year
            day_of_week: Weekday of ``day`` (0=Sunday); required for the
                nearest-weekday ("W") markers, which never match without it

        Returns:
            True if the day is accepted
        """
        if day in self.values:
            return True
        if not self.last_days and not self.nearest_weekdays:
            return False

        last_day = last_day_of(month, leap_year)
        for marker in self.last_days:
            target = last_day - marker.offset
            if target < 1:
                continue
            if marker.nearest_weekday:
                if day_of_week is None:
                    continue
                target = nearest_weekday(target, _weekday_of(target, day, day_of_week), last_day)
            if target == day:
                return True

        if day_of_week is None:
            return False
        for marker in self.nearest_weekdays:
            if marker.day > last_day:
                continue
            target = nearest_weekday(marker.day, _weekday_of(marker.day, day, day_of_week), last_day)
            if target == day:
                return True
        return False


@dataclass(frozen=True)
class DayOfWeekSet:
    """Day-of-week matcher with nth-weekday and last-weekday positions."""

    values: frozenset[int]
    nth_weekdays: tuple[NthWeekday, ...] = ()
    last_weekdays: frozenset[int] = frozenset()

    def match(self, day_of_week: int, day: int, last_day: int) -> bool:
        if day_of_week in self.values:
            return True
        if day_of_week in self.last_weekdays and day + 7 > last_day:
            return True
        occurrence = (day - 1) // 7 + 1
        return any(
            marker.weekday == day_of_week and marker.n == occurrence for marker in self.nth_weekdays
        )


FieldMatcher = AlwaysMatch | ValueSet | DayOfMonthSet | DayOfWeekSet

ALWAYS_MATCH = AlwaysMatch()


def build_matcher(compiled: CompiledField) -> FieldMatcher:
    """Wrap a compiled field into the matcher variant suited to its kind and markers."""
    if compiled.matches_all:
        return ALWAYS_MATCH

    if compiled.kind is FieldKind.DAY_OF_MONTH:
        return DayOfMonthSet(
            values=compiled.values,
            last_days=compiled.markers_of(LastDayOfMonth),
            nearest_weekdays=compiled.markers_of(NearestWeekday),
        )

    if compiled.kind is FieldKind.DAY_OF_WEEK and compiled.markers:
        return DayOfWeekSet(
            values=compiled.values,
            nth_weekdays=compiled.markers_of(NthWeekday),
            last_weekdays=frozenset(m.weekday for m in compiled.markers_of(LastWeekdayOfMonth)),
        )

    return ValueSet(compiled.values)


def _weekday_of(target: int, day: int, day_of_week: int) -> int:
    """Weekday of ``target`` given that ``day`` falls on ``day_of_week``."""
    return (day_of_week + target - day) % 7
