"""
Field domains, alias tables and compiled-token variants.

Every field of an alternative is compiled against a ``FieldDomain`` describing
its numeric range and, for months and weekdays, the accepted three-letter
names. Compilation yields a sequence of tokens: plain ``Value`` entries for
concrete numbers, and marker tokens for semantics that can only be resolved
against a concrete calendar date (last day of month, nth weekday, ...).
"""

from __future__ import annotations

from calendar import monthrange
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from cronpattern.core.common.types import FieldKind

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

WEEKDAYS = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")
MONTHS = (
    "jan",
    "feb",
    "mar",
    "apr",
    "may",
    "jun",
    "jul",
    "aug",
    "sep",
    "oct",
    "nov",
    "dec",
)

# Reference years for month lengths
COMMON_YEAR = 2001
LEAP_YEAR = 2000

MAX_LAST_DAY_OFFSET = 30
MIN_NTH_WEEKDAY = 1
MAX_NTH_WEEKDAY = 5

SATURDAY = 6
SUNDAY = 0


@dataclass(frozen=True)
class FieldDomain:
    """Numeric range and aliases of one field kind."""

    kind: FieldKind
    min_value: int
    max_value: int
    modulus: int
    aliases: Mapping[str, int] | None = None

    @property
    def label(self) -> str:
        return self.kind.value.replace("_", " ")

    @property
    def first(self) -> int:
        """Lowest value of the full domain."""
        return self.min_value

    @property
    def last(self) -> int:
        """Highest value of the full domain after normalization."""
        return self.min_value + self.modulus - 1

    def normalize(self, value: int) -> int:
        """Fold a value (possibly past the maximum of a wrapped range) into the domain."""
        return (value - self.min_value) % self.modulus + self.min_value

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def resolve_alias(self, name: str) -> int | None:
        if self.aliases is None:
            return None
        return self.aliases.get(name.lower())


DOMAINS: Mapping[FieldKind, FieldDomain] = MappingProxyType(
    {
        FieldKind.SECOND: FieldDomain(FieldKind.SECOND, 0, 59, 60),
        FieldKind.MINUTE: FieldDomain(FieldKind.MINUTE, 0, 59, 60),
        FieldKind.HOUR: FieldDomain(FieldKind.HOUR, 0, 23, 24),
        FieldKind.DAY_OF_MONTH: FieldDomain(FieldKind.DAY_OF_MONTH, 1, 31, 31),
        FieldKind.MONTH: FieldDomain(
            FieldKind.MONTH,
            1,
            12,
            12,
            MappingProxyType({name: index + 1 for index, name in enumerate(MONTHS)}),
        ),
        # 7 is accepted as a second spelling of Sunday
        FieldKind.DAY_OF_WEEK: FieldDomain(
            FieldKind.DAY_OF_WEEK,
            0,
            7,
            7,
            MappingProxyType({name: index for index, name in enumerate(WEEKDAYS)}),
        ),
    }
)


# ---------------------------------------------------------------------------
# Compiled tokens
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Value:
    """A single concrete value of the field."""

    value: int


@dataclass(frozen=True)
class All:
    """Every value of the field ("*")."""


@dataclass(frozen=True)
class Unspecified:
    """No constraint; the other day field decides ("?")."""


@dataclass(frozen=True)
class LastDayOfMonth:
    """The last day of the month, ``offset`` days earlier, optionally moved to
    the nearest weekday ("L", "L-3", "LW", "L-3W")."""

    offset: int = 0
    nearest_weekday: bool = False


@dataclass(frozen=True)
class NearestWeekday:
    """The weekday (Monday to Friday) nearest to ``day`` within the same month ("15W")."""

    day: int


@dataclass(frozen=True)
class NthWeekday:
    """The nth occurrence of ``weekday`` within the month ("fri#3")."""

    weekday: int
    n: int


@dataclass(frozen=True)
class LastWeekdayOfMonth:
    """The last occurrence of ``weekday`` within the month ("friL")."""

    weekday: int


Marker = All | Unspecified | LastDayOfMonth | NearestWeekday | NthWeekday | LastWeekdayOfMonth
FieldToken = Value | Marker


@dataclass(frozen=True)
class CompiledField:
    """Accepted values of one field plus the calendar-relative markers it carries."""

    kind: FieldKind
    values: frozenset[int]
    markers: frozenset[Marker] = frozenset()

    @property
    def matches_all(self) -> bool:
        return any(isinstance(marker, (All, Unspecified)) for marker in self.markers)

    def markers_of(self, marker_type: type) -> tuple:
        return tuple(marker for marker in self.markers if isinstance(marker, marker_type))


# ---------------------------------------------------------------------------
# Calendar helpers
# ---------------------------------------------------------------------------


def last_day_of(month: int, leap_year: bool) -> int:
    """Length of ``month`` (1-based) in a common or leap year."""
    return monthrange(LEAP_YEAR if leap_year else COMMON_YEAR, month)[1]


def nearest_weekday(day: int, weekday: int, last_day: int) -> int:
    """
    Move ``day`` to the nearest Monday-to-Friday without leaving the month.

    Args:
        day: Target day of month
        weekday: Weekday of the target day (0=Sunday)
        last_day: Number of days in the month

    Returns:
        Day of month of the nearest weekday
    """
    if weekday == SATURDAY:
        return day + 2 if day == 1 else day - 1
    if weekday == SUNDAY:
        return day - 2 if day == last_day else day + 1
    return day
