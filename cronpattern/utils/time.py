"""Time utilities for cronpattern."""

from calendar import isleap
from datetime import datetime, timedelta, timezone, tzinfo
from typing import NamedTuple
from zoneinfo import ZoneInfo

from cronpattern.core.fields.domain import last_day_of

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class CalendarFields(NamedTuple):
    """Calendar components of one instant, as read by the field matchers."""

    second: int
    minute: int
    hour: int
    day: int
    month: int
    day_of_week: int  # 0=Sunday
    leap_year: bool
    last_day: int


def utc_now() -> datetime:
    """
    Get current UTC time (timezone-aware).

    Returns:
        Current UTC datetime
    """
    return datetime.now(ZoneInfo("UTC"))


def get_timezone(tz_name: str) -> tzinfo:
    """
    Get timezone object from IANA timezone name.

    Args:
        tz_name: IANA timezone name (e.g., "Asia/Seoul", "America/New_York")

    Returns:
        Timezone object

    Raises:
        ValueError: Invalid timezone name
    """
    try:
        return ZoneInfo(tz_name)
    except Exception as e:
        raise ValueError(f"Invalid timezone '{tz_name}': {e}") from e


def resolve_timezone(tz: str | tzinfo | None) -> tzinfo | None:
    """Accept an IANA name, a tzinfo, or None (system local zone)."""
    if tz is None or isinstance(tz, tzinfo):
        return tz
    return get_timezone(tz)


def from_epoch_millis(millis: int | float) -> datetime:
    """
    Convert epoch milliseconds to an aware UTC datetime.

    Raises:
        ValueError: If the instant falls outside years 1-9999
    """
    try:
        return EPOCH + timedelta(milliseconds=millis)
    except OverflowError as e:
        raise ValueError(f"Epoch milliseconds {millis} out of range (years 1-9999)") from e


def to_local_datetime(instant: datetime | int | float, tz: str | tzinfo | None = None) -> datetime:
    """
    Express an instant as wall-clock time in the given zone.

    Args:
        instant: Epoch milliseconds or datetime
        tz: Target zone; None means the system local zone for epoch values,
            the datetime's own zone for aware datetimes, and no conversion
            for naive datetimes

    Returns:
        Datetime whose fields are the wall-clock reading of the instant
    """
    zone = resolve_timezone(tz)

    if isinstance(instant, datetime):
        if zone is None:
            return instant
        if instant.tzinfo is None:
            # Naive values are wall-clock readings of the system local zone
            instant = instant.astimezone()
        return instant.astimezone(zone)

    moment = from_epoch_millis(instant)
    try:
        return moment.astimezone(zone) if zone is not None else moment.astimezone()
    except OverflowError as e:
        raise ValueError(f"Epoch milliseconds {instant} out of range (years 1-9999)") from e


def decompose(moment: datetime) -> CalendarFields:
    """Split a datetime into the components matched by a scheduling pattern."""
    leap_year = isleap(moment.year)
    return CalendarFields(
        second=moment.second,
        minute=moment.minute,
        hour=moment.hour,
        day=moment.day,
        month=moment.month,
        day_of_week=(moment.weekday() + 1) % 7,
        leap_year=leap_year,
        last_day=last_day_of(moment.month, leap_year),
    )
