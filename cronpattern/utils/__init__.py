"""Utility modules for cronpattern."""

from cronpattern.utils.logging import ContextLogger, get_logger, setup_logger
from cronpattern.utils.time import (
    CalendarFields,
    decompose,
    from_epoch_millis,
    get_timezone,
    to_local_datetime,
    utc_now,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "ContextLogger",
    "CalendarFields",
    "decompose",
    "from_epoch_millis",
    "get_timezone",
    "to_local_datetime",
    "utc_now",
]
