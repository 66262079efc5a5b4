"""Common type definitions for cronpattern."""

from enum import Enum


class FieldKind(Enum):
    """Time component addressed by one field of an alternative."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_MONTH = "day_of_month"
    MONTH = "month"
    DAY_OF_WEEK = "day_of_week"


# Fixed field order of a six-field alternative
FIELD_ORDER = (
    FieldKind.SECOND,
    FieldKind.MINUTE,
    FieldKind.HOUR,
    FieldKind.DAY_OF_MONTH,
    FieldKind.MONTH,
    FieldKind.DAY_OF_WEEK,
)


class PatternErrorKind(Enum):
    """Machine-distinguishable reason a pattern failed to compile."""

    MALFORMED_EXPRESSION = "malformed_expression"  # Bad field count or syntax
    OUT_OF_RANGE_VALUE = "out_of_range_value"  # Value or step outside domain
    INVALID_ALIAS = "invalid_alias"  # Unknown month/weekday name
    INVALID_MODIFIER_PLACEMENT = "invalid_modifier_placement"  # L, W, #, ? misused
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"  # Token truncated
