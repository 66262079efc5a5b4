"""Common components shared across core modules."""

from cronpattern.core.common.exceptions import (
    InvalidPatternError,
    PatternError,
    PredictionError,
)
from cronpattern.core.common.types import FIELD_ORDER, FieldKind, PatternErrorKind

__all__ = [
    # Types
    "FieldKind",
    "FIELD_ORDER",
    "PatternErrorKind",
    # Exceptions
    "PatternError",
    "InvalidPatternError",
    "PredictionError",
]
