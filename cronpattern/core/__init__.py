"""Core pattern compiler, matchers and prediction."""

from cronpattern.core.common import (
    FIELD_ORDER,
    FieldKind,
    InvalidPatternError,
    PatternError,
    PatternErrorKind,
    PredictionError,
)
from cronpattern.core.fields import CompiledField, compile_field
from cronpattern.core.matchers import (
    AlwaysMatch,
    DayOfMonthSet,
    DayOfWeekSet,
    FieldMatcher,
    ValueSet,
    build_matcher,
)
from cronpattern.core.pattern import Alternative, SchedulingPattern, construct, match, validate
from cronpattern.core.predictor import Predictor, next_match
from cronpattern.core.triggers import PatternTrigger, TriggerStrategy

__all__ = [
    # Common Types
    "FieldKind",
    "FIELD_ORDER",
    "PatternErrorKind",
    # Exceptions
    "PatternError",
    "InvalidPatternError",
    "PredictionError",
    # Compilation
    "compile_field",
    "CompiledField",
    # Matchers
    "AlwaysMatch",
    "ValueSet",
    "DayOfMonthSet",
    "DayOfWeekSet",
    "FieldMatcher",
    "build_matcher",
    # Pattern
    "Alternative",
    "SchedulingPattern",
    "construct",
    "validate",
    "match",
    # Prediction
    "Predictor",
    "next_match",
    # Triggers
    "TriggerStrategy",
    "PatternTrigger",
]
