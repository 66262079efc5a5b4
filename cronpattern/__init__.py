"""
cronpattern - Scheduling pattern compiler and matcher for polling schedulers

Usage:
    from cronpattern import Predictor, SchedulingPattern, validate

    # second minute hour day-of-month month day-of-week
    pattern = SchedulingPattern("0 */15 9-17 * * mon-fri|0 0 12 L * *")

    # Called once per tick by the scheduler
    if pattern.match(time.time_ns() // 1_000_000, "Asia/Seoul"):
        run_job()

    # Check user input without raising
    validate("0 0 0 30 feb *")  # True, although it never fires
    validate("0 0 25 * * *")  # False, hour out of range

    # Next fire times
    predictor = Predictor(pattern, timezone="Asia/Seoul")
    next_run = predictor.next_matching_date()
"""

from cronpattern.core import (
    FieldKind,
    InvalidPatternError,
    PatternError,
    PatternErrorKind,
    PatternTrigger,
    PredictionError,
    Predictor,
    SchedulingPattern,
    TriggerStrategy,
    construct,
    match,
    next_match,
    validate,
)

__all__ = [
    # Pattern
    "SchedulingPattern",
    "construct",
    "validate",
    "match",
    "FieldKind",
    # Prediction
    "Predictor",
    "next_match",
    # Triggers
    "TriggerStrategy",
    "PatternTrigger",
    # Exceptions
    "PatternError",
    "InvalidPatternError",
    "PatternErrorKind",
    "PredictionError",
]
