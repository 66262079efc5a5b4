"""Field domains and the field value compiler."""

from cronpattern.core.fields.compiler import compile_field
from cronpattern.core.fields.domain import (
    DOMAINS,
    All,
    CompiledField,
    FieldDomain,
    LastDayOfMonth,
    LastWeekdayOfMonth,
    NearestWeekday,
    NthWeekday,
    Unspecified,
    Value,
)

__all__ = [
    "compile_field",
    "CompiledField",
    "FieldDomain",
    "DOMAINS",
    # Tokens
    "Value",
    "All",
    "Unspecified",
    "LastDayOfMonth",
    "NearestWeekday",
    "NthWeekday",
    "LastWeekdayOfMonth",
]
