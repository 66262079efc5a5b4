"""Custom exceptions for cronpattern."""

from cronpattern.core.common.types import FieldKind, PatternErrorKind


class PatternError(Exception):
    """Base exception for scheduling pattern errors."""

    pass


class InvalidPatternError(PatternError, ValueError):
    """
    Scheduling pattern could not be compiled.

    Common causes:
        - Wrong number of fields in an alternative (six, or five in classic form)
        - Value or step outside the field's range (e.g. minute 60, hour */25)
        - Unknown month or weekday name (e.g. "jna", "fry")
        - Modifier used on a field that does not support it ("L" in hours,
          "#" outside day-of-week, "?" outside the day fields)

    Solution:
        Inspect ``kind``, ``field`` and ``position`` to locate the problem, or
        call ``validate(text)`` to check a pattern without raising.
    """

    def __init__(
        self,
        kind: PatternErrorKind,
        reason: str,
        *,
        sub_pattern: str = "",
        field: FieldKind | None = None,
        position: int | None = None,
    ) -> None:
        self.kind = kind
        self.reason = reason
        self.sub_pattern = sub_pattern
        self.field = field
        self.position = position
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        message = f'invalid pattern "{self.sub_pattern}"'
        if self.field is not None:
            message += f". Error parsing {self.field.value.replace('_', ' ')} field"
        message += f": {self.reason}"
        if self.position is not None:
            message += f" (pos={self.position})"
        return message

    def with_context(self, *, sub_pattern: str, field: FieldKind | None = None) -> "InvalidPatternError":
        """Return a copy of this error located in a specific alternative and field."""
        return InvalidPatternError(
            self.kind,
            self.reason,
            sub_pattern=sub_pattern,
            field=field if field is not None else self.field,
            position=self.position,
        )


class PredictionError(PatternError):
    """
    No matching time was found within the predictor's search horizon.

    Common causes:
        - Pattern that can never match (e.g. "0 0 0 31 feb *")
        - Pattern matching only rarely, beyond ``max_search_years``

    Solution:
        Check the day-of-month/month combination or raise ``max_search_years``.
    """

    pass
