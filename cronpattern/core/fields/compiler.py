"""
Field value compiler.

Turns the text of one field ("0-30/5", "mon-fri", "L-2W", "fri#3", ...) into a
``CompiledField``. The scanner walks the text with an explicit cursor because
the meaning of ``-``, ``/``, ``#``, ``L`` and ``W`` depends on what was consumed
before them: after a value ``/`` starts a step, ``#`` an nth-weekday position,
``L`` a last-weekday suffix and ``W`` a nearest-weekday suffix, while a leading
``L`` in the day-of-month field is the last day of the month.
"""

from __future__ import annotations

from cronpattern.core.common.exceptions import InvalidPatternError
from cronpattern.core.common.types import FieldKind, PatternErrorKind
from cronpattern.core.fields.domain import (
    DOMAINS,
    MAX_LAST_DAY_OFFSET,
    MAX_NTH_WEEKDAY,
    MIN_NTH_WEEKDAY,
    All,
    CompiledField,
    FieldDomain,
    FieldToken,
    LastDayOfMonth,
    LastWeekdayOfMonth,
    NearestWeekday,
    NthWeekday,
    Unspecified,
    Value,
)

LAST_SUFFIX = "L"
DAY_FIELDS = (FieldKind.DAY_OF_MONTH, FieldKind.DAY_OF_WEEK)


def compile_field(text: str, kind: FieldKind) -> CompiledField:
    """
    Compile the text of a single field.

    Args:
        text: Field text, e.g. "*/15", "jan-mar", "L-2W"
        kind: Field being compiled

    Returns:
        CompiledField with concrete values and calendar-relative markers

    Raises:
        InvalidPatternError: If the text is not a valid field of this kind
    """
    tokens = _FieldScanner(text, DOMAINS[kind]).scan()

    values = frozenset(token.value for token in tokens if isinstance(token, Value))
    markers = frozenset(token for token in tokens if not isinstance(token, Value))
    return CompiledField(kind=kind, values=values, markers=markers)


class _FieldScanner:
    """Cursor scanner over one field. Instances are single use."""

    def __init__(self, text: str, domain: FieldDomain) -> None:
        self.source = text
        self.domain = domain
        self._text = text.upper()
        self._pos = 0
        self._tokens: list[FieldToken] = []

    # -- cursor ------------------------------------------------------------

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _error(
        self, kind: PatternErrorKind, reason: str, position: int | None = None
    ) -> InvalidPatternError:
        return InvalidPatternError(
            kind,
            reason,
            sub_pattern=self.source,
            field=self.domain.kind,
            position=self._pos if position is None else position,
        )

    # -- entry point -------------------------------------------------------

    def scan(self) -> list[FieldToken]:
        if not self._text:
            raise self._error(PatternErrorKind.MALFORMED_EXPRESSION, "empty field")

        # upper() maps some non-ASCII letters onto ASCII ones ("ſ" -> "S")
        if not self.source.isascii():
            position = next(i for i, char in enumerate(self.source) if not char.isascii())
            raise self._error(
                PatternErrorKind.MALFORMED_EXPRESSION,
                f"unexpected character '{self.source[position]}'",
                position=position,
            )

        if self.domain.kind is FieldKind.DAY_OF_MONTH and "L" in self._text and "," in self._text:
            raise self._error(
                PatternErrorKind.INVALID_MODIFIER_PLACEMENT,
                "'L' and 'LW' cannot be combined with other days of the month",
                position=self._text.index("L"),
            )

        while True:
            self._scan_element()
            if self._at_end():
                break
            char = self._peek()
            if char != ",":
                raise self._error(
                    PatternErrorKind.MALFORMED_EXPRESSION, f"unexpected character '{char}'"
                )
            self._pos += 1
            if self._at_end():
                raise self._error(
                    PatternErrorKind.UNEXPECTED_END_OF_INPUT, "',' must be followed by a value"
                )

        if len(self._tokens) > 1 and any(isinstance(t, Unspecified) for t in self._tokens):
            raise self._error(
                PatternErrorKind.INVALID_MODIFIER_PLACEMENT,
                "'?' cannot be combined with other values",
                position=self._text.index("?"),
            )
        return self._tokens

    # -- elements ----------------------------------------------------------

    def _scan_element(self) -> None:
        char = self._peek()

        if char == "*":
            self._pos += 1
            if self._peek() == "/":
                self._emit_range(self.domain.first, self.domain.last, self._scan_step())
            else:
                self._tokens.append(All())
        elif char == "/":
            self._emit_range(self.domain.first, self.domain.last, self._scan_step())
        elif char == "?":
            if self.domain.kind not in DAY_FIELDS:
                raise self._error(
                    PatternErrorKind.INVALID_MODIFIER_PLACEMENT,
                    "'?' can only be specified for day-of-month or day-of-week",
                )
            self._pos += 1
            self._tokens.append(Unspecified())
        elif char == "L":
            self._scan_last_day()
        elif _is_digit(char) or _is_letter(char):
            self._scan_value_element()
        elif char == "":
            raise self._error(PatternErrorKind.UNEXPECTED_END_OF_INPUT, "missing value")
        else:
            raise self._error(PatternErrorKind.MALFORMED_EXPRESSION, f"unexpected character '{char}'")

    def _scan_last_day(self) -> None:
        if self.domain.kind is FieldKind.DAY_OF_WEEK:
            raise self._error(
                PatternErrorKind.INVALID_MODIFIER_PLACEMENT,
                "'L' must follow a weekday in the day-of-week field (e.g. 'friL')",
            )
        if self.domain.kind is not FieldKind.DAY_OF_MONTH:
            raise self._error(PatternErrorKind.INVALID_MODIFIER_PLACEMENT, "'L' option is not valid here")
        self._pos += 1

        offset = 0
        if self._peek() == "-":
            self._pos += 1
            start = self._pos
            offset = self._scan_number()
            if offset > MAX_LAST_DAY_OFFSET:
                raise self._error(
                    PatternErrorKind.OUT_OF_RANGE_VALUE,
                    f"offset from last day must be <= {MAX_LAST_DAY_OFFSET}",
                    position=start,
                )

        nearest = False
        if self._peek() == "W":
            self._pos += 1
            nearest = True
        self._tokens.append(LastDayOfMonth(offset=offset, nearest_weekday=nearest))

    def _scan_value_element(self) -> None:
        first = self._scan_value()
        char = self._peek()

        if char == "-":
            self._pos += 1
            last = self._scan_value()
            step = self._scan_step() if self._peek() == "/" else 1
            self._emit_range(first, last, step)
        elif char == "/":
            # day-of-week 7 sits above the top of its domain
            self._emit_range(first, max(first, self.domain.last), self._scan_step())
        elif char == "#":
            self._scan_nth_weekday(first)
        elif char == "L":
            if self.domain.kind is not FieldKind.DAY_OF_WEEK:
                raise self._error(PatternErrorKind.INVALID_MODIFIER_PLACEMENT, "'L' option is not valid here")
            self._pos += 1
            self._tokens.append(LastWeekdayOfMonth(self.domain.normalize(first)))
        elif char == "W":
            if self.domain.kind is not FieldKind.DAY_OF_MONTH:
                raise self._error(PatternErrorKind.INVALID_MODIFIER_PLACEMENT, "'W' option is not valid here")
            self._pos += 1
            self._tokens.append(NearestWeekday(first))
        else:
            self._tokens.append(Value(self.domain.normalize(first)))

    def _scan_nth_weekday(self, weekday: int) -> None:
        if self.domain.kind is not FieldKind.DAY_OF_WEEK:
            raise self._error(PatternErrorKind.INVALID_MODIFIER_PLACEMENT, "'#' option is not valid here")
        self._pos += 1
        start = self._pos
        n = self._scan_number()
        if not MIN_NTH_WEEKDAY <= n <= MAX_NTH_WEEKDAY:
            raise self._error(
                PatternErrorKind.OUT_OF_RANGE_VALUE,
                f"a numeric value between {MIN_NTH_WEEKDAY} and {MAX_NTH_WEEKDAY} "
                "must follow the '#' option",
                position=start,
            )
        self._tokens.append(NthWeekday(self.domain.normalize(weekday), n))

    # -- primitives --------------------------------------------------------

    def _scan_value(self) -> int:
        """Scan a number or an alias and check it against the domain."""
        start = self._pos
        char = self._peek()

        if _is_digit(char):
            value = self._scan_number()
            if not self.domain.contains(value):
                raise self._error(
                    PatternErrorKind.OUT_OF_RANGE_VALUE,
                    f"{self.domain.label} values must be between "
                    f"{self.domain.min_value} and {self.domain.max_value}, got {value}",
                    position=start,
                )
            return value

        if _is_letter(char):
            return self._scan_alias()

        if char == "":
            raise self._error(PatternErrorKind.UNEXPECTED_END_OF_INPUT, "unexpected end of field")
        raise self._error(PatternErrorKind.MALFORMED_EXPRESSION, f"unexpected character '{char}'")

    def _scan_alias(self) -> int:
        start = self._pos
        if self.domain.aliases is None:
            raise self._error(
                PatternErrorKind.MALFORMED_EXPRESSION,
                f"illegal characters for this position: '{self.source[start:]}'",
            )

        while _is_letter(self._peek()):
            self._pos += 1
        name = self._text[start : self._pos]

        # "friL": the trailing L is the last-weekday suffix, not part of the name
        if (
            name.endswith(LAST_SUFFIX)
            and self.domain.resolve_alias(name) is None
            and self.domain.resolve_alias(name[:-1]) is not None
        ):
            self._pos -= 1
            name = name[:-1]

        value = self.domain.resolve_alias(name)
        if value is None:
            raise self._error(
                PatternErrorKind.INVALID_ALIAS,
                f"invalid {self.domain.label} value: '{self.source[start:self._pos]}'",
                position=start,
            )
        return value

    def _scan_number(self) -> int:
        start = self._pos
        while _is_digit(self._peek()):
            self._pos += 1
        if self._pos == start:
            if self._at_end():
                raise self._error(PatternErrorKind.UNEXPECTED_END_OF_INPUT, "expected a number")
            raise self._error(
                PatternErrorKind.MALFORMED_EXPRESSION, f"expected a number, got '{self._peek()}'"
            )
        return int(self._text[start : self._pos])

    def _scan_step(self) -> int:
        self._pos += 1  # "/"
        if self._at_end():
            raise self._error(PatternErrorKind.UNEXPECTED_END_OF_INPUT, "'/' must be followed by an integer")
        start = self._pos
        step = self._scan_number()
        if not 1 <= step <= self.domain.modulus:
            raise self._error(
                PatternErrorKind.OUT_OF_RANGE_VALUE,
                f"increment must be between 1 and {self.domain.modulus}, got {step}",
                position=start,
            )
        return step

    def _emit_range(self, first: int, last: int, step: int) -> None:
        if last < first:
            last += self.domain.modulus
        for value in range(first, last + 1, step):
            self._tokens.append(Value(self.domain.normalize(value)))


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_letter(char: str) -> bool:
    return "A" <= char <= "Z"
