"""This module compiles date/time pattern strings.

Patterns use the Unicode LDML letters (``yyyy``, ``MM``, ``MMM``, ``dd``,
``hh``, ``mm``, ``ss``, ``a``...), the same syntax babel formats with.
Fields are rendered by babel, except for fractions of a second, which are
written from the integer microseconds; parsing is done here, strictly and token by
token, so that a failure can report the exact index where the text stopped
matching its pattern.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache

from babel import Locale
from babel.dates import format_datetime, get_month_names, get_period_names
from date_utilities.exceptions.date import DateParseError, InvalidArgumentError

FIELD_WIDTHS: dict[str, tuple[int, ...]] = {
    "y": (1, 2, 3, 4),
    "M": (1, 2, 3, 4),
    "d": (1, 2),
    "H": (1, 2),
    "h": (1, 2),
    "m": (1, 2),
    "s": (1, 2),
    "S": (1, 2, 3, 4, 5, 6),
    "a": (1,),
}

FIELD_KEYS: dict[str, str] = {
    "y": "year",
    "M": "month",
    "d": "day",
    "H": "hour",
    "h": "clock_hour",
    "m": "minute",
    "s": "second",
    "S": "microsecond",
    "a": "period",
}

FIELD_RANGES: dict[str, tuple[int, int]] = {
    "year": (1, 9999),
    "month": (1, 12),
    "hour": (0, 23),
    "clock_hour": (1, 12),
    "minute": (0, 59),
    "second": (0, 59),
}

REQUIRED_FIELDS = ("year", "month", "day")

MONTH_NAME_WIDTHS = {3: "abbreviated", 4: "wide"}


@dataclass(frozen=True)
class PatternToken:
    """A single piece of a pattern: either a field or literal text."""

    kind: str
    value: str
    width: int = 0

    @property
    def is_field(self) -> bool:
        """Returns True if the token stands for a date/time field."""
        return self.kind == "field"


def tokenize_pattern(pattern: str) -> tuple[PatternToken, ...]:
    """Splits a pattern into field and literal tokens.

    A run of the same letter forms one field token. Text between single
    quotes is literal, and two consecutive single quotes stand for one
    literal quote, inside or outside quoted text.

    Args:
        pattern: The pattern string, e.g. ``MM-dd-yyyy``.

    Returns:
        The tokens in pattern order, adjacent literals merged.

    Raises:
        InvalidArgumentError: If the pattern has an unknown letter, a field
            width that is not supported, or an unterminated quote.
    """
    tokens: list[PatternToken] = []
    literal: list[str] = []
    index = 0
    length = len(pattern)

    def flush_literal() -> None:
        if literal:
            tokens.append(PatternToken("literal", "".join(literal)))
            literal.clear()

    while index < length:
        char = pattern[index]
        if char == "'":
            if pattern.startswith("''", index):
                literal.append("'")
                index += 2
                continue
            end = index + 1
            while True:
                if end >= length:
                    raise InvalidArgumentError(f"Pattern {pattern!r} has an unterminated quote at index {index}.")
                if pattern.startswith("''", end):
                    literal.append("'")
                    end += 2
                elif pattern[end] == "'":
                    break
                else:
                    literal.append(pattern[end])
                    end += 1
            index = end + 1
        elif char.isascii() and char.isalpha():
            flush_literal()
            end = index
            while end < length and pattern[end] == char:
                end += 1
            width = end - index
            if char not in FIELD_WIDTHS:
                raise InvalidArgumentError(f"Pattern {pattern!r} has an unknown pattern letter: {char!r}.")
            if width not in FIELD_WIDTHS[char]:
                raise InvalidArgumentError(f"Pattern {pattern!r} has too many pattern letters: {char * width!r}.")
            tokens.append(PatternToken("field", char, width))
            index = end
        else:
            literal.append(char)
            index += 1

    flush_literal()
    return tuple(tokens)


def _names_matcher(names: dict[int, str]) -> tuple[re.Pattern[str], Callable[[str], int]]:
    """Builds a matcher for a closed set of names.

    Longer names are tried first so that no name shadows another that starts
    with it.

    Args:
        names: Maps each field value to the name that spells it.

    Returns:
        The compiled alternation and the function mapping a name back to its value.
    """
    lookup = {name: value for value, name in names.items()}
    alternatives = sorted(lookup, key=len, reverse=True)
    regex = re.compile("|".join(re.escape(name) for name in alternatives))
    return regex, lookup.__getitem__


def _digits_matcher(minimum: int, maximum: int) -> re.Pattern[str]:
    """Compiles a matcher for an ASCII digit run of the given length bounds."""
    if minimum == maximum:
        return re.compile(f"[0-9]{{{minimum}}}")
    return re.compile(f"[0-9]{{{minimum},{maximum}}}")


class CompiledPattern:
    """A validated pattern bound to a locale, ready to format and parse."""

    def __init__(self, pattern: str, locale: Locale):
        """Initializes the compiled pattern.

        Args:
            pattern: The pattern string.
            locale: The locale supplying month names and AM/PM markers.

        Raises:
            InvalidArgumentError: If the pattern is not valid.
        """
        self.pattern = pattern
        self.locale = locale
        self.tokens = tokenize_pattern(pattern)
        self._matchers = [self._field_matcher(token) if token.is_field else None for token in self.tokens]

    def _field_matcher(self, token: PatternToken) -> tuple[re.Pattern[str], Callable[[str], int]]:
        """Returns the regex and converter used to read one field token.

        Args:
            token: A field token.

        Returns:
            A compiled regex matching the token's text and a function turning
            the matched text into the field value.
        """
        if token.value == "M" and token.width >= 3:
            width = MONTH_NAME_WIDTHS[token.width]
            return _names_matcher(dict(get_month_names(width, context="format", locale=self.locale).items()))
        if token.value == "a":
            periods = get_period_names(width="abbreviated", context="format", locale=self.locale)
            return _names_matcher({0: periods["am"], 1: periods["pm"]})
        if token.value == "y":
            if token.width == 2:
                return _digits_matcher(2, 2), lambda digits: 2000 + int(digits)
            return _digits_matcher(token.width, 4), int
        if token.value == "S":
            scale = 10 ** (6 - token.width)
            return _digits_matcher(token.width, token.width), lambda digits: int(digits) * scale
        if token.width == 2:
            return _digits_matcher(2, 2), int
        return _digits_matcher(1, 2), int

    def format(self, value: datetime) -> str:
        """Renders a datetime with babel.

        Each field is rendered by babel on its own and joined with the
        literals. Fractions of a second are written from the integer
        microseconds, truncated to the field width.

        Args:
            value: The datetime to render.

        Returns:
            The rendered text.
        """
        fraction = f"{value.microsecond:06d}"
        parts: list[str] = []
        for token in self.tokens:
            if not token.is_field:
                parts.append(token.value)
            elif token.value == "S":
                parts.append(fraction[: token.width])
            else:
                parts.append(format_datetime(value, token.value * token.width, locale=self.locale))
        return "".join(parts)

    def parse(self, text: str) -> datetime:
        """Parses a text that must match the whole pattern.

        Args:
            text: The text to parse.

        Returns:
            A naive datetime; fields the pattern lacks default to zero.

        Raises:
            DateParseError: If the text does not match the pattern, has
                trailing characters, or spells an invalid date or time.
        """
        fields: dict[str, int] = {}
        offsets: dict[str, int] = {}
        position = 0

        for token, matcher in zip(self.tokens, self._matchers):
            if matcher is None:
                if not text.startswith(token.value, position):
                    raise DateParseError(f"Text {text!r} could not be parsed at index {position}.", text, position)
                position += len(token.value)
                continue

            regex, convert = matcher
            match = regex.match(text, position)
            if match is None:
                raise DateParseError(f"Text {text!r} could not be parsed at index {position}.", text, position)
            key = FIELD_KEYS[token.value]
            value = convert(match.group())
            if key in fields and fields[key] != value:
                raise DateParseError(
                    f"Text {text!r} could not be parsed: conflicting {key} values at index {position}.",
                    text,
                    position,
                )
            fields[key] = value
            offsets[key] = position
            position = match.end()

        if position != len(text):
            raise DateParseError(
                f"Text {text!r} could not be parsed, unparsed text found at index {position}.", text, position
            )
        return self._resolve(text, fields, offsets)

    def _resolve(self, text: str, fields: dict[str, int], offsets: dict[str, int]) -> datetime:
        """Combines parsed fields into a datetime, validating their ranges.

        Args:
            text: The parsed text, used for error reporting.
            fields: The field values read from the text.
            offsets: The index where each field started.

        Returns:
            The resolved naive datetime.

        Raises:
            DateParseError: If a field is missing or out of range.
        """
        missing = [key for key in REQUIRED_FIELDS if key not in fields]
        if missing:
            raise DateParseError(
                f"Text {text!r} could not be parsed: pattern {self.pattern!r} has no {', '.join(missing)} field.",
                text,
                0,
            )

        for key, (low, high) in FIELD_RANGES.items():
            if key in fields and not low <= fields[key] <= high:
                raise DateParseError(
                    f"Text {text!r} could not be parsed: invalid value for {key} "
                    f"(valid values {low} - {high}): {fields[key]}.",
                    text,
                    offsets[key],
                )

        period = fields.get("period")
        if "hour" in fields:
            hour = fields["hour"]
            if period is not None and period != int(hour >= 12):
                raise DateParseError(
                    f"Text {text!r} could not be parsed: AM/PM marker conflicts with hour {hour}.",
                    text,
                    offsets["period"],
                )
        elif "clock_hour" in fields:
            hour = fields["clock_hour"] % 12 + 12 * (period or 0)
        else:
            hour = 0

        try:
            return datetime(
                fields["year"],
                fields["month"],
                fields["day"],
                hour,
                fields.get("minute", 0),
                fields.get("second", 0),
                fields.get("microsecond", 0),
            )
        except ValueError as e:
            raise DateParseError(f"Text {text!r} could not be parsed: {e}.", text, offsets["day"]) from e


@lru_cache(maxsize=128)
def compile_pattern(pattern: str, locale: Locale) -> CompiledPattern:
    """Compiles a pattern for a locale, caching the result.

    Args:
        pattern: The pattern string.
        locale: The locale supplying month names and AM/PM markers.

    Returns:
        The compiled pattern.

    Raises:
        InvalidArgumentError: If the pattern is not valid.
    """
    return CompiledPattern(pattern, locale)
