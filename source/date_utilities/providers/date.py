"""This module provides centralized date formatting and parsing.

`DateFormatter` converts between naive datetimes and their string form using
either one of the named `FormatPattern` members or a caller-supplied pattern
string. Every named-pattern call resolves to the pattern string and goes
through the same two primitives, `format` and `parse`.
"""

from __future__ import annotations

import threading
from datetime import datetime
from enum import StrEnum

from babel import Locale
from date_utilities.exceptions.date import InvalidArgumentError
from date_utilities.providers.config import ConfigProvider, parse_locale
from date_utilities.providers.pattern import CompiledPattern, compile_pattern
from pydantic import ValidationError

FALLBACK_LOCALE = "en_US"


def _configured_locale() -> Locale:
    """Returns the locale named by `DATE_LOCALE`.

    Falls back to `en_US` when the settings do not validate, so that creating
    the formatter never fails.

    Returns:
        The babel Locale to format and parse with.
    """
    try:
        return parse_locale(ConfigProvider.get_config().DATE_LOCALE)
    except ValidationError:
        return parse_locale(FALLBACK_LOCALE)


class FormatPattern(StrEnum):
    """The named date/time patterns."""

    DEFAULT = "MMM d yyyy hh:mm"
    DATEONLY = "MM-dd-yyyy"
    LONGDATE = "MM dd yyyy hh:mm:ss a"

    @property
    def pattern(self) -> str:
        """Returns the pattern string of the member."""
        return self.value


class DateFormatter:
    """Formats and parses datetimes with named or custom patterns.

    The formatter is a process-wide singleton. Its only data is the babel
    locale read from configuration when the instance is first created, used
    for month names and AM/PM markers. An invalid `DATE_LOCALE` setting
    falls back to `en_US`.
    """

    _instance: DateFormatter | None = None
    _instance_lock = threading.Lock()
    _locale: Locale

    def __new__(cls) -> DateFormatter:
        """Ensures that only one instance of this class is ever created.

        Returns:
            The singleton instance of the DateFormatter.
        """
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._locale = _configured_locale()
                    cls._instance = instance
        return cls._instance

    @classmethod
    def get_instance(cls) -> DateFormatter:
        """Returns the singleton instance, creating it on first call."""
        return cls()

    @property
    def locale(self) -> Locale:
        """The locale used for month names and AM/PM markers."""
        return self._locale

    def _resolve_pattern(self, pattern: FormatPattern | str | None) -> CompiledPattern:
        """Resolves a named or literal pattern to its compiled form.

        Args:
            pattern: A FormatPattern member or a pattern string.

        Returns:
            The compiled pattern.

        Raises:
            InvalidArgumentError: If the pattern is missing, empty or invalid.
        """
        if pattern is None:
            raise InvalidArgumentError("Pattern provided should not be None.")
        if isinstance(pattern, FormatPattern):
            pattern = pattern.pattern
        if not isinstance(pattern, str) or not pattern:
            raise InvalidArgumentError("Pattern provided should be a non-empty string or a FormatPattern.")
        return compile_pattern(pattern, self._locale)

    def format(self, value: datetime, pattern: FormatPattern | str | None = FormatPattern.DEFAULT) -> str:
        """Formats a datetime according to a named or custom pattern.

        Args:
            value: The datetime to format.
            pattern: A FormatPattern member or a custom pattern string.
                Defaults to `FormatPattern.DEFAULT` (``MMM d yyyy hh:mm``).

        Returns:
            The datetime rendered with the pattern.

        Raises:
            InvalidArgumentError: If the value is not a datetime, or the
                pattern is missing, empty or invalid.
        """
        if not isinstance(value, datetime):
            raise InvalidArgumentError("Date provided should be a datetime.")
        return self._resolve_pattern(pattern).format(value)

    def parse(self, text: str, pattern: FormatPattern | str | None = FormatPattern.DEFAULT) -> datetime:
        """Parses a string into a datetime according to a named or custom pattern.

        The whole text must match the pattern. Time fields the pattern does
        not have default to midnight.

        Args:
            text: The string to parse.
            pattern: A FormatPattern member or a custom pattern string.
                Defaults to `FormatPattern.DEFAULT` (``MMM d yyyy hh:mm``).

        Returns:
            The parsed naive datetime.

        Raises:
            InvalidArgumentError: If the text is missing or empty, or the
                pattern is missing, empty or invalid.
            DateParseError: If the text does not conform to the pattern.
        """
        if not isinstance(text, str) or not text:
            raise InvalidArgumentError("DateTime string provided should be a non-empty string.")
        return self._resolve_pattern(pattern).parse(text)


def format_datetime(value: datetime, pattern: FormatPattern | str | None = FormatPattern.DEFAULT) -> str:
    """Formats a datetime with the shared formatter. See `DateFormatter.format`."""
    return DateFormatter.get_instance().format(value, pattern)


def parse_datetime(text: str, pattern: FormatPattern | str | None = FormatPattern.DEFAULT) -> datetime:
    """Parses a string with the shared formatter. See `DateFormatter.parse`."""
    return DateFormatter.get_instance().parse(text, pattern)
