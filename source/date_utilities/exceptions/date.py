"""This module defines custom exceptions raised by the date formatter."""


class DateFormatterError(Exception):
    """Base exception for errors raised while formatting or parsing dates."""

    pass


class InvalidArgumentError(DateFormatterError, ValueError):
    """Raised when a required argument is missing, empty or of the wrong type.

    Invalid pattern strings (unknown letters, unsupported widths, unterminated
    quotes) are reported with this error as well, before any formatting or
    parsing work happens.
    """

    pass


class DateParseError(DateFormatterError, ValueError):
    """Raised when a text does not conform to the pattern it is parsed with."""

    def __init__(self, message: str, text: str, error_index: int):
        """Initializes the error.

        Args:
            message: A human readable description of the failure.
            text: The text that could not be parsed.
            error_index: The position in `text` where parsing stopped.
        """
        super().__init__(message)
        self.text = text
        self.error_index = error_index
