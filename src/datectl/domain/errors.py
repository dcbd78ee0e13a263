"""Error taxonomy for date operations.

Every failure raised by the domain layer is a :class:`DateError`.
Each concrete error also derives from the builtin exception a caller
would naturally catch, so ``except ValueError`` keeps working.
"""

from __future__ import annotations


class DateError(Exception):
    """Base class for all datectl domain errors."""

    code = "DATE_ERROR"


class InvalidPatternError(DateError, ValueError):
    """A format pattern could not be compiled.

    Operations re-raise this as :class:`ParseError` or :class:`FormatError`
    depending on which direction the pattern was used in.
    """

    code = "INVALID_PATTERN"

    def __init__(self, pattern: str, reason: str, *, index: int | None = None) -> None:
        self.pattern = pattern
        self.reason = reason
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(f"Invalid pattern {pattern!r}{where}: {reason}")


class ParseError(DateError, ValueError):
    """Text does not conform to the pattern, or the pattern is invalid."""

    code = "PARSE_ERROR"

    def __init__(self, message: str, *, text: str | None = None, pattern: str | None = None):
        self.text = text
        self.pattern = pattern
        super().__init__(message)


class FormatError(DateError, ValueError):
    """A date could not be rendered with the given pattern or locale."""

    code = "FORMAT_ERROR"


class UnsupportedLocaleError(FormatError):
    """No month/weekday data exists for the requested locale."""

    code = "UNSUPPORTED_LOCALE"

    def __init__(self, locale: str) -> None:
        self.locale = locale
        super().__init__(f"Unsupported locale: {locale!r}")


class InvalidArgumentError(DateError, TypeError):
    """A required argument is missing or of the wrong type."""

    code = "INVALID_ARGUMENT"


class DateRangeError(DateError, OverflowError):
    """Arithmetic would leave the representable calendar range."""

    code = "RANGE_ERROR"
