"""Exceptions raised while parsing date phrases and durations.

Every error is a direct subclass of `DateParseError` (itself a `ValueError`), so callers can
catch the whole family at once or single out one kind.
"""

from typing import Any


class DateParseError(ValueError):
    """Base class for every parse failure."""


class EmptyInput(DateParseError):
    def __init__(self) -> None:
        super().__init__("date string is empty")


class UnexpectedToken(DateParseError):
    def __init__(self, position: int, text: str = "", expected: str | None = None) -> None:
        self.position = position
        self.text = text
        self.expected = expected
        found = f"'{text}'" if text else "end of input"
        message = f"unexpected {found} at position {position}"
        if expected:
            message += f", expected {expected}"
        super().__init__(message)


class OutOfRange(DateParseError):
    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} {value} is out of range")


class AmbiguousForm(DateParseError):
    def __init__(self, reason: str, field: str | None = None) -> None:
        self.reason = reason
        self.field = field
        super().__init__(reason)


class BackendConstructionFailed(DateParseError):
    def __init__(self, backend: str, detail: Any) -> None:
        self.backend = backend
        self.detail = detail
        super().__init__(f"{backend} could not build the instant: {detail}")


# Raised by parse_duration when the phrase holds more than a duration


class UnexpectedDate(DateParseError):
    def __init__(self) -> None:
        super().__init__("expected relative date, found a named date")


class UnexpectedAbsoluteDate(DateParseError):
    def __init__(self) -> None:
        super().__init__("expected relative date, found an exact date")


class UnexpectedTime(DateParseError):
    def __init__(self) -> None:
        super().__init__("expected duration, found time")
