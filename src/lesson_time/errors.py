"""Parse results and error hierarchy for lesson time input.

Parsers return a ParseError value instead of raising, so form handlers can
surface the message and re-prompt without try/except around every field.
Callers that would rather fail loudly convert the value with unwrap():

    slot_date = unwrap(parse_display_date(form["date"]))
"""

from enum import Enum
from typing import TypeGuard, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ParseErrorKind(str, Enum):
    """Why a display string was rejected."""

    INVALID_FORMAT = "invalid_format"
    INVALID_DATE = "invalid_date"


class ParseError(BaseModel):
    """Tagged failure returned by the parsers in place of a value."""

    model_config = ConfigDict(frozen=True)

    kind: ParseErrorKind
    value: str
    message: str

    def to_exception(self) -> "InvalidInputError":
        if self.kind is ParseErrorKind.INVALID_DATE:
            return InvalidDateError(self.message, value=self.value)
        return InvalidFormatError(self.message, value=self.value)


class LessonTimeError(Exception):
    """Base exception for all lesson time errors."""

    pass


class InvalidInputError(LessonTimeError):
    """User-entered text could not be turned into a date or time.

    Carries the rejected text so the form can echo it back.
    """

    def __init__(self, message: str, *, value: str = "") -> None:
        super().__init__(message)
        self.value = value


class InvalidFormatError(InvalidInputError):
    """Input does not have the expected shape (separators, digits, AM/PM)."""

    pass


class InvalidDateError(InvalidInputError):
    """Input is well-formed but names no real calendar date, e.g. 02/30/2026."""

    pass


def is_parse_error(result: object) -> TypeGuard[ParseError]:
    """True if a parser returned a ParseError; narrows the result for type checkers."""
    return isinstance(result, ParseError)


def unwrap(result: T | ParseError) -> T:
    """Return the parsed value or raise the matching InvalidInputError.

    Raises:
        InvalidFormatError: If the result is an INVALID_FORMAT error.
        InvalidDateError: If the result is an INVALID_DATE error.
    """
    if isinstance(result, ParseError):
        raise result.to_exception()
    return result
