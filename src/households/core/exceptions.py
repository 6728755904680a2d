from __future__ import annotations

from typing import Optional

from households.constants import INVALID_AGE_MESSAGE, UNREADABLE_INPUT_MESSAGE


class HouseholdError(Exception):
    """Base exception for household import failures."""


class RecordError(HouseholdError):
    """
    Raised when a single input line cannot become an Individual.

    Recoverable: the import loop reports it and moves on to the next line.
    """

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number


class MalformedRecord(RecordError):
    """Raised when a line does not hold six quoted fields or the age is not an integer."""


class InvalidAge(RecordError):
    """Raised when the age parses but is negative."""

    def __init__(self, line_number: Optional[int] = None):
        super().__init__(INVALID_AGE_MESSAGE, line_number)


class UnreadableInput(HouseholdError):
    """Raised when the input source cannot be opened or read. Fatal to the import."""

    def __init__(self, message: str = UNREADABLE_INPUT_MESSAGE):
        super().__init__(message)
