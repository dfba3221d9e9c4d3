"""Common errors for the grouping_by package."""

from typing import Any


class GroupingByException(Exception):
    """Base exception of the grouping_by package."""


class StreamConsumedError(GroupingByException):
    """A terminal operation was requested on an already consumed stream."""

    def __init__(self) -> None:
        super().__init__("Stream has already been consumed by a terminal operation")


class InvalidRecordsError(GroupingByException):
    """Records file does not contain a list of mappings."""


class MissingFieldError(GroupingByException, KeyError):
    """Exception raised when a record does not contain a requested field."""

    def __init__(self, field: str, record: Any) -> None:
        self.field = field
        self.record = record
        message = f"Record is missing field {field!r}: {record!r}"
        super().__init__(message)

    def __str__(self) -> str:
        return self.args[0]


class IncompatibleValuesError(GroupingByException):
    """Field values of different records cannot be compared or added."""
