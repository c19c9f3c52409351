"""abagen exception hierarchy."""

from __future__ import annotations

from typing import Any


class AbaError(Exception):
    """Base exception for all abagen errors."""


class RecordValidationError(AbaError):
    """A record field failed its format, length or character-class rule."""

    record = "Record"

    def __init__(self, field: str, value: Any, expected: str) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"{self._label()} {field} is invalid: {value!r}. {expected}")

    def _label(self) -> str:
        return self.record


class HeaderValidationError(RecordValidationError):
    """Descriptive record (file header) input is invalid."""

    record = "Descriptive record"


class DetailValidationError(RecordValidationError):
    """A transaction cannot be encoded as a detail record."""

    record = "Detail record"

    def __init__(self, field: str, value: Any, expected: str, *, index: int | None = None) -> None:
        self.index = index
        super().__init__(field, value, expected)

    def _label(self) -> str:
        if self.index is None:
            return self.record
        return f"{self.record} #{self.index}"


class FieldOverflowError(AbaError):
    """A value is wider than the fixed column it must fit in."""

    def __init__(self, record_type: str, field: str, value: str, width: int) -> None:
        self.record_type = record_type
        self.field = field
        self.value = value
        self.width = width
        super().__init__(
            f"Value for {field} in record type {record_type} is {len(value)} characters, "
            f"column width is {width}"
        )
