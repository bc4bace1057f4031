"""Error kinds raised while decoding TLE catalogs.

Every decode error carries a human-readable message and the character
offset of the offending field, measured from the start of the record that
contains it.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Categories of decode failure."""

    EMPTY_INPUT = "empty_input"
    TRUNCATED_LINE = "truncated_line"
    FIELD_FORMAT = "field_format"
    INVALID_EPOCH = "invalid_epoch"
    INVARIANT_VIOLATION = "invariant_violation"


class TLEError(ValueError):
    """Base class for TLE decode failures.

    Attributes:
        message: Human-readable description of the failure.
        offset: Character offset of the failing field within its record.
    """

    kind: ErrorKind

    def __init__(self, message: str, offset: int = 0) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset

    def with_offset(self, offset: int) -> TLEError:
        """Return a copy of this error located at ``offset``."""
        return type(self)(self.message, offset)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, offset={self.offset})"


class EmptyInputError(TLEError):
    """The input contained no lines at all."""

    kind = ErrorKind.EMPTY_INPUT


class TruncatedLineError(TLEError):
    """A line is too short to hold a field's column range."""

    kind = ErrorKind.TRUNCATED_LINE


class FieldFormatError(TLEError):
    """A field's content cannot be parsed by its decoder."""

    kind = ErrorKind.FIELD_FORMAT


class InvalidEpochError(TLEError):
    """The epoch day field has no fractional separator."""

    kind = ErrorKind.INVALID_EPOCH


class InvariantViolationError(TLEError):
    """A decoded value violates a semantic constraint."""

    kind = ErrorKind.INVARIANT_VIOLATION
