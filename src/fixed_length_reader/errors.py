"""Error taxonomy shared by every decoding layer."""

from __future__ import annotations


class ArgumentError(ValueError):
    """Raised for configuration or precondition errors caused by the caller."""


class FixedLengthError(Exception):
    """Raised when fixed-length data cannot be decoded.

    Carries the 1-based line number (0 when no single line is at fault), the
    name of the offending field when known, and the original line text.
    """

    def __init__(
        self,
        message: str,
        line_number: int = 0,
        field_name: str | None = None,
        original_line: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.field_name = field_name
        self.original_line = original_line

    def __str__(self) -> str:
        location = f"line {self.line_number}"
        if self.field_name:
            location = f"{location}, field '{self.field_name}'"
        return f"{self.message} ({location})"

    def __repr__(self) -> str:
        return (
            f"FixedLengthError(message={self.message!r}, line_number={self.line_number}, "
            f"field_name={self.field_name!r}, original_line={self.original_line!r})"
        )
