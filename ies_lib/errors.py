# -*- coding: utf-8 -*-
"""Error handling for photometric file parsing.

Recoverable conditions are collected as :class:`IesParseError` records.
Conditions that must abort a run are raised as :class:`IesParseException`
subclasses.
"""

from dataclasses import dataclass

from ies_lib.enums import Severity


@dataclass(frozen=True)
class SourceLocation:
    """Tracks the source location of text for error reporting.

    Attributes:
        source: The source file name or identifier
        line: Line number (0-based)
        column: Column number (0-based)
        text: The text at this location
    """

    source: str
    line: int
    column: int
    text: str

    def __str__(self) -> str:
        """Format as human-readable location string."""
        return f"(in {self.source}, line {self.line + 1}, column {self.column + 1})"


@dataclass(frozen=True)
class IesParseError:
    """Represents a parsing error, warning or notice with source location.

    This is a data record for storing error information, not an exception.
    Use IesParseException for raising errors.

    Attributes:
        severity: ERROR, WARNING or INFO
        message: Human-readable error message
        location: Source location where error occurred (optional)
    """

    severity: Severity
    message: str
    location: SourceLocation | None = None

    def __str__(self) -> str:
        """Format as human-readable error string."""
        base = f"{self.severity.value}: {self.message}"
        if self.location:
            base += f" {self.location}"
            if self.location.text:
                base += f"\n  {self.location.text}"
        return base


class IesParseException(Exception):  # noqa: N818
    """Exception raised for parsing errors that abort the run.

    Attributes:
        message: Error message
        location: Source location where error occurred
    """

    def __init__(self, message: str, location: SourceLocation | None = None):
        self.message = message
        self.location = location
        super().__init__(str(self))

    def __str__(self) -> str:
        """Format as human-readable exception string."""
        if self.location:
            return f"{self.message} {self.location}"
        return self.message

    def to_error(self) -> IesParseError:
        """Convert exception to IesParseError record."""
        return IesParseError(
            severity=Severity.ERROR,
            message=self.message,
            location=self.location,
        )


class UnsupportedTiltReferenceError(IesParseException):
    """``TILT=<filename>``: external tilt files are not supported."""


class UndefinedParserStateError(IesParseException):
    """The parser reached a state it has no handler for."""


class IncompleteDocumentError(IesParseException):
    """Strict mode: the parsed arrays do not match the declared counts."""
