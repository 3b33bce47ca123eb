"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "SourceSpan",
]


class ErrorCategory(StrEnum):
    """Error categorization for depcycle exceptions.

    Inherits from ``StrEnum`` so that ``str(category)`` yields the plain
    value (``"parse"``, ``"resource"``, ``"input"``) in logs and JSON output.

    Categories:
        PARSE: Malformed dependency declaration
        RESOURCE: Graph storage could not be allocated or input too large
        INPUT: Command-line or file access problem outside the core
    """

    PARSE = "parse"
    RESOURCE = "resource"
    INPUT = "input"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Parse errors (malformed declaration lines)
        2000-2999: Resource errors (allocation failure, size limits)
        3000-3999: Input errors (argument count, unreadable file)
    """

    # Parse errors (1000-1999)
    PARSE_MISSING_DELIMITER = 1001
    PARSE_EMPTY_NAME = 1002
    PARSE_EMPTY_DEPENDENCY = 1003

    # Resource errors (2000-2999)
    RESOURCE_EXHAUSTED = 2001
    SOURCE_TOO_LARGE = 2002

    # Input errors (3000-3999)
    INVALID_ARGUMENT_COUNT = 3001
    FILE_UNREADABLE = 3002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        if self.value < 2000:
            return ErrorCategory.PARSE
        if self.value < 3000:
            return ErrorCategory.RESOURCE
        return ErrorCategory.INPUT


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Attributes:
        start: Starting character offset in the whole source (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when the error is not tied to a line)
        hint: Suggestion for fixing the error
        source_line: Raw text of the offending line, if any
        filename: Input file the error refers to, if known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source_line: str | None = None
    filename: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[PARSE_MISSING_DELIMITER]: Line 3 has no ':' separating the name
              --> line 3, column 1
               |
             3 | justaname
               |
              = help: Write the line as '<name>: <dep>, <dep>'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
