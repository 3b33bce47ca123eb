"""depcycle exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object,
so callers get the same rich error information regardless of the
layer that raised.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DepcycleError",
    "InputError",
    "ParseError",
    "ResourceError",
]


class DepcycleError(Exception):
    """Base exception for all depcycle errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DepcycleError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseError(DepcycleError):
    """Malformed declaration line.

    The build is aborted on the first ParseError; no partial graph
    is returned to the caller.

    Attributes:
        line_number: 1-based number of the offending line
        line_content: Raw text of the offending line (terminator removed)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        line_number: int,
        line_content: str,
    ) -> None:
        """Initialize ParseError.

        Args:
            message: Error message string OR Diagnostic object
            line_number: 1-based number of the offending line
            line_content: Raw text of the offending line
        """
        super().__init__(message)
        self.line_number = line_number
        self.line_content = line_content


class ResourceError(DepcycleError):
    """Graph storage could not be allocated, or the input exceeds limits.

    Fatal: the check cannot continue and no partial result is produced.
    """


class InputError(DepcycleError):
    """Invalid invocation or unreadable input file.

    Raised by the command-line layer and file helpers before the core
    is invoked.

    Attributes:
        filename: File that could not be opened (empty if not applicable)
    """

    def __init__(self, message: str | Diagnostic, *, filename: str = "") -> None:
        """Initialize InputError.

        Args:
            message: Error message string OR Diagnostic object
            filename: File that could not be opened
        """
        super().__init__(message)
        self.filename = filename
