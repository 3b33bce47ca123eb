"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from depcycle.constants import (
    DEPENDENCY_DELIMITER,
    FILE_OPEN_ERROR_MESSAGE,
    INVALID_ARGUMENTS_MESSAGE,
    NAME_DELIMITER,
)

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and consistent and documents every error case.
    """

    _FORMAT_HINT = (
        f"Write the line as '<name>{NAME_DELIMITER} <dep>{DEPENDENCY_DELIMITER} <dep>'"
    )

    @staticmethod
    def missing_delimiter(line_number: int, line: str, span: SourceSpan) -> Diagnostic:
        """Line without a name delimiter.

        Args:
            line_number: 1-based line number
            line: Raw line content
            span: Location of the whole line

        Returns:
            Diagnostic for PARSE_MISSING_DELIMITER
        """
        msg = f"Line {line_number} has no '{NAME_DELIMITER}' separating the name"
        return Diagnostic(
            code=DiagnosticCode.PARSE_MISSING_DELIMITER,
            message=msg,
            span=span,
            hint=ErrorTemplate._FORMAT_HINT,
            source_line=line,
        )

    @staticmethod
    def empty_name(line_number: int, line: str, span: SourceSpan) -> Diagnostic:
        """Declaration whose name is empty after trimming.

        Args:
            line_number: 1-based line number
            line: Raw line content
            span: Location of the name delimiter

        Returns:
            Diagnostic for PARSE_EMPTY_NAME
        """
        msg = f"Line {line_number} declares an empty name"
        return Diagnostic(
            code=DiagnosticCode.PARSE_EMPTY_NAME,
            message=msg,
            span=span,
            hint=f"Put a name before '{NAME_DELIMITER}'",
            source_line=line,
        )

    @staticmethod
    def empty_dependency(
        line_number: int, position: int, line: str, span: SourceSpan
    ) -> Diagnostic:
        """Dependency token that is empty after trimming.

        Args:
            line_number: 1-based line number
            position: 1-based position of the token in the dependency list
            line: Raw line content
            span: Location of the empty token

        Returns:
            Diagnostic for PARSE_EMPTY_DEPENDENCY
        """
        msg = f"Line {line_number} has an empty dependency at position {position}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_EMPTY_DEPENDENCY,
            message=msg,
            span=span,
            hint=f"Remove the extra '{DEPENDENCY_DELIMITER}' or name the dependency",
            source_line=line,
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Source exceeds the configured size limit.

        Args:
            size: Characters read so far
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size {size} exceeds the limit of {limit} characters"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Raise CheckConfig.max_source_size if this input is expected",
        )

    @staticmethod
    def resource_exhausted(node_count: int) -> Diagnostic:
        """Memory ran out while growing graph storage.

        Args:
            node_count: Nodes stored when allocation failed

        Returns:
            Diagnostic for RESOURCE_EXHAUSTED
        """
        msg = f"Out of memory while building the graph ({node_count} nodes stored)"
        return Diagnostic(
            code=DiagnosticCode.RESOURCE_EXHAUSTED,
            message=msg,
        )

    @staticmethod
    def invalid_argument_count(prog: str) -> Diagnostic:
        """Wrong number of command-line arguments.

        Args:
            prog: Program name for the usage line

        Returns:
            Diagnostic for INVALID_ARGUMENT_COUNT
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARGUMENT_COUNT,
            message=INVALID_ARGUMENTS_MESSAGE.format(prog=prog),
        )

    @staticmethod
    def file_unreadable(filename: str, reason: str) -> Diagnostic:
        """Input file could not be opened or decoded.

        Args:
            filename: Path given by the caller
            reason: Underlying OS or decoding error text

        Returns:
            Diagnostic for FILE_UNREADABLE
        """
        return Diagnostic(
            code=DiagnosticCode.FILE_UNREADABLE,
            message=FILE_OPEN_ERROR_MESSAGE.format(filename=filename),
            hint=reason,
            filename=filename,
        )
