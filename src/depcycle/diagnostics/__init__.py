"""Diagnostic system for depcycle errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, SourceSpan
from .errors import DepcycleError, InputError, ParseError, ResourceError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "DepcycleError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InputError",
    "OutputFormat",
    "ParseError",
    "ResourceError",
    "SourceSpan",
]
