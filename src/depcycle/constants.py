"""Shared constants for depcycle.

Centralized configuration constants used across the syntax, graph and
analysis packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Syntax: Delimiters of the dependency file format
- Input limits: Size constraints on accepted sources
- Output: Result and CLI messages

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Syntax
    "NAME_DELIMITER",
    "DEPENDENCY_DELIMITER",
    # Input limits
    "MAX_SOURCE_SIZE",
    "DEFAULT_ENCODING",
    # Output
    "CYCLE_FOUND_MESSAGE",
    "NO_CYCLE_MESSAGE",
    "INVALID_ARGUMENTS_MESSAGE",
    "FILE_OPEN_ERROR_MESSAGE",
    "DEFAULT_LOCALE",
]

# ============================================================================
# SYNTAX
# ============================================================================

# Separates the declaring name from its dependency list.
# Only the first occurrence on a line is significant.
NAME_DELIMITER: str = ":"

# Separates dependency names from each other.
DEPENDENCY_DELIMITER: str = ","

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
# Exceeding it raises ResourceError before the line is parsed.
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

DEFAULT_ENCODING: str = "utf-8"

# ============================================================================
# OUTPUT
# ============================================================================

CYCLE_FOUND_MESSAGE: str = "Cyclic dependency"
NO_CYCLE_MESSAGE: str = "No Cyclic dependency"

INVALID_ARGUMENTS_MESSAGE: str = "Please supply one file!\nusage: {prog} <filename>"
FILE_OPEN_ERROR_MESSAGE: str = "Error! trying to open the file {filename}"

# Locale used for the --stats summary line.
DEFAULT_LOCALE: str = "en_US"
