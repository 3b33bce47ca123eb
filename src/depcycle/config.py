"""Check configuration.

Provides a single frozen dataclass that encapsulates the parameters
shared by the parser, the graph builder and the file helpers.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass

from depcycle.constants import DEFAULT_ENCODING, MAX_SOURCE_SIZE

__all__ = ["CheckConfig"]


@dataclass(frozen=True, slots=True)
class CheckConfig:
    """Immutable configuration for building and checking a dependency graph.

    All fields have sensible defaults; ``CheckConfig()`` with no arguments
    produces a usable configuration.

    Attributes:
        max_source_size: Maximum number of characters accepted from a single
            source (default: 10 MiB). Larger input raises ResourceError.
        encoding: Text encoding used when opening files (default: utf-8).
        skip_blank_lines: Ignore whitespace-only lines (default: True).
            When False, a blank line is reported as a ParseError.

    Example:
        >>> from depcycle import check_source
        >>> config = CheckConfig(skip_blank_lines=False)
        >>> check_source("a: b\\n\\nb:\\n", config)
        Traceback (most recent call last):
        ...
        depcycle.diagnostics.errors.ParseError: error[PARSE_MISSING_DELIMITER]: ...
    """

    max_source_size: int = MAX_SOURCE_SIZE
    encoding: str = DEFAULT_ENCODING
    skip_blank_lines: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_source_size is not positive or encoding is
                not a known codec.
        """
        if self.max_source_size <= 0:
            msg = "max_source_size must be positive"
            raise ValueError(msg)
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            msg = f"unknown encoding: {self.encoding}"
            raise ValueError(msg) from e
