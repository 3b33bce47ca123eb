"""Line parser for dependency declarations.

Each non-blank line of a dependency file declares one name and the
names it depends on:

    <name>: <dep1>, <dep2>, ...

The text before the first ':' is the declaring name. The text after it
is split on ',' and every token is trimmed. An empty right-hand side
declares a name with no dependencies.

Duplicate dependencies are preserved here in their textual order;
deduplication happens when declarations are merged into a graph.

Line Ending Support:
    - LF (Unix, \\n), CRLF (Windows, \\r\\n) and lone CR are accepted.
    - Strings and files are both split without newline translation, so
      every entry point sees the same lines.
    - Offsets in SourceSpan count the terminator characters, so they
      index into the original source text.

Python 3.13+. Zero external dependencies.
"""

import io
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NoReturn

from depcycle.config import CheckConfig
from depcycle.constants import DEPENDENCY_DELIMITER, NAME_DELIMITER
from depcycle.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    ParseError,
    ResourceError,
    SourceSpan,
)

__all__ = ["Declaration", "iter_declarations", "parse_line"]


@dataclass(frozen=True, slots=True)
class Declaration:
    """One parsed declaration line.

    Attributes:
        name: Declaring name (trimmed, never empty)
        dependencies: Dependency names in textual order, duplicates kept
        line: 1-based line number the declaration came from
    """

    name: str
    dependencies: tuple[str, ...]
    line: int


def _strip_terminator(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith(("\n", "\r")):
        return text[:-1]
    return text


def _span(offset: int, column: int, width: int, line_number: int) -> SourceSpan:
    """Build a span for a 0-based column inside the line starting at offset."""
    return SourceSpan(
        start=offset + column,
        end=offset + column + width,
        line=line_number,
        column=column + 1,
    )


def _raise(diagnostic: Diagnostic, line_number: int, line: str) -> NoReturn:
    raise ParseError(diagnostic, line_number=line_number, line_content=line)


def parse_line(
    text: str,
    line_number: int = 1,
    offset: int = 0,
    *,
    skip_blank: bool = True,
) -> Declaration | None:
    """Parse a single declaration line.

    Args:
        text: Line text, with or without its line terminator
        line_number: 1-based line number used in errors
        offset: Character offset of the line within the whole source
        skip_blank: Return None for whitespace-only lines instead of failing

    Returns:
        Parsed Declaration, or None for a skipped blank line

    Raises:
        ParseError: If the line has no ':', an empty name, or an empty
            dependency token

    Example:
        >>> parse_line("app: lib, util\\n", 3)
        Declaration(name='app', dependencies=('lib', 'util'), line=3)
        >>> parse_line("leaf:")
        Declaration(name='leaf', dependencies=(), line=1)
    """
    line = _strip_terminator(text)

    if skip_blank and not line.strip():
        return None

    name_part, separator, rest = line.partition(NAME_DELIMITER)
    if not separator:
        span = _span(offset, 0, len(line), line_number)
        _raise(ErrorTemplate.missing_delimiter(line_number, line, span), line_number, line)

    name = name_part.strip()
    if not name:
        span = _span(offset, len(name_part), len(NAME_DELIMITER), line_number)
        _raise(ErrorTemplate.empty_name(line_number, line, span), line_number, line)

    dependencies: list[str] = []
    if rest.strip():
        column = len(name_part) + len(NAME_DELIMITER)
        for position, token in enumerate(rest.split(DEPENDENCY_DELIMITER), start=1):
            dependency = token.strip()
            if not dependency:
                span = _span(offset, column, len(token), line_number)
                diagnostic = ErrorTemplate.empty_dependency(line_number, position, line, span)
                _raise(diagnostic, line_number, line)
            dependencies.append(dependency)
            column += len(token) + len(DEPENDENCY_DELIMITER)

    return Declaration(name=name, dependencies=tuple(dependencies), line=line_number)


def iter_declarations(
    source: str | Iterable[str],
    config: CheckConfig | None = None,
) -> Iterator[Declaration]:
    """Yield declarations from a source, line by line.

    Args:
        source: Whole source text, or an iterable of lines such as an
            open text file
        config: Limits and blank-line handling (default: CheckConfig())

    Yields:
        One Declaration per non-blank line, in source order

    Raises:
        ParseError: On the first malformed line
        ResourceError: If the source exceeds config.max_source_size
    """
    if config is None:
        config = CheckConfig()

    # newline="" splits on every terminator but leaves it in the line
    lines: Iterable[str] = io.StringIO(source, newline="") if isinstance(source, str) else source

    offset = 0
    for line_number, text in enumerate(lines, start=1):
        if offset + len(text) > config.max_source_size:
            diagnostic = ErrorTemplate.source_too_large(
                offset + len(text), config.max_source_size
            )
            raise ResourceError(diagnostic)

        declaration = parse_line(
            text, line_number, offset, skip_blank=config.skip_blank_lines
        )
        offset += len(text)
        if declaration is not None:
            yield declaration
