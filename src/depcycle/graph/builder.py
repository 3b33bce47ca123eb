"""Graph construction from dependency declarations.

Architecture:
    - GraphBuilder.add_declaration(): Merge one Declaration into the graph
    - GraphBuilder.feed(): Parse a source and merge every declaration
    - GraphBuilder.build(): Hand over the finished Graph
    - build_graph(): One-shot helper used by check_source()

Repeated declarations of the same name are merged, and a dependency that
is already recorded for a node (from the same line or an earlier one) is
dropped. Names mentioned only as dependencies become empty placeholder
nodes.

Python 3.13+.
"""

import logging
from collections.abc import Iterable

from depcycle.config import CheckConfig
from depcycle.diagnostics import ErrorTemplate, ResourceError
from depcycle.syntax import Declaration, iter_declarations, parse_line

from .model import Graph

__all__ = ["GraphBuilder", "build_graph"]

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Incrementally build a Graph from declarations.

    The builder owns the graph under construction until build() is
    called. If feed() raises, everything merged so far is discarded,
    so a partial graph is never handed out.

    Example:
        >>> builder = GraphBuilder()
        >>> builder.feed("a: b, b\\nb:\\n")
        >>> builder.duplicates_dropped
        1
        >>> graph = builder.build()
        >>> graph.dependencies_of("a")
        ('b',)
    """

    __slots__ = ("_config", "_declarations", "_duplicates", "_graph")

    def __init__(self, config: CheckConfig | None = None) -> None:
        self._config = config if config is not None else CheckConfig()
        self._graph = Graph()
        self._declarations = 0
        self._duplicates = 0

    @property
    def declarations_seen(self) -> int:
        """Declarations merged since the last build()."""
        return self._declarations

    @property
    def duplicates_dropped(self) -> int:
        """Duplicate edges rejected since the last build()."""
        return self._duplicates

    def add_declaration(self, declaration: Declaration) -> None:
        """Merge one declaration into the graph under construction.

        Raises:
            ResourceError: If memory runs out while growing graph storage
        """
        graph = self._graph
        try:
            graph.resolve(declaration.name)
            for dependency in declaration.dependencies:
                if not graph.add_edge(declaration.name, dependency):
                    self._duplicates += 1
        except MemoryError as e:
            raise ResourceError(ErrorTemplate.resource_exhausted(graph.node_count)) from e
        self._declarations += 1

    def add_line(self, text: str, line_number: int = 1, offset: int = 0) -> None:
        """Parse and merge a single line; blank lines follow the config.

        Unlike feed(), this does not apply ``max_source_size``; callers
        feeding lines one at a time own any size limit.

        Args:
            text: Line text, with or without its terminator
            line_number: 1-based line number used in errors
            offset: Character offset of the line in the caller's source.
                Error spans are relative to the line when left at 0.
        """
        declaration = parse_line(
            text, line_number, offset, skip_blank=self._config.skip_blank_lines
        )
        if declaration is not None:
            self.add_declaration(declaration)

    def feed(self, source: str | Iterable[str]) -> None:
        """Parse ``source`` and merge every declaration.

        Errors raised by the source itself (for example UnicodeDecodeError
        from a text stream) propagate unchanged. On any error the graph
        under construction is discarded.

        Raises:
            ParseError: On the first malformed line
            ResourceError: On oversized input or allocation failure
        """
        try:
            for declaration in iter_declarations(source, self._config):
                self.add_declaration(declaration)
        except BaseException:
            # Any failure, including decode errors from the stream, leaves
            # nothing behind for a later build()
            self._reset()
            raise

    def build(self) -> Graph:
        """Return the finished graph and reset the builder."""
        graph = self._graph
        logger.debug(
            "Built graph: %d nodes, %d edges from %d declarations (%d duplicate edges dropped)",
            graph.node_count,
            graph.edge_count,
            self._declarations,
            self._duplicates,
        )
        self._reset()
        return graph

    def _reset(self) -> None:
        self._graph = Graph()
        self._declarations = 0
        self._duplicates = 0


def build_graph(
    source: str | Iterable[str],
    config: CheckConfig | None = None,
) -> Graph:
    """Build a Graph from a dependency source.

    Args:
        source: Whole source text, or an iterable of lines such as an
            open text file
        config: Parsing limits (default: CheckConfig())

    Returns:
        Fully built Graph

    Raises:
        ParseError: On the first malformed line; no graph is returned
        ResourceError: On oversized input or allocation failure

    Example:
        >>> graph = build_graph("a: b\\nc: d\\n")
        >>> list(graph)
        ['a', 'b', 'c', 'd']
    """
    builder = GraphBuilder(config)
    builder.feed(source)
    return builder.build()
