"""Dependency source checking.

Runs the full pipeline on a source: parse, build the graph, detect
cycles. Useful for CI pipelines and tooling that only need the verdict.

Architecture:
    - check_source(): Build + detect on text or a line iterable
    - check_file(): Open a path with the configured encoding, then check_source()

Python 3.13+.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike

from depcycle.analysis import CycleDetector
from depcycle.config import CheckConfig
from depcycle.constants import CYCLE_FOUND_MESSAGE, NO_CYCLE_MESSAGE
from depcycle.diagnostics import ErrorTemplate, InputError
from depcycle.graph import build_graph

__all__ = ["CheckResult", "check_file", "check_source"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of checking one dependency source.

    Attributes:
        has_cycle: True if the declared dependencies contain a cycle
        node_count: Distinct names in the graph (declared or referenced)
        edge_count: Distinct dependency edges after deduplication
    """

    has_cycle: bool
    node_count: int
    edge_count: int

    @property
    def message(self) -> str:
        """One-line verdict for display."""
        return CYCLE_FOUND_MESSAGE if self.has_cycle else NO_CYCLE_MESSAGE


def check_source(
    source: str | Iterable[str],
    config: CheckConfig | None = None,
) -> CheckResult:
    """Check a dependency source for cycles.

    Args:
        source: Whole source text, or an iterable of lines such as an
            open text file
        config: Parsing limits (default: CheckConfig())

    Returns:
        CheckResult with the verdict and graph size

    Raises:
        ParseError: On the first malformed line
        ResourceError: On oversized input or allocation failure

    Example:
        >>> check_source("a: b\\nb: c\\nc: a\\n").message
        'Cyclic dependency'
        >>> check_source("a: b, c\\nb:\\nc:\\n").has_cycle
        False
    """
    graph = build_graph(source, config)
    found = CycleDetector(graph).run()
    result = CheckResult(
        has_cycle=found,
        node_count=graph.node_count,
        edge_count=graph.edge_count,
    )
    logger.debug("Checked source: %s", result)
    return result


def check_file(
    path: str | PathLike[str],
    config: CheckConfig | None = None,
) -> CheckResult:
    """Check the dependency file at ``path``.

    The file is read without newline translation, so span offsets in
    errors index into the file text exactly as stored.

    Raises:
        InputError: If the file cannot be opened or decoded
        ParseError: On the first malformed line
        ResourceError: On oversized input or allocation failure
    """
    if config is None:
        config = CheckConfig()

    filename = str(path)
    try:
        with open(path, encoding=config.encoding, newline="") as stream:
            return check_source(stream, config)
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(
            ErrorTemplate.file_unreadable(filename, str(e)), filename=filename
        ) from e
