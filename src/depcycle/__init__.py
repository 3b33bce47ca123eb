"""depcycle - cyclic dependency detection for declaration files.

Parses line-oriented dependency declarations (``name: dep, dep, ...``)
into a directed graph and reports whether the graph contains a cycle.

Public API:
    build_graph - Parse a source into a Graph
    has_cycle - Cycle check on a built Graph
    check_source - Build + check in one call, returns CheckResult
    check_file - check_source() on a file path
    Graph - Name-keyed dependency graph
    CycleDetector - Re-runnable three-state DFS detector
    CheckConfig - Parsing limits and file encoding
    LinkedList - Generic singly linked list of strings

Exceptions:
    DepcycleError - Base exception class
    ParseError - Malformed declaration line
    ResourceError - Oversized input or allocation failure
    InputError - Invalid invocation or unreadable file

Submodules:
    depcycle.syntax - Line parser
    depcycle.graph - Graph model and builder
    depcycle.analysis - Cycle detection
    depcycle.diagnostics - Error codes, templates and formatting
    depcycle.report - Locale-aware summary lines
    depcycle.cli - Command-line interface
"""

from .analysis import CycleDetector, has_cycle
from .check import CheckResult, check_file, check_source
from .config import CheckConfig
from .containers import LinkedList
from .diagnostics import DepcycleError, InputError, ParseError, ResourceError
from .graph import Graph, build_graph

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("depcycle")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CheckConfig",
    "CheckResult",
    "CycleDetector",
    "DepcycleError",
    "Graph",
    "InputError",
    "LinkedList",
    "ParseError",
    "ResourceError",
    "__version__",
    "build_graph",
    "check_file",
    "check_source",
    "has_cycle",
]
