"""Cycle detection for dependency graphs.

Answers one question: does the graph contain a directed cycle (self-loops
included)? The cycle itself is not reported.

Python 3.13+.
"""

import logging
from collections.abc import Iterator
from enum import Enum, auto

from depcycle.graph import Graph

__all__ = ["CycleDetector", "VisitState", "has_cycle"]

logger = logging.getLogger(__name__)


class VisitState(Enum):
    """DFS visitation state of a node during one detector run.

    States only move forward: UNVISITED -> ON_PATH -> DONE.
    """

    UNVISITED = auto()  # Not reached yet
    ON_PATH = auto()  # On the active DFS stack for the current root
    DONE = auto()  # Every dependency explored, no cycle reachable through it


class CycleDetector:
    """Three-state iterative DFS over a Graph.

    Every node is tried as a root, since the graph need not be connected.
    A node that reached DONE is never expanded again from another root,
    so one run does O(V + E) work. Reaching an ON_PATH node is a
    back-edge and ends the whole run immediately.

    Uses an explicit stack of ``(node_index, dependency_iterator)`` frames
    instead of recursion, so chains longer than the interpreter recursion
    limit are handled.

    The graph is only read. Visitation state lives in a list indexed by
    node index and is rebuilt by every run(), so one detector can be run
    repeatedly and several detectors can share a graph.

    Example:
        >>> from depcycle.graph import build_graph
        >>> detector = CycleDetector(build_graph("a: b\\nb: c\\nc: a\\n"))
        >>> detector.run()
        True
        >>> CycleDetector(build_graph("a: b, c\\nb:\\nc:\\n")).run()
        False

    Complexity:
        Time: O(V + E) per run
        Space: O(V) for state and stack
    """

    __slots__ = ("_edges_examined", "_graph", "_nodes_expanded")

    def __init__(self, graph: Graph) -> None:
        self._graph = graph
        self._nodes_expanded = 0
        self._edges_examined = 0

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def nodes_expanded(self) -> int:
        """Nodes moved to ON_PATH during the last run()."""
        return self._nodes_expanded

    @property
    def edges_examined(self) -> int:
        """Dependency edges inspected during the last run()."""
        return self._edges_examined

    def run(self) -> bool:
        """Search the whole graph for a directed cycle.

        Returns:
            True on the first back-edge found, False if the graph is acyclic
        """
        graph = self._graph
        state = [VisitState.UNVISITED] * graph.node_count
        expanded = 0
        examined = 0
        found = False

        for root in range(graph.node_count):
            if state[root] is not VisitState.UNVISITED:
                continue

            state[root] = VisitState.ON_PATH
            expanded += 1
            stack: list[tuple[int, Iterator[int]]] = [
                (root, iter(graph.node_at(root).dependencies))
            ]

            while stack and not found:
                index, dependencies = stack[-1]
                for dependency in dependencies:
                    examined += 1
                    dependency_state = state[dependency]
                    if dependency_state is VisitState.ON_PATH:
                        found = True
                        break
                    if dependency_state is VisitState.UNVISITED:
                        state[dependency] = VisitState.ON_PATH
                        expanded += 1
                        stack.append(
                            (dependency, iter(graph.node_at(dependency).dependencies))
                        )
                        break
                    # DONE: already proven cycle-free below it
                else:
                    state[index] = VisitState.DONE
                    stack.pop()

            if found:
                break

        self._nodes_expanded = expanded
        self._edges_examined = examined
        logger.debug(
            "Cycle search on %d nodes: cycle=%s (%d nodes expanded, %d edges examined)",
            graph.node_count,
            found,
            expanded,
            examined,
        )
        return found


def has_cycle(graph: Graph) -> bool:
    """Return True if ``graph`` contains a directed cycle.

    Example:
        >>> from depcycle.graph import build_graph
        >>> has_cycle(build_graph("a: a\\n"))
        True
        >>> has_cycle(build_graph("a: b\\nc: d\\n"))
        False
    """
    return CycleDetector(graph).run()
