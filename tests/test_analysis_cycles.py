"""Tests for cycle detection.

Covers the three-state DFS detector: verdicts on small hand-written
graphs, traversal counters, re-running, deep chains beyond the recursion
limit, and property tests against a topological-sort oracle.
"""

from __future__ import annotations

import logging
import sys

import pytest
from hypothesis import event, given

from depcycle.analysis import CycleDetector, VisitState, has_cycle
from depcycle.graph import Graph, build_graph
from tests.helpers.graph_checks import is_acyclic
from tests.strategies import dependency_sources

# ============================================================================
# UNIT TESTS - verdicts
# ============================================================================


class TestHasCycleBasic:
    """Verdicts on small graphs."""

    def test_three_node_ring(self) -> None:
        assert has_cycle(build_graph("A: B\nB: C\nC: A\n"))

    def test_simple_tree(self) -> None:
        assert not has_cycle(build_graph("A: B, C\nB:\nC:\n"))

    def test_self_loop(self) -> None:
        assert has_cycle(build_graph("A: A\n"))

    def test_disjoint_chains(self) -> None:
        assert not has_cycle(build_graph("A: B\nC: D\n"))

    def test_empty_graph(self) -> None:
        assert not has_cycle(Graph())

    def test_nodes_without_edges(self) -> None:
        assert not has_cycle(build_graph("a:\nb:\nc:\n"))

    def test_two_node_cycle(self) -> None:
        assert has_cycle(build_graph("a: b\nb: a\n"))

    def test_diamond_is_acyclic(self) -> None:
        """Two paths to the same node are not a cycle."""
        assert not has_cycle(build_graph("a: b, c\nb: d\nc: d\n"))

    def test_cycle_in_second_component(self) -> None:
        """Roots are tried until a component with a cycle is found."""
        assert has_cycle(build_graph("a: b\nb:\nx: y\ny: z\nz: x\n"))

    def test_cycle_reached_through_done_nodes(self) -> None:
        """A cycle not reachable from the first root is still found."""
        assert has_cycle(build_graph("a: b\nc: d\nd: c, b\n"))

    def test_self_loop_on_placeholder_declared_later(self) -> None:
        assert has_cycle(build_graph("a: b\nb: b\n"))

    def test_cycle_via_repeated_declarations(self) -> None:
        """Edges from separate declarations of one name combine into a cycle."""
        assert has_cycle(build_graph("a: b\nb: c\na: x\nc: a\n"))


# ============================================================================
# UNIT TESTS - CycleDetector
# ============================================================================


class TestCycleDetector:
    """Detector state, counters and re-running."""

    def test_graph_property(self) -> None:
        graph = build_graph("a: b\n")
        assert CycleDetector(graph).graph is graph

    def test_counters_on_tree(self) -> None:
        detector = CycleDetector(build_graph("A: B, C\nB:\nC:\n"))
        assert detector.run() is False
        assert detector.nodes_expanded == 3
        assert detector.edges_examined == 2

    def test_done_nodes_not_expanded_twice(self) -> None:
        """A shared dependency is expanded once across all roots."""
        detector = CycleDetector(build_graph("a: b, c\nb: d\nc: d\n"))
        assert detector.run() is False
        assert detector.nodes_expanded == 4
        assert detector.edges_examined == 4

    def test_short_circuit(self) -> None:
        """The run stops at the first back-edge."""
        detector = CycleDetector(build_graph("a: a\nb: c\nc: d\n"))
        assert detector.run() is True
        assert detector.nodes_expanded == 1
        assert detector.edges_examined == 1

    def test_counters_before_run(self) -> None:
        detector = CycleDetector(Graph())
        assert detector.nodes_expanded == 0
        assert detector.edges_examined == 0

    def test_run_is_repeatable(self) -> None:
        """Running twice gives the same verdict and leaves the graph untouched."""
        graph = build_graph("a: b\nb: c\nc: a\nd: a\n")
        before = graph.to_adjacency()
        detector = CycleDetector(graph)

        first = detector.run()
        expanded = detector.nodes_expanded
        second = detector.run()

        assert first is second is True
        assert detector.nodes_expanded == expanded
        assert graph.to_adjacency() == before

    def test_detectors_share_graph(self) -> None:
        graph = build_graph("a: b\nb:\n")
        assert CycleDetector(graph).run() == CycleDetector(graph).run() is False

    def test_logs_result(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="depcycle.analysis.cycles"):
            CycleDetector(build_graph("a: a\n")).run()
        assert "Cycle search on 1 nodes: cycle=True" in caplog.text

    def test_visit_states_are_distinct(self) -> None:
        assert len({VisitState.UNVISITED, VisitState.ON_PATH, VisitState.DONE}) == 3


class TestDeepGraphs:
    """Chains longer than the interpreter recursion limit."""

    @staticmethod
    def _chain(length: int) -> Graph:
        graph = Graph()
        for i in range(length - 1):
            graph.add_edge(f"n{i}", f"n{i + 1}")
        return graph

    def test_long_chain_is_acyclic(self) -> None:
        length = sys.getrecursionlimit() * 5
        graph = self._chain(length)
        detector = CycleDetector(graph)
        assert detector.run() is False
        assert detector.nodes_expanded == length

    def test_long_ring_has_cycle(self) -> None:
        length = sys.getrecursionlimit() * 5
        graph = self._chain(length)
        graph.add_edge(f"n{length - 1}", "n0")
        assert has_cycle(graph)

    def test_long_chain_declared_backwards(self) -> None:
        """Each new root finds its only dependency already DONE."""
        length = 5000
        source = "".join(f"n{i}: n{i + 1}\n" for i in reversed(range(length)))
        detector = CycleDetector(build_graph(source))
        assert detector.run() is False
        assert detector.nodes_expanded == length + 1


# ============================================================================
# PROPERTY TESTS
# ============================================================================


class TestHasCycleProperties:
    """Property-based tests against a topological-sort oracle."""

    @given(case=dependency_sources())
    def test_matches_topological_sort(self, case: tuple[dict[str, list[str]], str]) -> None:
        """PROPERTY: A cycle is reported iff no topological order exists."""
        adjacency, source = case
        expected = not is_acyclic(adjacency)
        event(f"outcome={'cyclic' if expected else 'acyclic'}")
        assert has_cycle(build_graph(source)) is expected

    @given(case=dependency_sources(allow_cycles=True))
    def test_forced_cycles_found(self, case: tuple[dict[str, list[str]], str]) -> None:
        """PROPERTY: Graphs generated with a cycle are always reported."""
        _, source = case
        assert has_cycle(build_graph(source))

    @given(case=dependency_sources(allow_cycles=False))
    def test_acyclic_graphs_pass(self, case: tuple[dict[str, list[str]], str]) -> None:
        """PROPERTY: Acyclic graphs are never reported."""
        _, source = case
        assert not has_cycle(build_graph(source))

    @given(case=dependency_sources())
    def test_work_is_linear(self, case: tuple[dict[str, list[str]], str]) -> None:
        """PROPERTY: Each node is expanded and each edge examined at most once."""
        _, source = case
        graph = build_graph(source)
        detector = CycleDetector(graph)
        found = detector.run()

        assert detector.nodes_expanded <= graph.node_count
        assert detector.edges_examined <= graph.edge_count
        if not found:
            assert detector.nodes_expanded == graph.node_count
            assert detector.edges_examined == graph.edge_count

