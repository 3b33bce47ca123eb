"""Fuzz property-based tests for analysis.cycles: large generated graphs."""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from depcycle import check_source
from depcycle.analysis import CycleDetector, has_cycle
from depcycle.graph import build_graph
from tests.helpers.graph_checks import is_acyclic
from tests.strategies import dependency_sources

pytestmark = pytest.mark.fuzz


class TestLargeGraphProperties:
    """Oracle agreement on larger graphs than the unit suite uses."""

    @given(case=dependency_sources(max_nodes=40))
    @settings(max_examples=2000, deadline=None)
    def test_matches_oracle(self, case: tuple[dict[str, list[str]], str]) -> None:
        """Property: Verdict agrees with Kahn's algorithm."""
        adjacency, source = case
        expected = not is_acyclic(adjacency)
        event(f"nodes={len(adjacency) // 10 * 10}+")
        assert has_cycle(build_graph(source)) is expected

    @given(st.integers(min_value=1, max_value=500), st.integers(min_value=0, max_value=499))
    @settings(max_examples=200, deadline=None)
    def test_ring_with_entry_point(self, ring_length: int, entry: int) -> None:
        """Property: A ring entered from a long tail is always found."""
        entry = min(entry, ring_length - 1)
        lines = [f"tail{i}: tail{i + 1}\n" for i in range(100)]
        lines.append(f"tail100: r{entry}\n")
        lines.extend(f"r{i}: r{(i + 1) % ring_length}\n" for i in range(ring_length))

        detector = CycleDetector(build_graph("".join(lines)))

        event(f"ring_len={'short' if ring_length < 10 else 'long'}")
        assert detector.run() is True
        assert detector.nodes_expanded <= detector.graph.node_count

    @given(st.integers(min_value=1, max_value=2000))
    @settings(max_examples=100, deadline=None)
    def test_chain_never_cyclic(self, length: int) -> None:
        """Property: A simple chain of any length has no cycle."""
        source = "".join(f"n{i}: n{i + 1}\n" for i in range(length))
        result = check_source(source)
        assert not result.has_cycle
        assert result.node_count == length + 1
        assert result.edge_count == length
