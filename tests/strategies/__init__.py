"""Hypothesis strategies for depcycle property-based testing.

Usage:
    from tests.strategies import dependency_graphs, dependency_sources
"""

from .graph import dependency_graphs, dependency_sources, node_names, render_source

__all__ = [
    "dependency_graphs",
    "dependency_sources",
    "node_names",
    "render_source",
]
