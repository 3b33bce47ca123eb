"""Dependency graph model and construction.

Exports:
    Graph: Name-keyed directed graph with index-based edges
    Node: Graph node with a duplicate-free dependency list
    GraphBuilder: Incremental graph construction from declarations
    build_graph: Build a Graph from a source in one call
"""

from .builder import GraphBuilder, build_graph
from .model import Graph, Node

__all__ = ["Graph", "GraphBuilder", "Node", "build_graph"]
