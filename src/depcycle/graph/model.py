"""Dependency graph data model.

A Graph owns an insertion-ordered node table and a name index. Each Node
stores its dependencies as integer indices into that table rather than
object references, so a dependency can be recorded before the node it
points to has been declared: the target is created as an empty
placeholder on first mention.

Invariant: every index in any node's dependency list is a valid index
into the owning graph's node table.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["Graph", "Node"]


class Node:
    """A named node with an ordered, duplicate-free dependency list.

    Attributes:
        name: Unique node name
    """

    __slots__ = ("_dependencies", "_dependency_set", "name")

    def __init__(self, name: str) -> None:
        self.name = name
        self._dependencies: list[int] = []
        # Mirrors _dependencies for O(1) duplicate rejection
        self._dependency_set: set[int] = set()

    @property
    def dependencies(self) -> tuple[int, ...]:
        """Dependency indices in the order they were first recorded."""
        return tuple(self._dependencies)

    def add_dependency(self, index: int) -> bool:
        """Record a dependency on the node at ``index``.

        Returns:
            False if the dependency was already recorded (nothing changes)
        """
        if index in self._dependency_set:
            return False
        self._dependencies.append(index)
        self._dependency_set.add(index)
        return True

    def has_dependency(self, index: int) -> bool:
        return index in self._dependency_set

    def __len__(self) -> int:
        return len(self._dependencies)

    def __repr__(self) -> str:
        return f"Node(name={self.name!r}, dependencies={self._dependencies!r})"


class Graph:
    """Directed dependency graph keyed by node name.

    Nodes are kept in order of first mention, which makes iteration order
    (and therefore detector traversal order) deterministic for a given
    source.

    Example:
        >>> graph = Graph()
        >>> graph.add_edge("app", "lib")
        True
        >>> graph.add_edge("app", "lib")
        False
        >>> list(graph)
        ['app', 'lib']
        >>> graph.dependencies_of("app")
        ('lib',)
    """

    __slots__ = ("_edge_count", "_index", "_nodes")

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._index: dict[str, int] = {}
        self._edge_count = 0

    # ------------------------------------------------------------------ #
    # Construction
    # ------------------------------------------------------------------ #

    def resolve(self, name: str) -> int:
        """Return the index of ``name``, creating an empty node if needed."""
        index = self._index.get(name)
        if index is None:
            index = len(self._nodes)
            self._nodes.append(Node(name))
            self._index[name] = index
        return index

    def add_edge(self, source: str, target: str) -> bool:
        """Record that ``source`` depends on ``target``.

        Both nodes are created if missing.

        Returns:
            False if the edge already existed
        """
        source_index = self.resolve(source)
        target_index = self.resolve(target)
        added = self._nodes[source_index].add_dependency(target_index)
        if added:
            self._edge_count += 1
        return added

    # ------------------------------------------------------------------ #
    # Lookup
    # ------------------------------------------------------------------ #

    def index_of(self, name: str) -> int:
        """Return the table index of ``name``.

        Raises:
            KeyError: If no node has that name
        """
        return self._index[name]

    def node(self, name: str) -> Node:
        return self._nodes[self._index[name]]

    def node_at(self, index: int) -> Node:
        return self._nodes[index]

    def dependencies_of(self, name: str) -> tuple[str, ...]:
        """Return dependency names of ``name`` in recorded order."""
        node = self.node(name)
        return tuple(self._nodes[i].name for i in node.dependencies)

    def names(self) -> tuple[str, ...]:
        return tuple(node.name for node in self._nodes)

    def to_adjacency(self) -> dict[str, tuple[str, ...]]:
        """Return a plain ``{name: (dependency, ...)}`` snapshot."""
        return {node.name: self.dependencies_of(node.name) for node in self._nodes}

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    # ------------------------------------------------------------------ #
    # Container protocol
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[str]:
        return (node.name for node in self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.to_adjacency() == other.to_adjacency()

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
