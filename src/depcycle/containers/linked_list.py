"""Singly linked list of strings.

A small generic container with value semantics: each list owns its
nodes, copy() clones them, and new values are always inserted at the
front. It carries no dependency-graph logic.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

__all__ = ["LinkedList"]

_EMPTY_OUTPUT = "Empty!"


class _Link:
    __slots__ = ("next", "value")

    def __init__(self, value: str, next: _Link | None) -> None:  # noqa: A002
        self.value = value
        self.next = next


class LinkedList:
    """Singly linked list of strings with front insertion.

    Example:
        >>> items = LinkedList(["b", "a"])
        >>> items.insert_first("a")
        >>> items.format_debug()
        "'a'->'a'->'b'->|| size:3 "
        >>> items.remove_all("a")
        2
        >>> len(items)
        1
    """

    __slots__ = ("_head", "_size")

    def __init__(self, values: Iterable[str] = ()) -> None:
        """Create a list, inserting ``values`` at the front one by one.

        The last value given ends up first, exactly as repeated
        insert_first() calls would leave it.
        """
        self._head: _Link | None = None
        self._size = 0
        for value in values:
            self.insert_first(value)

    def insert_first(self, value: str) -> None:
        """Insert ``value`` at the front.

        Raises:
            TypeError: If ``value`` is not a str
        """
        if not isinstance(value, str):
            msg = f"LinkedList holds str values, got {type(value).__name__}"
            raise TypeError(msg)
        self._head = _Link(value, self._head)
        self._size += 1

    def remove_all(self, value: str) -> int:
        """Remove every occurrence of ``value``.

        Returns:
            Number of elements removed
        """
        removed = 0
        while self._head is not None and self._head.value == value:
            self._head = self._head.next
            removed += 1

        current = self._head
        while current is not None and current.next is not None:
            if current.next.value == value:
                current.next = current.next.next
                removed += 1
            else:
                current = current.next

        self._size -= removed
        return removed

    def count(self, value: str) -> int:
        """Return the number of occurrences of ``value``."""
        return sum(1 for item in self if item == value)

    def copy(self) -> LinkedList:
        """Return an independent list with the same values in the same order."""
        clone = LinkedList()
        tail: _Link | None = None
        for value in self:
            link = _Link(value, None)
            if tail is None:
                clone._head = link
            else:
                tail.next = link
            tail = link
        clone._size = self._size
        return clone

    def clear(self) -> None:
        """Release every node."""
        self._head = None
        self._size = 0

    def format_debug(self) -> str:
        """Render the list as ``'a'->'b'->|| size:2 `` or ``Empty!``."""
        if self._head is None:
            return _EMPTY_OUTPUT
        chain = "".join(f"'{value}'->" for value in self)
        return f"{chain}|| size:{self._size} "

    def print_debug(self, file: TextIO | None = None) -> None:
        """Write format_debug() to ``file`` (default: stdout)."""
        print(self.format_debug(), file=file if file is not None else sys.stdout)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._size == other._size and list(self) == list(other)

    def __repr__(self) -> str:
        return f"<LinkedList size={self._size} {list(self)!r}>"
