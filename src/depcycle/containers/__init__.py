"""General-purpose containers shipped with depcycle."""

from .linked_list import LinkedList

__all__ = ["LinkedList"]
