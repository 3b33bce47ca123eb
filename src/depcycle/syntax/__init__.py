"""Dependency file syntax.

Exports:
    Declaration: One parsed ``name: dep, dep`` line
    parse_line: Parse a single line
    iter_declarations: Parse a whole source lazily
"""

from .parser import Declaration, iter_declarations, parse_line

__all__ = ["Declaration", "iter_declarations", "parse_line"]
