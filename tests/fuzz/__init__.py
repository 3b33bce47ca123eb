"""Fuzz testing for depcycle.

This package contains:
- test_analysis_cycles_property: Large generated graphs checked against
  the topological-sort oracle

Python 3.13+.
"""
