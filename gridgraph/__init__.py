"""Grids, matrices, assignment, topological sorting, connected components and spanning trees."""

__version__ = "0.1.0"