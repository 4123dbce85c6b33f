"""Algorithms for classic combinatorics, string, sequence, union-find, graph, grid and tree problems."""

__version__ = "0.1.0"