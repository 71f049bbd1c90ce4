"""Solvers for a collection of Advent of Code puzzles, one module per puzzle."""

__version__ = "0.1.0"