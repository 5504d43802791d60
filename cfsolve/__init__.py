"""Solvers for six short algorithmic puzzles, as functions and commands."""

__version__ = "0.1.0"