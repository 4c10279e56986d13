"""Data structures, sorting and search algorithms, and puzzle models and solvers."""

__version__ = "0.1.0"