"""Classic data structures, graph algorithms and small problem solvers in plain Python."""

__version__ = "0.1.0"