"""Daily puzzle solvers sharing a generic A* search engine."""

__version__ = "0.1.0"
