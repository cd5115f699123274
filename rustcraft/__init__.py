"""Small worked programs: puzzles, parsers, data structures and concurrency demos."""

__version__ = "0.1.0"