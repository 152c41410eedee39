"""Command-line task list persisted to a pipe-delimited text file."""

__version__ = "0.1.0"
