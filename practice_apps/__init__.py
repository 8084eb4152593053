"""Console grade recorder, palindrome check, character frequency, library manager, and a task HTTP API."""

__version__ = "0.1.0"