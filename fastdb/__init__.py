"""FastDB: a flag-oriented command-line front-end for SQLite."""

__version__ = "0.1.0"
