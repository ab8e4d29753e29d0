# src/file_for_ai/__init__.py
"""Merge a directory tree or glob match into one AI-friendly text file."""

__version__ = "0.3.0"
