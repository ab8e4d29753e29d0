# src/file_for_ai/utils/formatting.py
import os


def format_int(n: int) -> str:
    """12345678 -> '12,345,678'"""
    return f"{n:,}"


def display_path(path: str) -> str:
    """Printable form of a path whose on-disk name may not be valid UTF-8."""
    return os.fsencode(path).decode("utf-8", "replace")
