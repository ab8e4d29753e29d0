# src/file_for_ai/core/writer.py
import os
from pathlib import Path
from typing import BinaryIO

from file_for_ai.config import SEPARATOR_TEMPLATE
from file_for_ai.errors import OutputError
from file_for_ai.models import FileEntry


def open_output(output_file: Path) -> BinaryIO:
    """Creates or truncates the output file."""
    try:
        return open(output_file, "wb")
    except OSError as e:
        raise OutputError(f"Error creating output file: {e}") from e


def format_separator(rel_path: str) -> bytes:
    # fsencode gives back the on-disk bytes of names that are not valid UTF-8
    return os.fsencode(SEPARATOR_TEMPLATE.format(rel_path=rel_path))


class ContextWriter:
    """
    Appends accepted files to the output stream in the order they arrive,
    each behind a '>>>>>> path <<<<<<' separator, and keeps the running totals.
    """

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.file_count = 0
        self.total_tokens = 0

    def write(self, entry: FileEntry) -> None:
        self.total_tokens += entry.token_count
        try:
            self.stream.write(format_separator(entry.rel_path))
        except OSError as e:
            raise OutputError(f"Error writing separator to output file: {e}") from e
        try:
            self.stream.write(entry.content)
        except OSError as e:
            raise OutputError(f"Error writing file contents to output file: {e}") from e
        self.file_count += 1
