# src/file_for_ai/core/scanner.py
import glob
import logging
import os
import re
import stat
import sys
from pathlib import Path
from typing import Iterator, Optional, Tuple

from file_for_ai.core.classifier import is_text_path
from file_for_ai.core.ignore import GitIgnoreMatcher, is_path_ignored
from file_for_ai.errors import PatternError, TraversalError
from file_for_ai.models import FileEntry
from file_for_ai.utils.tokenizer import Tokenizer

logger = logging.getLogger(__name__)

_NAVIGATION_PARTS = {"", ".", ".."}


def is_hidden_path(walked_path: str) -> bool:
    """
    True when any component of the path as walked starts with '.'.
    Plain '.' and '..' components are navigation, not hidden entries, so a
    root such as '../project' is still scanned even though the path string
    itself starts with a dot.
    """
    return any(
        part.startswith(".") and part not in _NAVIGATION_PARTS
        for part in re.split(r"[\\/]", walked_path)
    )


class _Scanner:
    """Shared filter and read steps for both traversal modes."""

    def __init__(self, tokenizer: Tokenizer, output_name: str,
                 process_non_text: bool = False,
                 ignore_matcher: Optional[GitIgnoreMatcher] = None):
        self.tokenizer = tokenizer
        self.output_name = output_name
        self.process_non_text = process_non_text
        self.ignore_matcher = ignore_matcher

    def _accept(self, walked_path: str, rel_path: str, is_directory: bool) -> bool:
        if os.path.basename(walked_path) == self.output_name:
            logger.debug("Skipping output file: %s", rel_path)
            return False
        if is_directory:
            return False
        if is_path_ignored(self.ignore_matcher, rel_path, is_directory=False):
            logger.debug("Skipping ignored file: %s", rel_path)
            return False
        if not is_text_path(walked_path, self.process_non_text):
            logger.debug("Skipping non-text file: %s", rel_path)
            return False
        if is_hidden_path(walked_path):
            logger.debug("Skipping hidden path: %s", walked_path)
            return False
        return True

    def _entry(self, walked_path: str, rel_path: str) -> FileEntry:
        """Reads the whole file; OSError propagates to the caller's error policy."""
        path = Path(walked_path)
        content = path.read_bytes()
        return FileEntry(
            path=path,
            rel_path=rel_path,
            content=content,
            token_count=self.tokenizer.count(content),
        )


class DirectoryScanner(_Scanner):
    """
    Recursive pre-order walk of a root directory in lexical order.

    Any walk or read error aborts the scan with TraversalError.
    """

    def __init__(self, root_dir: str, tokenizer: Tokenizer, output_name: str,
                 process_non_text: bool = False,
                 ignore_matcher: Optional[GitIgnoreMatcher] = None):
        super().__init__(tokenizer, output_name, process_non_text, ignore_matcher)
        self.root_dir = str(root_dir)

    def _walk(self, dir_path: str, rel_dir: str) -> Iterator[Tuple[str, str, bool]]:
        try:
            with os.scandir(dir_path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise TraversalError(f"Error accessing path: {dir_path}: {e}") from e

        for entry in entries:
            rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
            try:
                is_directory = entry.is_dir()
            except OSError as e:
                raise TraversalError(f"Error accessing path: {entry.path}: {e}") from e

            yield entry.path, rel_path, is_directory

            # Symlinked directories are listed but never descended into.
            if not is_directory or entry.is_symlink():
                continue
            if is_path_ignored(self.ignore_matcher, rel_path, is_directory=True):
                logger.debug("Pruning ignored directory: %s", rel_path)
                continue
            yield from self._walk(entry.path, rel_path)

    def scan(self) -> Iterator[FileEntry]:
        for walked_path, rel_path, is_directory in self._walk(self.root_dir, ""):
            if not self._accept(walked_path, rel_path, is_directory):
                continue
            try:
                yield self._entry(walked_path, rel_path)
            except OSError as e:
                raise TraversalError(f"Error reading file: {walked_path}: {e}") from e


class PatternScanner(_Scanner):
    """
    Expands a glob expression ('**' recurses) and processes each match.

    Relative paths are taken against each match's own parent directory.
    Files that cannot be stat'ed or read are reported and skipped.
    """

    def __init__(self, pattern: str, tokenizer: Tokenizer, output_name: str,
                 process_non_text: bool = False):
        super().__init__(tokenizer, output_name, process_non_text, ignore_matcher=None)
        self.pattern = pattern

    def expand(self) -> list[str]:
        if "\x00" in self.pattern:
            raise PatternError(f"Error parsing glob pattern {self.pattern!r}: embedded null byte")
        try:
            return sorted(glob.glob(self.pattern, recursive=True))
        except (OSError, ValueError, re.error) as e:
            raise PatternError(f"Error parsing glob pattern '{self.pattern}': {e}") from e

    def scan(self) -> Iterator[FileEntry]:
        for walked_path in self.expand():
            try:
                st = os.stat(walked_path)
            except OSError as e:
                print(f"  > [Warning] Error accessing file: {walked_path} ({e})", file=sys.stderr)
                continue

            try:
                rel_path = os.path.relpath(walked_path, os.path.dirname(walked_path) or os.curdir)
            except ValueError as e:
                print(f"  > [Warning] Error processing relative path: {walked_path} ({e})", file=sys.stderr)
                continue

            if not self._accept(walked_path, rel_path, stat.S_ISDIR(st.st_mode)):
                continue
            try:
                yield self._entry(walked_path, rel_path)
            except OSError as e:
                print(f"  > [Warning] Skipping {walked_path} (read error: {e})", file=sys.stderr)
