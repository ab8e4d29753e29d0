# src/file_for_ai/models.py
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Settings:
    """Resolved run options."""
    model: str
    output_file: Path
    ignore_gitignore: bool = False
    process_non_text: bool = False


@dataclass(frozen=True)
class FileEntry:
    """Immutable data class holding an accepted file."""
    path: Path
    rel_path: str
    content: bytes
    token_count: int
