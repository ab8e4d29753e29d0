# src/file_for_ai/core/classifier.py
from typing import Union
from pathlib import PurePath

from file_for_ai.config import NON_TEXT_EXTENSIONS


def path_extension(path: Union[str, PurePath]) -> str:
    """
    Returns the lower-cased extension of the final path segment, dot included.
    Dotfiles count as all-extension ('.bashrc' -> '.bashrc'), no dot gives ''.
    """
    name = str(path).replace("\\", "/").rsplit("/", 1)[-1]
    idx = name.rfind(".")
    return name[idx:].lower() if idx != -1 else ""


def is_text_path(path: Union[str, PurePath], process_non_text: bool = False) -> bool:
    if process_non_text:
        return True
    return path_extension(path) not in NON_TEXT_EXTENSIONS
