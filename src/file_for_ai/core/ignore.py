# src/file_for_ai/core/ignore.py
import logging
from pathlib import Path
from typing import Dict, List, Optional

import pathspec

from file_for_ai.config import GIT_EXCLUDE_FILE, GITIGNORE_FILENAME
from file_for_ai.errors import IgnoreRulesError

logger = logging.getLogger(__name__)


def _read_lines(path: Path) -> List[str]:
    if not path.is_file():
        return []
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read().splitlines()
    except OSError as e:
        raise IgnoreRulesError(f"Error reading ignore file {path}: {e}") from e


def _compile(lines: List[str], source: Path) -> Optional[pathspec.PathSpec]:
    if not lines:
        return None
    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except ValueError as e:
        raise IgnoreRulesError(f"Error parsing ignore rules in {source}: {e}") from e


def _last_match(spec: pathspec.PathSpec, rel_path: str) -> Optional[bool]:
    """
    Evaluates every pattern in order; the last one matching decides.
    True means ignored, False means re-included by a '!' rule, None means no rule applied.
    """
    verdict = None
    for pattern in spec.patterns:
        if pattern.include is None:
            continue
        if pattern.match_file(rel_path) is not None:
            verdict = pattern.include
    return verdict


class GitIgnoreMatcher:
    """
    Answers .gitignore queries for paths relative to a repository root.

    Rules come from the root .gitignore (preceded by .git/info/exclude) and from
    nested .gitignore files, each applied relative to the directory holding it.
    Deeper files override shallower ones, and anything below an ignored
    directory is ignored too.
    """

    def __init__(self, root_dir: Path):
        self.root_dir = Path(root_dir)
        self._specs: Dict[str, Optional[pathspec.PathSpec]] = {}
        self._dir_verdicts: Dict[str, bool] = {}
        # Root rules load eagerly so a broken ignore file fails at construction.
        self._spec_for("")

    def _spec_for(self, rel_dir: str) -> Optional[pathspec.PathSpec]:
        if rel_dir not in self._specs:
            directory = self.root_dir / rel_dir if rel_dir else self.root_dir
            gitignore = directory / GITIGNORE_FILENAME
            lines = []
            if not rel_dir:
                lines.extend(_read_lines(self.root_dir / GIT_EXCLUDE_FILE))
            lines.extend(_read_lines(gitignore))
            self._specs[rel_dir] = _compile(lines, gitignore)
            if self._specs[rel_dir] is not None:
                logger.debug("Loaded ignore rules for '%s'", rel_dir or ".")
        return self._specs[rel_dir]

    def _matches(self, parts: List[str], is_directory: bool) -> bool:
        ignored = None
        for depth in range(len(parts)):
            spec = self._spec_for("/".join(parts[:depth]))
            if spec is None:
                continue
            sub_path = "/".join(parts[depth:]) + ("/" if is_directory else "")
            verdict = _last_match(spec, sub_path)
            if verdict is not None:
                ignored = verdict
        return bool(ignored)

    def _is_dir_ignored(self, rel_dir: str) -> bool:
        if rel_dir not in self._dir_verdicts:
            parts = rel_dir.split("/")
            parent = "/".join(parts[:-1])
            self._dir_verdicts[rel_dir] = (
                (bool(parent) and self._is_dir_ignored(parent))
                or self._matches(parts, is_directory=True)
            )
        return self._dir_verdicts[rel_dir]

    def is_ignored(self, rel_path: str, is_directory: bool = False) -> bool:
        rel_path = rel_path.replace("\\", "/").strip("/")
        if not rel_path or rel_path == ".":
            return False
        if is_directory:
            return self._is_dir_ignored(rel_path)

        parts = rel_path.split("/")
        parent = "/".join(parts[:-1])
        if parent and self._is_dir_ignored(parent):
            return True
        return self._matches(parts, is_directory=False)


def build_ignore_matcher(root_dir: Path, ignore_gitignore: bool = False) -> Optional[GitIgnoreMatcher]:
    """Returns None when ignore filtering is switched off."""
    if ignore_gitignore:
        return None
    return GitIgnoreMatcher(root_dir)


def is_path_ignored(matcher: Optional[GitIgnoreMatcher], rel_path: str, is_directory: bool = False) -> bool:
    if matcher is None:
        return False
    return matcher.is_ignored(rel_path, is_directory)
