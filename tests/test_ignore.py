# tests/test_ignore.py
import pathspec
import pytest

from file_for_ai.core.ignore import GitIgnoreMatcher, build_ignore_matcher, is_path_ignored
from file_for_ai.errors import IgnoreRulesError


@pytest.fixture
def repo(tmp_path):
    (tmp_path / ".gitignore").write_text(
        "# comment\n"
        "*.log\n"
        "!important.log\n"
        "/build\n"
        "logs/\n",
        encoding="utf-8",
    )
    return tmp_path


def test_simple_patterns(repo):
    matcher = GitIgnoreMatcher(repo)
    assert matcher.is_ignored("app.log") is True
    assert matcher.is_ignored("src/app.log") is True
    assert matcher.is_ignored("src/main.py") is False
    assert matcher.is_ignored("README.md") is False


def test_negation_last_match_wins(repo):
    matcher = GitIgnoreMatcher(repo)
    assert matcher.is_ignored("important.log") is False
    assert matcher.is_ignored("nested/important.log") is False


def test_anchored_directory(repo):
    matcher = GitIgnoreMatcher(repo)
    assert matcher.is_ignored("build", is_directory=True) is True
    assert matcher.is_ignored("build/app.js") is True
    assert matcher.is_ignored("src/build", is_directory=True) is False
    assert matcher.is_ignored("src/build/app.js") is False


def test_directory_only_pattern(repo):
    matcher = GitIgnoreMatcher(repo)
    assert matcher.is_ignored("logs", is_directory=True) is True
    assert matcher.is_ignored("logs/today.txt") is True
    assert matcher.is_ignored("deep/logs/today.txt") is True


def test_files_below_ignored_directory_cannot_be_reincluded(tmp_path):
    (tmp_path / ".gitignore").write_text("logs/\n!logs/keep.txt\n", encoding="utf-8")
    matcher = GitIgnoreMatcher(tmp_path)
    assert matcher.is_ignored("logs/keep.txt") is True


def test_nested_gitignore_is_relative_to_its_directory(repo):
    src = repo / "src"
    src.mkdir()
    (src / ".gitignore").write_text("generated.py\n", encoding="utf-8")

    matcher = GitIgnoreMatcher(repo)
    assert matcher.is_ignored("src/generated.py") is True
    assert matcher.is_ignored("generated.py") is False


def test_nested_gitignore_overrides_parent(tmp_path):
    (tmp_path / ".gitignore").write_text("*.txt\n", encoding="utf-8")
    docs = tmp_path / "docs"
    docs.mkdir()
    (docs / ".gitignore").write_text("!keep.txt\n", encoding="utf-8")

    matcher = GitIgnoreMatcher(tmp_path)
    assert matcher.is_ignored("docs/keep.txt") is False
    assert matcher.is_ignored("docs/other.txt") is True
    assert matcher.is_ignored("keep.txt") is True


def test_git_info_exclude_is_honored(tmp_path):
    info = tmp_path / ".git" / "info"
    info.mkdir(parents=True)
    (info / "exclude").write_text("local-only.md\n", encoding="utf-8")

    matcher = GitIgnoreMatcher(tmp_path)
    assert matcher.is_ignored("local-only.md") is True
    assert matcher.is_ignored("README.md") is False


def test_no_ignore_file_ignores_nothing(tmp_path):
    matcher = GitIgnoreMatcher(tmp_path)
    assert matcher.is_ignored("anything.log") is False
    assert matcher.is_ignored("node_modules", is_directory=True) is False


def test_root_path_is_never_ignored(repo):
    matcher = GitIgnoreMatcher(repo)
    assert matcher.is_ignored("") is False
    assert matcher.is_ignored(".", is_directory=True) is False


def test_directory_named_gitignore_is_skipped(tmp_path):
    (tmp_path / ".gitignore").mkdir()
    matcher = GitIgnoreMatcher(tmp_path)
    assert matcher.is_ignored("a.txt") is False


def test_unparsable_rules_raise(tmp_path, monkeypatch):
    (tmp_path / ".gitignore").write_text("*.log\n", encoding="utf-8")

    def broken(*args, **kwargs):
        raise ValueError("bad pattern")

    monkeypatch.setattr(pathspec.PathSpec, "from_lines", broken)
    with pytest.raises(IgnoreRulesError, match="bad pattern"):
        GitIgnoreMatcher(tmp_path)


def test_build_ignore_matcher_disabled(repo):
    assert build_ignore_matcher(repo, ignore_gitignore=True) is None
    assert isinstance(build_ignore_matcher(repo), GitIgnoreMatcher)


def test_is_path_ignored_tolerates_missing_matcher():
    assert is_path_ignored(None, "app.log") is False
    assert is_path_ignored(None, "build", is_directory=True) is False
