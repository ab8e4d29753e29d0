# tests/conftest.py
import pytest

from file_for_ai.config import ENV_IGNORE_GITIGNORE, ENV_MODEL, ENV_OUTPUT_FILE, ENV_PROCESS_NON_TEXT


class FakeTokenizer:
    """Counts whitespace-separated words, so expected totals are easy to compute."""
    model = "fake-model"

    def count(self, content: bytes) -> int:
        return len(content.split())


@pytest.fixture
def fake_tokenizer():
    return FakeTokenizer()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment from leaking into option defaults."""
    for name in (ENV_MODEL, ENV_OUTPUT_FILE, ENV_IGNORE_GITIGNORE, ENV_PROCESS_NON_TEXT):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_project(tmp_path):
    """
    project/
      a.txt          "hello"
      b.png          binary
      notes.md       "some notes here"
      secret.txt     listed in .gitignore
      .gitignore
      .git/config
      src/main.py
      build/out.js   build/ is ignored
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "a.txt").write_text("hello", encoding="utf-8")
    (root / "b.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR")
    (root / "notes.md").write_text("some notes here", encoding="utf-8")
    (root / "secret.txt").write_text("do not share", encoding="utf-8")
    (root / ".gitignore").write_text("secret.txt\nbuild/\n", encoding="utf-8")

    git_dir = root / ".git"
    git_dir.mkdir()
    (git_dir / "config").write_text("[core]\n    bare = false", encoding="utf-8")

    src = root / "src"
    src.mkdir()
    (src / "main.py").write_text("print('main')", encoding="utf-8")

    build = root / "build"
    build.mkdir()
    (build / "out.js").write_text("var x = 1;", encoding="utf-8")
    return root
