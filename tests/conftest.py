"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from autocommiter.git import FileChange


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_repo_root(temp_dir):
    """Create a directory that looks like a git repository root."""
    (temp_dir / ".git").mkdir()
    return temp_dir


@pytest.fixture
def config_dir(temp_dir, mocker, monkeypatch):
    """Point the global config directory at a temporary location."""
    mock_dir = temp_dir / ".autocommiter"
    mocker.patch("autocommiter.global_config._CONFIG_DIR", mock_dir)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    return mock_dir


@pytest.fixture
def sample_file_changes():
    """Typical analyzer output for a small commit."""
    return [
        FileChange(file="src/app.py", change="12+/3-"),
        FileChange(file="src/utils/helpers.py", change="40+/0-"),
        FileChange(file="README.md", change="2+/1-"),
        FileChange(file="docs/guide.md", change="@@ -1,2 +1,3 @@ intro"),
    ]


@pytest.fixture
def make_tree():
    """Return a helper that creates directories and files below a root."""

    def _make(root: Path, dirs=(), files=None) -> Path:
        for d in dirs:
            (root / d).mkdir(parents=True, exist_ok=True)
        for rel, content in (files or {}).items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make
