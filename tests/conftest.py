"""Common test fixtures."""

import os
import stat
import sys
from pathlib import Path
from typing import Dict, List, Set

import pytest
from loguru import logger

from treechanges.sync import FileStats, TreeScanner


class FakeFileSystem:
    """In-memory FileSystem with absolute posix paths."""

    def __init__(self):
        self.entries: Dict[str, FileStats] = {}
        self.unreadable: Set[str] = set()
        self._next_ino = 1

    def _ino(self) -> int:
        self._next_ino += 1
        return self._next_ino

    def add_dir(self, path: str) -> None:
        self.entries[path] = FileStats(mode=stat.S_IFDIR | 0o755, ino=self._ino())

    def add_file(self, path: str, size: int = 0, mtime: int = 0) -> None:
        self.entries[path] = FileStats(
            size=size, mtime=mtime, mode=stat.S_IFREG | 0o644, ino=self._ino()
        )

    def remove(self, path: str) -> None:
        prefix = path + "/"
        for entry in [p for p in self.entries if p == path or p.startswith(prefix)]:
            del self.entries[entry]

    def list_dir(self, path: str) -> List[str]:
        if path in self.unreadable:
            raise PermissionError(13, "Permission denied", path)
        stats = self.entries.get(path)
        if stats is None:
            raise FileNotFoundError(2, "No such file or directory", path)
        if not stats.is_dir:
            raise NotADirectoryError(20, "Not a directory", path)
        prefix = path.rstrip("/") + "/"
        return [
            entry[len(prefix) :]
            for entry in self.entries
            if entry.startswith(prefix) and "/" not in entry[len(prefix) :]
        ]

    def stat(self, path: str) -> FileStats:
        try:
            return self.entries[path]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", path) from None


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Empty directory to monitor."""
    root = tmp_path / "tree"
    root.mkdir()
    return root


@pytest.fixture
def scanner(tree: Path) -> TreeScanner:
    return TreeScanner([tree])


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    fs = FakeFileSystem()
    fs.add_dir("/data")
    return fs


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run without TREECHANGES_* variables or a .env file in the working directory."""
    for name in list(os.environ):
        if name.startswith("TREECHANGES_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def restore_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)


def create_test_file(path: Path, content: str = "test content") -> Path:
    """Create a test file with given content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path
