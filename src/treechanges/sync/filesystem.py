"""Filesystem access used by the tree scanner."""

import os
from typing import List, Protocol

from treechanges.sync.utils import FileStats


class FileSystem(Protocol):
    """Directory listing and metadata lookup.

    Both methods raise OSError when the path cannot be read.
    """

    def list_dir(self, path: str) -> List[str]: ...

    def stat(self, path: str) -> FileStats: ...


class OSFileSystem:
    """FileSystem backed by the local operating system."""

    def list_dir(self, path: str) -> List[str]:
        with os.scandir(path) as entries:
            return [entry.name for entry in entries]

    def stat(self, path: str) -> FileStats:
        # follows symlinks
        return FileStats.from_stat_result(os.stat(path))
