"""Types and utilities for tree scanning."""

import os
import stat
from dataclasses import dataclass, field
from typing import Set


@dataclass(frozen=True)
class FileStats:
    """Metadata captured for one path by a single scan.

    Only size and mtime take part in change detection. mode, dev and ino
    are used while walking the tree.
    """

    size: int = 0
    mtime: int = 0  # nanoseconds
    mode: int = 0
    dev: int = 0
    ino: int = 0

    @classmethod
    def zero(cls) -> "FileStats":
        return cls()

    @classmethod
    def from_stat_result(cls, result: os.stat_result) -> "FileStats":
        return cls(
            size=result.st_size,
            mtime=result.st_mtime_ns,
            mode=result.st_mode,
            dev=result.st_dev,
            ino=result.st_ino,
        )

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def is_file(self) -> bool:
        return stat.S_ISREG(self.mode)

    def same_as(self, other: "FileStats") -> bool:
        """True if size and modification time both match."""
        return self.size == other.size and self.mtime == other.mtime


@dataclass
class FileHistory:
    """The last two scans' metadata for a tracked file.

    Attributes:
        current: Metadata from the most recent scan
        previous: Metadata from the scan before, or the zero sentinel when
            the file first appeared in the most recent scan
    """

    current: FileStats
    previous: FileStats = field(default_factory=FileStats.zero)

    def push(self, stats: FileStats) -> None:
        """Shift current into previous and record the new metadata."""
        self.previous = self.current
        self.current = stats

    @property
    def modified(self) -> bool:
        return not self.current.same_as(self.previous)

    @property
    def size_delta(self) -> int:
        return self.current.size - self.previous.size


@dataclass
class ScanReport:
    """Changes found by one scan compared to the one before it.

    Attributes:
        new: Files found now that were not tracked before
        removed: Files tracked before that are gone now
        modified: Files found in both whose size or mtime changed
    """

    new: Set[str] = field(default_factory=set)
    removed: Set[str] = field(default_factory=set)
    modified: Set[str] = field(default_factory=set)

    @property
    def changed(self) -> int:
        """Number of files that appeared or disappeared."""
        return len(self.new) + len(self.removed)

    @property
    def total_changes(self) -> int:
        return len(self.new) + len(self.removed) + len(self.modified)
