"""Scanner for detecting file changes in directory trees between polls."""

import os
from datetime import datetime
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple, Union

from loguru import logger

from treechanges.config import TreeChangesConfig
from treechanges.sync.filesystem import FileSystem, OSFileSystem
from treechanges.sync.masks import is_selected
from treechanges.sync.utils import FileHistory, FileStats, ScanReport

PathLike = Union[str, "os.PathLike[str]"]


class TreeScanner:
    """
    Tracks the files under a set of directories and reports what changed
    between consecutive calls to scan().

    A file is identified by its full path. It counts as modified when its
    size or modification time differs from the previous scan; content is
    never read, so an edit that preserves both goes unnoticed.

    Not safe for concurrent scan() calls.
    """

    def __init__(
        self,
        directories: Iterable[PathLike] = (),
        include_masks: Iterable[str] = (),
        exclude_masks: Iterable[str] = (),
        recurse: bool = True,
        filesystem: Optional[FileSystem] = None,
    ):
        self.filesystem: FileSystem = filesystem or OSFileSystem()
        self.directories = directories
        self.include_masks = include_masks
        self.exclude_masks = exclude_masks
        self.recurse = recurse

        self._files: Dict[str, FileHistory] = {}
        self._report = ScanReport()
        self.scan_count = 0
        self.last_scan: Optional[datetime] = None

    @classmethod
    def from_config(
        cls, config: TreeChangesConfig, filesystem: Optional[FileSystem] = None
    ) -> "TreeScanner":
        return cls(
            directories=config.directories,
            include_masks=config.include_masks,
            exclude_masks=config.exclude_masks,
            recurse=config.recurse,
            filesystem=filesystem,
        )

    # configuration

    @property
    def directories(self) -> List[str]:
        """Monitored directories as absolute paths."""
        return sorted(self._directories)

    @directories.setter
    def directories(self, directories: Iterable[PathLike]) -> None:
        if isinstance(directories, (str, os.PathLike)):
            directories = [directories]
        # abspath normalizes, so "a", "./a" and "a/" collapse to one entry
        self._directories: Set[str] = {os.path.abspath(os.fspath(d)) for d in directories}

    @property
    def include_masks(self) -> List[str]:
        return list(self._include_masks)

    @include_masks.setter
    def include_masks(self, masks: Iterable[str]) -> None:
        self._include_masks: Tuple[str, ...] = tuple(masks)

    @property
    def exclude_masks(self) -> List[str]:
        return list(self._exclude_masks)

    @exclude_masks.setter
    def exclude_masks(self, masks: Iterable[str]) -> None:
        self._exclude_masks: Tuple[str, ...] = tuple(masks)

    @property
    def recurse(self) -> bool:
        return self._recurse

    @recurse.setter
    def recurse(self, value: bool) -> None:
        self._recurse = bool(value)

    def set_locations(self, *directories: PathLike) -> None:
        self.directories = directories

    def get_locations(self) -> List[str]:
        return self.directories

    # results

    def files(self) -> List[str]:
        """Paths of every file found by the last scan."""
        return list(self._files)

    def file_map(self) -> Dict[str, FileHistory]:
        """Tracked files with their metadata history."""
        return dict(self._files)

    def new_files(self) -> List[str]:
        return list(self._report.new)

    def removed_files(self) -> List[str]:
        return list(self._report.removed)

    def modified_files(self) -> List[str]:
        return list(self._report.modified)

    @property
    def report(self) -> ScanReport:
        return self._report

    def stats(self, path: PathLike) -> Optional[FileHistory]:
        """Metadata from the last two scans of a tracked file, or None."""
        return self._files.get(os.path.abspath(os.fspath(path)))

    # scanning

    def scan(self) -> int:
        """
        Walk every monitored directory and compare against the previous scan.

        Use new_files(), removed_files() and modified_files() (or report) to
        inspect the results.

        Returns:
            Number of files added or removed. Modified files are not counted.

        Raises:
            MaskError: If a mask is not a valid regular expression. Tracked
                state is left as it was before the call.
        """
        logger.debug(f"Scanning directories: {self.directories}")
        snapshot: Dict[str, FileStats] = {}
        for root in sorted(self._directories):
            self._scan_root(root, snapshot)

        report = ScanReport()

        for path, stats in snapshot.items():
            history = self._files.get(path)
            if history is None:
                self._files[path] = FileHistory(current=stats)
                report.new.add(path)
            else:
                history.push(stats)
                if history.modified:
                    report.modified.add(path)

        report.removed = {path for path in self._files if path not in snapshot}
        for path in report.removed:
            del self._files[path]

        self._report = report
        self.scan_count += 1
        self.last_scan = datetime.now()

        logger.debug(f"Scan {self.scan_count}: {len(self._files)} files tracked")
        logger.debug(f"  New: {len(report.new)}")
        logger.debug(f"  Removed: {len(report.removed)}")
        logger.debug(f"  Modified: {len(report.modified)}")

        return report.changed

    def _scan_root(self, root: str, snapshot: Dict[str, FileStats]) -> None:
        try:
            root_stats = self.filesystem.stat(root)
        except OSError as e:
            logger.debug(f"Directory does not exist: {root} ({e})")
            return

        if not root_stats.is_dir:
            logger.debug(f"Not a directory, skipping: {root}")
            return

        # depth first, but a directory's files are collected before any of
        # its subdirectories are listed. Each entry carries the identities of
        # the directories above it; only a link back into that chain is cut.
        pending: List[Tuple[str, FileStats, FrozenSet[Tuple[int, int]]]] = [
            (root, root_stats, frozenset())
        ]
        while pending:
            path, dir_stats, ancestors = pending.pop()
            if dir_stats.ino:
                identity = (dir_stats.dev, dir_stats.ino)
                if identity in ancestors:
                    logger.debug(f"Directory loop, skipping: {path}")
                    continue
                ancestors = ancestors | {identity}

            subdirs = self._scan_dir(path, snapshot)
            if self._recurse:
                pending.extend(
                    (subdir, stats, ancestors) for subdir, stats in reversed(subdirs)
                )

    def _scan_dir(self, path: str, snapshot: Dict[str, FileStats]) -> List[Tuple[str, FileStats]]:
        """Add the selected files directly inside path to snapshot.

        Returns:
            The subdirectories found, to be scanned next
        """
        try:
            names = self.filesystem.list_dir(path)
        except OSError as e:
            logger.debug(f"Cannot read directory {path}: {e}")
            return []

        subdirs: List[Tuple[str, FileStats]] = []
        for name in names:
            full_path = os.path.join(path, name)
            try:
                stats = self.filesystem.stat(full_path)
            except OSError as e:
                # vanished since listing, or a dangling symlink
                logger.debug(f"Cannot stat {full_path}: {e}")
                continue

            if stats.is_dir:
                subdirs.append((full_path, stats))
                continue
            if not stats.is_file:
                continue
            if not is_selected(name, self._include_masks, self._exclude_masks):
                continue

            snapshot[full_path] = stats

        return subdirs
