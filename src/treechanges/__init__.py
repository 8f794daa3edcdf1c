"""treechanges - poll directory trees for added, removed and modified files."""

__version__ = "0.1.0"

from treechanges.sync import TreeScanner, WatchService  # noqa: E402

__all__ = ["TreeScanner", "WatchService", "__version__"]
