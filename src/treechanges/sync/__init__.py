from .tree_scanner import TreeScanner
from .utils import FileHistory, FileStats, ScanReport
from .watch_service import WatchService

__all__ = ["TreeScanner", "WatchService", "FileHistory", "FileStats", "ScanReport"]
