"""Polling watch service for treechanges."""

import os
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from loguru import logger
from pydantic import BaseModel, Field

from treechanges.sync.tree_scanner import TreeScanner
from treechanges.sync.utils import ScanReport


class WatchEvent(BaseModel):
    timestamp: datetime
    path: str
    action: str  # new, removed, modified, scan
    status: str  # success, error
    size_delta: Optional[int] = None
    error: Optional[str] = None


class WatchServiceState(BaseModel):
    # Service status
    running: bool = False
    start_time: datetime = Field(default_factory=datetime.now)
    pid: int = Field(default_factory=os.getpid)

    # Stats
    error_count: int = 0
    last_error: Optional[datetime] = None
    last_scan: Optional[datetime] = None
    scan_count: int = 0

    # File counts
    tracked_files: int = 0

    # Recent activity
    recent_events: List[WatchEvent] = Field(default_factory=list)

    def add_event(
        self,
        path: str,
        action: str,
        status: str,
        size_delta: Optional[int] = None,
        error: Optional[str] = None,
    ) -> WatchEvent:
        event = WatchEvent(
            timestamp=datetime.now(),
            path=path,
            action=action,
            status=status,
            size_delta=size_delta,
            error=error,
        )
        self.recent_events.insert(0, event)
        self.recent_events = self.recent_events[:100]  # Keep last 100
        return event

    def record_error(self, error: str):
        self.error_count += 1
        self.add_event(path="", action="scan", status="error", error=error)
        self.last_error = datetime.now()


class WatchService:
    def __init__(
        self,
        scanner: TreeScanner,
        interval: float = 1.0,
        status_path: Optional[Path] = None,
        on_scan: Optional[Callable[[ScanReport], None]] = None,
    ):
        self.scanner = scanner
        self.interval = interval
        self.status_path = Path(status_path) if status_path is not None else None
        self.on_scan = on_scan
        self.state = WatchServiceState()
        if self.status_path is not None:
            self.status_path.parent.mkdir(parents=True, exist_ok=True)

    def run(self, max_scans: Optional[int] = None):
        """Scan every interval seconds until max_scans scans are done, or forever"""
        self.state.running = True
        self.state.start_time = datetime.now()
        self.write_status()

        logger.info(f"Watching {self.scanner.directories} every {self.interval}s")
        try:
            scans = 0
            while max_scans is None or scans < max_scans:
                self.scan_once()
                scans += 1
                if max_scans is None or scans < max_scans:
                    time.sleep(self.interval)
        finally:
            self.state.running = False
            self.write_status()

    def write_status(self):
        """Write current state to status file"""
        if self.status_path is None:
            return
        self.status_path.write_text(WatchServiceState.model_dump_json(self.state, indent=2))

    def scan_once(self) -> ScanReport:
        """Run a single scan and record what changed"""
        try:
            self.scanner.scan()
        except Exception as e:
            logger.error(f"Scan failed: {e}")
            self.state.record_error(str(e))
            self.write_status()
            raise

        report = self.scanner.report
        self.state.last_scan = self.scanner.last_scan
        self.state.scan_count = self.scanner.scan_count
        self.state.tracked_files = len(self.scanner.files())

        for path in sorted(report.new):
            self.state.add_event(path=path, action="new", status="success")
        for path in sorted(report.removed):
            self.state.add_event(path=path, action="removed", status="success")
        for path in sorted(report.modified):
            history = self.scanner.stats(path)
            self.state.add_event(
                path=path,
                action="modified",
                status="success",
                size_delta=history.size_delta if history else None,
            )

        if report.total_changes:
            logger.info(
                f"Changes: {len(report.new)} new, {len(report.removed)} removed, "
                f"{len(report.modified)} modified"
            )

        self.write_status()
        if self.on_scan is not None:
            self.on_scan(report)
        return report
