"""Utility functions for treechanges."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(level: str = "INFO", log_file: Optional[Path] = None) -> None:
    """
    Configure loguru sinks:
    - Replace the default handler with stderr at the given level
    - Optionally add a rotating file sink

    Args:
        level: Minimum level for emitted records
        log_file: Optional path of a log file to append to
    """
    logger.remove()
    logger.add(sys.stderr, level=level, colorize=True)

    if log_file is not None:
        log_file = Path(log_file).expanduser()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            level=level,
            rotation="10 MB",
            retention="10 days",
            backtrace=True,
            diagnose=False,
        )
