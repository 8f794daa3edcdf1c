"""Tests for logging setup."""

from pathlib import Path

from loguru import logger

from treechanges.utils import setup_logging


def test_setup_logging_writes_log_file(tmp_path: Path, restore_logging):
    log_file = tmp_path / "logs" / "treechanges.log"

    setup_logging(level="DEBUG", log_file=log_file)
    logger.debug("scanner started")
    logger.complete()

    assert log_file.exists()
    assert "scanner started" in log_file.read_text()


def test_setup_logging_level_filters(tmp_path: Path, restore_logging):
    log_file = tmp_path / "treechanges.log"

    setup_logging(level="WARNING", log_file=log_file)
    logger.info("not written")
    logger.warning("written")
    logger.complete()

    content = log_file.read_text()
    assert "written" in content
    assert "not written" not in content
