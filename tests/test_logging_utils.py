from __future__ import annotations

import logging
from pathlib import Path

from rs_clean.logging_utils import configure_logging


def test_configure_logging_console_only() -> None:
    logger = configure_logging("warning")

    root_handlers = logging.getLogger().handlers
    assert logger.name == "rs_clean"
    assert logger.level == logging.WARNING
    assert len(root_handlers) == 1
    assert not isinstance(root_handlers[0], logging.FileHandler)


def test_configure_logging_writes_log_file(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "rs_clean.log"

    logger = configure_logging(logging.INFO, log_file=log_file)
    logger.info("cleanup.status message=%s", "hello")

    assert log_file.parent.is_dir()
    text = log_file.read_text(encoding="utf-8")
    assert "| INFO | rs_clean | cleanup.status message=hello" in text


def test_configure_logging_replaces_existing_handlers(tmp_path: Path) -> None:
    configure_logging(logging.INFO, log_file=tmp_path / "first.log")
    configure_logging(logging.INFO)

    assert not any(isinstance(handler, logging.FileHandler) for handler in logging.getLogger().handlers)
