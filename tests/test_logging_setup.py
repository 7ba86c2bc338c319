# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from schtaskctl.logging_setup import setup_logging


@pytest.fixture()
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_console_only(restore_root: logging.Logger) -> None:
    setup_logging("warning")
    assert len(restore_root.handlers) == 1
    assert restore_root.handlers[0].level == logging.WARNING


def test_file_handler_gets_debug(restore_root: logging.Logger, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "schtaskctl.log"
    setup_logging(logging.INFO, log_file=log_file)
    logging.getLogger("schtaskctl.test").debug("hidden from console")
    for h in restore_root.handlers:
        h.flush()
    assert "hidden from console" in log_file.read_text(encoding="utf-8")


def test_unknown_level_name_falls_back(restore_root: logging.Logger) -> None:
    setup_logging("LOUD")
    assert restore_root.handlers[0].level == logging.INFO
