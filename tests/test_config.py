# tests/test_config.py

from __future__ import annotations

from schtaskctl.config import DEFAULT_TIMEOUT, SchedulerConfig
from schtaskctl.schedules import DEFAULT_CATALOG


def test_defaults() -> None:
    cfg = SchedulerConfig()
    assert cfg.tool == "schtasks.exe"
    assert cfg.timeout == DEFAULT_TIMEOUT
    assert cfg.success_token == "SUCCESS"
    assert cfg.missing_folder_marker == "cannot find the file specified"
    assert cfg.catalog is DEFAULT_CATALOG
    assert cfg.layout.name_width == 100


def test_from_env() -> None:
    cfg = SchedulerConfig.from_env(
        {
            "SCHTASKCTL_TOOL": "C:\\Windows\\System32\\schtasks.exe",
            "SCHTASKCTL_TIMEOUT": "12.5",
            "SCHTASKCTL_SUCCESS_TOKEN": "",
            "SCHTASKCTL_MISSING_FOLDER_MARKER": " nicht gefunden ",
            "SCHTASKCTL_LOG_LEVEL": "debug",
        }
    )
    assert cfg.tool == "C:\\Windows\\System32\\schtasks.exe"
    assert cfg.timeout == 12.5
    assert cfg.success_token == ""
    assert cfg.missing_folder_marker == "nicht gefunden"
    assert cfg.log_level == "DEBUG"


def test_from_env_bad_values_fall_back() -> None:
    cfg = SchedulerConfig.from_env({"SCHTASKCTL_TIMEOUT": "soon", "SCHTASKCTL_TOOL": "  "})
    assert cfg.timeout == DEFAULT_TIMEOUT
    assert cfg.tool == "schtasks.exe"
    assert SchedulerConfig.from_env({"SCHTASKCTL_TIMEOUT": "-4"}).timeout == DEFAULT_TIMEOUT
