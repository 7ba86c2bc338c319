"""Settings for talking to the scheduler tool, optionally read from the environment.

Environment variables (all optional):

- ``SCHTASKCTL_TOOL``: path to the scheduler executable (default ``schtasks.exe``)
- ``SCHTASKCTL_TIMEOUT``: seconds to wait for each invocation (default 60)
- ``SCHTASKCTL_SUCCESS_TOKEN``: marker expected in create output; empty disables the check
- ``SCHTASKCTL_MISSING_FOLDER_MARKER``: text in a failed query meaning the folder does not
  exist yet (reported as an empty folder); empty makes every failed query an error
- ``SCHTASKCTL_LOG_LEVEL``: logging level name for the CLI (default INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .report import DEFAULT_LAYOUT, ReportLayout
from .schedules import DEFAULT_CATALOG, ScheduleCatalog

ENV_PREFIX = "SCHTASKCTL"

DEFAULT_TOOL = "schtasks.exe"
DEFAULT_TIMEOUT = 60.0
DEFAULT_SUCCESS_TOKEN = "SUCCESS"
DEFAULT_MISSING_FOLDER_MARKER = "cannot find the file specified"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class SchedulerConfig:
    tool: str = DEFAULT_TOOL
    timeout: Optional[float] = DEFAULT_TIMEOUT
    success_token: str = DEFAULT_SUCCESS_TOKEN
    missing_folder_marker: str = DEFAULT_MISSING_FOLDER_MARKER
    catalog: ScheduleCatalog = field(default=DEFAULT_CATALOG, compare=False)
    layout: ReportLayout = DEFAULT_LAYOUT
    log_level: str = "INFO"

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "SchedulerConfig":
        env = os.environ if env is None else env
        tool = (env.get(_k("TOOL")) or "").strip() or DEFAULT_TOOL
        token = env.get(_k("SUCCESS_TOKEN"))
        marker = env.get(_k("MISSING_FOLDER_MARKER"))
        return SchedulerConfig(
            tool=tool,
            timeout=_env_float(env, _k("TIMEOUT"), DEFAULT_TIMEOUT),
            success_token=DEFAULT_SUCCESS_TOKEN if token is None else token.strip(),
            missing_folder_marker=(
                DEFAULT_MISSING_FOLDER_MARKER if marker is None else marker.strip()
            ),
            log_level=(env.get(_k("LOG_LEVEL")) or "INFO").strip().upper(),
        )
