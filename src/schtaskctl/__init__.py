"""
Manage Windows scheduled tasks by driving ``schtasks.exe``.

Public API:
- TaskRegistry: create, run, delete, edit, list and check scheduled tasks.
- format_report: render task records as a fixed-width text table.
- SchedulerConfig: tool location, timeout, schedule catalog and report layout.
"""

from .config import SchedulerConfig
from .core import TaskRegistry, filter_by_name
from .errors import (
    ExternalToolError,
    InvalidScheduleTypeError,
    ModifierOutOfRangeError,
    TaskAlreadyExistsError,
    TaskError,
    TaskNotFoundError,
    ToggleInvalidError,
)
from .paths import ExplodedPath, explode, join
from .process import ProcessResult, run_process
from .query import TaskRecord, parse_query_output
from .report import ReportLayout, format_report
from .schedules import DEFAULT_CATALOG, ScheduleCatalog, ScheduleDefinition

__all__ = [
    "TaskRegistry",
    "filter_by_name",
    "SchedulerConfig",
    "TaskRecord",
    "parse_query_output",
    "ProcessResult",
    "run_process",
    "ExplodedPath",
    "explode",
    "join",
    "ReportLayout",
    "format_report",
    "ScheduleCatalog",
    "ScheduleDefinition",
    "DEFAULT_CATALOG",
    "TaskError",
    "ExternalToolError",
    "InvalidScheduleTypeError",
    "ModifierOutOfRangeError",
    "TaskAlreadyExistsError",
    "TaskNotFoundError",
    "ToggleInvalidError",
]

__version__ = "0.1.0"
