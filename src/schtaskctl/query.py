from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .errors import ExternalToolError
from .paths import ROOT, SEPARATOR
from .process import Runner, run_process

if TYPE_CHECKING:
    from .config import SchedulerConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TaskRecord:
    name: str
    status: str
    next_run: str


def _clean(field: str) -> str:
    return field.replace('"', "")


def parse_query_output(text: str) -> List[TaskRecord]:
    """Parse ``schtasks /query /nh /fo csv`` output, keeping the tool's order.

    Columns are name, next run time, status. Lines with fewer than three
    fields (blank lines, ``INFO:`` messages, stray headers) are skipped.
    """
    tasks: List[TaskRecord] = []
    for row in csv.reader(text.splitlines()):
        if len(row) < 3:
            continue
        tasks.append(
            TaskRecord(
                name=_clean(row[0]),
                next_run=_clean(row[1]),
                status=_clean(row[2]).rstrip("\r"),
            )
        )
    return tasks


def normalize_folder(folder: Optional[str]) -> str:
    folder = (folder or "").strip()
    if not folder or folder == ROOT:
        return ROOT
    return folder if folder.endswith(SEPARATOR) else folder + SEPARATOR


class TaskQuery:
    """Reads the tasks of one folder through the scheduler tool."""

    def __init__(self, config: "SchedulerConfig", runner: Runner = run_process) -> None:
        self.config = config
        self.runner = runner

    def list(self, folder: Optional[str] = "") -> List[TaskRecord]:
        target = normalize_folder(folder)
        res = self.runner(
            [self.config.tool, "/query", "/nh", "/fo", "csv", "/tn", target],
            timeout=self.config.timeout,
        )
        if not res.ok:
            marker = self.config.missing_folder_marker
            if marker and marker in res.output():
                # A folder that does not exist yet simply has no tasks.
                logger.info("Folder '%s' does not exist (exit %s)", target, res.returncode)
                return []
            logger.warning("Query of folder '%s' failed (exit %s)", target, res.returncode)
            raise ExternalToolError(
                f"Failed to query folder '{target}' (exit code {res.returncode}):\n{res.output()}",
                res,
            )
        tasks = parse_query_output(res.stdout)
        logger.debug("Folder '%s' holds %d task(s)", target, len(tasks))
        return tasks
