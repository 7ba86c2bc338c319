from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from .config import SchedulerConfig
from .errors import (
    ExternalToolError,
    InvalidScheduleTypeError,
    ModifierOutOfRangeError,
    TaskAlreadyExistsError,
    TaskError,
    TaskNotFoundError,
    ToggleInvalidError,
)
from .paths import explode, join
from .process import MASK, ProcessResult, Runner, run_process
from .query import TaskQuery, TaskRecord
from .report import format_report

__all__ = [
    "TaskRegistry",
    "filter_by_name",
    "TaskError",
    "ExternalToolError",
    "InvalidScheduleTypeError",
    "ModifierOutOfRangeError",
    "TaskAlreadyExistsError",
    "TaskNotFoundError",
    "ToggleInvalidError",
]

logger = logging.getLogger(__name__)

WILDCARD = "*"
TOGGLES = ("enable", "disable")


def filter_by_name(tasks: Sequence[TaskRecord], name: str) -> List[TaskRecord]:
    """Return all tasks for ``"*"``, else the first task whose name contains ``name``.

    Raises ``TaskNotFoundError`` when nothing matches; the unfiltered list is
    never returned in that case.
    """
    if name == WILDCARD:
        return list(tasks)
    for task in tasks:
        if name in task.name:
            return [task]
    raise TaskNotFoundError(f"Unable to locate any scheduled tasks matching name: {name}")


class TaskRegistry:
    """
    Create, run, delete, edit and inspect scheduled tasks via the scheduler tool.

    Parameters
    - config: tool location, timeout, success token, schedule catalog and report layout.
    - runner: process runner, ``run_process`` unless a test substitutes one.

    Task state is re-read from the scheduler on every call; nothing is cached.
    Checking existence and creating are two separate tool calls, so two
    callers creating the same path at once can both pass the check.
    """

    def __init__(
        self,
        config: Optional[SchedulerConfig] = None,
        runner: Runner = run_process,
    ) -> None:
        self.config = config or SchedulerConfig()
        self.runner = runner
        self.query = TaskQuery(self.config, runner)

    def _invoke(self, *args: str, secrets: Sequence[str] = ()) -> ProcessResult:
        return self.runner(
            [self.config.tool, *args], timeout=self.config.timeout, secrets=secrets
        )

    def _check(
        self, res: ProcessResult, action: str, full_path: str, secrets: Sequence[str] = ()
    ) -> ProcessResult:
        if not res.ok:
            if secrets:
                res = replace(res, args=tuple(MASK if a in secrets else a for a in res.args))
            logger.warning("Failed to %s task '%s' (exit %s)", action, full_path, res.returncode)
            raise ExternalToolError(
                f"Failed to {action} task '{full_path}' (exit code {res.returncode}):\n{res.output()}",
                res,
            )
        return res

    def list(self, folder: str = "") -> List[TaskRecord]:
        return self.query.list(folder)

    filter_by_name = staticmethod(filter_by_name)

    def exists(self, folder: str, name: Optional[str] = None) -> bool:
        tasks = self.list(folder)
        if name is None:
            return bool(tasks)
        try:
            matches = filter_by_name(tasks, name)
        except TaskNotFoundError:
            return False
        return bool(matches)

    def _require(self, full_path: str) -> None:
        path = explode(full_path)
        if not self.exists(path.folder, path.name):
            logger.info("Task '%s' not found", full_path)
            raise TaskNotFoundError(f"Task '{full_path}' not found")

    def report(self, folder: str = "", name: str = WILDCARD) -> str:
        return format_report(filter_by_name(self.list(folder), name), self.config.layout)

    def create(self, schedule: str, modifier: str, full_path: str, run_command: str) -> ProcessResult:
        definition = self.config.catalog.lookup(schedule)
        if definition is None:
            raise InvalidScheduleTypeError(f"Invalid value for 'Schedule': {schedule}")

        try:
            mod = int(str(modifier).strip())
        except ValueError:
            raise ModifierOutOfRangeError(f"Modifier must be an integer, got '{modifier}'. {definition}")
        if mod < 0 or mod > definition.max_modifier:
            raise ModifierOutOfRangeError(f"Modifier for task exceeds maximum value. {definition}")

        path = explode(full_path)
        if self.exists(path.folder, path.name):
            logger.info("Not creating '%s': task already exists", full_path)
            raise TaskAlreadyExistsError(f"Task '{full_path}' already exists")

        target = join(path.folder, path.name)
        res = self._invoke(
            "/create", "/sc", definition.name, "/mo", str(mod), "/tn", target, "/tr", run_command
        )
        self._check(res, "create", target)
        token = self.config.success_token
        if token and token not in res.stdout:
            logger.warning("Create of '%s' exited 0 without '%s' in output", target, token)
            raise ExternalToolError(f"Failed to create task '{target}':\n{res.output()}", res)
        logger.info("Created task '%s' (%s /mo %d)", target, definition.name, mod)
        return res

    def run(self, full_path: str) -> ProcessResult:
        self._require(full_path)
        res = self._check(self._invoke("/run", "/tn", full_path), "run", full_path)
        logger.info("Started task '%s'", full_path)
        return res

    def delete(self, full_path: str) -> ProcessResult:
        self._require(full_path)
        res = self._check(self._invoke("/delete", "/tn", full_path, "/f"), "delete", full_path)
        logger.info("Deleted task '%s'", full_path)
        return res

    def edit(
        self,
        full_path: str,
        toggle: str,
        run_command: Optional[str] = None,
        run_as_user: Optional[str] = None,
        run_as_password: Optional[str] = None,
    ) -> ProcessResult:
        flag = toggle.strip().lower()
        if flag not in TOGGLES:
            raise ToggleInvalidError(f"Toggle must be 'enable' or 'disable', got '{toggle}'")
        self._require(full_path)

        args = ["/change", "/tn", full_path]
        if run_command is not None:
            args += ["/tr", run_command]
        args.append("/" + flag.upper())
        if run_as_user is not None:
            args += ["/ru", run_as_user]
        if run_as_password is not None:
            args += ["/rp", run_as_password]

        secrets = [run_as_password] if run_as_password else []
        res = self._check(
            self._invoke(*args, secrets=secrets), "change", full_path, secrets
        )
        logger.info("Changed task '%s' (%s)", full_path, flag)
        return res
