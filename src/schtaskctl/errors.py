from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .process import ProcessResult


class TaskError(Exception):
    pass


class InvalidScheduleTypeError(TaskError):
    pass


class ModifierOutOfRangeError(TaskError):
    pass


class TaskAlreadyExistsError(TaskError):
    pass


class TaskNotFoundError(TaskError):
    pass


class ToggleInvalidError(TaskError):
    pass


class ExternalToolError(TaskError):
    """The scheduler tool could not be run, timed out, or reported failure.

    ``result`` holds the captured invocation when the tool got as far as
    exiting, so callers can show the raw output for diagnostics.
    """

    def __init__(self, message: str, result: Optional["ProcessResult"] = None) -> None:
        super().__init__(message)
        self.result = result
