"""Task paths as the scheduler tool spells them: ``Folder\\Sub\\TaskName``."""

from __future__ import annotations

from dataclasses import dataclass

SEPARATOR = "\\"
ROOT = SEPARATOR


@dataclass(frozen=True)
class ExplodedPath:
    """A task path split into its folder and leaf name.

    ``folder + "\\" + name`` gives back the original path, except for tasks
    in the root folder written as ``\\Task``: their folder is the root ``\\``
    itself, and only ``join`` rebuilds the path.
    """

    folder: str
    name: str

    def __str__(self) -> str:
        return join(self.folder, self.name)


def explode(full_path: str) -> ExplodedPath:
    folder, sep, name = full_path.rpartition(SEPARATOR)
    if not sep:
        return ExplodedPath(folder="", name=full_path)
    if folder == "":
        # "\Task" lives in the root folder
        return ExplodedPath(folder=ROOT, name=name)
    return ExplodedPath(folder=folder, name=name)


def join(folder: str, name: str) -> str:
    if folder == "":
        return name
    if folder == ROOT:
        return ROOT + name
    return folder + SEPARATOR + name
