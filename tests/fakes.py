# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from schtaskctl.process import ProcessResult


@dataclass
class Call:
    args: Tuple[str, ...]
    timeout: Optional[float]
    secrets: Tuple[str, ...]

    @property
    def verb(self) -> str:
        return self.args[1]


@dataclass
class FakeScheduler:
    """
    Stand-in for schtasks.exe used as the registry's process runner.

    - Keeps tasks per folder ("\\" is the root, other folders end with "\\")
    - Answers /query with CSV rows in insertion order
    - /create, /delete and /change update the in-memory folders
    - Records every call for assertions

    ``fail`` maps a verb ("/create", "/run", ...) to a ProcessResult returned
    instead of the normal behavior.
    """

    folders: Dict[str, List[List[str]]] = field(default_factory=dict)
    calls: List[Call] = field(default_factory=list)
    fail: Dict[str, ProcessResult] = field(default_factory=dict)

    def add(self, full_path: str, next_run: str = "N/A", status: str = "Ready") -> None:
        path = full_path if full_path.startswith("\\") else "\\" + full_path
        folder = path[: path.rfind("\\") + 1]
        self.folders.setdefault(folder, []).append([path, next_run, status])

    def verbs(self) -> List[str]:
        return [c.verb for c in self.calls]

    def _find(self, tn: str) -> Optional[Tuple[str, List[str]]]:
        path = tn if tn.startswith("\\") else "\\" + tn
        for folder, rows in self.folders.items():
            for row in rows:
                if row[0] == path:
                    return folder, row
        return None

    def __call__(
        self,
        args: Sequence[str],
        timeout: Optional[float] = None,
        secrets: Sequence[str] = (),
    ) -> ProcessResult:
        argv = tuple(args)
        self.calls.append(Call(argv, timeout, tuple(secrets)))
        verb = argv[1]
        if verb in self.fail:
            return self.fail[verb]
        opts = dict(zip(argv[2:], argv[3:]))
        tn = opts.get("/tn", "")

        if verb == "/query":
            folder = tn if tn.startswith("\\") else "\\" + tn
            if folder not in self.folders:
                return ProcessResult(argv, 1, "", "ERROR: The system cannot find the file specified.\r\n")
            rows = self.folders[folder]
            if not rows:
                return ProcessResult(argv, 0, "INFO: There are no scheduled tasks presently available.\r\n", "")
            out = "".join('"{}","{}","{}"\r\n'.format(*r) for r in rows)
            return ProcessResult(argv, 0, "\r\n" + out, "")

        if verb == "/create":
            self.add(tn)
            return ProcessResult(
                argv, 0, f'SUCCESS: The scheduled task "{tn}" has successfully been created.\r\n', ""
            )

        found = self._find(tn)
        if found is None:
            return ProcessResult(argv, 1, "", "ERROR: The system cannot find the file specified.\r\n")
        folder, row = found

        if verb == "/delete":
            self.folders[folder].remove(row)
            return ProcessResult(argv, 0, f'SUCCESS: The scheduled task "{tn}" was successfully deleted.\r\n', "")
        if verb == "/run":
            row[2] = "Running"
            return ProcessResult(argv, 0, f'SUCCESS: Attempted to run the scheduled task "{tn}".\r\n', "")
        if verb == "/change":
            if "/DISABLE" in argv:
                row[2] = "Disabled"
            elif "/ENABLE" in argv:
                row[2] = "Ready"
            return ProcessResult(argv, 0, f'SUCCESS: The parameters of scheduled task "{tn}" have been changed.\r\n', "")
        return ProcessResult(argv, 1, "", f"ERROR: Invalid argument/option - '{verb}'.\r\n")
