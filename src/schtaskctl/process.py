from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Tuple

from .errors import ExternalToolError

logger = logging.getLogger(__name__)

MASK = "****"


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of one synchronous tool invocation."""

    args: Tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def output(self) -> str:
        """Combined stripped stdout/stderr for error messages."""
        parts = [p for p in (self.stdout.strip(), self.stderr.strip()) if p]
        return "\n".join(parts)


# (args, timeout, secrets) -> ProcessResult
Runner = Callable[..., ProcessResult]


def mask_args(args: Sequence[str], secrets: Iterable[str] = ()) -> str:
    hidden = {s for s in secrets if s}
    return " ".join(MASK if a in hidden else a for a in args)


def run_process(
    args: Sequence[str],
    timeout: Optional[float] = None,
    secrets: Iterable[str] = (),
) -> ProcessResult:
    """Run a program without a shell and wait for it to exit.

    Both output streams are captured as text; undecodable bytes (schtasks
    writes the OEM code page) become U+FFFD instead of failing the call. A missing program or an
    expired ``timeout`` raises ``ExternalToolError``; the child is killed
    before the timeout is reported. A non-zero exit code is *not* an error
    here, callers decide what it means.
    """
    argv = tuple(str(a) for a in args)
    secrets = tuple(secrets)
    shown = mask_args(argv, secrets)
    logger.debug("Running: %s", shown)
    try:
        res = subprocess.run(
            list(argv),
            text=True,
            errors="replace",
            capture_output=True,
            check=False,
            timeout=timeout,
        )
    except FileNotFoundError:
        logger.error("Program not found: %s", argv[0] if argv else "")
        raise ExternalToolError(f"Program not found: {argv[0] if argv else ''}")
    except subprocess.TimeoutExpired:
        logger.error("Timed out after %ss: %s", timeout, shown)
        raise ExternalToolError(f"'{argv[0]}' did not finish within {timeout} seconds")

    logger.debug("Exit code %s from %s", res.returncode, argv[0])
    return ProcessResult(
        args=argv,
        returncode=res.returncode,
        stdout=res.stdout or "",
        stderr=res.stderr or "",
    )
