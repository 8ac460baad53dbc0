"""Subprocess helper shared by the git and uv adapters."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

logger = logging.getLogger(__name__)


class CommandFailed(Exception):
    """A command could not be started or exited with a non-zero status."""

    def __init__(self, cmd: Sequence[str], returncode: int | None, stderr: str = "") -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr.strip()
        if returncode is None:
            message = f"could not run '{self.cmd[0]}'"
        else:
            message = f"'{' '.join(self.cmd)}' exited with {returncode}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)


def run_command(
    cmd: Sequence[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run `cmd` capturing text output.

    With `check=True` a non-zero exit raises `CommandFailed`; a missing
    executable always does.
    """

    logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            list(cmd),
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise CommandFailed(cmd, None, str(exc)) from exc

    if check and result.returncode != 0:
        raise CommandFailed(cmd, result.returncode, result.stderr or "")
    return result
