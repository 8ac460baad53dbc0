"""`PackageEnvTool` backed by uv.

uv is looked up on PATH first and then in the scripts directory of the
running interpreter, which is where `pip install uv` puts it even when that
directory is not on PATH.
"""

from __future__ import annotations

import logging
import shutil
import sys
import sysconfig
from pathlib import Path

from adapters.process import CommandFailed, run_command
from core.errors import PackageToolError

logger = logging.getLogger(__name__)


class UvTool:
    def __init__(self, executable: str = "uv") -> None:
        self._name = executable

    def executable(self) -> str | None:
        found = shutil.which(self._name)
        if found:
            return found
        scripts = sysconfig.get_path("scripts")
        if scripts:
            suffix = ".exe" if sys.platform.startswith("win") else ""
            candidate = Path(scripts) / f"{self._name}{suffix}"
            if candidate.exists():
                return str(candidate)
        return None

    def version(self) -> str | None:
        exe = self.executable()
        if exe is None:
            return None
        try:
            result = run_command([exe, "--version"], check=False)
        except CommandFailed:
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def is_installed(self) -> bool:
        return self.version() is not None

    def install(self) -> None:
        logger.info("Installing uv with pip")
        try:
            run_command([sys.executable, "-m", "pip", "install", "uv"])
        except CommandFailed as exc:
            raise PackageToolError(str(exc)) from exc

    def init_project(self, path: Path) -> None:
        self._run(path, "init", "--vcs", "none", ".")

    def create_venv(self, path: Path) -> None:
        self._run(path, "venv", ".venv")

    def add_requirements(self, path: Path, manifest: Path) -> None:
        self._run(path, "add", "-r", str(manifest))

    def _run(self, path: Path, *args: str) -> None:
        exe = self.executable()
        if exe is None:
            raise PackageToolError("uv is not installed")
        try:
            run_command([exe, *args], cwd=path)
        except CommandFailed as exc:
            raise PackageToolError(str(exc)) from exc
