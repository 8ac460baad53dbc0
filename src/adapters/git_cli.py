"""`VersionControl` backed by the git executable."""

from __future__ import annotations

import shutil
from pathlib import Path

from adapters.process import CommandFailed, run_command
from core.errors import VcsError


class GitCli:
    def __init__(self, executable: str = "git") -> None:
        self._git = executable

    def is_available(self) -> bool:
        return shutil.which(self._git) is not None

    def is_repository(self, path: Path) -> bool:
        return (path / ".git").exists()

    def init(self, path: Path) -> bool:
        if self.is_repository(path):
            return False
        self._run(path, "init")
        return True

    def get_config(self, path: Path, key: str) -> str | None:
        try:
            result = run_command([self._git, "config", "--get", key], cwd=path, check=False)
        except CommandFailed as exc:
            raise VcsError(str(exc)) from exc
        # `git config --get` exits 1 when the key is unset.
        if result.returncode == 1:
            return None
        if result.returncode != 0:
            raise VcsError(f"git config --get {key} exited with {result.returncode}: {result.stderr.strip()}")
        value = result.stdout.strip()
        return value or None

    def set_config(self, path: Path, key: str, value: str) -> None:
        self._run(path, "config", "--local", key, value)

    def add_remote(self, path: Path, name: str, url: str) -> None:
        self._run(path, "remote", "add", name, url)

    def _run(self, path: Path, *args: str) -> None:
        try:
            run_command([self._git, *args], cwd=path)
        except CommandFailed as exc:
            raise VcsError(str(exc)) from exc
