"""Package/environment tool capability (uv)."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class PackageEnvTool(Protocol):
    """Contract for the tool that manages the project's environment.

    Every method except `is_installed` raises `core.errors.PackageToolError`
    on failure.
    """

    def is_installed(self) -> bool:
        ...

    def install(self) -> None:
        ...

    def init_project(self, path: Path) -> None:
        ...

    def create_venv(self, path: Path) -> None:
        ...

    def add_requirements(self, path: Path, manifest: Path) -> None:
        ...
