"""Version-control capability.

Why Protocol:
- The pipeline needs four operations (init, config get/set, remote add) and
  nothing about how they are carried out.
- Lets tests run the whole pipeline with an in-memory fake.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class VersionControl(Protocol):
    """Minimal contract for a local repository backend.

    Design rules:
    - Every method raises `core.errors.VcsError` on failure.
    - `init` is idempotent: on an existing repository it does nothing and
      returns False.
    """

    def init(self, path: Path) -> bool:
        """Create a repository rooted at `path`; True if one was created."""

        ...

    def get_config(self, path: Path, key: str) -> str | None:
        """Effective (local + global) value of `key`, or None when unset."""

        ...

    def set_config(self, path: Path, key: str, value: str) -> None:
        """Write `key` in the repository-local configuration."""

        ...

    def add_remote(self, path: Path, name: str, url: str) -> None:
        ...
