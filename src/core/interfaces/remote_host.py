"""Remote hosting API capability.

Why one method:
- The pipeline creates exactly one repository per run; nothing else of the
  hosting API is used.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from pydantic import SecretStr

from core.domain.models import RemoteRepository, Visibility


@runtime_checkable
class RemoteHost(Protocol):
    """Contract for a repository hosting service.

    `create_repository` performs a single attempt and raises
    `AuthFailedError`, `NameConflictError` or `NetworkError`.
    """

    def create_repository(self, name: str, visibility: Visibility) -> RemoteRepository:
        ...


RemoteHostFactory = Callable[[SecretStr], RemoteHost]
