"""Turns raw invocation input into an immutable `BootstrapPlan`.

Everything that can be rejected without touching the filesystem is rejected
here, including a missing credential, so a bad invocation never leaves a
half-created project behind.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from core.config import CREDENTIAL_ENV_VAR, AppSettings
from core.domain.models import BootstrapPlan, RemoteTarget, SetupKind, Visibility
from core.errors import InvalidInputError, MissingCredentialError

logger = logging.getLogger(__name__)

_RESERVED_NAMES = {".", ".."}


@dataclass
class BootstrapRequest:
    """Raw parameters as received from the CLI (not yet validated)."""

    project_name: str
    setup: str | SetupKind = SetupKind.ADVANCED
    github_repo: bool = False
    github_repo_name: str | None = None
    private: bool = False
    resume: bool = False
    setup_environment: bool = True
    base_dir: Path | None = None


def validate_project_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise InvalidInputError("Project name must not be empty.")
    separators = {"/", "\\", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in cleaned for sep in separators):
        raise InvalidInputError(
            f"Project name '{cleaned}' must be a single path segment (no path separators)."
        )
    if cleaned in _RESERVED_NAMES or "\x00" in cleaned:
        raise InvalidInputError(f"Project name '{cleaned}' is not a valid directory name.")
    return cleaned


def _resolve_remote(request: BootstrapRequest, project_name: str) -> RemoteTarget | None:
    if not request.github_repo:
        return None
    repo_name = (request.github_repo_name or "").strip() or project_name
    if any(ch.isspace() for ch in repo_name):
        raise InvalidInputError(f"Repository name '{repo_name}' must not contain whitespace.")
    return RemoteTarget(repo_name=repo_name, visibility=Visibility.from_bool(request.private))


def resolve_plan(request: BootstrapRequest, *, settings: AppSettings) -> BootstrapPlan:
    """Validate `request` and build the plan.

    Raises:
    - `InvalidInputError` for a bad project name, setup kind or repo name.
    - `MissingCredentialError` when a remote is requested and no token is set.
    """

    project_name = validate_project_name(request.project_name)
    setup_kind = (
        request.setup if isinstance(request.setup, SetupKind) else SetupKind.parse(request.setup)
    )
    remote = _resolve_remote(request, project_name)

    credential = None
    if remote is not None:
        credential = settings.github_token
        if credential is None or not credential.get_secret_value().strip():
            raise MissingCredentialError(
                f"{CREDENTIAL_ENV_VAR} environment variable is not set.",
                hint=f"Export {CREDENTIAL_ENV_VAR} with a token that has the 'repo' scope.",
            )

    plan = BootstrapPlan(
        project_name=project_name,
        setup_kind=setup_kind,
        remote=remote,
        base_dir=(request.base_dir or Path.cwd()).resolve(),
        resume=request.resume,
        setup_environment=request.setup_environment,
        credential=credential,
    )
    logger.debug(
        "Resolved plan: project=%s setup=%s remote=%s",
        plan.project_name,
        plan.setup_kind.value,
        remote.repo_name if remote else None,
    )
    return plan
