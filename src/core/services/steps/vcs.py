"""Local repository initialization and identity check."""

from __future__ import annotations

import logging

from core.domain.models import GitIdentity, StepOutcome
from core.errors import FileWriteError, VcsConfigError, VcsError
from core.services.steps.context import StepContext

logger = logging.getLogger(__name__)

INIT_STEP_NAME = "vcs"
IDENTITY_STEP_NAME = "identity"

USER_NAME = "user.name"
USER_EMAIL = "user.email"

_IDENTITY_FIELDS = {USER_NAME: "name", USER_EMAIL: "email"}

_IDENTITY_HINT = 'Run `git config user.name "..."` and `git config user.email "..."` inside the project.'


def initialize_repository(ctx: StepContext) -> StepOutcome:
    try:
        created = ctx.vcs.init(ctx.project_dir)
    except VcsError as exc:
        raise FileWriteError(
            f"Could not initialize git repository: {exc}",
            hint="Check that git is installed and on PATH.",
        ) from exc

    if not created:
        return StepOutcome.skipped(INIT_STEP_NAME, "already a git repository")
    logger.info("Initialized git repository in %s", ctx.project_dir)
    return StepOutcome.ok(INIT_STEP_NAME, "git repository initialized")


def read_identity(ctx: StepContext) -> GitIdentity:
    return GitIdentity(
        name=ctx.vcs.get_config(ctx.project_dir, USER_NAME),
        email=ctx.vcs.get_config(ctx.project_dir, USER_EMAIL),
    )


def ensure_identity(ctx: StepContext) -> StepOutcome:
    """Check `user.name`/`user.email`; prompt and set them only if missing.

    Missing identity never stops the run: it is only needed for commits.
    """

    try:
        identity = read_identity(ctx)
    except VcsError as exc:
        raise VcsConfigError(f"Could not read git identity: {exc}", hint=_IDENTITY_HINT) from exc

    if identity.complete:
        return StepOutcome.skipped(IDENTITY_STEP_NAME, f"{identity.name} <{identity.email}>")

    missing = identity.missing()
    supplied = ctx.prompt_identity(missing) if ctx.prompt_identity else None
    values: dict[str, str] = {}
    for key in missing:
        value = getattr(supplied, _IDENTITY_FIELDS[key], None) if supplied else None
        if value and value.strip():
            values[key] = value.strip()

    try:
        for key, value in values.items():
            ctx.vcs.set_config(ctx.project_dir, key, value)
    except VcsError as exc:
        raise VcsConfigError(f"Could not write git identity: {exc}", hint=_IDENTITY_HINT) from exc

    still_missing = [key for key in missing if key not in values]
    if still_missing:
        raise VcsConfigError(
            f"Git {', '.join(still_missing)} not configured.",
            hint=_IDENTITY_HINT,
        )

    logger.info("Configured %s for %s", ", ".join(values), ctx.project_dir)
    return StepOutcome.ok(IDENTITY_STEP_NAME, f"set {', '.join(values)}")
