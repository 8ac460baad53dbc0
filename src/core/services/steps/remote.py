"""Creates the hosted repository and links it as a git remote.

Exactly one creation attempt per run: this is the only step with effects
outside the local machine, so a failure is reported and never retried.
"""

from __future__ import annotations

import logging

from core.config import CREDENTIAL_ENV_VAR
from core.domain.models import StepOutcome
from core.errors import MissingCredentialError, VcsConfigError, VcsError
from core.services.steps.context import StepContext

logger = logging.getLogger(__name__)

STEP_NAME = "remote"


def provision_remote(ctx: StepContext) -> StepOutcome:
    target = ctx.plan.remote
    if target is None:
        return StepOutcome.skipped(STEP_NAME, "not requested")

    credential = ctx.plan.credential
    if credential is None or ctx.remote_host_factory is None:
        raise MissingCredentialError(f"{CREDENTIAL_ENV_VAR} was not resolved for this run.")

    host = ctx.remote_host_factory(credential)
    logger.info(
        "Creating %s repository '%s'", target.visibility.value, target.repo_name
    )
    repo = host.create_repository(target.repo_name, target.visibility)

    remote_name = ctx.settings.remote_name
    try:
        ctx.vcs.add_remote(ctx.project_dir, remote_name, repo.clone_url)
    except VcsError as exc:
        raise VcsConfigError(
            f"Repository created at {repo.clone_url} but the remote could not be added: {exc}",
            hint=f"git remote add {remote_name} {repo.clone_url}",
        ) from exc

    public_url = repo.html_url or repo.clone_url.removesuffix(".git")
    return StepOutcome.ok(STEP_NAME, f"{public_url} ({remote_name})")
