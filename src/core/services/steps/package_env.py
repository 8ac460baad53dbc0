"""Makes sure the package/environment tool (uv) is available."""

from __future__ import annotations

import logging

from core.domain.models import StepOutcome
from core.errors import PackageToolError, ProvisionerUnavailableError
from core.services.steps.context import StepContext

logger = logging.getLogger(__name__)

STEP_NAME = "package-env"


def provision_package_tool(ctx: StepContext) -> StepOutcome:
    tool = ctx.package_tool
    if tool.is_installed():
        return StepOutcome.skipped(STEP_NAME, "uv already installed")

    logger.info("uv not found, installing it")
    install_error: str | None = None
    try:
        tool.install()
    except PackageToolError as exc:
        install_error = str(exc)
        logger.info("uv installation failed: %s", exc)

    if not tool.is_installed():
        detail = "uv is not available after the install attempt"
        if install_error:
            detail = f"{detail}: {install_error}"
        raise ProvisionerUnavailableError(
            detail,
            hint="Install uv manually (https://docs.astral.sh/uv/) and re-run with --resume.",
        )
    return StepOutcome.ok(STEP_NAME, "uv installed")
