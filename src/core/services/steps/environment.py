"""Sets up the project environment with uv once the tool is present."""

from __future__ import annotations

import logging

from core.domain.models import StepOutcome
from core.errors import EnvSetupFailedError, PackageToolError
from core.services.steps.context import StepContext

logger = logging.getLogger(__name__)

STEP_NAME = "environment"


def _manifest_has_packages(ctx: StepContext) -> bool:
    path = ctx.manifest_path
    if not path.exists():
        return False
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvSetupFailedError(
            f"Could not read {path.name}: {exc}",
            hint=f"Fix {path.name} (UTF-8, one package per line), then run `uv add -r {path.name}`.",
        ) from exc
    return any(line.strip() for line in text.splitlines())


def setup_environment(ctx: StepContext) -> StepOutcome:
    if not ctx.plan.setup_environment:
        return StepOutcome.skipped(STEP_NAME, "disabled (--no-env)")

    project_dir = ctx.project_dir
    tool = ctx.package_tool
    done: list[str] = []
    try:
        if not (project_dir / "pyproject.toml").exists():
            tool.init_project(project_dir)
            done.append("uv init")
        if not (project_dir / ".venv").exists():
            tool.create_venv(project_dir)
            done.append(".venv created")
        if _manifest_has_packages(ctx):
            tool.add_requirements(project_dir, ctx.manifest_path)
            done.append("requirements installed")
    except PackageToolError as exc:
        raise EnvSetupFailedError(
            str(exc),
            hint="Run `uv venv` and `uv add -r requirements.txt` inside the project to finish.",
        ) from exc

    if not done:
        return StepOutcome.skipped(STEP_NAME, "environment already present")
    logger.info("Environment ready in %s: %s", project_dir, ", ".join(done))
    return StepOutcome.ok(STEP_NAME, ", ".join(done))
