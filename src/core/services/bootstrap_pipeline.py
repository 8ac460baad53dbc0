"""Bootstrap orchestration.

This module owns the ordered list of provisioning steps and the rule that
decides whether the run continues after each one. The CLI only renders
progress through `PipelineHooks`; nothing here prints or prompts, which
keeps the pipeline reusable from tests and other entry points.

Order: directory -> manifest -> vcs -> identity -> gitignore -> license ->
package-env -> environment -> remote. Steps run strictly one after the other;
a fatal failure ends the run and leaves what earlier steps produced in place
so a later `--resume` can pick up from there.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable, Sequence

from core.config import AppSettings
from core.domain.models import BootstrapReport, StepOutcome, StepStatus
from core.errors import BootstrapError
from core.services.steps import (
    StepContext,
    boilerplate_assets,
    ensure_identity,
    fetch_asset,
    generate_manifest,
    initialize_directory,
    initialize_repository,
    provision_package_tool,
    provision_remote,
    setup_environment,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineStep:
    name: str
    label: str
    run: Callable[[StepContext], StepOutcome]


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (spinners, step tree)."""

    step_started: Callable[[PipelineStep], None] | None = None
    step_finished: Callable[[PipelineStep, StepOutcome], None] | None = None


def build_steps(settings: AppSettings) -> list[PipelineStep]:
    gitignore, license_ = boilerplate_assets(settings)
    return [
        PipelineStep("directory", "Create project directory", initialize_directory),
        PipelineStep("manifest", f"Write {settings.manifest_filename}", generate_manifest),
        PipelineStep("vcs", "Initialize git repository", initialize_repository),
        PipelineStep("identity", "Check git identity", ensure_identity),
        PipelineStep(gitignore.step_name, f"Download {gitignore.filename}", partial(fetch_asset, asset=gitignore)),
        PipelineStep(license_.step_name, f"Download {license_.filename}", partial(fetch_asset, asset=license_)),
        PipelineStep("package-env", "Check uv installation", provision_package_tool),
        PipelineStep("environment", "Set up uv environment", setup_environment),
        PipelineStep("remote", "Create GitHub repository", provision_remote),
    ]


def _failed_outcome(step: PipelineStep, exc: BootstrapError) -> StepOutcome:
    return StepOutcome(
        step_name=step.name,
        status=StepStatus.FAILED,
        detail=exc.message,
        error_kind=exc.kind,
        fatal=exc.fatal,
        hint=exc.hint,
    )


def run_bootstrap(
    ctx: StepContext,
    *,
    hooks: PipelineHooks | None = None,
    steps: Sequence[PipelineStep] | None = None,
) -> BootstrapReport:
    """Execute the steps in order and collect one outcome per executed step.

    Only `BootstrapError` is handled here: anything else is a bug and
    propagates to the caller.
    """

    hooks = hooks or PipelineHooks()
    steps = list(steps) if steps is not None else build_steps(ctx.settings)

    for step in steps:
        if hooks.step_started:
            hooks.step_started(step)
        logger.debug("Starting step %s", step.name)

        try:
            outcome = step.run(ctx)
        except BootstrapError as exc:
            outcome = _failed_outcome(step, exc)

        ctx.outcomes.append(outcome)
        if hooks.step_finished:
            hooks.step_finished(step, outcome)

        if outcome.status is not StepStatus.FAILED:
            logger.debug("Step %s %s: %s", step.name, outcome.status.value, outcome.detail)
            continue

        logger.info(
            "Step %s failed (%s, %s): %s",
            step.name,
            outcome.error_kind.value if outcome.error_kind else "unknown",
            "fatal" if outcome.fatal else "non-fatal",
            outcome.detail,
        )
        if outcome.fatal:
            break

    return BootstrapReport(
        project_name=ctx.plan.project_name,
        project_dir=ctx.project_dir,
        outcomes=list(ctx.outcomes),
    )
