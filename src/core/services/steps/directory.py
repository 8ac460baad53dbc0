"""Creates (or validates) the project directory.

The only step whose failure always stops the run: nothing after it has a
place to write.
"""

from __future__ import annotations

import logging

from core.domain.models import StepOutcome
from core.errors import AlreadyExistsError, FileWriteError
from core.services.steps.context import StepContext

logger = logging.getLogger(__name__)

STEP_NAME = "directory"


def initialize_directory(ctx: StepContext) -> StepOutcome:
    path = ctx.project_dir
    name = ctx.plan.project_name

    if path.exists():
        if not path.is_dir():
            raise AlreadyExistsError(f"'{name}' already exists and is not a directory.")
        if any(path.iterdir()):
            if ctx.plan.resume:
                logger.info("Resuming in existing directory %s", path)
                return StepOutcome.skipped(STEP_NAME, f"resuming in {path}")
            raise AlreadyExistsError(
                f"Directory '{name}' already exists and is not empty.",
                hint="Choose a different project name, or pass --resume to continue a previous run.",
            )
        return StepOutcome.skipped(STEP_NAME, f"reusing empty directory {path}")

    try:
        path.mkdir()
    except FileExistsError as exc:
        raise AlreadyExistsError(f"Directory '{name}' appeared while creating it.") from exc
    except OSError as exc:
        raise FileWriteError(f"Could not create '{path}': {exc}") from exc

    logger.info("Created project directory %s", path)
    return StepOutcome.ok(STEP_NAME, str(path))
