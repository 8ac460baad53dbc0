"""Writes the dependency manifest for the selected setup kind."""

from __future__ import annotations

import logging

from core.domain.models import StepOutcome
from core.domain.templates import manifest_lines, render_manifest
from core.errors import FileWriteError
from core.services.steps.context import StepContext

logger = logging.getLogger(__name__)

STEP_NAME = "manifest"


def generate_manifest(ctx: StepContext) -> StepOutcome:
    path = ctx.manifest_path
    kind = ctx.plan.setup_kind

    # An existing manifest is never rewritten, even if the setup kind changed.
    if path.exists():
        return StepOutcome.skipped(STEP_NAME, f"{path.name} already present")

    try:
        path.write_text(render_manifest(kind), encoding="utf-8")
    except OSError as exc:
        raise FileWriteError(f"Could not write {path.name}: {exc}") from exc

    count = len(manifest_lines(kind))
    logger.info("Wrote %s with %d packages (%s)", path, count, kind.value)
    return StepOutcome.ok(STEP_NAME, f"{path.name} from '{kind.value}' template ({count} packages)")
