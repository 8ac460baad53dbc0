"""Best-effort download of boilerplate files (.gitignore, LICENSE)."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.config import AppSettings
from core.domain.models import StepOutcome
from core.errors import DownloadError, DownloadFailedError
from core.services.steps.context import StepContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Asset:
    step_name: str
    filename: str
    url: str


def boilerplate_assets(settings: AppSettings) -> tuple[Asset, ...]:
    return (
        Asset(step_name="gitignore", filename=".gitignore", url=settings.gitignore_url),
        Asset(step_name="license", filename="LICENSE", url=settings.license_url),
    )


def fetch_asset(ctx: StepContext, asset: Asset) -> StepOutcome:
    target = ctx.project_dir / asset.filename
    if target.exists():
        return StepOutcome.skipped(asset.step_name, f"{asset.filename} already present")

    try:
        body = ctx.downloader.fetch(asset.url)
    except DownloadError as exc:
        raise DownloadFailedError(
            f"{asset.filename}: {exc}",
            hint=f"Download it manually from {asset.url}",
        ) from exc

    try:
        target.write_bytes(body)
    except OSError as exc:
        raise DownloadFailedError(f"{asset.filename}: could not write file: {exc}") from exc

    logger.info("Downloaded %s (%d bytes)", asset.filename, len(body))
    return StepOutcome.ok(asset.step_name, f"{asset.filename} ({len(body)} bytes)")
