"""Shared state handed to every pipeline step."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from core.config import AppSettings
from core.domain.models import BootstrapPlan, GitIdentity, StepOutcome
from core.interfaces.downloader import AssetDownloader
from core.interfaces.package_tool import PackageEnvTool
from core.interfaces.remote_host import RemoteHostFactory
from core.interfaces.vcs import VersionControl

# Receives the missing config keys ("user.name", "user.email") and returns the
# values the user supplied, or None to leave identity unset.
IdentityPrompt = Callable[[list[str]], GitIdentity | None]


@dataclass
class StepContext:
    plan: BootstrapPlan
    settings: AppSettings
    vcs: VersionControl
    package_tool: PackageEnvTool
    downloader: AssetDownloader
    remote_host_factory: RemoteHostFactory | None = None
    prompt_identity: IdentityPrompt | None = None
    outcomes: list[StepOutcome] = field(default_factory=list)

    @property
    def project_dir(self) -> Path:
        return self.plan.project_dir

    @property
    def manifest_path(self) -> Path:
        return self.project_dir / self.settings.manifest_filename
