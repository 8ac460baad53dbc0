"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into
  the CLI.
- Adapters (git, uv, HTTP) and the plan resolver read settings the same way.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.models import SetupKind

CREDENTIAL_ENV_VAR = "GITHUB_TOKEN"

GITIGNORE_URL = "https://raw.githubusercontent.com/github/gitignore/main/Python.gitignore"
LICENSE_URL = "https://www.apache.org/licenses/LICENSE-2.0.txt"


def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no extra dependency)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pycargo"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pycargo"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pycargo"
    return Path.home() / ".config" / "pycargo"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) so the pipeline only ever
      sees clean values.
    - One config contract for the CLI, the steps and the adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PYCARGO_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the user-wide file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per HTTP request (seconds).",
    )
    user_agent: str = Field(
        default="pycargo/0.1",
        min_length=1,
        description="User-Agent sent to GitHub and the download hosts.",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL of the GitHub REST API.",
    )
    gitignore_url: str = Field(
        default=GITIGNORE_URL,
        min_length=8,
        description="Source of the .gitignore template.",
    )
    license_url: str = Field(
        default=LICENSE_URL,
        min_length=8,
        description="Source of the LICENSE text.",
    )
    manifest_filename: str = Field(
        default="requirements.txt",
        min_length=1,
        description="Dependency manifest written into the project.",
    )
    remote_name: str = Field(
        default="origin",
        min_length=1,
        description="Name of the git remote linked to the created repository.",
    )
    default_setup: SetupKind = Field(
        default=SetupKind.ADVANCED,
        description="Setup kind used when --setup is not given.",
    )

    github_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices(CREDENTIAL_ENV_VAR, "PYCARGO_GITHUB_TOKEN"),
        description="Token for the GitHub API (only needed with --github-repo).",
    )
