"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from adapters.git_cli import GitCli
from adapters.http_client import build_client
from adapters.uv_tool import UvTool
from cli.ui_components import build_settings_error_panel
from core.config import CREDENTIAL_ENV_VAR, AppSettings
from core.errors import VcsError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


def _check_identity(git: GitCli) -> tuple[str, str]:
    try:
        name = git.get_config(Path.cwd(), "user.name")
        email = git.get_config(Path.cwd(), "user.email")
    except VcsError as exc:
        return "FAIL", str(exc)
    if name and email:
        return "OK", f"{name} <{email}>"
    return "MISSING", "Will be asked for (or use --git-name/--git-email) during `pycargo new`"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(build_settings_error_panel(exc))
        raise typer.Exit(2) from exc
    git = GitCli()
    uv = UvTool()

    table = Table(title="PyCargo Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    git_ok = git.is_available()
    table.add_row("git", "OK" if git_ok else "FAIL", "found on PATH" if git_ok else "install git first")

    if git_ok:
        status, detail = _check_identity(git)
        table.add_row("git identity", status, detail)

    uv_version = uv.version()
    if uv_version:
        table.add_row("uv", "OK", uv_version)
    else:
        table.add_row("uv", "MISSING", "Will be installed with pip during `pycargo new`")

    if settings.github_token is not None:
        table.add_row(CREDENTIAL_ENV_VAR, "OK", "--github-repo available")
    else:
        table.add_row(CREDENTIAL_ENV_VAR, "OPTIONAL", "Not set -> --github-repo will be refused")

    ok_http, detail_http = _check_http(settings.github_api_url, settings)
    table.add_row("GitHub API", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not git_ok:
        _console.print("\n[yellow]Note:[/yellow] `pycargo new` cannot initialize the repository without git.")
        raise typer.Exit(1)
