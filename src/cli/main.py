"""PyCargo command line.

`pycargo new NAME` runs the bootstrap pipeline; `pycargo doctor run`
checks the environment. The commands only translate flags into a
`BootstrapRequest`, wire the real adapters and render the report.
"""

from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.git_cli import GitCli
from adapters.github_api import GitHubClient
from adapters.http_client import HttpDownloader
from adapters.uv_tool import UvTool
from cli.doctor import app as doctor_app
from cli.logging_config import configure_logging
from cli.ui_components import (
    StepReporter,
    activation_hint,
    build_error_panel,
    build_failure_panel,
    build_settings_error_panel,
    build_summary_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.models import BootstrapPlan, GitIdentity, StepStatus
from core.errors import BootstrapError, ErrorKind
from core.services.bootstrap_pipeline import run_bootstrap
from core.services.plan_resolver import BootstrapRequest, resolve_plan
from core.services.steps import IdentityPrompt, StepContext

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="PyCargo: bootstrap a Python project (directory, requirements, git, uv, GitHub).",
)
app.add_typer(doctor_app, name="doctor")

_console = Console()

EXIT_STEP_FAILED = 1
EXIT_BAD_INPUT = 2


def _package_version() -> str:
    try:
        return version("pycargo")
    except PackageNotFoundError:
        return "0.0.0+dev"


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"pycargo {_package_version()}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs on stderr."),
    show_version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    configure_logging(verbose)


def make_identity_prompt(
    git_name: str | None,
    git_email: str | None,
    *,
    interactive: bool,
    reporter: StepReporter | None = None,
) -> IdentityPrompt:
    """Identity values from flags first, then from the terminal if there is one."""

    def prompt(missing: list[str]) -> GitIdentity | None:
        name, email = git_name, git_email
        needs_input = ("user.name" in missing and not name) or ("user.email" in missing and not email)
        if needs_input and interactive:
            if reporter is not None:
                reporter.pause()
            if "user.name" in missing and not name:
                name = typer.prompt("Git user.name is not configured. Please enter your name", default="", show_default=False)
            if "user.email" in missing and not email:
                email = typer.prompt("Git user.email is not configured. Please enter your email", default="", show_default=False)
        if not name and not email:
            return None
        return GitIdentity(name=name or None, email=email or None)

    return prompt


def build_context(
    plan: BootstrapPlan,
    settings: AppSettings,
    *,
    prompt_identity: IdentityPrompt | None,
) -> StepContext:
    return StepContext(
        plan=plan,
        settings=settings,
        vcs=GitCli(),
        package_tool=UvTool(),
        downloader=HttpDownloader(settings),
        remote_host_factory=lambda token: GitHubClient(token, settings),
        prompt_identity=prompt_identity,
    )


@app.command()
def new(
    project_name: Optional[str] = typer.Argument(None, metavar="NAME", help="Name of the project directory."),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Name of the project directory (alternative to NAME)."),
    setup: Optional[str] = typer.Option(
        None,
        "--setup",
        "-s",
        help="Setup type: basic, advanced, data-science or blank (default: advanced).",
    ),
    github_repo: bool = typer.Option(False, "--github-repo", "-g", help="Create a GitHub repository and add it as a remote."),
    github_repo_name: Optional[str] = typer.Option(
        None,
        "--github-repo-name",
        help="Custom name for the GitHub repository (default: project name).",
    ),
    private: bool = typer.Option(False, "--private", "-p", help="Make the GitHub repository private."),
    resume: bool = typer.Option(False, "--resume", help="Continue in an existing, non-empty project directory."),
    no_env: bool = typer.Option(False, "--no-env", help="Skip uv init/venv/requirements installation."),
    git_name: Optional[str] = typer.Option(None, "--git-name", help="git user.name to set if none is configured."),
    git_email: Optional[str] = typer.Option(None, "--git-email", help="git user.email to set if none is configured."),
) -> None:
    """Bootstrap a new project directory."""

    if project_name and name and project_name != name:
        _console.print(build_error_panel(ErrorKind.INVALID_INPUT.value, "Give the project name either as NAME or --name, not both."))
        raise typer.Exit(EXIT_BAD_INPUT)

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(build_settings_error_panel(exc))
        raise typer.Exit(EXIT_BAD_INPUT) from exc

    request = BootstrapRequest(
        project_name=project_name or name or "",
        setup=setup or settings.default_setup,
        github_repo=github_repo,
        github_repo_name=github_repo_name,
        private=private,
        resume=resume,
        setup_environment=not no_env,
    )

    try:
        plan = resolve_plan(request, settings=settings)
    except BootstrapError as exc:
        _console.print(build_error_panel(exc.kind.value, exc.message, exc.hint))
        raise typer.Exit(EXIT_BAD_INPUT) from exc

    print_banner(_console)
    reporter = StepReporter(_console)
    prompt = make_identity_prompt(git_name, git_email, interactive=sys.stdin.isatty(), reporter=reporter)
    ctx = build_context(plan, settings, prompt_identity=prompt)

    try:
        report = run_bootstrap(ctx, hooks=reporter.hooks())
    finally:
        reporter.pause()

    _console.print()
    _console.print(build_summary_table(report))

    for outcome in report.warnings:
        if outcome.hint:
            _console.print(f"[yellow]⚠ {outcome.step_name}:[/yellow] {outcome.hint}")

    if not report.succeeded:
        failed = report.outcomes[-1]
        _console.print(build_failure_panel(failed))
        raise typer.Exit(EXIT_STEP_FAILED)

    _console.print(f"\n[bold green]✅ Setup completed[/bold green] in {report.project_dir}")
    environment = report.outcome("environment")
    if environment is not None and environment.status is not StepStatus.FAILED and plan.setup_environment:
        _console.print("[bold blue]To activate the virtual environment, run:[/bold blue]")
        _console.print(f"[yellow]cd {plan.project_name} && {activation_hint()}[/yellow]")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
