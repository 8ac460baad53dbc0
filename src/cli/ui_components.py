"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- The same step reporter and tables serve `new` and `doctor`.
"""

from __future__ import annotations

import sys

from pydantic import ValidationError
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.status import Status
from rich.table import Table
from rich.text import Text

from core.domain.models import BootstrapReport, StepOutcome, StepStatus
from core.errors import ErrorKind
from core.services.bootstrap_pipeline import PipelineHooks, PipelineStep

_STATUS_STYLE = {
    StepStatus.OK: ("✅", "green"),
    StepStatus.SKIPPED: ("⏭", "yellow"),
    StepStatus.FAILED: ("❌", "red"),
}


def print_banner(console: Console) -> None:
    title = Text("PyCargo", style="bold blue")
    subtitle = Text("Bootstrap a Python project • git • uv • GitHub", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="blue", padding=(1, 4)))


def format_outcome(label: str, outcome: StepOutcome) -> Text:
    symbol, style = _STATUS_STYLE[outcome.status]
    if outcome.status is StepStatus.FAILED and not outcome.fatal:
        symbol, style = "⚠", "yellow"
    line = Text(f"{symbol} ", style=style)
    line.append(label, style="white")
    if outcome.detail:
        line.append(f" ({outcome.detail})", style="bright_black")
    return line


class StepReporter:
    """Spinner while a step runs, one status line when it finishes.

    `pause()` stops the spinner so an interactive prompt can take the
    terminal; the next step starts a new one.
    """

    def __init__(self, console: Console) -> None:
        self._console = console
        self._status: Status | None = None

    def hooks(self) -> PipelineHooks:
        return PipelineHooks(step_started=self.started, step_finished=self.finished)

    def started(self, step: PipelineStep) -> None:
        self.pause()
        self._status = self._console.status(f"{step.label}...", spinner="dots")
        self._status.start()

    def finished(self, step: PipelineStep, outcome: StepOutcome) -> None:
        self.pause()
        self._console.print(format_outcome(step.label, outcome))

    def pause(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None


def build_summary_table(report: BootstrapReport) -> Table:
    table = Table(title=f"Project '{report.project_name}'")
    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    for outcome in report.outcomes:
        _, style = _STATUS_STYLE[outcome.status]
        status = outcome.status.value.upper()
        if outcome.error_kind is not None:
            status = f"{status} [{outcome.error_kind.value}]"
            if not outcome.fatal:
                style = "yellow"
        table.add_row(outcome.step_name, Text(status, style=style), outcome.detail)
    return table


def build_failure_panel(outcome: StepOutcome) -> Panel:
    body = Text(outcome.detail)
    if outcome.hint:
        body.append("\n\n")
        body.append(outcome.hint, style="yellow")
    kind = outcome.error_kind.value if outcome.error_kind else "Error"
    return Panel(body, title=Text(f"{kind} in step '{outcome.step_name}'", style="bold red"), border_style="red")


def build_error_panel(kind: str, message: str, hint: str | None = None) -> Panel:
    body = Text(message)
    if hint:
        body.append("\n\n")
        body.append(hint, style="yellow")
    return Panel(body, title=Text(kind, style="bold red"), border_style="red", padding=(1, 2))


def activation_hint() -> str:
    if sys.platform.startswith("win"):
        return r".venv\Scripts\activate"
    return "source .venv/bin/activate"


def build_settings_error_panel(exc: ValidationError) -> Panel:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'settings'}: {err['msg']}" for err in exc.errors()
    )
    return build_error_panel(
        ErrorKind.INVALID_INPUT.value,
        f"Invalid configuration: {problems}",
        "Check the PYCARGO_* environment variables and the .env files.",
    )
