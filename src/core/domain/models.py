"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Frozen models give the plan its "built once, never mutated" contract for
  free, and `SecretStr` keeps the credential out of reprs and dumps.
- Step outcomes serialize cleanly for the summary table and for tests.

Note:
- These models describe *what* a bootstrap is, not *how* each external
  system is driven.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, SecretStr
from pydantic.config import ConfigDict

from core.errors import ErrorKind, InvalidInputError


class SetupKind(str, Enum):
    """Named dependency template selected with `--setup`."""

    BASIC = "basic"
    ADVANCED = "advanced"
    DATA_SCIENCE = "data-science"
    BLANK = "blank"

    @classmethod
    def parse(cls, value: str) -> "SetupKind":
        normalized = (value or "").strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind
        choices = ", ".join(f"'{k.value}'" for k in cls)
        raise InvalidInputError(f"Invalid setup type '{value}'. Use {choices}.")


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"

    @classmethod
    def from_bool(cls, private: bool) -> "Visibility":
        return cls.PRIVATE if private else cls.PUBLIC

    @property
    def is_private(self) -> bool:
        return self is Visibility.PRIVATE


class RemoteTarget(BaseModel):
    """Remote repository requested for this bootstrap."""

    model_config = ConfigDict(frozen=True)

    repo_name: str = Field(..., min_length=1, max_length=100)
    visibility: Visibility = Field(default=Visibility.PUBLIC)


class BootstrapPlan(BaseModel):
    """Validated, immutable description of one invocation.

    Built once by `core.services.plan_resolver.resolve_plan`; every step reads
    it and none of them writes to it.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1)
    setup_kind: SetupKind = Field(default=SetupKind.ADVANCED)
    remote: RemoteTarget | None = Field(default=None)
    base_dir: Path = Field(
        ...,
        description="Directory the project is created in (cwd at resolution time).",
    )
    resume: bool = Field(
        default=False,
        description="Reuse a non-empty project directory left by a previous run.",
    )
    setup_environment: bool = Field(
        default=True,
        description="Run uv init/venv/add after the tool is provisioned.",
    )
    credential: SecretStr | None = Field(
        default=None,
        repr=False,
        exclude=True,
        description="Hosting API token; only the remote step reads it.",
    )

    @property
    def project_dir(self) -> Path:
        return self.base_dir / self.project_name


class GitIdentity(BaseModel):
    name: str | None = None
    email: str | None = None

    def missing(self) -> list[str]:
        out: list[str] = []
        if not self.name:
            out.append("user.name")
        if not self.email:
            out.append("user.email")
        return out

    @property
    def complete(self) -> bool:
        return not self.missing()


class StepStatus(str, Enum):
    OK = "ok"
    SKIPPED = "skipped"
    FAILED = "failed"


class StepOutcome(BaseModel):
    step_name: str
    status: StepStatus
    detail: str = ""
    error_kind: ErrorKind | None = None
    fatal: bool = False
    hint: str | None = None

    @classmethod
    def ok(cls, step_name: str, detail: str = "") -> "StepOutcome":
        return cls(step_name=step_name, status=StepStatus.OK, detail=detail)

    @classmethod
    def skipped(cls, step_name: str, detail: str = "") -> "StepOutcome":
        return cls(step_name=step_name, status=StepStatus.SKIPPED, detail=detail)


class RemoteRepository(BaseModel):
    """What the hosting API returns after creating a repository."""

    model_config = ConfigDict(extra="ignore")

    name: str
    clone_url: str = Field(..., min_length=1)
    html_url: str | None = None


class BootstrapReport(BaseModel):
    project_name: str
    project_dir: Path
    outcomes: list[StepOutcome] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not any(o.status is StepStatus.FAILED and o.fatal for o in self.outcomes)

    @property
    def warnings(self) -> list[StepOutcome]:
        return [o for o in self.outcomes if o.status is StepStatus.FAILED and not o.fatal]

    def outcome(self, step_name: str) -> StepOutcome | None:
        for o in self.outcomes:
            if o.step_name == step_name:
                return o
        return None
