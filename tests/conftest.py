from pathlib import Path

import pytest
from pydantic import SecretStr

from core.config import AppSettings
from core.domain.models import RemoteRepository, Visibility
from core.errors import DownloadError, PackageToolError, VcsError
from core.services.plan_resolver import BootstrapRequest, resolve_plan
from core.services.steps import StepContext

GITIGNORE_BODY = b"__pycache__/\n*.py[cod]\n.venv/\n"
LICENSE_BODY = b"Apache License\nVersion 2.0, January 2004\n"


class FakeVcs:
    """In-memory repository backend; `init` creates a real `.git` directory."""

    def __init__(
        self,
        identity=None,
        *,
        fail_init=False,
        fail_get=False,
        fail_set=False,
        fail_add_remote=False,
    ):
        self.config = dict(identity or {})
        self.remotes = {}
        self.calls = []
        self.fail_init = fail_init
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.fail_add_remote = fail_add_remote

    def init(self, path: Path) -> bool:
        self.calls.append(("init", path))
        if self.fail_init:
            raise VcsError("git: command not found")
        if (path / ".git").exists():
            return False
        (path / ".git").mkdir()
        return True

    def get_config(self, path: Path, key: str):
        self.calls.append(("get_config", key))
        if self.fail_get:
            raise VcsError("config file locked")
        return self.config.get(key)

    def set_config(self, path: Path, key: str, value: str) -> None:
        self.calls.append(("set_config", key, value))
        if self.fail_set:
            raise VcsError("config file locked")
        self.config[key] = value

    def add_remote(self, path: Path, name: str, url: str) -> None:
        self.calls.append(("add_remote", name, url))
        if self.fail_add_remote:
            raise VcsError(f"remote {name} already exists")
        self.remotes[name] = url


class FakePackageTool:
    def __init__(self, *, installed=True, installable=True, fail_env=False):
        self.installed = installed
        self.installable = installable
        self.fail_env = fail_env
        self.calls = []

    def is_installed(self) -> bool:
        self.calls.append("is_installed")
        return self.installed

    def install(self) -> None:
        self.calls.append("install")
        if not self.installable:
            raise PackageToolError("pip install uv exited with 1")
        self.installed = True

    def init_project(self, path: Path) -> None:
        self.calls.append("init_project")
        if self.fail_env:
            raise PackageToolError("uv init failed")
        (path / "pyproject.toml").write_text("[project]\nname = 'demo'\n", encoding="utf-8")

    def create_venv(self, path: Path) -> None:
        self.calls.append("create_venv")
        (path / ".venv").mkdir()

    def add_requirements(self, path: Path, manifest: Path) -> None:
        self.calls.append("add_requirements")


class FakeDownloader:
    def __init__(self, bodies, *, failing=()):
        self.bodies = dict(bodies)
        self.failing = set(failing)
        self.requested = []

    def fetch(self, url: str) -> bytes:
        self.requested.append(url)
        if url in self.failing:
            raise DownloadError(f"HTTP 503 from {url}")
        return self.bodies[url]


class FakeRemoteHost:
    def __init__(self, *, error=None, owner="octocat"):
        self.error = error
        self.owner = owner
        self.created = []
        self.tokens = []

    def factory(self, token: SecretStr):
        self.tokens.append(token.get_secret_value())
        return self

    def create_repository(self, name: str, visibility: Visibility) -> RemoteRepository:
        self.created.append((name, visibility))
        if self.error is not None:
            raise self.error
        return RemoteRepository(
            name=name,
            clone_url=f"https://github.com/{self.owner}/{name}.git",
            html_url=f"https://github.com/{self.owner}/{name}",
        )


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    """No real token, no stray .env files, cwd inside the test's tmp dir."""

    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("PYCARGO_GITHUB_TOKEN", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings():
    return AppSettings(_env_file=None)


@pytest.fixture
def settings_with_token(settings):
    return settings.model_copy(update={"github_token": SecretStr("ghp_test_token")})


@pytest.fixture
def vcs():
    return FakeVcs({"user.name": "Ada Lovelace", "user.email": "ada@example.com"})


@pytest.fixture
def package_tool():
    return FakePackageTool()


@pytest.fixture
def downloader(settings):
    return FakeDownloader({settings.gitignore_url: GITIGNORE_BODY, settings.license_url: LICENSE_BODY})


@pytest.fixture
def remote_host():
    return FakeRemoteHost()


@pytest.fixture
def make_plan(tmp_path, settings):
    def _make(project_name="demo", *, settings_override=None, **kwargs):
        request = BootstrapRequest(project_name=project_name, base_dir=tmp_path, **kwargs)
        return resolve_plan(request, settings=settings_override or settings)

    return _make


@pytest.fixture
def make_context(settings, vcs, package_tool, downloader, remote_host):
    def _make(plan, **overrides):
        fields = dict(
            plan=plan,
            settings=settings,
            vcs=vcs,
            package_tool=package_tool,
            downloader=downloader,
            remote_host_factory=remote_host.factory,
        )
        fields.update(overrides)
        return StepContext(**fields)

    return _make


def snapshot_tree(root: Path) -> dict:
    """Relative path -> bytes (files) or None (directories)."""

    out = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        out[rel] = path.read_bytes() if path.is_file() else None
    return out


@pytest.fixture
def tree_snapshot():
    return snapshot_tree
