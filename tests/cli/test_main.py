import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from core.errors import NameConflictError
from core.services.steps import StepContext
from conftest import GITIGNORE_BODY, LICENSE_BODY, FakeDownloader, FakePackageTool, FakeRemoteHost, FakeVcs

runner = CliRunner()


@pytest.fixture
def fakes(mocker, settings):
    """Replace the real adapters wired by `build_context` with in-memory fakes."""

    bundle = {
        "vcs": FakeVcs({"user.name": "Ada Lovelace", "user.email": "ada@example.com"}),
        "package_tool": FakePackageTool(),
        "downloader": FakeDownloader({settings.gitignore_url: GITIGNORE_BODY, settings.license_url: LICENSE_BODY}),
        "remote_host": FakeRemoteHost(),
    }

    def _build(plan, settings, *, prompt_identity):
        return StepContext(
            plan=plan,
            settings=settings,
            vcs=bundle["vcs"],
            package_tool=bundle["package_tool"],
            downloader=bundle["downloader"],
            remote_host_factory=bundle["remote_host"].factory,
            prompt_identity=prompt_identity,
        )

    mocker.patch.object(cli_main, "build_context", side_effect=_build)
    return bundle


def test_new_blank_project(tmp_path, fakes):
    result = runner.invoke(cli_main.app, ["new", "demo", "--setup", "blank", "--no-env"])

    assert result.exit_code == 0, result.output
    project = tmp_path / "demo"
    assert (project / "requirements.txt").read_text(encoding="utf-8") == ""
    assert (project / ".gitignore").read_bytes() == GITIGNORE_BODY
    assert (project / "LICENSE").read_bytes() == LICENSE_BODY
    assert "Setup completed" in result.output
    assert "add_requirements" not in fakes["package_tool"].calls


def test_new_accepts_name_option(tmp_path, fakes):
    result = runner.invoke(cli_main.app, ["new", "--name", "demo", "-s", "basic"])

    assert result.exit_code == 0, result.output
    assert "numpy" in (tmp_path / "demo" / "requirements.txt").read_text(encoding="utf-8")
    assert "activate" in result.output


def test_conflicting_names_are_rejected(tmp_path, fakes):
    result = runner.invoke(cli_main.app, ["new", "demo", "--name", "other"])

    assert result.exit_code == cli_main.EXIT_BAD_INPUT
    assert not (tmp_path / "demo").exists()
    assert not (tmp_path / "other").exists()


def test_invalid_setup_is_rejected(tmp_path, fakes):
    result = runner.invoke(cli_main.app, ["new", "demo", "--setup", "enterprise"])

    assert result.exit_code == cli_main.EXIT_BAD_INPUT
    assert "enterprise" in result.output
    assert not (tmp_path / "demo").exists()


def test_missing_name_is_rejected(tmp_path, fakes):
    result = runner.invoke(cli_main.app, ["new"])

    assert result.exit_code == cli_main.EXIT_BAD_INPUT
    assert list(tmp_path.iterdir()) == []


def test_invalid_configuration_is_bad_input(tmp_path, fakes, monkeypatch):
    monkeypatch.setenv("PYCARGO_DEFAULT_SETUP", "enterprise")

    result = runner.invoke(cli_main.app, ["new", "demo"])

    assert result.exit_code == cli_main.EXIT_BAD_INPUT
    assert "Invalid configuration" in result.output
    assert "default_setup" in result.output
    assert not (tmp_path / "demo").exists()


def test_github_repo_without_token_creates_nothing(tmp_path, fakes):
    result = runner.invoke(cli_main.app, ["new", "demo", "--github-repo"])

    assert result.exit_code == cli_main.EXIT_BAD_INPUT
    assert "GITHUB_TOKEN" in result.output
    assert not (tmp_path / "demo").exists()
    assert fakes["remote_host"].created == []


def test_github_repo_with_token(tmp_path, fakes, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_from_env")

    result = runner.invoke(cli_main.app, ["new", "demo", "-g", "-p", "--github-repo-name", "demo-repo", "--no-env"])

    assert result.exit_code == 0, result.output
    (name, visibility), = fakes["remote_host"].created
    assert name == "demo-repo"
    assert visibility.is_private
    assert fakes["vcs"].remotes == {"origin": "https://github.com/octocat/demo-repo.git"}
    assert "ghp_from_env" not in result.output


def test_remote_failure_exits_with_step_failure(tmp_path, fakes, monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_from_env")
    fakes["remote_host"].error = NameConflictError("Repository 'demo' already exists on this account.")

    result = runner.invoke(cli_main.app, ["new", "demo", "-g", "--no-env"])

    assert result.exit_code == cli_main.EXIT_STEP_FAILED
    assert "already exists" in result.output
    assert (tmp_path / "demo" / "requirements.txt").exists()


def test_non_empty_directory_is_a_step_failure(tmp_path, fakes):
    existing = tmp_path / "demo"
    existing.mkdir()
    (existing / "notes.txt").write_text("keep me", encoding="utf-8")

    result = runner.invoke(cli_main.app, ["new", "demo"])

    assert result.exit_code == cli_main.EXIT_STEP_FAILED
    assert "--resume" in result.output
    assert sorted(p.name for p in existing.iterdir()) == ["notes.txt"]


def test_resume_continues_in_existing_directory(tmp_path, fakes):
    assert runner.invoke(cli_main.app, ["new", "demo", "--no-env"]).exit_code == 0

    result = runner.invoke(cli_main.app, ["new", "demo", "--resume", "--no-env"])

    assert result.exit_code == 0, result.output


def test_download_failure_is_only_a_warning(tmp_path, fakes, settings):
    fakes["downloader"].failing.add(settings.license_url)

    result = runner.invoke(cli_main.app, ["new", "demo", "--no-env"])

    assert result.exit_code == 0, result.output
    assert not (tmp_path / "demo" / "LICENSE").exists()
    assert (tmp_path / "demo" / ".gitignore").exists()


def test_identity_from_flags(tmp_path, fakes):
    fakes["vcs"].config.clear()

    result = runner.invoke(
        cli_main.app,
        ["new", "demo", "--no-env", "--git-name", "Grace Hopper", "--git-email", "grace@example.com"],
    )

    assert result.exit_code == 0, result.output
    assert fakes["vcs"].config == {"user.name": "Grace Hopper", "user.email": "grace@example.com"}


def test_version_flag():
    result = runner.invoke(cli_main.app, ["--version"])

    assert result.exit_code == 0
    assert result.output.startswith("pycargo ")


class TestIdentityPrompt:
    def test_flags_win_without_prompting(self, mocker):
        ask = mocker.patch("cli.main.typer.prompt")
        prompt = cli_main.make_identity_prompt("Ada", "ada@example.com", interactive=True)

        identity = prompt(["user.name", "user.email"])

        assert identity.name == "Ada"
        assert identity.email == "ada@example.com"
        ask.assert_not_called()

    def test_asks_only_for_missing_values(self, mocker):
        ask = mocker.patch("cli.main.typer.prompt", return_value="ada@example.com")
        prompt = cli_main.make_identity_prompt(None, None, interactive=True)

        identity = prompt(["user.email"])

        assert identity.email == "ada@example.com"
        assert identity.name is None
        ask.assert_called_once()

    def test_non_interactive_without_flags_gives_nothing(self, mocker):
        ask = mocker.patch("cli.main.typer.prompt")
        prompt = cli_main.make_identity_prompt(None, None, interactive=False)

        assert prompt(["user.name", "user.email"]) is None
        ask.assert_not_called()

    def test_blank_answers_give_nothing(self, mocker):
        mocker.patch("cli.main.typer.prompt", return_value="")
        prompt = cli_main.make_identity_prompt(None, None, interactive=True)

        assert prompt(["user.name"]) is None
