import sys

import pytest

from adapters.process import CommandFailed, run_command


def test_captures_stdout(tmp_path):
    result = run_command([sys.executable, "-c", "print('hello')"], cwd=tmp_path)

    assert result.returncode == 0
    assert result.stdout.strip() == "hello"


def test_non_zero_exit_raises_with_stderr():
    script = "import sys; sys.stderr.write('boom'); sys.exit(3)"

    with pytest.raises(CommandFailed) as excinfo:
        run_command([sys.executable, "-c", script])

    assert excinfo.value.returncode == 3
    assert excinfo.value.stderr == "boom"
    assert "boom" in str(excinfo.value)


def test_non_zero_exit_without_check_returns_result():
    result = run_command([sys.executable, "-c", "import sys; sys.exit(1)"], check=False)

    assert result.returncode == 1


def test_missing_executable_raises():
    with pytest.raises(CommandFailed) as excinfo:
        run_command(["pycargo-definitely-not-a-real-command"], check=False)

    assert excinfo.value.returncode is None
    assert "could not run" in str(excinfo.value)
