"""Unit tests for utility functions (setmystack.utils).

Tests cover:
- run_command (success, failure, cwd, timeout, env vars, capture=False)
- run_checked (success, non-zero exit, missing executable, missing cwd)
- CommandError message
- Rich output helpers (banner, success, warning, error streams)
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from setmystack.utils import (
    CommandError,
    print_error,
    print_success,
    print_warning,
    run_checked,
    run_command,
    show_banner,
)

PY = sys.executable


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_successful_command(self):
        returncode, stdout, stderr = await run_command([PY, "-c", "print('hello')"])
        assert returncode == 0
        assert stdout == "hello"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_failed_command(self):
        returncode, _, _ = await run_command([PY, "-c", "import sys; sys.exit(3)"])
        assert returncode == 3

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_command_with_cwd(self, tmp_path: Path):
        returncode, stdout, _ = await run_command(
            [PY, "-c", "import os; print(os.getcwd())"], cwd=tmp_path
        )
        assert returncode == 0
        assert Path(stdout).resolve() == tmp_path.resolve()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_command_timeout(self):
        returncode, _, stderr = await run_command(
            [PY, "-c", "import time; time.sleep(10)"], timeout=1
        )
        assert returncode == -1
        assert "timed out" in stderr

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_command_with_env(self):
        returncode, stdout, _ = await run_command(
            [PY, "-c", "import os; print(os.environ['SMS_TEST_VAR'])"],
            env={"SMS_TEST_VAR": "value"},
        )
        assert returncode == 0
        assert stdout == "value"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_returns_stderr(self):
        _, _, stderr = await run_command(
            [PY, "-c", "import sys; sys.stderr.write('oops\\n')"]
        )
        assert stderr == "oops"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_capture_false_returns_empty_strings(self):
        returncode, stdout, stderr = await run_command(
            [PY, "-c", "pass"], capture=False
        )
        assert (returncode, stdout, stderr) == (0, "", "")


# ---------------------------------------------------------------------------
# run_checked
# ---------------------------------------------------------------------------


class TestRunChecked:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_returns_stdout_on_success(self):
        assert await run_checked([PY, "-c", "print('ok')"]) == "ok"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_non_zero_exit_raises(self):
        with pytest.raises(CommandError) as exc_info:
            await run_checked(
                [PY, "-c", "import sys; sys.stderr.write('bad'); sys.exit(2)"]
            )
        assert exc_info.value.returncode == 2
        assert exc_info.value.stderr == "bad"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_timeout_raises(self):
        with pytest.raises(CommandError) as exc_info:
            await run_checked([PY, "-c", "import time; time.sleep(10)"], timeout=1)
        assert exc_info.value.returncode == -1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_executable_raises(self):
        with pytest.raises(CommandError) as exc_info:
            await run_checked(["nonexistent-binary-12345-xyz"])
        assert exc_info.value.returncode == 127

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_cwd_raises(self, tmp_path: Path):
        with pytest.raises(CommandError):
            await run_checked([PY, "-c", "pass"], cwd=tmp_path / "absent")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_not_silent_runs_without_capture(self):
        assert await run_checked([PY, "-c", "pass"], silent=False) == ""


class TestCommandError:
    @pytest.mark.unit
    def test_message_includes_command_and_code(self):
        err = CommandError(["npm", "install"], 1)
        assert "npm install" in str(err)
        assert "exit code 1" in str(err)

    @pytest.mark.unit
    def test_message_includes_stderr(self):
        err = CommandError(["git", "init"], 128, "fatal: nope")
        assert str(err).endswith("fatal: nope")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    def test_banner_goes_to_stdout(self, capsys):
        show_banner()
        out = capsys.readouterr().out
        assert "____" in out

    @pytest.mark.unit
    def test_success_goes_to_stdout(self, capsys):
        print_success("All good")
        captured = capsys.readouterr()
        assert "All good" in captured.out
        assert captured.err == ""

    @pytest.mark.unit
    def test_error_goes_to_stderr(self, capsys):
        print_error("Broken")
        captured = capsys.readouterr()
        assert "Broken" in captured.err
        assert captured.out == ""

    @pytest.mark.unit
    def test_warning_goes_to_stderr(self, capsys):
        print_warning("Careful")
        assert "Careful" in capsys.readouterr().err

    @pytest.mark.unit
    def test_markup_in_message_is_escaped(self, capsys):
        print_error("[/tmp/project] failed")
        assert "[/tmp/project] failed" in capsys.readouterr().err
