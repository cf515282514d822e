"""Shared utility functions for setmystack.

Provides async command execution and Rich-based console reporting (banner,
success, warning, and error messages).
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.text import Text

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


class CommandError(Exception):
    """Raised when an external command cannot run or exits non-zero."""

    def __init__(self, cmd: list[str], returncode: int, stderr: str = "") -> None:
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed with exit code {returncode}: {' '.join(cmd)}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 120,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams).
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.  A timed-out process is
        reported with returncode ``-1``.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


async def run_checked(
    cmd: list[str],
    cwd: str | Path | None = None,
    *,
    silent: bool = True,
    timeout: int = 120,
) -> str:
    """Run *cmd* in *cwd* and raise ``CommandError`` unless it exits 0.

    ``silent`` captures the child's stdout/stderr instead of echoing them to
    the terminal.  An executable that cannot be spawned (missing binary,
    missing working directory) is reported as ``CommandError`` with
    returncode ``127``.

    Returns:
        The captured stdout (empty when not silent).
    """
    try:
        returncode, stdout, stderr = await run_command(
            cmd, cwd=cwd, timeout=timeout, capture=silent
        )
    except OSError as exc:
        raise CommandError(cmd, 127, str(exc)) from exc

    if returncode != 0:
        raise CommandError(cmd, returncode, stderr)
    return stdout


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------

BANNER = r"""
 ____       _     __  __         ____  _             _
/ ___|  ___| |_  |  \/  |_   _  / ___|| |_ __ _  ___| | __
\___ \ / _ \ __| | |\/| | | | | \___ \| __/ _` |/ __| |/ /
 ___) |  __/ |_  | |  | | |_| |  ___) | || (_| | (__|   <
|____/ \___|\__| |_|  |_|\__, | |____/ \__\__,_|\___|_|\_\
                         |___/
"""


def show_banner() -> None:
    """Print the cyan ASCII-art banner."""
    banner = Text(BANNER.strip("\n"), style="bold cyan")
    console.print(Align.left(banner))
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
