"""setmystack scaffolding pipeline.

Runs one scaffolding session, strictly in order:

1. Banner, then prompt for the project name and template.
2. CREATE_DIRECTORY      -- ``<output_dir>/<name>``.
3. WRITE_MANIFEST        -- ``package.json``.
4. WRITE_PROJECT_FILES   -- ``public/``, ``src/app``, ``src/components``, ``src/styles``.
5. INIT_GIT              -- ``git init`` plus ``.gitignore``.
6. INSTALL_DEPENDENCIES  -- ``npm install``.

Whether a failed step ends the run is decided by ``STEP_POLICIES``.  Nothing
is rolled back; a failed run leaves the partially written directory behind.

Usage::

    setmystack
    python -m setmystack --version
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from rich.markup import escape

from setmystack import __version__
from setmystack.config import Config
from setmystack.models import ProjectRequest
from setmystack.prompt import prompt_project_request
from setmystack.scaffolder import ProjectGenerator
from setmystack.scaffolder.writer import create_directory
from setmystack.utils import (
    CommandError,
    console,
    err_console,
    print_error,
    print_success,
    print_warning,
    run_checked,
    show_banner,
)

# ---------------------------------------------------------------------------
# Steps and failure policy
# ---------------------------------------------------------------------------


class Step(str, Enum):
    CREATE_DIRECTORY = "create_directory"
    WRITE_MANIFEST = "write_manifest"
    WRITE_PROJECT_FILES = "write_project_files"
    INIT_GIT = "init_git"
    INSTALL_DEPENDENCIES = "install_dependencies"


class FailurePolicy(str, Enum):
    CONTINUE = "continue"
    ABORT = "abort"


STEP_POLICIES: dict[Step, FailurePolicy] = {
    Step.CREATE_DIRECTORY: FailurePolicy.CONTINUE,
    Step.WRITE_MANIFEST: FailurePolicy.CONTINUE,
    Step.WRITE_PROJECT_FILES: FailurePolicy.CONTINUE,
    Step.INIT_GIT: FailurePolicy.CONTINUE,
    Step.INSTALL_DEPENDENCIES: FailurePolicy.ABORT,
}

STEP_LABELS: dict[Step, str] = {
    Step.CREATE_DIRECTORY: "creating directory",
    Step.WRITE_MANIFEST: "writing package.json",
    Step.WRITE_PROJECT_FILES: "writing project files",
    Step.INIT_GIT: "initializing git",
    Step.INSTALL_DEPENDENCIES: "installing dependencies",
}


# ---------------------------------------------------------------------------
# Results and exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when a step whose policy is ``ABORT`` fails."""

    def __init__(self, step: Step, message: str) -> None:
        self.step = step
        super().__init__(f"Error {STEP_LABELS[step]}: {message}")


@dataclass
class StepResult:
    step: Step
    ok: bool
    error: str | None = None


@dataclass
class ScaffoldResult:
    """Outcome of one pipeline run."""

    request: ProjectRequest
    project_path: Path
    success: bool = False
    steps: list[StepResult] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def failed_steps(self) -> list[Step]:
        return [r.step for r in self.steps if not r.ok]


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class ScaffoldPipeline:
    """Drives one scaffolding run from prompt to success message.

    Attributes:
        config: Run configuration.
        prompter: Callable returning the ``ProjectRequest``; receives the
            default project name.
    """

    def __init__(
        self,
        config: Config,
        prompter: Callable[[str], ProjectRequest] | None = None,
    ) -> None:
        self.config = config
        self.prompter = prompter or prompt_project_request

    async def run(self, request: ProjectRequest | None = None) -> ScaffoldResult:
        """Run the full pipeline.

        Args:
            request: Pre-resolved answers.  When omitted the operator is
                prompted; prompt errors (``EOFError``, ``KeyboardInterrupt``)
                propagate.

        Returns:
            A ``ScaffoldResult``; ``success`` is ``False`` only when an
            ``ABORT`` step failed.
        """
        show_banner()
        if request is None:
            request = self.prompter(self.config.default_project_name)

        project_path = self.config.project_path(request.name)
        generator = ProjectGenerator(
            request, apply_variant=self.config.apply_template_variant
        )
        result = ScaffoldResult(request=request, project_path=project_path)

        # Spinner and step errors share err_console.
        with err_console.status("Creating your Next.js app...") as status:
            try:
                await self._run_step(
                    result, Step.CREATE_DIRECTORY, lambda: create_directory(project_path)
                )
                await self._run_step(
                    result, Step.WRITE_MANIFEST, lambda: generator.write_manifest(project_path)
                )
                await self._run_step(
                    result,
                    Step.WRITE_PROJECT_FILES,
                    lambda: generator.write_project_files(project_path),
                )
                await self._run_step(
                    result, Step.INIT_GIT, lambda: self._init_git(generator, project_path)
                )
                status.update("Installing dependencies...")
                await self._run_step(
                    result,
                    Step.INSTALL_DEPENDENCIES,
                    lambda: self._install_dependencies(project_path),
                )
            except ScaffoldError as exc:
                result.error = str(exc)

        if result.error is not None:
            print_error("Failed to create project")
            print_error(result.error)
            return result

        result.success = True
        if result.warnings:
            failed = ", ".join(STEP_LABELS[s] for s in result.failed_steps)
            print_warning(f"Finished with errors in: {failed}")
        self._print_next_steps(request, project_path)
        return result

    # ------------------------------------------------------------------
    # Step execution
    # ------------------------------------------------------------------

    async def _run_step(
        self,
        result: ScaffoldResult,
        step: Step,
        action: Callable[[], Awaitable[object]],
    ) -> StepResult:
        """Run *action* and apply the step's failure policy.

        Actions signal failure by raising ``OSError``/``CommandError`` or by
        returning ``False`` after reporting the problem themselves.
        """
        try:
            outcome = await action()
        except (OSError, CommandError) as exc:
            step_result = StepResult(step=step, ok=False, error=str(exc))
            if STEP_POLICIES[step] is FailurePolicy.CONTINUE:
                print_error(f"Error {STEP_LABELS[step]}: {exc}")
        else:
            if outcome is False:
                step_result = StepResult(step=step, ok=False, error=f"{STEP_LABELS[step]} failed")
            else:
                step_result = StepResult(step=step, ok=True)

        result.steps.append(step_result)
        if step_result.ok:
            return step_result

        if STEP_POLICIES[step] is FailurePolicy.ABORT:
            raise ScaffoldError(step, step_result.error or "failed")
        result.warnings.append(step_result.error or STEP_LABELS[step])
        return step_result

    async def _init_git(self, generator: ProjectGenerator, project_path: Path) -> None:
        await run_checked(
            self.config.git_command,
            cwd=project_path,
            silent=True,
            timeout=self.config.git_timeout,
        )
        await generator.write_gitignore(project_path)

    async def _install_dependencies(self, project_path: Path) -> None:
        await run_checked(
            self.config.install_command,
            cwd=project_path,
            silent=True,
            timeout=self.config.install_timeout,
        )

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def _print_next_steps(self, request: ProjectRequest, project_path: Path) -> None:
        print_success(f"Success! Created {request.name} at {project_path}")
        console.print()
        console.print("To get started, run:")
        console.print(f"  [cyan]cd {escape(request.name)}[/cyan]")
        console.print("  [cyan]npm run dev[/cyan]")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``setmystack`` and ``python -m setmystack``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="setmystack",
        description="My Node CLI -- scaffold a minimal Next.js project",
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    pipeline = ScaffoldPipeline(config)
    try:
        result = asyncio.run(pipeline.run())
    except (EOFError, KeyboardInterrupt):
        print_error("Aborted.")
        sys.exit(1)

    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    main()
