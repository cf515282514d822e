"""setmystack configuration.

Typed configuration for a scaffolding run. Settings use a Pydantic v2 model
so they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_PROJECT_NAME = "my-next-app"

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global setmystack configuration.

    Created once by the CLI entry point (usually via :meth:`from_env`) and
    handed to :class:`setmystack.pipeline.ScaffoldPipeline`.
    """

    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory the project folder is created in",
    )
    default_project_name: str = Field(default=DEFAULT_PROJECT_NAME)
    git_command: list[str] = Field(
        default_factory=lambda: ["git", "init"], min_length=1
    )
    install_command: list[str] = Field(
        default_factory=lambda: ["npm", "install"], min_length=1
    )
    git_timeout: int = Field(default=60, ge=1, description="git init timeout in seconds")
    install_timeout: int = Field(
        default=600, ge=1, description="Dependency installation timeout in seconds"
    )
    apply_template_variant: bool = Field(
        default=False,
        description="Branch generated files on the chosen template",
    )

    def project_path(self, name: str) -> Path:
        """Return the absolute target directory for a project called *name*."""
        return (self.output_dir / name).absolute()

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SETMYSTACK_OUTPUT_DIR, SETMYSTACK_DEFAULT_NAME,
            SETMYSTACK_INSTALL_COMMAND, SETMYSTACK_INSTALL_TIMEOUT,
            SETMYSTACK_APPLY_TEMPLATE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SETMYSTACK_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["SETMYSTACK_OUTPUT_DIR"])
        if os.environ.get("SETMYSTACK_DEFAULT_NAME"):
            kwargs["default_project_name"] = os.environ["SETMYSTACK_DEFAULT_NAME"]
        if os.environ.get("SETMYSTACK_INSTALL_COMMAND"):
            kwargs["install_command"] = os.environ["SETMYSTACK_INSTALL_COMMAND"].split()
        if os.environ.get("SETMYSTACK_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["SETMYSTACK_INSTALL_TIMEOUT"])

        apply_variant = os.environ.get("SETMYSTACK_APPLY_TEMPLATE", "")
        kwargs["apply_template_variant"] = apply_variant.strip().lower() in _TRUTHY

        return cls(**kwargs)
