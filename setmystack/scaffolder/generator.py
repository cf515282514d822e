"""Project file generation.

Takes a ``ProjectRequest`` and renders the minimal Next.js skeleton: the
fixed subdirectory set, the ``package.json`` manifest, the app sources and
the ``.gitignore``.  Sequencing and failure handling belong to
:mod:`setmystack.pipeline`; everything here raises on I/O errors.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel

from setmystack.models import ProjectRequest

from .manifest import MANIFEST_FILENAME, ProjectManifest, build_manifest
from .templates import TemplateRenderer
from .variants import TemplateVariant, resolve_variant
from .writer import create_directory, write_file


# ---------------------------------------------------------------------------
# Fixed layout
# ---------------------------------------------------------------------------

PROJECT_DIRECTORIES: list[str] = [
    "public",
    "src/app",
    "src/components",
    "src/styles",
]

GITIGNORE_FILENAME = ".gitignore"


class GeneratedFile(BaseModel):
    """A file to materialise under the project root."""

    relative_path: str
    content: str


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Renders and writes the project skeleton for one request.

    With ``apply_variant`` disabled every template choice produces the
    TypeScript skeleton, so the choice has no effect on output.
    """

    def __init__(
        self,
        request: ProjectRequest,
        *,
        apply_variant: bool = False,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.request = request
        self.variant: TemplateVariant = resolve_variant(request.template, apply_variant)
        self.renderer = renderer or TemplateRenderer()

    # -- Content -----------------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        return {
            "project_name": self.request.name,
            "typescript": self.variant.typescript,
            "tailwind": self.variant.tailwind,
        }

    def manifest(self) -> ProjectManifest:
        """Return the manifest for this project."""
        return build_manifest(self.request.name, self.variant)

    def file_set(self) -> list[GeneratedFile]:
        """Return the app source files, relative to the project root."""
        ctx = self._build_context()
        ext = self.variant.source_ext
        files = [
            GeneratedFile(
                relative_path=f"src/app/layout.{ext}",
                content=self.renderer.render("app/layout.j2", ctx),
            ),
            GeneratedFile(
                relative_path=f"src/app/page.{ext}",
                content=self.renderer.render("app/page.j2", ctx),
            ),
            GeneratedFile(
                relative_path="src/styles/globals.css",
                content=self.renderer.render("styles/globals.css.j2", ctx),
            ),
        ]
        if self.variant.tailwind:
            for name in ("tailwind.config.js", "postcss.config.js"):
                files.append(
                    GeneratedFile(
                        relative_path=name,
                        content=self.renderer.render(f"config/{name}.j2", ctx),
                    )
                )
        return files

    def gitignore(self) -> str:
        """Return the ``.gitignore`` content."""
        return self.renderer.render("gitignore.j2", self._build_context())

    # -- Writes ------------------------------------------------------------

    async def write_manifest(self, root: Path) -> Path:
        """Write ``package.json`` into *root*."""
        return await write_file(root / MANIFEST_FILENAME, self.manifest().to_json())

    async def write_project_files(self, root: Path) -> list[Path]:
        """Create the fixed subdirectories and write the app sources.

        Raises:
            OSError: If a subdirectory could not be created or a file could
                not be written.
        """
        for directory in PROJECT_DIRECTORIES:
            if not await create_directory(root / directory):
                raise OSError(f"Could not create directory {root / directory}")

        written: list[Path] = []
        for generated in self.file_set():
            written.append(await write_file(root / generated.relative_path, generated.content))
        return written

    async def write_gitignore(self, root: Path) -> Path:
        """Write ``.gitignore`` into *root*."""
        return await write_file(root / GITIGNORE_FILENAME, self.gitignore())
