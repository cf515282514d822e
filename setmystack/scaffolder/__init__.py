"""setmystack scaffolder -- renders and writes the Next.js skeleton.

Quick usage::

    from setmystack.models import ProjectRequest
    from setmystack.scaffolder import ProjectGenerator

    generator = ProjectGenerator(ProjectRequest(name="my-next-app"))
    await generator.write_manifest(root)
    await generator.write_project_files(root)
"""

from setmystack.scaffolder.generator import GeneratedFile, ProjectGenerator
from setmystack.scaffolder.manifest import ProjectManifest, build_manifest
from setmystack.scaffolder.templates import TemplateRenderer

__all__ = [
    "GeneratedFile",
    "ProjectGenerator",
    "ProjectManifest",
    "TemplateRenderer",
    "build_manifest",
]
