"""``package.json`` manifest for generated projects."""

from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field

from .variants import DEFAULT_VARIANT, TYPESCRIPT_DEV_DEPENDENCIES, TemplateVariant

MANIFEST_FILENAME = "package.json"

NEXT_VERSION = "14.1.0"

DEFAULT_SCRIPTS: dict[str, str] = {
    "dev": "next dev",
    "build": "next build",
    "start": "next start",
    "lint": "next lint",
}

DEPENDENCIES: dict[str, str] = {
    "next": NEXT_VERSION,
    "react": "^18.2.0",
    "react-dom": "^18.2.0",
}

DEV_DEPENDENCIES: dict[str, str] = {
    "@types/node": "^20.11.0",
    "@types/react": "^18.2.0",
    "@types/react-dom": "^18.2.0",
    "typescript": "^5.3.0",
    "eslint": "^8.56.0",
    "eslint-config-next": NEXT_VERSION,
}


class ProjectManifest(BaseModel):
    """The npm package descriptor written once per generated project."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    version: str = "0.1.0"
    private: bool = True
    scripts: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_SCRIPTS))
    dependencies: dict[str, str] = Field(default_factory=lambda: dict(DEPENDENCIES))
    dev_dependencies: dict[str, str] = Field(
        default_factory=lambda: dict(DEV_DEPENDENCIES),
        alias="devDependencies",
    )

    def to_json(self) -> str:
        """Serialise with two-space indentation, npm field names, declared order."""
        return json.dumps(self.model_dump(by_alias=True), indent=2, ensure_ascii=False)


def build_manifest(name: str, variant: TemplateVariant = DEFAULT_VARIANT) -> ProjectManifest:
    """Build the manifest for a project called *name*.

    The default variant yields the fixed dependency maps.  Other variants
    drop the TypeScript tooling or add their extra dev dependencies.
    """
    dev_dependencies = dict(DEV_DEPENDENCIES)
    if not variant.typescript:
        for package in TYPESCRIPT_DEV_DEPENDENCIES:
            dev_dependencies.pop(package, None)
    dev_dependencies.update(variant.extra_dev_dependencies)

    return ProjectManifest(name=name, dev_dependencies=dev_dependencies)
