"""Data models shared by the prompt, the scaffolder and the pipeline."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

TYPESCRIPT_LABEL = "Default Next.js (TypeScript)"
TAILWIND_LABEL = "Next.js with Tailwind CSS"
JAVASCRIPT_LABEL = "Basic Next.js (JavaScript)"

TEMPLATE_CHOICES: list[str] = [TYPESCRIPT_LABEL, TAILWIND_LABEL, JAVASCRIPT_LABEL]


class ProjectRequest(BaseModel):
    """The operator's answers for one run.

    ``name`` is taken verbatim from the prompt; no validation is applied.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    template: str = TYPESCRIPT_LABEL

    @field_validator("template")
    @classmethod
    def _known_template(cls, value: str) -> str:
        if value not in TEMPLATE_CHOICES:
            raise ValueError(f"Unknown template {value!r}; expected one of {TEMPLATE_CHOICES}")
        return value
