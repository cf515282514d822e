"""Template variants offered by the interactive prompt.

Each variant is labelled exactly as the operator sees it.  Only the default
variant is rendered unless ``Config.apply_template_variant`` is enabled.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from setmystack.models import JAVASCRIPT_LABEL, TAILWIND_LABEL, TYPESCRIPT_LABEL

TYPESCRIPT_DEV_DEPENDENCIES = ("@types/node", "@types/react", "@types/react-dom", "typescript")


class TemplateVariant(BaseModel):
    """What a template choice changes in the generated project."""

    label: str
    typescript: bool = True
    tailwind: bool = False
    extra_dev_dependencies: dict[str, str] = Field(default_factory=dict)

    @property
    def source_ext(self) -> str:
        """Extension of the generated React source files."""
        return "tsx" if self.typescript else "jsx"


VARIANTS: dict[str, TemplateVariant] = {
    TYPESCRIPT_LABEL: TemplateVariant(label=TYPESCRIPT_LABEL),
    TAILWIND_LABEL: TemplateVariant(
        label=TAILWIND_LABEL,
        tailwind=True,
        extra_dev_dependencies={
            "tailwindcss": "^3.4.1",
            "postcss": "^8.4.33",
            "autoprefixer": "^10.4.17",
        },
    ),
    JAVASCRIPT_LABEL: TemplateVariant(label=JAVASCRIPT_LABEL, typescript=False),
}

DEFAULT_VARIANT = VARIANTS[TYPESCRIPT_LABEL]


def resolve_variant(template: str, apply: bool) -> TemplateVariant:
    """Return the variant to render for *template*.

    With *apply* disabled every choice renders the default variant.

    Raises:
        KeyError: If *template* is not one of ``TEMPLATE_CHOICES``.
    """
    variant = VARIANTS[template]
    return variant if apply else DEFAULT_VARIANT
