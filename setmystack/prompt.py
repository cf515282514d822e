"""Interactive prompt that collects a ``ProjectRequest``.

Two questions are asked in order: the project name (free text with a
default) and the template (one of ``TEMPLATE_CHOICES``, shown numbered).
Closing the input stream or pressing Ctrl-C propagates to the caller.
"""

from __future__ import annotations

from typing import TextIO

from rich.console import Console
from rich.prompt import Prompt
from rich.text import TextType

from setmystack.config import DEFAULT_PROJECT_NAME
from setmystack.models import TEMPLATE_CHOICES, ProjectRequest
from setmystack.utils import console as default_console


class LinePrompt(Prompt):
    """Prompt that treats a blank line read from a stream like an empty ``input()``."""

    @classmethod
    def get_input(
        cls,
        console: Console,
        prompt: TextType,
        password: bool,
        stream: TextIO | None = None,
    ) -> str:
        return super().get_input(console, prompt, password, stream=stream).rstrip("\r\n")


class NamePrompt(LinePrompt):
    """Free-text prompt that returns the answer exactly as typed."""

    def process_response(self, value: str) -> str:
        return value


def ask_project_name(
    default: str = DEFAULT_PROJECT_NAME,
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> str:
    """Ask for the project name; an empty answer takes *default*.

    Surrounding whitespace is kept, so a whitespace-only answer is a
    (whitespace) name rather than a request for the default.
    """
    return NamePrompt.ask(
        "What is your project named?",
        default=default,
        console=console or default_console,
        stream=stream,
    )


def ask_template(
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> str:
    """Ask the operator to pick a template by number.

    Accepting immediately selects the first entry.
    """
    console = console or default_console
    console.print("Choose your template")
    for index, label in enumerate(TEMPLATE_CHOICES, start=1):
        console.print(f"  [cyan]{index}[/cyan]) {label}")

    answer = LinePrompt.ask(
        "Template",
        choices=[str(i) for i in range(1, len(TEMPLATE_CHOICES) + 1)],
        default="1",
        console=console,
        stream=stream,
    )
    return TEMPLATE_CHOICES[int(answer) - 1]


def prompt_project_request(
    default_name: str = DEFAULT_PROJECT_NAME,
    *,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> ProjectRequest:
    """Run both prompts and return the resolved request."""
    name = ask_project_name(default_name, console=console, stream=stream)
    template = ask_template(console=console, stream=stream)
    return ProjectRequest(name=name, template=template)
