"""Interactive questions asked before scaffolding.

Name validation errors are shown inline and the question is asked again;
they never escape this module.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .composer.models import Language, Selection, StyleLibrary
from .composer.resolver import validate_name
from .errors import InvalidProjectName
from .utils import console as default_console


def ask_project_name(cwd: Path, console: Console | None = None) -> str:
    """Ask for a project name until one passes ``validate_name``."""
    console = console or default_console
    while True:
        name = Prompt.ask("What is the project's name?", default="", console=console)
        try:
            validate_name(name, cwd)
        except InvalidProjectName as exc:
            console.print(f"[bold red]>>[/bold red] {exc}", highlight=False)
            continue
        return name


def ask_language(console: Console | None = None) -> Language:
    use_typescript = Confirm.ask(
        "Do you want to use TypeScript?",
        default=False,
        console=console or default_console,
    )
    return Language.TYPESCRIPT if use_typescript else Language.JAVASCRIPT


def ask_style_library(console: Console | None = None) -> StyleLibrary:
    # Prompt re-asks on its own when the answer is not one of the choices.
    label = Prompt.ask(
        "What style library would you like to include?",
        choices=StyleLibrary.labels(),
        default=StyleLibrary.NONE.label,
        console=console or default_console,
    )
    return StyleLibrary.from_label(label)


def collect_selection(cwd: Path, console: Console | None = None) -> Selection:
    """Ask every question in order and bundle the answers."""
    name = ask_project_name(cwd, console)
    language = ask_language(console)
    style_library = ask_style_library(console)
    return Selection(
        project_name=name,
        language=language,
        style_library=style_library,
    )
