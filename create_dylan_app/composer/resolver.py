"""Name validation and plan resolution.

Both functions are pure with respect to configuration: the working directory
and the template catalog are passed in, never read from globals.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import EmptyName, NameConflict
from ..utils import is_directory_empty
from .catalog import TemplateCatalog
from .models import ComposedPlan, Selection


def project_path(name: str, cwd: str | Path) -> Path:
    """Absolute directory a project called *name* is created in."""
    return (Path(cwd) / name).resolve()


def validate_name(name: str, cwd: str | Path) -> Path:
    """Check that *name* can be used as a new project directory under *cwd*.

    A nonexistent path or an existing empty directory is accepted.  The
    directory itself is not created.

    Returns:
        The resolved project path.

    Raises:
        EmptyName: If *name* is blank.
        NameConflict: If ``cwd/name`` exists and is a file or a non-empty
            directory.
    """
    if not name or not name.strip():
        raise EmptyName()

    path = project_path(name, cwd)
    if path.exists():
        if not path.is_dir() or not is_directory_empty(path):
            raise NameConflict(name, path)
    return path


def resolve_config(
    selection: Selection,
    catalog: TemplateCatalog,
    cwd: str | Path,
) -> ComposedPlan:
    """Compose the copy order and dependency lists for *selection*.

    Content paths are ordered common, language, then style (only when the
    style ships a template tree).  Runtime dependencies come from the
    language alone; dev dependencies are the language's followed by the
    style's, with duplicates dropped on first occurrence.
    """
    language_config = catalog.language(selection.language)
    style_config = catalog.style(selection.style_library)

    content_paths: list[Path] = [catalog.common_path]
    if language_config.content_path is not None:
        content_paths.append(language_config.content_path)
    if style_config.content_path is not None:
        content_paths.append(style_config.content_path)

    runtime_deps = _dedupe(language_config.dependencies.runtime)
    dev_deps = _dedupe(
        [*language_config.dependencies.dev, *style_config.dependencies.dev]
    )

    return ComposedPlan(
        content_paths=content_paths,
        runtime_deps=runtime_deps,
        dev_deps=dev_deps,
        project_root=project_path(selection.project_name, cwd),
    )


def _dedupe(specifiers: list[str]) -> list[str]:
    """Drop repeated specifiers, keeping the first occurrence."""
    return list(dict.fromkeys(specifiers))
