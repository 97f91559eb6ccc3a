"""Layered copy of template trees into the new project root.

Content directories are applied in plan order.  A file from a later layer
replaces a same-named file from an earlier one, which is how style templates
(e.g. the Tailwind ``src/index.css``) override the language defaults.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path
from typing import Any

from ..errors import TemplateMissing
from .models import ComposedPlan, Language, Selection
from .templates import TEMPLATE_SUFFIX, TemplateRenderer


def build_context(
    selection: Selection, package_manager: str = "npm"
) -> dict[str, Any]:
    """Template variables available to every ``.j2`` file."""
    return {
        "package_manager": package_manager,
        "project_name": selection.project_name,
        "language": selection.language.value,
        "language_label": selection.language.label,
        "style_library": selection.style_library.value,
        "style_library_label": selection.style_library.label,
        "typescript": selection.language is Language.TYPESCRIPT,
    }


async def materialize(
    plan: ComposedPlan,
    project_root: str | Path,
    renderer: TemplateRenderer,
    context: dict[str, Any],
) -> list[Path]:
    """Copy every content path of *plan* into *project_root*, in order.

    ``.j2`` files are rendered and written without their suffix; all other
    files are copied byte for byte with their metadata.

    Returns:
        Written paths relative to *project_root*, in write order.  A path
        overwritten by a later layer appears once per write.

    Raises:
        TemplateMissing: If a content path is not a directory.
    """
    root = Path(project_root)
    await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)

    written: list[Path] = []
    for content_path in plan.content_paths:
        if not content_path.is_dir():
            raise TemplateMissing(content_path)

        for source in sorted(content_path.rglob("*")):
            if not source.is_file():
                continue
            rel = source.relative_to(content_path)

            if source.name.endswith(TEMPLATE_SUFFIX):
                rel = rel.with_name(rel.name[: -len(TEMPLATE_SUFFIX)])
                await renderer.render_to_file(
                    renderer.template_key(source), root / rel, context
                )
            else:
                await asyncio.to_thread(_copy_file, source, root / rel)
            written.append(rel)

    return written


def _copy_file(source: Path, target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(source, target)
